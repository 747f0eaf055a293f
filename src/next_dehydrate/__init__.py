"""
next-dehydrate - Strip unneeded framework JavaScript from Next.js builds

Classifies every generated page by how much client-side script it needs,
removes the framework runtime from pages that need none, and gives pages
that only navigate a small replacement navigation script.
"""

__version__ = "0.1.0"

from .analysis import PageAnalyzer, classify
from .models import DehydrateStats, PageAnalysis, PageClassification
from .pipeline import DehydrateResult, Dehydrator, dehydrate

__all__ = [
    "dehydrate",  # Main entry point
    "Dehydrator",
    "DehydrateResult",
    "DehydrateStats",
    "PageAnalysis",
    "PageAnalyzer",
    "PageClassification",
    "classify",
]
