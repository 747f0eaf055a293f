"""Textual scanning of component sources: patterns, imports, indicators, crawl."""

from .crawler import ClosureResult, DependencyCrawler
from .detector import detect, has_interactivity
from .imports import ImportResolver, extract_import_specifiers
from .patterns import FRAMEWORK_SCRIPT_PATTERNS, SOURCE_EXTENSIONS, is_framework_script

__all__ = [
    "ClosureResult",
    "DependencyCrawler",
    "ImportResolver",
    "extract_import_specifiers",
    "detect",
    "has_interactivity",
    "FRAMEWORK_SCRIPT_PATTERNS",
    "SOURCE_EXTENSIONS",
    "is_framework_script",
]
