"""Page analysis: classification engine over the scanning layer."""

from .analyzer import PageAnalyzer
from .classifier import classify, describe_classification

__all__ = ["PageAnalyzer", "classify", "describe_classification"]
