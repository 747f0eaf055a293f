"""Exception hierarchy for next-dehydrate."""

from .analysis import (
    AnalysisError,
    FileAccessError,
    MalformedDocumentError,
    MissingSourceError,
)
from .base import DehydrateError
from .config import (
    BuildDetectionError,
    ConfigurationError,
    InvalidConfigError,
    InvalidPathError,
)

__all__ = [
    "DehydrateError",
    "AnalysisError",
    "FileAccessError",
    "MalformedDocumentError",
    "MissingSourceError",
    "ConfigurationError",
    "InvalidPathError",
    "InvalidConfigError",
    "BuildDetectionError",
]
