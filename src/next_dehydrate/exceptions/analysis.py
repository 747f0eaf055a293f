"""Analysis-related exceptions: file access, page sources, HTML documents."""

from pathlib import Path

from .base import DehydrateError


class AnalysisError(DehydrateError):
    """Base class for per-page analysis and transformation errors."""
    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class MissingSourceError(AnalysisError):
    """Raised when an HTML document has no entry source module."""

    def __init__(self, html_path: Path, candidates: list[Path]):
        super().__init__(
            f"No source module found for {html_path}",
            details={"tried": ", ".join(str(c) for c in candidates)},
        )
        self.html_path = html_path
        self.candidates = candidates


class MalformedDocumentError(AnalysisError):
    """Raised when an HTML document cannot be parsed into a usable tree."""

    def __init__(self, reason: str, filepath: Path | None = None):
        details = {"reason": reason}
        if filepath is not None:
            details["filepath"] = str(filepath)
        super().__init__("Malformed HTML document", details=details)
        self.reason = reason
        self.filepath = filepath
