"""Root of the next-dehydrate error hierarchy."""

from typing import Mapping, Optional


class DehydrateError(Exception):
    """An expected failure of a run or of one page.

    Run-level errors (configuration, build layout) stop the CLI with exit
    code 1. Page-level errors are caught by the pipeline and reported as
    PageError records while sibling pages carry on.

    Attributes:
        message: Short human-readable summary
        details: Context such as the offending path or value, rendered
            after the summary by ``str()``
    """

    def __init__(self, message: str, details: Optional[Mapping[str, object]] = None):
        super().__init__(message)
        self.message = message
        self.details = {key: str(value) for key, value in (details or {}).items()}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = "; ".join(f"{key}: {value}" for key, value in self.details.items())
        return f"{self.message} [{context}]"
