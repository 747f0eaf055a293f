"""Base formatter interface for next-dehydrate output rendering."""

from abc import ABC, abstractmethod

from ..pipeline import DehydrateResult


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: DehydrateResult) -> None:
        """Render the run summary to stdout/stderr as appropriate."""

    @abstractmethod
    def format(self, result: DehydrateResult) -> str:
        """Return formatted string representation of the run."""
