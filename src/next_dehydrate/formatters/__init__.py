"""Output formatters for next-dehydrate."""

from .base import BaseFormatter
from .json_formatter import JsonFormatter, generate_json_report
from .rich_formatter import RichFormatter
from .units import format_bytes, format_duration, format_percent


def get_formatter(name: str) -> BaseFormatter:
    """Get a formatter instance by name.

    Args:
        name: One of "rich", "json"

    Raises:
        ValueError: If name is not recognized
    """
    formatters = {
        "rich": RichFormatter,
        "json": JsonFormatter,
    }
    cls = formatters.get(name)
    if cls is None:
        raise ValueError(f"Unknown formatter: {name!r}. Choose from: {', '.join(sorted(formatters))}")
    return cls()


__all__ = [
    "BaseFormatter",
    "RichFormatter",
    "JsonFormatter",
    "generate_json_report",
    "get_formatter",
    "format_bytes",
    "format_duration",
    "format_percent",
]
