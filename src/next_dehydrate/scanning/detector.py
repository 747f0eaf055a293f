"""Indicator detection for a source module and its HTML document."""

from __future__ import annotations

from .patterns import (
    CLIENT_MODULE_PATTERNS,
    EVENT_HANDLER_PATTERNS,
    NAVIGATION_PATTERNS,
    PRELOAD_ATTR_PATTERN,
    SCRIPT_TAG_PATTERN,
    STATEFUL_HOOK_PATTERNS,
    matches_any,
)
from ..models import IndicatorSet


def detect_event_handlers(content: str) -> bool:
    return matches_any(EVENT_HANDLER_PATTERNS, content)


def detect_stateful_hooks(content: str) -> bool:
    return matches_any(STATEFUL_HOOK_PATTERNS, content)


def detect_client_module(content: str) -> bool:
    return matches_any(CLIENT_MODULE_PATTERNS, content)


def detect_client_navigation(content: str) -> bool:
    return matches_any(NAVIGATION_PATTERNS, content)


def has_interactivity(content: str) -> bool:
    """True if the module itself forces hydration of any page that reaches it."""
    return (
        detect_client_module(content)
        or detect_stateful_hooks(content)
        or detect_event_handlers(content)
    )


def detect(source_text: str, html_text: str = "") -> IndicatorSet:
    """Scan one source/HTML pair and return its indicator set.

    The four source families are evaluated independently. Script and
    preload counts come from the HTML document and do not affect
    classification.
    """
    return IndicatorSet(
        has_event_handlers=detect_event_handlers(source_text),
        uses_stateful_hooks=detect_stateful_hooks(source_text),
        has_client_components=detect_client_module(source_text),
        has_client_navigation=detect_client_navigation(source_text),
        script_count=len(SCRIPT_TAG_PATTERN.findall(html_text)),
        preload_count=len(PRELOAD_ATTR_PATTERN.findall(html_text)),
    )
