"""Aggregation of processed pages into run statistics."""

from __future__ import annotations

import time
from typing import Optional, Sequence

from .models import DehydrateStats, PageClassification, ProcessedPage


def calculate_stats(
    pages: Sequence[ProcessedPage],
    start_time: float,
    end_time: Optional[float] = None,
) -> DehydrateStats:
    """Fold *pages* into summary statistics.

    Args:
        pages: Processed pages, already in input page order
        start_time: ``time.perf_counter()`` value taken when the run started
        end_time: End of the run (default: now)

    Returns:
        DehydrateStats whose ``pages`` preserve the given order
    """
    if end_time is None:
        end_time = time.perf_counter()

    by_classification = {c: 0 for c in PageClassification}
    stats = DehydrateStats(by_classification=by_classification, pages=list(pages))

    for page in pages:
        by_classification[page.analysis.classification] += 1
        stats.total_original_size += page.analysis.original_size
        stats.total_new_size += page.new_size
        stats.total_scripts_removed += page.scripts_removed
        stats.total_preloads_removed += page.preloads_removed
        if page.router_injected:
            stats.pages_with_router += 1

    stats.total_pages = len(pages)
    stats.processing_time_ms = max(0.0, (end_time - start_time) * 1000)
    return stats
