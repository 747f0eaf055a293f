"""Run orchestration: detect, analyze, transform, write, aggregate.

Example:
    >>> from next_dehydrate import dehydrate
    >>> result = dehydrate("/path/to/next-app", out_dir="dist")
    >>> result.stats.total_pages
    12
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional, Sequence, TypeVar

from .analysis.analyzer import PageAnalyzer
from .build import detect_build, find_generated_pages, validate_build
from .config import DehydrateConfig, load_config
from .logging_config import get_logger, setup_logging
from .models import (
    BuildDetectionResult,
    DehydrateStats,
    PageAnalysis,
    PageError,
)
from .output import OutputGenerator
from .stats import calculate_stats
from .transform.router import get_navigation_helper_script

logger = get_logger(__name__)

ProgressCallback = Callable[[str], None]

_In = TypeVar("_In")
_Out = TypeVar("_Out")


@dataclass
class DehydrateResult:
    """Everything a run produced.

    Attributes:
        build: The detected build layout
        output_dir: Where documents were written
        stats: Aggregated statistics over successfully processed pages
        analyses: Page analyses in input order (failed pages omitted)
        errors: Pages that failed analysis or transformation
        helper_path: The standalone navigation helper file, if written
    """

    build: BuildDetectionResult
    output_dir: Path
    stats: DehydrateStats
    analyses: list[PageAnalysis] = field(default_factory=list)
    errors: list[PageError] = field(default_factory=list)
    helper_path: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return not self.errors


class Dehydrator:
    """Processes one Next.js build according to a DehydrateConfig."""

    def __init__(self, config: DehydrateConfig, on_progress: Optional[ProgressCallback] = None):
        self.config = config
        self._on_progress = on_progress

    def _progress(self, message: str) -> None:
        logger.debug(message)
        if self._on_progress is not None:
            self._on_progress(message)

    def run(self, project_dir: Path) -> DehydrateResult:
        """Process the build under *project_dir*.

        Raises:
            BuildDetectionError: If no usable build or router directory exists
            InvalidPathError: If the configured output directory is unusable
        """
        start = time.perf_counter()

        self._progress("Detecting build output")
        build = detect_build(Path(project_dir))
        validate_build(build)

        helper = get_navigation_helper_script()
        output = OutputGenerator(build, self.config, helper)

        self._progress("Discovering pages")
        pages = find_generated_pages(build, self.config.source_extensions)
        logger.debug("Found %d pages with source modules", len(pages))

        self._progress(f"Analyzing {len(pages)} pages")
        analyzer = PageAnalyzer(
            build.source_root_dir,
            alias_prefixes=self.config.alias_prefixes,
            extensions=self.config.source_extensions,
        )
        analyses, errors = self._run_parallel(
            pages, analyzer.analyze, "analyze", lambda page: page.html_path
        )

        self._progress("Optimizing pages")
        processed, transform_errors = self._run_parallel(
            analyses, output.process_page, "transform", lambda a: a.absolute_path
        )
        errors.extend(transform_errors)

        output.copy_assets(p.analysis.absolute_path for p in processed)
        helper_path = output.write_helper_file()

        stats = calculate_stats(processed, start)
        return DehydrateResult(
            build=build,
            output_dir=output.output_dir,
            stats=stats,
            analyses=analyses,
            errors=errors,
            helper_path=helper_path,
        )

    def _run_parallel(
        self,
        items: Sequence[_In],
        fn: Callable[[_In], _Out],
        stage: str,
        path_of: Callable[[_In], Path],
    ) -> tuple[list[_Out], list[PageError]]:
        """Apply *fn* to every item on the worker pool.

        Results keep the order of *items*; failures become PageErrors
        (also in input order) and never stop the remaining items.
        """
        results: list[Optional[_Out]] = [None] * len(items)
        failures: dict[int, PageError] = {}

        if not items:
            return [], []

        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            futures = {executor.submit(fn, item): index for index, item in enumerate(items)}
            for future in as_completed(futures):
                index = futures[future]
                try:
                    results[index] = future.result()
                except Exception as e:
                    path = path_of(items[index])
                    logger.debug("Failed to %s %s: %s", stage, path, e, exc_info=True)
                    failures[index] = PageError(path=path, stage=stage, message=str(e))

        ordered = [r for i, r in enumerate(results) if i not in failures]
        return ordered, [failures[i] for i in sorted(failures)]


def dehydrate(
    path: str = ".",
    config_file: Optional[Path] = None,
    on_progress: Optional[ProgressCallback] = None,
    **overrides,
) -> DehydrateResult:
    """Load configuration and process the build under *path*.

    Args:
        path: Next.js project root (default: current directory)
        config_file: Optional explicit config file path
        on_progress: Called with a short message as each stage starts
        **overrides: Configuration overrides (e.g. ``out_dir="dist"``)

    Raises:
        DehydrateError: If configuration is invalid or no build is found
    """
    config = load_config(config_file=config_file, **overrides)
    setup_logging(verbose=config.verbose, quiet=config.quiet)
    logger.info("Processing %s", path)
    return Dehydrator(config, on_progress).run(Path(path))


__all__ = ["DehydrateResult", "Dehydrator", "dehydrate"]
