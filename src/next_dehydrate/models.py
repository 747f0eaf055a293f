"""Core data models shared across next-dehydrate components.

Every record here is created and discarded within a single run:
    - IndicatorSet: per-module interactivity signals (plus HTML counts)
    - PageAnalysis: classification of one generated HTML document
    - ProcessedPage: the result of transforming and writing that document
    - DehydrateStats: the fold of all processed pages
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class PageClassification(Enum):
    """How much client-side script a page needs."""

    PURE_STATIC = "PURE_STATIC"  # no interactivity: remove framework scripts
    ROUTING_ONLY = "ROUTING_ONLY"  # static content + internal links: inject helper
    INTERACTIVE = "INTERACTIVE"  # needs hydration: preserve everything


class BuildMode(Enum):
    """Layout of the build output on disk."""

    STATIC_EXPORT = "STATIC_EXPORT"  # out/
    STANDARD_BUILD = "STANDARD_BUILD"  # .next/


@dataclass(frozen=True)
class IndicatorSet:
    """Interactivity signals for a module (and counts for its HTML document).

    Attributes:
        has_event_handlers: Event handler props such as onClick= are present
        uses_stateful_hooks: Reactive hooks such as useState are called
        has_client_components: Explicit "use client" directive. Within a
            PageAnalysis this carries the aggregate over the whole
            dependency closure, not only the entry module.
        has_client_navigation: The navigation Link component is used
        script_count: <script> elements in the HTML document (informational)
        preload_count: preload/modulepreload links in the HTML (informational)
    """

    has_event_handlers: bool = False
    uses_stateful_hooks: bool = False
    has_client_components: bool = False
    has_client_navigation: bool = False
    script_count: int = 0
    preload_count: int = 0

    @property
    def is_interactive(self) -> bool:
        """True if any hydration-requiring signal is set."""
        return self.has_event_handlers or self.uses_stateful_hooks or self.has_client_components

    def to_dict(self) -> dict[str, bool | int]:
        return {
            "hasEventHandlers": self.has_event_handlers,
            "usesStatefulHooks": self.uses_stateful_hooks,
            "hasClientComponents": self.has_client_components,
            "hasClientNavigation": self.has_client_navigation,
            "scriptCount": self.script_count,
            "preloadCount": self.preload_count,
        }


@dataclass(frozen=True)
class GeneratedPage:
    """One generated HTML document paired with the module that produced it."""

    html_path: Path
    source_path: Path


@dataclass(frozen=True)
class BuildDetectionResult:
    """Where the build output and the project sources live."""

    mode: BuildMode
    build_dir: Path
    html_dir: Path
    assets_dir: Path
    routes_dir: Path
    source_root_dir: Path
    is_app_router: bool = True


@dataclass(frozen=True)
class PageAnalysis:
    """Classification of one page, immutable once created."""

    absolute_path: Path
    classification: PageClassification
    indicators: IndicatorSet
    original_size: int
    source_path: Path | None = None
    dependencies: tuple[Path, ...] = ()


@dataclass(frozen=True)
class ProcessedPage:
    """A PageAnalysis plus the outcome of rewriting its document."""

    analysis: PageAnalysis
    new_size: int
    scripts_removed: int
    preloads_removed: int
    router_injected: bool

    @property
    def bytes_saved(self) -> int:
        return self.analysis.original_size - self.new_size


@dataclass(frozen=True)
class PageError:
    """A page that failed analysis or transformation."""

    path: Path
    stage: str
    message: str


@dataclass
class DehydrateStats:
    """Summary statistics for a run, with pages in input order."""

    total_pages: int = 0
    by_classification: dict[PageClassification, int] = field(
        default_factory=lambda: {c: 0 for c in PageClassification}
    )
    total_original_size: int = 0
    total_new_size: int = 0
    total_scripts_removed: int = 0
    total_preloads_removed: int = 0
    pages_with_router: int = 0
    processing_time_ms: float = 0.0
    pages: list[ProcessedPage] = field(default_factory=list)

    @property
    def bytes_saved(self) -> int:
        return self.total_original_size - self.total_new_size

    @property
    def percent_saved(self) -> float:
        if self.total_original_size == 0:
            return 0.0
        return self.bytes_saved / self.total_original_size * 100
