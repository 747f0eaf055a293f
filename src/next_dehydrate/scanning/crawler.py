"""Dependency crawl over a page's locally-imported source modules.

The crawl stops at the first module that needs hydration: any reachable
interactive module makes the whole page interactive, whichever render path
is taken at runtime.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..logging_config import get_logger
from .detector import has_interactivity
from .imports import ImportResolver

logger = get_logger(__name__)


@dataclass
class ClosureResult:
    """Outcome of crawling one entry module.

    Attributes:
        has_client_code: Some inspected module set an interactivity indicator
        modules: Resolved paths inspected, in visit order (entry first)
        unresolved: (importer, specifier) pairs that matched no file
    """

    has_client_code: bool = False
    modules: list[Path] = field(default_factory=list)
    unresolved: list[tuple[Path, str]] = field(default_factory=list)


class DependencyCrawler:
    """Walks local imports from an entry module.

    The visited set lives only for one ``closure`` call, so a crawler
    instance can be shared between pages and threads.
    """

    def __init__(self, resolver: ImportResolver):
        self.resolver = resolver

    def closure(self, entry_path: Path, entry_content: str) -> ClosureResult:
        """Inspect *entry_path* and everything it transitively imports."""
        result = ClosureResult()
        visited: set[Path] = set()
        entry = Path(entry_path).resolve()
        result.has_client_code = self._visit(entry, entry_content, visited, result)
        return result

    def _visit(
        self, path: Path, content: str, visited: set[Path], result: ClosureResult
    ) -> bool:
        visited.add(path)
        result.modules.append(path)

        if has_interactivity(content):
            logger.debug("Client code in %s", path)
            return True

        for specifier in self.resolver.local_imports(content):
            resolved = self.resolver.resolve(path.parent, specifier)
            if resolved is None:
                logger.debug("Unresolved import %r in %s", specifier, path)
                result.unresolved.append((path, specifier))
                continue
            if resolved in visited:
                continue

            try:
                imported = resolved.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Skipping unreadable import %s: %s", resolved, e)
                visited.add(resolved)
                continue

            if self._visit(resolved, imported, visited, result):
                return True

        return False
