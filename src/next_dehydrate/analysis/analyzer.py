"""Per-page analysis: crawl, detect, classify."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Iterable

from ..exceptions import FileAccessError
from ..logging_config import get_logger
from ..models import GeneratedPage, PageAnalysis
from ..scanning.crawler import DependencyCrawler
from ..scanning.detector import detect
from ..scanning.imports import ImportResolver
from ..scanning.patterns import SOURCE_EXTENSIONS
from .classifier import classify

logger = get_logger(__name__)


class PageAnalyzer:
    """Produces a PageAnalysis for a generated page.

    Args:
        source_root: Directory root-alias imports resolve against
        alias_prefixes: Root-alias import prefixes
        extensions: Source extensions in resolution order
    """

    def __init__(
        self,
        source_root: Path,
        alias_prefixes: Iterable[str] = ("@/",),
        extensions: Iterable[str] = SOURCE_EXTENSIONS,
    ):
        self.resolver = ImportResolver(source_root, alias_prefixes, extensions)
        self.crawler = DependencyCrawler(self.resolver)

    def analyze(self, page: GeneratedPage) -> PageAnalysis:
        """Classify one page.

        Raises:
            FileAccessError: If the entry source or the HTML document is unreadable
        """
        source_text = _read(page.source_path)
        html_text = _read(page.html_path)
        try:
            original_size = page.html_path.stat().st_size
        except OSError as e:
            raise FileAccessError(page.html_path, str(e))

        closure = self.crawler.closure(page.source_path, source_text)
        indicators = replace(
            detect(source_text, html_text),
            has_client_components=closure.has_client_code,
        )
        classification = classify(indicators)

        logger.debug("%s: %s", page.html_path, classification.value)

        return PageAnalysis(
            absolute_path=page.html_path.resolve(),
            classification=classification,
            indicators=indicators,
            original_size=original_size,
            source_path=page.source_path.resolve(),
            dependencies=tuple(closure.modules),
        )


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(path, str(e))
