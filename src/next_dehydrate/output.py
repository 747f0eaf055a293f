"""Output generation: rewritten documents, assets and the standalone helper file."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Iterable, Optional

import minify_html

from .config import DehydrateConfig
from .exceptions import FileAccessError, InvalidPathError
from .logging_config import get_logger
from .models import BuildDetectionResult, BuildMode, PageAnalysis, PageClassification, ProcessedPage
from .transform.stripper import transform

logger = get_logger(__name__)

HELPER_DIR = "_next-dehydrate"
HELPER_FILE = "spa-nav.min.js"


class OutputGenerator:
    """Writes processed pages for one build.

    Standard builds are always rewritten in place (the server bundle
    expects its own layout). Static exports go to ``config.out_dir`` when
    set, otherwise in place.
    """

    def __init__(
        self,
        build: BuildDetectionResult,
        config: DehydrateConfig,
        navigation_helper: Optional[str] = None,
    ):
        self.build = build
        self.config = config
        self.navigation_helper = navigation_helper
        self.output_dir = self._resolve_output_dir()

    def _resolve_output_dir(self) -> Path:
        if not self.config.out_dir:
            return self.build.build_dir
        if self.build.mode is BuildMode.STANDARD_BUILD:
            logger.warning("Standard builds are optimized in place; ignoring out_dir")
            return self.build.build_dir
        out_dir = Path(self.config.out_dir).resolve()
        if out_dir.exists() and not out_dir.is_dir():
            raise InvalidPathError(out_dir, "output path exists and is not a directory")
        if out_dir != self.build.build_dir and out_dir.is_relative_to(self.build.build_dir):
            raise InvalidPathError(out_dir, "output directory cannot be inside the build directory")
        return out_dir

    @property
    def in_place(self) -> bool:
        return self.output_dir == self.build.build_dir

    def target_path(self, analysis: PageAnalysis) -> Path:
        """Where the rewritten document for *analysis* is written."""
        if self.in_place:
            return analysis.absolute_path
        return self.output_dir / analysis.absolute_path.relative_to(self.build.build_dir)

    def process_page(self, analysis: PageAnalysis) -> ProcessedPage:
        """Transform and write one page.

        Raises:
            FileAccessError: If the document cannot be read or written
            MalformedDocumentError: If the document cannot be parsed
        """
        try:
            original = analysis.absolute_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileAccessError(analysis.absolute_path, str(e))

        result = transform(original, analysis.classification, self.navigation_helper)
        target = self.target_path(analysis)

        if analysis.classification is PageClassification.INTERACTIVE:
            if not self.in_place:
                _copy_file(analysis.absolute_path, target)
            new_size = analysis.original_size
        else:
            html = minify(result.html) if self.config.minify else result.html
            data = html.encode("utf-8")
            try:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.write_bytes(data)
            except OSError as e:
                raise FileAccessError(target, str(e))
            new_size = len(data)

        logger.debug(
            "Processed: %s (%d scripts, %d preloads)",
            target,
            result.scripts_removed,
            result.preloads_removed,
        )

        return ProcessedPage(
            analysis=analysis,
            new_size=new_size,
            scripts_removed=result.scripts_removed,
            preloads_removed=result.preloads_removed,
            router_injected=result.router_injected,
        )

    def copy_assets(self, written: Iterable[Path] = ()) -> int:
        """Copy build files not already written to the output directory.

        Documents that were skipped or failed are copied untouched so the
        output stays a complete site. Returns the count copied.
        """
        if self.in_place:
            logger.debug("Output is the build directory: assets already in place")
            return 0

        skip = set(written)
        copied = 0
        for src in sorted(self.build.build_dir.rglob("*")):
            if not src.is_file() or src in skip:
                continue
            _copy_file(src, self.output_dir / src.relative_to(self.build.build_dir))
            copied += 1

        logger.debug("Copied %d files", copied)
        return copied

    def write_helper_file(self) -> Optional[Path]:
        """Write the navigation helper as a standalone file for reference."""
        if not self.navigation_helper:
            return None
        path = self.output_dir / HELPER_DIR / HELPER_FILE
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(self.navigation_helper, encoding="utf-8")
        except OSError as e:
            raise FileAccessError(path, str(e))
        logger.debug("Created navigation helper: %s", path)
        return path


def minify(html: str) -> str:
    """Minify an HTML document, including inline CSS and JS."""
    return minify_html.minify(html, minify_css=True, minify_js=True)


def _copy_file(src: Path, dest: Path) -> None:
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, dest)
    except OSError as e:
        raise FileAccessError(src, str(e))
