"""Build-output layout detection and page discovery.

Two layouts are recognised:
    - Static export: ``out/`` with ``index.html`` or ``_next/``
    - Standard build: ``.next/`` with ``server/``, ``static/`` and a build manifest
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .exceptions import BuildDetectionError, MissingSourceError
from .logging_config import get_logger
from .models import BuildDetectionResult, BuildMode, GeneratedPage
from .scanning.patterns import ROUTER_LAYOUTS, SOURCE_EXTENSIONS

logger = get_logger(__name__)

DEFAULT_EXPORT_DIR = "out"
DEFAULT_BUILD_DIR = ".next"
BUILD_MANIFEST = "build-manifest.json"


def detect_build(project_dir: Path) -> BuildDetectionResult:
    """Locate the build output under *project_dir*.

    Raises:
        BuildDetectionError: If no build directory, router directory or
            recognisable layout is found
    """
    project_dir = Path(project_dir).resolve()
    out_dir = project_dir / DEFAULT_EXPORT_DIR
    next_dir = project_dir / DEFAULT_BUILD_DIR

    if out_dir.is_dir():
        logger.debug("Found static export directory: %s", out_dir)
        return _analyze_build_directory(project_dir, out_dir)

    if next_dir.is_dir():
        logger.debug("Found build directory: %s", next_dir)
        return _analyze_build_directory(project_dir, next_dir)

    raise BuildDetectionError(
        "No Next.js build found. Expected either:\n"
        f"  - Static export: {out_dir}\n"
        f"  - Standard build: {next_dir}\n\n"
        "Run 'next build' first.",
        project_dir=project_dir,
    )


def _find_router(project_dir: Path) -> tuple[Path, bool, Path]:
    for rel_path, is_app_router, source_root in ROUTER_LAYOUTS:
        routes_dir = project_dir / rel_path
        if routes_dir.exists():
            return routes_dir, is_app_router, (project_dir / source_root).resolve()

    raise BuildDetectionError(
        "No Next.js router directory found. Expected 'app' or 'pages' directory.",
        project_dir=project_dir,
    )


def _analyze_build_directory(project_dir: Path, build_dir: Path) -> BuildDetectionResult:
    entries = {entry.name for entry in build_dir.iterdir()}

    has_server_dir = "server" in entries
    has_static_dir = "static" in entries
    has_build_manifest = BUILD_MANIFEST in entries
    has_index_html = "index.html" in entries
    has_next_static_dir = "_next" in entries

    is_static_export = has_index_html or (has_next_static_dir and not has_server_dir)
    is_standard_build = has_server_dir and has_static_dir and has_build_manifest

    routes_dir, is_app_router, source_root = _find_router(project_dir)

    if is_standard_build:
        html_dir = build_dir / "server" / ("app" if is_app_router else "pages")
        return BuildDetectionResult(
            mode=BuildMode.STANDARD_BUILD,
            build_dir=build_dir,
            html_dir=html_dir,
            assets_dir=build_dir / "static",
            routes_dir=routes_dir,
            source_root_dir=source_root,
            is_app_router=is_app_router,
        )

    if is_static_export:
        return BuildDetectionResult(
            mode=BuildMode.STATIC_EXPORT,
            build_dir=build_dir,
            html_dir=build_dir,
            assets_dir=build_dir / "_next" / "static" if has_next_static_dir else build_dir,
            routes_dir=routes_dir,
            source_root_dir=source_root,
            is_app_router=is_app_router,
        )

    raise BuildDetectionError(
        f"Could not determine build mode for directory: {build_dir}\n"
        "The directory does not appear to contain a valid Next.js build.",
        project_dir=project_dir,
    )


def validate_build(result: BuildDetectionResult) -> None:
    """Check that the detected layout is usable.

    Raises:
        BuildDetectionError: If the HTML directory or required build files are missing
    """
    if not result.html_dir.exists():
        raise BuildDetectionError(f"HTML directory not found: {result.html_dir}")

    if result.mode is BuildMode.STANDARD_BUILD:
        manifest = result.build_dir / BUILD_MANIFEST
        if not manifest.exists():
            raise BuildDetectionError(f"Required build file not found: {manifest}")


def describe_build_mode(mode: BuildMode) -> str:
    if mode is BuildMode.STATIC_EXPORT:
        return "Static Export (out/)"
    return "Standard Build (.next/)"


def source_candidates(
    routes_dir: Path, route: str, extensions: Iterable[str] = SOURCE_EXTENSIONS
) -> list[Path]:
    """Possible entry modules for *route* ("" for the index route), in priority order."""
    candidates: list[Path] = []
    for ext in extensions:
        candidates.append(routes_dir / f"{route or 'index'}{ext}")
        candidates.append(routes_dir / route / f"page{ext}")
    return candidates


def find_source(
    routes_dir: Path, html_rel: str, extensions: Iterable[str] = SOURCE_EXTENSIONS
) -> Path:
    """Entry module for the document at *html_rel* (relative to the HTML dir).

    Raises:
        MissingSourceError: If no candidate module exists
    """
    route = "" if html_rel == "index.html" else html_rel[: -len(".html")]
    routes = [route]
    # trailingSlash exports write about/index.html for /about
    if route.endswith("/index"):
        routes.append(route[: -len("/index")])

    tried: list[Path] = []
    for r in routes:
        for candidate in source_candidates(routes_dir, r, extensions):
            if candidate.is_file():
                return candidate
            tried.append(candidate)

    raise MissingSourceError(Path(html_rel), tried)


def find_generated_pages(
    build: BuildDetectionResult, extensions: Iterable[str] = SOURCE_EXTENSIONS
) -> list[GeneratedPage]:
    """Pair every generated HTML document with its entry source module.

    Documents without a source module are excluded: classifying them
    without indicator data would be unsound.
    """
    extensions = tuple(extensions)
    pages: list[GeneratedPage] = []

    for html_path in sorted(build.html_dir.rglob("*.html")):
        if not html_path.is_file():
            continue
        rel = html_path.relative_to(build.html_dir).as_posix()
        try:
            source = find_source(build.routes_dir, rel, extensions)
        except MissingSourceError as e:
            logger.debug("Skipping %s: %s", html_path, e)
            continue
        pages.append(GeneratedPage(html_path=html_path, source_path=source))

    return pages
