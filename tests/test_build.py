"""Tests for build layout detection and page discovery."""

import json

import pytest

from next_dehydrate.build import (
    describe_build_mode,
    detect_build,
    find_generated_pages,
    find_source,
    source_candidates,
    validate_build,
)
from next_dehydrate.exceptions import BuildDetectionError, MissingSourceError
from next_dehydrate.models import BuildMode

from conftest import STATIC_SOURCE


def _standard_build(root, router="app"):
    next_dir = root / ".next"
    (next_dir / "server" / router).mkdir(parents=True)
    (next_dir / "static" / "chunks").mkdir(parents=True)
    (next_dir / "build-manifest.json").write_text(json.dumps({"pages": {}}))
    (root / router).mkdir(parents=True, exist_ok=True)
    return next_dir


class TestDetectBuild:
    def test_static_export(self, project):
        project.page("", STATIC_SOURCE)
        build = detect_build(project.root)
        assert build.mode is BuildMode.STATIC_EXPORT
        assert build.build_dir == project.out_dir.resolve()
        assert build.html_dir == build.build_dir
        assert build.assets_dir == build.build_dir / "_next" / "static"
        assert build.routes_dir == project.root.resolve() / "app"
        assert build.source_root_dir == project.root.resolve()
        assert build.is_app_router

    def test_static_export_without_next_dir(self, tmp_path):
        (tmp_path / "out").mkdir()
        (tmp_path / "out" / "index.html").write_text("<html></html>")
        (tmp_path / "pages").mkdir()
        build = detect_build(tmp_path)
        assert build.mode is BuildMode.STATIC_EXPORT
        assert build.assets_dir == build.build_dir
        assert not build.is_app_router

    def test_standard_build(self, tmp_path):
        next_dir = _standard_build(tmp_path)
        build = detect_build(tmp_path)
        assert build.mode is BuildMode.STANDARD_BUILD
        assert build.html_dir == next_dir.resolve() / "server" / "app"
        assert build.assets_dir == next_dir.resolve() / "static"

    def test_standard_build_pages_router(self, tmp_path):
        next_dir = _standard_build(tmp_path, router="pages")
        build = detect_build(tmp_path)
        assert build.html_dir == next_dir.resolve() / "server" / "pages"
        assert not build.is_app_router

    def test_export_preferred_over_build(self, project):
        project.page("", STATIC_SOURCE)
        _standard_build(project.root)
        assert detect_build(project.root).mode is BuildMode.STATIC_EXPORT

    def test_src_layout(self, tmp_path):
        (tmp_path / "out" / "_next").mkdir(parents=True)
        (tmp_path / "src" / "app").mkdir(parents=True)
        (tmp_path / "app").mkdir()
        build = detect_build(tmp_path)
        assert build.routes_dir == tmp_path.resolve() / "src" / "app"
        assert build.source_root_dir == tmp_path.resolve() / "src"

    def test_no_build(self, tmp_path):
        with pytest.raises(BuildDetectionError, match="No Next.js build found"):
            detect_build(tmp_path)

    def test_no_router(self, tmp_path):
        (tmp_path / "out").mkdir()
        (tmp_path / "out" / "index.html").write_text("<html></html>")
        with pytest.raises(BuildDetectionError, match="router directory"):
            detect_build(tmp_path)

    def test_unrecognised_layout(self, tmp_path):
        (tmp_path / ".next" / "cache").mkdir(parents=True)
        (tmp_path / "app").mkdir()
        with pytest.raises(BuildDetectionError, match="Could not determine build mode"):
            detect_build(tmp_path)


class TestValidateBuild:
    def test_valid(self, project):
        project.page("", STATIC_SOURCE)
        validate_build(detect_build(project.root))

    def test_missing_html_dir(self, tmp_path):
        next_dir = _standard_build(tmp_path)
        (next_dir / "server" / "app").rmdir()
        with pytest.raises(BuildDetectionError, match="HTML directory not found"):
            validate_build(detect_build(tmp_path))


def test_describe_build_mode():
    assert "out/" in describe_build_mode(BuildMode.STATIC_EXPORT)
    assert ".next/" in describe_build_mode(BuildMode.STANDARD_BUILD)


class TestSourceLookup:
    def test_candidate_order(self, tmp_path):
        assert source_candidates(tmp_path, "blog", (".tsx", ".js")) == [
            tmp_path / "blog.tsx",
            tmp_path / "blog" / "page.tsx",
            tmp_path / "blog.js",
            tmp_path / "blog" / "page.js",
        ]

    def test_index_route(self, tmp_path):
        (tmp_path / "page.tsx").write_text("")
        assert find_source(tmp_path, "index.html") == tmp_path / "page.tsx"

    def test_pages_router_file(self, tmp_path):
        (tmp_path / "about.jsx").write_text("")
        assert find_source(tmp_path, "about.html") == tmp_path / "about.jsx"

    def test_trailing_slash_export(self, tmp_path):
        (tmp_path / "about").mkdir()
        (tmp_path / "about" / "page.tsx").write_text("")
        assert find_source(tmp_path, "about/index.html") == tmp_path / "about" / "page.tsx"

    def test_missing(self, tmp_path):
        with pytest.raises(MissingSourceError) as exc_info:
            find_source(tmp_path, "ghost.html", (".tsx",))
        assert exc_info.value.candidates == [tmp_path / "ghost.tsx", tmp_path / "ghost" / "page.tsx"]


class TestFindGeneratedPages:
    def test_pairs_documents_with_sources(self, mixed_project):
        build = detect_build(mixed_project.root)
        pages = find_generated_pages(build)
        names = [p.html_path.name for p in pages]
        assert names == ["about.html", "counter.html", "index.html"]
        assert pages[0].source_path == build.routes_dir / "about" / "page.tsx"

    def test_nested_routes(self, project):
        project.page("blog/first-post", STATIC_SOURCE)
        pages = find_generated_pages(detect_build(project.root))
        assert len(pages) == 1
        assert pages[0].source_path.parts[-3:] == ("blog", "first-post", "page.tsx")

    def test_documents_without_source_are_excluded(self, project):
        project.page("", STATIC_SOURCE)
        project.write("out/404.html", "<html><body>missing</body></html>")
        pages = find_generated_pages(detect_build(project.root))
        assert [p.html_path.name for p in pages] == ["index.html"]
