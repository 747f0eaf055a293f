"""Tests for the dependency crawl over local imports."""

from pathlib import Path

import pytest

from next_dehydrate.scanning.crawler import DependencyCrawler
from next_dehydrate.scanning.imports import ImportResolver


def _write(root: Path, rel: str, content: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def crawler(tmp_path):
    return DependencyCrawler(ImportResolver(tmp_path))


def _closure(crawler, entry: Path):
    return crawler.closure(entry, entry.read_text(encoding="utf-8"))


class TestClosure:
    def test_entry_only(self, tmp_path, crawler):
        entry = _write(tmp_path, "page.tsx", "export default function P() { return null; }")
        result = _closure(crawler, entry)
        assert not result.has_client_code
        assert result.modules == [entry.resolve()]
        assert result.unresolved == []

    def test_interactive_entry(self, tmp_path, crawler):
        entry = _write(tmp_path, "page.tsx", '"use client";\nexport default function P() {}')
        assert _closure(crawler, entry).has_client_code

    def test_transitive_interactivity(self, tmp_path, crawler):
        entry = _write(tmp_path, "page.tsx", 'import A from "./A";')
        _write(tmp_path, "A.tsx", 'import B from "./B";')
        _write(tmp_path, "B.tsx", "const [x, setX] = useState(0);")
        assert _closure(crawler, entry).has_client_code

    @pytest.mark.parametrize(
        "chart_source",
        [
            '"use client"; // client-only chart lib\nexport default function Chart() {}',
            "'use client';import Canvas from './Canvas';",
            '\ufeff"use client";\nexport default function Chart() {}',
        ],
    )
    def test_imported_directive_forms(self, tmp_path, crawler, chart_source):
        entry = _write(tmp_path, "page.tsx", 'import Chart from "./Chart";')
        _write(tmp_path, "Chart.tsx", chart_source)
        assert _closure(crawler, entry).has_client_code

    def test_stops_at_first_interactive_module(self, tmp_path, crawler):
        entry = _write(tmp_path, "page.tsx", 'import A from "./A";\nimport B from "./B";')
        _write(tmp_path, "A.tsx", "<button onClick={go} />")
        _write(tmp_path, "B.tsx", "export const b = 1;")
        result = _closure(crawler, entry)
        assert result.has_client_code
        assert (tmp_path / "B.tsx").resolve() not in result.modules

    def test_package_imports_are_not_followed(self, tmp_path, crawler):
        entry = _write(tmp_path, "page.tsx", 'import Widget from "widgets";')
        _write(tmp_path, "widgets.tsx", "useState()")
        result = _closure(crawler, entry)
        assert not result.has_client_code
        assert result.modules == [entry.resolve()]

    def test_alias_import(self, tmp_path, crawler):
        entry = _write(tmp_path, "app/page.tsx", 'import Nav from "@/components/Nav";')
        nav = _write(tmp_path, "components/Nav.tsx", "export default function Nav() {}")
        result = _closure(crawler, entry)
        assert not result.has_client_code
        assert nav.resolve() in result.modules


class TestCycleSafety:
    def test_two_module_cycle_terminates(self, tmp_path, crawler):
        entry = _write(tmp_path, "A.tsx", 'import B from "./B";')
        _write(tmp_path, "B.tsx", 'import A from "./A";')
        result = _closure(crawler, entry)
        assert not result.has_client_code
        assert len(result.modules) == 2

    def test_cycle_matches_acyclic_equivalent(self, tmp_path):
        cyclic = tmp_path / "cyclic"
        acyclic = tmp_path / "acyclic"
        for root, b_source in (
            (cyclic, 'import A from "./A";\nimport C from "./C";'),
            (acyclic, 'import C from "./C";'),
        ):
            _write(root, "A.tsx", 'import B from "./B";')
            _write(root, "B.tsx", b_source)
            _write(root, "C.tsx", "useEffect(() => {}, []);")

        results = [
            _closure(DependencyCrawler(ImportResolver(root)), root / "A.tsx")
            for root in (cyclic, acyclic)
        ]
        assert results[0].has_client_code
        assert results[0].has_client_code == results[1].has_client_code

    def test_self_import(self, tmp_path, crawler):
        entry = _write(tmp_path, "A.tsx", 'import A from "./A";')
        assert _closure(crawler, entry).modules == [entry.resolve()]

    def test_diamond_visits_shared_module_once(self, tmp_path, crawler):
        entry = _write(tmp_path, "page.tsx", 'import L from "./L";\nimport R from "./R";')
        _write(tmp_path, "L.tsx", 'import S from "./S";')
        _write(tmp_path, "R.tsx", 'import S from "./S";')
        shared = _write(tmp_path, "S.tsx", "export const s = 1;")
        result = _closure(crawler, entry)
        assert result.modules.count(shared.resolve()) == 1
        assert len(result.modules) == 4

    def test_crawler_is_reusable(self, tmp_path, crawler):
        """Visited state does not leak between closures."""
        entry = _write(tmp_path, "page.tsx", 'import S from "./S";')
        _write(tmp_path, "S.tsx", "export const s = 1;")
        first = _closure(crawler, entry)
        second = _closure(crawler, entry)
        assert first.modules == second.modules


class TestAbsorbedFailures:
    def test_missing_import_is_recorded_and_skipped(self, tmp_path, crawler):
        entry = _write(tmp_path, "page.tsx", 'import M from "./Missing";\nimport S from "./S";')
        _write(tmp_path, "S.tsx", "export const s = 1;")
        result = _closure(crawler, entry)
        assert not result.has_client_code
        assert result.unresolved == [(entry.resolve(), "./Missing")]
        assert (tmp_path / "S.tsx").resolve() in result.modules

    def test_missing_import_does_not_hide_resolved_signal(self, tmp_path, crawler):
        entry = _write(tmp_path, "page.tsx", 'import M from "./Missing";\nimport S from "./S";')
        _write(tmp_path, "S.tsx", "useRef(null)")
        assert _closure(crawler, entry).has_client_code

    def test_unreadable_import_is_skipped(self, tmp_path, crawler):
        entry = _write(tmp_path, "page.tsx", 'import Bad from "./Bad";')
        (tmp_path / "Bad.tsx").write_bytes(b"\xff\xfe useState(\x80)")
        result = _closure(crawler, entry)
        assert not result.has_client_code
        assert (tmp_path / "Bad.tsx").resolve() not in result.modules
