"""Tests for the pattern catalog and indicator detection."""

import pytest

from next_dehydrate.scanning.detector import (
    detect,
    detect_client_module,
    detect_client_navigation,
    detect_event_handlers,
    detect_stateful_hooks,
    has_interactivity,
)
from next_dehydrate.scanning.patterns import is_framework_script


class TestEventHandlers:
    @pytest.mark.parametrize("prop", ["onClick", "onChange", "onSubmit", "onKeyDown", "onDrop"])
    def test_detects_handler_props(self, prop):
        assert detect_event_handlers(f"<button {prop}={{handle}}>Go</button>")

    def test_ignores_plain_markup(self):
        assert not detect_event_handlers("<button type='submit'>Go</button>")

    def test_requires_word_boundary(self):
        """Identifiers that merely end in a handler name do not count."""
        assert not detect_event_handlers("<div xonClick={x} />")


class TestStatefulHooks:
    @pytest.mark.parametrize("hook", ["useState", "useEffect", "useRef", "useReducer", "useId"])
    def test_detects_hooks(self, hook):
        assert detect_stateful_hooks(f"const x = {hook}(0);")

    def test_longer_identifiers_do_not_match(self):
        assert not detect_stateful_hooks("const useStateful = 1;")


class TestClientModule:
    def test_double_quoted_directive(self):
        assert detect_client_module('"use client";\nexport default function A() {}')

    def test_single_quoted_directive_without_semicolon(self):
        assert detect_client_module("'use client'\nexport default function A() {}")

    def test_directive_inside_string_is_ignored(self):
        assert not detect_client_module('const note = "please use client side code";')

    def test_mismatched_quotes_are_ignored(self):
        assert not detect_client_module("\"use client';")

    @pytest.mark.parametrize(
        "source",
        [
            '"use client"; // needs the browser\nexport default function A() {}',
            '"use client" // needs the browser\nexport default function A() {}',
            "'use client';import Widget from './Widget';",
            '\ufeff"use client";\nexport default function A() {}',
            '"use client";\r\nexport default function A() {}',
            '"use client"\r\nexport default function A() {}',
            '/* chart */\n  "use client";\n',
        ],
    )
    def test_directive_statement_forms(self, source):
        assert detect_client_module(source)
        assert detect(source).has_client_components
        assert has_interactivity(source)

    def test_directive_used_as_expression_is_ignored(self):
        assert not detect_client_module('"use client" + suffix;')


class TestClientNavigation:
    def test_default_import(self):
        assert detect_client_navigation('import Link from "next/link";')

    def test_named_import(self):
        assert detect_client_navigation("import { Link } from 'next/link';")

    def test_usage(self):
        assert detect_client_navigation('<Link href="/about">About</Link>')

    def test_anchor_is_not_navigation(self):
        assert not detect_client_navigation('<a href="/about">About</a>')


class TestHasInteractivity:
    def test_navigation_alone_is_not_interactive(self):
        assert not has_interactivity('import Link from "next/link";\n<Link href="/">x</Link>')

    @pytest.mark.parametrize(
        "source",
        ['"use client";', "useState(1)", "<a onClick={go}>x</a>"],
    )
    def test_each_family_is_interactive(self, source):
        assert has_interactivity(source)


class TestDetect:
    def test_families_are_independent(self):
        indicators = detect('import Link from "next/link";\nconst [a] = useState(0);')
        assert indicators.uses_stateful_hooks
        assert indicators.has_client_navigation
        assert not indicators.has_event_handlers
        assert not indicators.has_client_components

    def test_counts_scripts_and_preloads(self):
        html = (
            '<link rel="preload" href="/a.js" as="script">'
            '<link rel="modulepreload" href="/b.js">'
            "<script src='/c.js'></script><SCRIPT>1</SCRIPT>"
        )
        indicators = detect("", html)
        assert indicators.script_count == 2
        assert indicators.preload_count == 2

    def test_empty_source(self):
        indicators = detect("")
        assert not indicators.is_interactive
        assert not indicators.has_client_navigation


class TestFrameworkScript:
    @pytest.mark.parametrize(
        "text",
        [
            "/_next/static/chunks/main.js",
            'self.__next_f.push([1,""])',
            "window.__NEXT_DATA__ = {}",
            "/node_modules/next/dist/client.js",
        ],
    )
    def test_framework_markers(self, text):
        assert is_framework_script(text)

    @pytest.mark.parametrize("text", [None, "", "https://www.googletagmanager.com/gtag/js"])
    def test_non_framework(self, text):
        assert not is_framework_script(text)
