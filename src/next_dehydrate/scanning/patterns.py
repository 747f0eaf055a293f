"""Pattern catalog: recognisable source and HTML markers.

All tables are immutable module constants. Patterns are matched textually
against component source (not parsed), first match wins within a family.
"""

import re

# Event handler props that indicate interactivity in JSX
EVENT_HANDLER_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"\b{prop}=")
    for prop in (
        "onClick",
        "onChange",
        "onSubmit",
        "onKeyDown",
        "onKeyUp",
        "onKeyPress",
        "onFocus",
        "onBlur",
        "onInput",
        "onMouseOver",
        "onMouseOut",
        "onMouseDown",
        "onMouseUp",
        "onTouchStart",
        "onTouchEnd",
        "onTouchMove",
        "onDragStart",
        "onDragEnd",
        "onDrop",
    )
)

# Reactive state / effect / ref / context primitives
STATEFUL_HOOK_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(rf"\b{hook}\b")
    for hook in (
        "useState",
        "useEffect",
        "useCallback",
        "useMemo",
        "useRef",
        "useContext",
        "useReducer",
        "useLayoutEffect",
        "useImperativeHandle",
        "useDebugValue",
        "useId",
        "useSyncExternalStore",
        "useTransition",
        "useDeferredValue",
    )
)

# "use client" directive as a statement of its own: optional BOM and
# indentation, the quoted directive, then ";", a comment or end of line.
# Code after the ";" does not matter.
CLIENT_MODULE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"""^\ufeff?[ \t]*(["'])use client\1[ \t]*(?:;|//|/\*|\r?$)""", re.MULTILINE),
)

# Navigation Link component import or usage
NAVIGATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"""import\s+(?:{\s*)?Link(?:\s*})?\s+from\s+['"]next/link['"]"""),
    re.compile(r"""import\s+{\s*[^}]*Link[^}]*\s*}\s+from\s+['"]next/link['"]"""),
    re.compile(r"<Link\s+"),
    re.compile(r"<Link>"),
)

# Markers of the framework's own hydration/runtime bundle
FRAMEWORK_SCRIPT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"_next/static/"),
    re.compile(r"__NEXT_DATA__"),
    re.compile(r"self\.__next_f"),
    re.compile(r"next/dist/"),
)

# Import statements. [^'";]* spans newlines so multi-line named imports match.
IMPORT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"""\bimport\s+[^'";]*?\s*from\s+['"]([^'"]+)['"]"""),
    re.compile(r"""\bexport\s+[^'";]*?\s*from\s+['"]([^'"]+)['"]"""),
    re.compile(r"""^\s*import\s+['"]([^'"]+)['"]""", re.MULTILINE),
)

RELATIVE_PREFIXES: tuple[str, ...] = ("./", "../")

# Resolution order for extensionless specifiers
SOURCE_EXTENSIONS: tuple[str, ...] = (".tsx", ".ts", ".jsx", ".js")

# HTML counting (informational indicators)
SCRIPT_TAG_PATTERN = re.compile(r"<script\b", re.IGNORECASE)
PRELOAD_ATTR_PATTERN = re.compile(r"""rel=["'](?:preload|modulepreload)["']""", re.IGNORECASE)

# Inline script types that are executed as ordinary JavaScript
EXECUTABLE_SCRIPT_TYPES = frozenset({"text/javascript", "application/javascript", "module"})
STRUCTURED_DATA_TYPE = "application/ld+json"

# (directory relative to project, uses app router, source root relative to project)
ROUTER_LAYOUTS: tuple[tuple[str, bool, str], ...] = (
    ("src/app", True, "src"),
    ("src/pages", False, "src"),
    ("app", True, "."),
    ("pages", False, "."),
)


def matches_any(patterns: tuple[re.Pattern[str], ...], text: str) -> bool:
    """True if any pattern in the family matches *text*."""
    return any(pattern.search(text) for pattern in patterns)


def is_framework_script(text: str | None) -> bool:
    """True if a script URL or inline body belongs to the framework runtime."""
    if not text:
        return False
    return matches_any(FRAMEWORK_SCRIPT_PATTERNS, text)
