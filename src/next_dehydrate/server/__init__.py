"""Local preview of a processed build (``next-dehydrate --serve``).

The ASGI app lives in :mod:`.app` and is only imported once the optional
packages are known to be present::

    pip install next-dehydrate[serve]
"""

from __future__ import annotations

import importlib.util

# Modules the preview needs, by import name
PREVIEW_MODULES = ("starlette", "uvicorn")


def _check_deps() -> None:
    """Raise ImportError naming every preview module that is not installed."""
    missing = [name for name in PREVIEW_MODULES if importlib.util.find_spec(name) is None]
    if missing:
        raise ImportError(
            f"The preview server needs {', '.join(missing)}. "
            "Install with: pip install next-dehydrate[serve]"
        )
