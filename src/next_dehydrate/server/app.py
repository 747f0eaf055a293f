"""Starlette ASGI application serving a processed build directory."""

from __future__ import annotations

import html
from pathlib import Path
from typing import Optional

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import FileResponse, HTMLResponse, Response
from starlette.routing import Route

from ..logging_config import get_logger

logger = get_logger(__name__)

_NOT_FOUND_TEMPLATE = """<!DOCTYPE html>
<html>
  <head><title>404 Not Found</title></head>
  <body>
    <h1>404 Not Found</h1>
    <p>The requested URL {path} was not found.</p>
  </body>
</html>
"""


def resolve_file_path(url_path: str, serve_dir: Path) -> Optional[Path]:
    """Map a request path to a file under *serve_dir*.

    ``/`` maps to ``index.html``; extensionless paths try ``<path>.html``
    then ``<path>/index.html``. Returns None for missing files and for
    paths that escape *serve_dir*.
    """
    root = serve_dir.resolve()
    relative = url_path.lstrip("/") or "index.html"
    candidate = (root / relative).resolve()

    if not candidate.is_relative_to(root):
        logger.debug("Rejected path outside serve dir: %s", url_path)
        return None

    if not candidate.suffix:
        html_path = candidate.with_name(candidate.name + ".html")
        if html_path.is_relative_to(root) and html_path.is_file():
            return html_path
        index_path = candidate / "index.html"
        if index_path.is_file():
            return index_path

    if candidate.is_file():
        return candidate
    return None


def not_found(url_path: str) -> HTMLResponse:
    return HTMLResponse(_NOT_FOUND_TEMPLATE.format(path=html.escape(url_path)), status_code=404)


def create_app(serve_dir: Path) -> Starlette:
    """Build the Starlette application serving files from *serve_dir*."""
    serve_dir = Path(serve_dir)

    async def serve(request: Request) -> Response:
        # request.url.path never carries the query string
        url_path = request.url.path
        file_path = resolve_file_path(url_path, serve_dir)
        if file_path is None:
            return not_found(url_path)
        return FileResponse(file_path)

    routes = [
        Route("/{path:path}", serve, methods=["GET", "HEAD"]),
    ]

    return Starlette(routes=routes)
