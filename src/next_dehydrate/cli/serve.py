"""Preview server launch for ``next-dehydrate --serve``."""

from pathlib import Path

import typer
from rich.markup import escape

from ..logging_config import get_logger
from ._common import console

logger = get_logger(__name__)


def serve_directory(serve_dir: Path, host: str, port: int, verbose: bool = False) -> None:
    """Serve *serve_dir* until interrupted."""
    try:
        from ..server import _check_deps

        _check_deps()
    except ImportError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(1)

    import uvicorn

    from ..server.app import create_app

    url = f"http://{host}:{port}"
    console.print()
    console.print(f"[green]Preview server running at:[/green] [link={url}]{url}[/link]")
    console.print(f"[dim]Serving {escape(str(serve_dir))}[/dim]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")

    asgi_app = create_app(serve_dir)
    try:
        uvicorn.run(
            asgi_app,
            host=host,
            port=port,
            log_level="warning" if not verbose else "info",
        )
    except KeyboardInterrupt:
        pass
    finally:
        logger.debug("Preview server stopped")
        console.print("\n[dim]Stopped.[/dim]")
