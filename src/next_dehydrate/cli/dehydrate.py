"""Main command: process a build, report, optionally preview."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..build import describe_build_mode
from ..config import load_config
from ..exceptions import DehydrateError
from ..formatters import JsonFormatter, RichFormatter, format_bytes
from ..logging_config import setup_logging
from ..pipeline import DehydrateResult, Dehydrator
from . import app
from ._common import console, err_console


def _print_banner() -> None:
    console.print()
    console.print("[bold cyan]NEXT-DEHYDRATE[/]")
    console.print("[dim]Remove unneeded JavaScript from Next.js builds[/]")
    console.print()


def _print_outcome(result: DehydrateResult) -> None:
    console.print(
        f"[green]✓[/green] {describe_build_mode(result.build.mode)} processed → "
        f"[bold]{escape(str(result.output_dir))}[/bold]"
    )
    if result.stats.bytes_saved > 0:
        console.print(f"[green]✓[/green] Saved {format_bytes(result.stats.bytes_saved)}")
    if result.helper_path is not None:
        console.print(f"[dim]Navigation helper: {escape(str(result.helper_path))}[/dim]")


@app.callback(invoke_without_command=True, no_args_is_help=False)
def main(
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Next.js project root (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
        readable=True,
    ),
    serve: bool = typer.Option(
        False,
        "--serve",
        help="Start a preview server after processing",
    ),
    port: Optional[int] = typer.Option(
        None,
        "--port",
        "-p",
        help="Preview server port (default: 3000)",
        min=1,
        max=65535,
    ),
    host: Optional[str] = typer.Option(
        None,
        "--host",
        help="Preview server host (default: 127.0.0.1)",
    ),
    out_dir: Optional[Path] = typer.Option(
        None,
        "--out-dir",
        "-o",
        help="Write the optimized static export here instead of in place",
        file_okay=False,
        dir_okay=True,
    ),
    no_minify: bool = typer.Option(
        False,
        "--no-minify",
        help="Write rewritten pages without HTML minification",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in machine-readable JSON format",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "-w",
        "--workers",
        help="Parallel workers (default: auto-detect)",
        min=1,
        max=32,
    ),
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug logging and per-page details",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print errors",
        hidden=True,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Remove framework JavaScript from Next.js pages that do not need it.

    Each generated page is classified from its source and dependencies:
    pure static pages lose all framework scripts, pages that only link to
    other pages get a small navigation helper instead, and interactive
    pages are left untouched.

    [bold cyan]Examples:[/bold cyan]

      next-dehydrate

      next-dehydrate --serve

      next-dehydrate -C /path/to/app --out-dir dist --json
    """
    target = Path(path) if path else Path.cwd()

    from .. import __version__

    if version:
        console.print(
            f"[bold cyan]next-dehydrate[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    logger = setup_logging(verbose=verbose, quiet=quiet)

    try:
        settings = load_config(
            config_file=config,
            verbose=verbose,
            quiet=quiet,
            workers=workers,
            out_dir=str(out_dir) if out_dir else None,
            minify=False if no_minify else None,
            serve=True if serve else None,
            host=host,
            port=port,
        )
        setup_logging(verbose=settings.verbose, quiet=settings.quiet)

        if settings.quiet:
            result = Dehydrator(settings).run(target)
        else:
            if not json_output:
                _print_banner()
            # JSON goes to stdout, so the spinner must not
            status_console = err_console if json_output else console
            with status_console.status("[cyan]Starting...", spinner="dots") as status:
                dehydrator = Dehydrator(
                    settings,
                    on_progress=lambda message: status.update(f"[cyan]{message}..."),
                )
                result = dehydrator.run(target)

        if json_output:
            JsonFormatter().render(result)
        elif not settings.quiet:
            RichFormatter(console=console, show_pages=settings.verbose).render(result)
            _print_outcome(result)
        elif result.errors:
            RichFormatter(console=err_console).render_errors(result)

        if result.errors:
            logger.error(f"{len(result.errors)} pages failed")
            raise typer.Exit(1)

        if settings.serve:
            from .serve import serve_directory

            serve_directory(result.output_dir, settings.host, settings.port, settings.verbose)

    except typer.Exit:
        raise

    except DehydrateError as e:
        logger.error(f"{e.__class__.__name__}: {e}")
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    except KeyboardInterrupt:
        logger.info("Processing interrupted by user")
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    except Exception as e:
        logger.exception("Unexpected error during processing")
        console.print(f"[red]Unexpected error:[/red] {escape(str(e))}")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)
