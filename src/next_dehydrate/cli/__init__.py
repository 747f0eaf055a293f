"""CLI entry point."""

import typer

app = typer.Typer(
    name="next-dehydrate",
    help="next-dehydrate - Remove unneeded framework JavaScript from Next.js builds",
    add_completion=False,
    rich_markup_mode="rich",
)


# Import commands to register them
from .dehydrate import main as _main_callback  # noqa: F401, E402


def main() -> None:
    """Console script entry point."""
    app()
