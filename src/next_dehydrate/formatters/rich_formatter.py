"""Rich terminal formatter for next-dehydrate."""

from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..analysis.classifier import describe_classification
from ..build import describe_build_mode
from ..models import PageClassification
from ..pipeline import DehydrateResult
from .base import BaseFormatter
from .units import format_bytes, format_duration, format_percent

_CLASSIFICATION_STYLE = {
    PageClassification.PURE_STATIC: "green",
    PageClassification.ROUTING_ONLY: "yellow",
    PageClassification.INTERACTIVE: "blue",
}


def _relative(path: Path, root: Path) -> str:
    try:
        return escape(path.relative_to(root).as_posix())
    except ValueError:
        return escape(str(path))


class RichFormatter(BaseFormatter):
    """Summary panel, classification breakdown and per-page table."""

    def __init__(self, console: Optional[Console] = None, show_pages: bool = True):
        self.console = console or Console()
        self.show_pages = show_pages

    def render(self, result: DehydrateResult) -> None:
        self._print_summary(result)
        if self.show_pages and result.stats.pages:
            self._print_pages(result)
        if result.errors:
            self.render_errors(result)

    def format(self, result: DehydrateResult) -> str:
        # Rich output goes directly to console; return empty string
        self.render(result)
        return ""

    def render_errors(self, result: DehydrateResult) -> None:
        self.console.print(f"[red bold]{len(result.errors)} pages failed:[/red bold]")
        for error in result.errors:
            self.console.print(
                f"  [red]✗[/red] {_relative(error.path, result.build.html_dir)} "
                f"[dim]({error.stage})[/dim]: {escape(error.message)}"
            )
        self.console.print()

    # -- private helpers --

    def _print_summary(self, result: DehydrateResult) -> None:
        stats = result.stats
        total = stats.total_pages

        lines = [f"Build: [cyan]{describe_build_mode(result.build.mode)}[/cyan]", ""]
        for classification in PageClassification:
            count = stats.by_classification.get(classification, 0)
            style = _CLASSIFICATION_STYLE[classification]
            lines.append(
                f"[{style}]●[/{style}] {describe_classification(classification)}: "
                f"[bold]{count}[/bold] ({format_percent(count, total)})"
            )
        lines.append("")
        saved = stats.bytes_saved
        if saved > 0:
            change = f"[green]-{format_bytes(saved)}[/green]"
        elif saved < 0:
            # injected helpers can outweigh the removed scripts
            change = f"[red]+{format_bytes(-saved)}[/red]"
        else:
            change = "no change"
        lines.append(
            f"Size: {format_bytes(stats.total_original_size)} → "
            f"{format_bytes(stats.total_new_size)}  "
            f"({change}, {abs(stats.percent_saved):.1f}%)"
        )
        lines.append(
            f"Removed: [bold]{stats.total_scripts_removed}[/bold] scripts, "
            f"[bold]{stats.total_preloads_removed}[/bold] preloads  |  "
            f"Router injected: [bold]{stats.pages_with_router}[/bold] pages"
        )
        lines.append(f"Time: {format_duration(stats.processing_time_ms)}")

        self.console.print(
            Panel(
                "\n".join(lines),
                title=f"[bold cyan]{total} pages processed[/bold cyan]",
                expand=False,
            )
        )
        self.console.print()

    def _print_pages(self, result: DehydrateResult) -> None:
        table = Table(title="Pages")
        table.add_column("Page", style="white", overflow="fold")
        table.add_column("Type", justify="center")
        table.add_column("Size", justify="right")
        table.add_column("Scripts", justify="right")
        table.add_column("Preloads", justify="right")

        for page in result.stats.pages:
            classification = page.analysis.classification
            style = _CLASSIFICATION_STYLE[classification]
            table.add_row(
                _relative(page.analysis.absolute_path, result.build.html_dir),
                f"[{style}]{classification.value}[/{style}]",
                f"{format_bytes(page.analysis.original_size)} → {format_bytes(page.new_size)}",
                str(page.scripts_removed),
                str(page.preloads_removed),
            )

        self.console.print(table)
        self.console.print()
