"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands reuse tables/panels.
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Movie


def print_banner(console: Console) -> None:
    """Print the welcome banner."""

    title = Text("CINE-LIST", style="bold cyan")
    subtitle = Text("Movie catalog client", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_movies_table(movies: list[Movie]) -> Table:
    """Rich table for a list of movies."""

    table = Table(title="Movies")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Rating", style="green", justify="right")
    table.add_column("Watched", style="magenta")
    for movie in movies:
        table.add_row(
            movie.id or "-",
            movie.titulo or "-",
            f"{movie.nota:.1f}" if movie.nota is not None else "-",
            movie.completed_at.date().isoformat() if movie.completed_at else "",
        )
    return table


def print_result(console: Console, data: Any) -> None:
    """Print a decoded backend response as JSON."""

    if data is None:
        console.print("[green]OK[/green]")
        return
    console.print_json(data=data)


def print_failure(console: Console, exc: Exception) -> None:
    console.print(f"[red]Error:[/red] {exc}")
