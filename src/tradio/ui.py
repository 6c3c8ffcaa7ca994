"""
Menu rendering and input helpers for the interactive mode
"""

import sys
from typing import Optional, Sequence

from blessed import Terminal
from rich.markup import escape
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from tradio.context import AppContext
from tradio.domain.stations import Station

APP_VERSION = "1.1"

COMMANDS_HELP = (
    ("r) Random Play", "s) Search"),
    ("f) Favorites", "h) History"),
    ("a) Add Favorite", "x) Stop"),
    ("v) Volume", "p) Toggle Player (cvlc/mpv)"),
    ("q) Quit", ""),
)

_term: Optional[Terminal] = None


def get_terminal() -> Terminal:
    global _term
    if _term is None:
        _term = Terminal()
    return _term


def station_grid(
    stations: Sequence[Station], favorites: set[str], columns: int = 2
) -> Table:
    """Lay stations out in numbered columns, starring favorites."""
    columns = max(1, columns)
    grid = Table.grid(padding=(0, 4))
    for _ in range(columns):
        grid.add_column(no_wrap=True)

    width = len(str(len(stations)))
    cells = []
    for i, station in enumerate(stations, start=1):
        star = " [yellow]★[/yellow]" if station.name in favorites else ""
        cells.append(f"({i:>{width}}) {escape(station.name)}{star}")

    for start in range(0, len(cells), columns):
        row = cells[start : start + columns]
        row += [""] * (columns - len(row))
        grid.add_row(*row)
    return grid


def render_menu(ctx: AppContext) -> None:
    """Clear the screen and draw the header, station list and commands."""
    console = ctx.console
    console.clear()
    console.print(f"[bold]🎵 Terminal Radio Player v{APP_VERSION}[/bold]")
    console.rule(style="dim")
    console.print(f"[yellow]Volume: {ctx.config.player.volume}%[/yellow]")
    console.print(f"[yellow]Player: {ctx.config.player.name}[/yellow]")

    record = ctx.session.now_playing()
    if record is not None:
        console.print(f"Now Playing: {record.station_name}", style="green", markup=False)
    else:
        console.print("[yellow]No station playing[/yellow]")

    console.rule(style="dim")
    console.print("[blue]Available Radio Stations:[/blue]")
    console.rule(style="dim")

    favorites = set(ctx.store.list_favorites())
    console.print(station_grid(ctx.registry.all_stations(), favorites, ctx.config.ui.columns))

    console.print("\n[blue]Commands:[/blue]")
    for left, right in COMMANDS_HELP:
        console.print(f"{left:<17}{right}".rstrip())


def render_choices(ctx: AppContext, title: str, names: Sequence[str]) -> None:
    """Print a numbered list of names."""
    ctx.console.print(f"[green]{title}[/green]")
    for i, name in enumerate(names, start=1):
        ctx.console.print(f"[blue]{i})[/blue] {escape(name)}")


def ask(ctx: AppContext, prompt: str, default: str = "") -> str:
    """Read a line of input."""
    return Prompt.ask(prompt, console=ctx.console, default=default, show_default=False)


def ask_index(ctx: AppContext, prompt: str, count: int) -> Optional[int]:
    """Ask for a 1-based choice; returns a 0-based index or None for 0/cancel."""
    choice = IntPrompt.ask(prompt, console=ctx.console, default=0, show_default=False)
    if choice is None or not 1 <= choice <= count:
        return None
    return choice - 1


def wait_for_key(ctx: AppContext, message: str = "Press any key to return to the menu...") -> None:
    """Block until a single key is pressed (a line when stdin is not a terminal)."""
    ctx.console.print(f"[green]{message}[/green]")
    if not sys.stdin.isatty():
        sys.stdin.readline()
        return
    term = get_terminal()
    with term.cbreak():
        term.inkey()
