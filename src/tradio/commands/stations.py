"""
Station listing and search command handlers for tradio.
"""

from typing import Tuple

from tradio.context import AppContext
from tradio.core.output import log
from tradio.domain.stations import Station


def handle_list_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Print all stations with their 1-based numbers."""
    ctx.console.print("[blue]Available Radio Stations:[/blue]")
    for i, station in enumerate(ctx.registry, start=1):
        ctx.console.print(f"{i}) {station.name}", markup=False)
    return ctx, True


def search_stations(ctx: AppContext, term: str) -> list[Station]:
    """Search stations by name; prints a message when nothing matches."""
    matches = ctx.registry.search(term)
    if not matches:
        log("No results found", level="error")
    return matches
