"""
Favorites and history command handlers for tradio.
"""

from typing import Optional, Tuple

from tradio.context import AppContext
from tradio.core.errors import NotFound
from tradio.core.output import log
from tradio.core.store import HistoryEntry


def handle_add_favorite(ctx: AppContext, name: str) -> Tuple[AppContext, bool]:
    """Add a known station to favorites."""
    try:
        station = ctx.registry.lookup(name)
    except NotFound as e:
        log(str(e), level="error")
        return ctx, False

    if ctx.store.add_favorite(station.name):
        log(f"Added {station.name} to favorites", level="success")
    else:
        log(f"{station.name} is already a favorite", level="warning")
    return ctx, True


def handle_remove_favorite(ctx: AppContext, name: str) -> Tuple[AppContext, bool]:
    """Remove a station from favorites; absent names are a no-op."""
    ctx.store.remove_favorite(name)
    log(f"Removed {name} from favorites", level="warning")
    return ctx, True


def recent_history(ctx: AppContext, limit: Optional[int] = None) -> list[HistoryEntry]:
    """Return the most recent plays, oldest first."""
    return ctx.store.read_history(limit or ctx.config.ui.history_length)


def handle_history_command(ctx: AppContext, limit: Optional[int] = None) -> Tuple[AppContext, bool]:
    """Print recently played stations."""
    ctx.console.print("[blue]Recently played:[/blue]")
    entries = recent_history(ctx, limit)
    if not entries:
        ctx.console.print("[dim](no history yet)[/dim]")
    for entry in entries:
        ctx.console.print(entry.format(), markup=False)
    return ctx, True
