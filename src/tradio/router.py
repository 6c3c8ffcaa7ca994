"""
Menu command routing for tradio.

Routes a menu choice to the matching handler.
"""

import time
from typing import Tuple

from tradio import ui
from tradio.commands import library, playback, settings, stations
from tradio.context import AppContext
from tradio.core.errors import InvalidInput, NotFound
from tradio.core.output import log


def _search_flow(ctx: AppContext) -> None:
    term = ui.ask(ctx, "Enter search term")
    matches = stations.search_stations(ctx, term)
    if not matches:
        return
    ui.render_choices(ctx, "Found stations:", [s.name for s in matches])
    index = ui.ask_index(ctx, "\nSelect station to play (0 to cancel)", len(matches))
    if index is not None:
        playback.play_station(ctx, matches[index])


def _favorites_flow(ctx: AppContext) -> bool:
    """Walk favorites offering play/remove/next. Returns True if one was played."""
    ctx.console.print("[blue]Favorites:[/blue]")
    favorites = ctx.store.list_favorites()
    if not favorites:
        ctx.console.print("[dim](no favorites yet - use 'a' to add one)[/dim]")
        time.sleep(1)
        return False

    for name in favorites:
        ctx.console.print(name, markup=False)
        choice = ui.ask(ctx, "1) Play  2) Remove  3) Next")
        if choice == "1":
            if name not in ctx.registry:
                log(f"{name} is no longer available", level="error")
                continue
            playback.play_station(ctx, ctx.registry.lookup(name), toggle=True)
            return True
        if choice == "2":
            library.handle_remove_favorite(ctx, name)
    return False


def _add_favorite_flow(ctx: AppContext) -> None:
    text = ui.ask(ctx, "Station number to add to favorites")
    try:
        station = playback.parse_station_number(ctx, text)
    except (InvalidInput, NotFound) as e:
        log(str(e), level="error")
        time.sleep(1)
        return
    library.handle_add_favorite(ctx, station.name)
    time.sleep(1)


def handle_command(ctx: AppContext, choice: str) -> Tuple[AppContext, bool]:
    """
    Handle one menu choice.

    Args:
        ctx: Application context
        choice: Raw menu input

    Returns:
        (updated_context, should_continue)
    """
    choice = choice.strip()
    command = choice.lower()

    if command in ("q", "quit", "exit"):
        log("Goodbye!", level="success")
        return ctx, False

    if choice.isdigit():
        ctx, ok = playback.handle_play_number(ctx, choice, toggle=True)
        if ok:
            ui.wait_for_key(ctx)
        else:
            time.sleep(1)

    elif command == "r":
        playback.handle_random_command(ctx)
        ui.wait_for_key(ctx)

    elif command == "s":
        _search_flow(ctx)
        ui.wait_for_key(ctx)

    elif command == "f":
        if _favorites_flow(ctx):
            ui.wait_for_key(ctx)

    elif command == "a":
        _add_favorite_flow(ctx)

    elif command == "h":
        library.handle_history_command(ctx)
        ui.wait_for_key(ctx)

    elif command == "v":
        ctx, _ = settings.handle_volume_command(ctx, ui.ask(ctx, "Enter new volume (0-100)"))
        time.sleep(1)

    elif command == "p":
        settings.handle_player_command(ctx)
        time.sleep(1)

    elif command == "x":
        playback.handle_stop_command(ctx)
        time.sleep(1)

    else:
        log("Invalid choice!", level="error")
        time.sleep(1)

    return ctx, True
