"""
Settings command handlers for tradio.

Handles: volume, player switching. Every change is saved immediately so
other running invocations read the new value.
"""

from typing import Tuple

from tradio.context import AppContext
from tradio.core.output import log
from tradio.domain.playback import PLAYER_LABELS, next_player, set_system_volume


def handle_volume_command(ctx: AppContext, text: str) -> Tuple[AppContext, bool]:
    """Set the volume from user input (0-100)."""
    text = text.strip()
    # ASCII digits only; isdigit() also accepts superscripts
    if not (text.isascii() and text.isdigit()) or not 0 <= int(text) <= 100:
        log("Invalid volume level!", level="error")
        return ctx, False

    volume = int(text)
    ctx.config.player.volume = volume
    ctx.store.save_config(ctx.config)
    set_system_volume(volume)
    log(f"Volume set to {volume}%", level="success")
    return ctx, True


def handle_player_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Switch to the next supported player and save it."""
    player = next_player(ctx.config.player.name)
    ctx.config.player.name = player
    ctx.store.save_config(ctx.config)
    log(f"Switched to {PLAYER_LABELS[player]} player", level="success")
    return ctx, True
