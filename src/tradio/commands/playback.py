"""
Playback command handlers for tradio.

Handles: play by number, toggle, random, stop, now-playing summary,
and the startup player check.
"""

from typing import Optional, Tuple

from tradio.context import AppContext
from tradio.core.errors import InvalidInput, NotFound, PlaybackStartFailed, PlayerUnsupported
from tradio.core.output import log
from tradio.domain.playback import PLAYER_ARGS, check_player_available
from tradio.domain.stations import Station


def check_dependencies(ctx: AppContext) -> bool:
    """Report a missing player executable. Returns False if it is missing."""
    player = ctx.config.player.name
    if player not in PLAYER_ARGS:
        log(f"Unsupported player: {player}", level="error")
        log(f"Set player= to one of: {', '.join(PLAYER_ARGS)}", level="info")
        return False
    if check_player_available(player):
        return True
    binary = PLAYER_ARGS[player][0]
    log(f"Missing dependencies: {binary}", level="error")
    log("Please install the following packages using your system's package manager:")
    log(f"- {binary}")
    return False


def parse_station_number(ctx: AppContext, text: str) -> Station:
    """Resolve a 1-based station number typed by the user.

    Raises:
        InvalidInput: ``text`` is not a number
        NotFound: The number is out of range
    """
    text = text.strip()
    if not (text.isascii() and text.isdigit()):
        raise InvalidInput(f"Invalid argument: {text}")
    return ctx.registry.by_index(int(text))


def play_station(ctx: AppContext, station: Station, toggle: bool = False) -> bool:
    """Start (or toggle) ``station``. Returns True on success.

    Errors are reported to the user; the session is always left idle or
    playing.
    """
    session = ctx.session
    try:
        current = session.now_playing()
        if toggle and current is not None and current.station_name == station.name:
            log("Stopping radio...", level="warning")
            session.toggle(station)
            return True
        log(f"Starting: {station.name}", level="success")
        # start() stops any other station first
        session.start(station)
        return True
    except (InvalidInput, PlayerUnsupported) as e:
        log(f"Error: {e}", level="error")
    except PlaybackStartFailed as e:
        log(str(e), level="error")
    return False


def handle_play_number(
    ctx: AppContext, text: str, toggle: bool = False
) -> Tuple[AppContext, bool]:
    """Play the station at a typed 1-based number.

    Returns:
        (context, success)
    """
    try:
        station = parse_station_number(ctx, text)
    except (InvalidInput, NotFound) as e:
        log(str(e), level="error")
        return ctx, False
    return ctx, play_station(ctx, station, toggle=toggle)


def handle_random_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Toggle a randomly chosen station."""
    try:
        station = ctx.registry.random_station()
    except NotFound as e:
        log(str(e), level="error")
        return ctx, False
    log(f"Randomly selected: {station.name}", level="success")
    return ctx, play_station(ctx, station, toggle=True)


def handle_stop_command(ctx: AppContext) -> Tuple[AppContext, bool]:
    """Stop playback; stopping with nothing playing is fine."""
    if ctx.session.is_playing():
        log("Stopping radio...", level="warning")
    ctx.session.stop()
    return ctx, True


def now_playing_name(ctx: AppContext) -> Optional[str]:
    record = ctx.session.now_playing()
    return record.station_name if record else None


def print_status(ctx: AppContext) -> None:
    """Print the short volume / now playing / player summary."""
    console = ctx.console
    console.print("[bold]🎵 Terminal Radio Player[/bold]")
    console.rule(style="dim")
    console.print(f"Volume: {ctx.config.player.volume}%")
    console.print(f"Now Playing: {now_playing_name(ctx) or '-'}", markup=False)
    console.print(f"Player: {ctx.config.player.name}")
    console.rule(style="dim")
