"""
tradio CLI - Entry point

Supports one-shot commands (play, toggle, stop, list, switch player) and
falls back to the interactive menu when called without arguments.
"""

import argparse
import sys
from typing import Optional

from tradio.commands import playback, settings, stations
from tradio.context import AppContext
from tradio.core.output import log


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message: str) -> None:
        log(f"Error: {message}", level="error")
        self.print_usage(sys.stderr)
        self.exit(1)


def build_parser(station_count: int) -> argparse.ArgumentParser:
    parser = _Parser(
        prog="tradio",
        usage="tradio [OPTION] [NUMBER]",
        description="Terminal based radio player",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-t", "--toggle",
        metavar="NUMBER",
        help="Toggle play/stop for given station",
    )
    group.add_argument(
        "-s", "--stop",
        action="store_true",
        help="Stop currently playing station",
    )
    group.add_argument(
        "-l", "--list",
        action="store_true",
        help="List all available stations",
    )
    group.add_argument(
        "-p", "--player",
        action="store_true",
        help="Switch player (cvlc/mpv)",
    )
    parser.add_argument(
        "number",
        nargs="?",
        metavar="NUMBER",
        help=f"Play station number (1-{station_count})",
    )
    return parser


def _play(ctx: AppContext, number: str, toggle: bool) -> int:
    if not playback.check_dependencies(ctx):
        return 1
    ctx, ok = playback.handle_play_number(ctx, number, toggle=toggle)
    if not ok:
        return 1
    ctx.console.clear()
    playback.print_status(ctx)
    return 0


def run(argv: Optional[list[str]] = None, ctx: Optional[AppContext] = None) -> int:
    """Run the CLI and return the exit code.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        ctx: Application context (default: built by ``bootstrap``)
    """
    from tradio.main import bootstrap, interactive_mode

    ctx = ctx or bootstrap()
    parser = build_parser(len(ctx.registry))
    args = parser.parse_args(argv)

    if args.number is not None and (args.toggle or args.stop or args.list or args.player):
        parser.error(f"unexpected argument: {args.number}")

    if args.toggle is not None:
        return _play(ctx, args.toggle, toggle=True)

    if args.stop:
        playback.handle_stop_command(ctx)
        return 0

    if args.list:
        stations.handle_list_command(ctx)
        return 0

    if args.player:
        settings.handle_player_command(ctx)
        return 0

    if args.number is not None:
        return _play(ctx, args.number, toggle=False)

    if not playback.check_dependencies(ctx):
        return 1
    interactive_mode(ctx)
    return 0


def main() -> None:
    """Main entry point for the tradio command."""
    sys.exit(run())


if __name__ == "__main__":
    main()
