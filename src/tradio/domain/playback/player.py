"""
External player processes for tradio
Builds player command lines, spawns players and checks/ends them by pid.
"""

import shutil
import subprocess
import time
from typing import Optional

import psutil
from loguru import logger

from tradio.core.config import clamp_volume
from tradio.core.errors import PlayerUnsupported

# A pid file is written after its process starts. A process created later
# than the file (beyond clock granularity) is a recycled pid, not ours.
CREATE_TIME_TOLERANCE = 2.0

# Poll step while waiting for a signalled process to go away
EXIT_POLL_INTERVAL = 0.05

PLAYER_ARGS: dict[str, list[str]] = {
    "cvlc": ["cvlc", "--no-video", "--play-and-exit", "--quiet", "--intf", "dummy"],
    "mpv": ["mpv", "--no-video", "--quiet"],
}

PLAYER_LABELS = {
    "cvlc": "VLC",
    "mpv": "MPV",
}


def build_player_command(player: str, url: str, volume: int) -> list[str]:
    """Return the argv that streams ``url`` at ``volume`` with ``player``.

    Raises:
        PlayerUnsupported: If ``player`` is not a known player
    """
    if player not in PLAYER_ARGS:
        raise PlayerUnsupported(player)
    return [*PLAYER_ARGS[player], f"--volume={clamp_volume(volume)}", url]


def next_player(player: str) -> str:
    """Return the player that follows ``player`` in the cycle."""
    players = list(PLAYER_ARGS)
    if player not in players:
        return players[0]
    return players[(players.index(player) + 1) % len(players)]


def check_player_available(player: str) -> bool:
    """Check if the executable for ``player`` is on PATH."""
    if player not in PLAYER_ARGS:
        return False
    return shutil.which(PLAYER_ARGS[player][0]) is not None


def spawn_player(cmd: list[str]) -> subprocess.Popen:
    """Start a detached player process.

    The player gets its own session so it keeps running after the CLI
    exits and does not receive the terminal's Ctrl+C.
    """
    logger.debug(f"Spawning player: {cmd}")
    return subprocess.Popen(
        cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )


def is_process_alive(pid: int, started_before: Optional[float] = None) -> bool:
    """Check if ``pid`` is a running (non-zombie) process.

    Args:
        pid: Process id to check
        started_before: Epoch seconds; a process created after this (plus
            tolerance) is treated as a recycled pid and reported dead
    """
    try:
        proc = psutil.Process(pid)
        if proc.status() == psutil.STATUS_ZOMBIE:
            return False
        if started_before is not None:
            if proc.create_time() > started_before + CREATE_TIME_TOLERANCE:
                logger.debug(f"pid {pid} was recycled by another process")
                return False
        return True
    except psutil.NoSuchProcess:
        return False
    except psutil.AccessDenied:
        # Exists but belongs to someone else
        return True


def _wait_for_exit(proc: psutil.Process, timeout: float) -> bool:
    """Wait until ``proc`` exits or turns zombie. Returns False on timeout.

    ``Process.wait`` reaps our own children, but a player started by another
    tradio stays a zombie until that process reaps it, so the status is
    checked between short waits.
    """
    deadline = time.monotonic() + timeout
    while True:
        try:
            proc.wait(timeout=EXIT_POLL_INTERVAL)
            return True
        except psutil.TimeoutExpired:
            pass
        except psutil.NoSuchProcess:
            return True

        try:
            if proc.status() == psutil.STATUS_ZOMBIE:
                return True
        except psutil.NoSuchProcess:
            return True

        if time.monotonic() >= deadline:
            return False


def terminate_process(pid: int, timeout: float = 2.0) -> bool:
    """Send SIGTERM to ``pid`` and wait; escalate to SIGKILL after ``timeout``.

    Returns:
        True if the process was signalled, False if it was already gone
    """
    try:
        proc = psutil.Process(pid)
        proc.terminate()
    except psutil.NoSuchProcess:
        return False
    except psutil.AccessDenied:
        logger.warning(f"Not allowed to stop pid {pid}")
        return False

    if _wait_for_exit(proc, timeout):
        return True

    logger.warning(f"pid {pid} ignored SIGTERM for {timeout}s, killing")
    try:
        proc.kill()
    except psutil.NoSuchProcess:
        return True
    if not _wait_for_exit(proc, timeout):
        logger.error(f"pid {pid} still running after SIGKILL")
    return True
