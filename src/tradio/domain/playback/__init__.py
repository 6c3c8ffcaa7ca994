"""Playback domain - player processes and the now-playing session.

This domain handles:
- Player command lines (cvlc, mpv) and process spawning
- Process liveness and termination by pid
- The now-playing pid/marker files shared across invocations
- The start/stop/toggle session state machine
- System mixer volume
"""

# Player integration
from .player import (
    PLAYER_ARGS,
    PLAYER_LABELS,
    build_player_command,
    check_player_available,
    is_process_alive,
    next_player,
    spawn_player,
    terminate_process,
)

# Mixer
from .mixer import set_system_volume

# Session state
from .state import FileSessionStore, SessionRecord, SessionStore
from .session import PlaybackSession, SessionPhase

__all__ = [
    # Player
    "PLAYER_ARGS",
    "PLAYER_LABELS",
    "build_player_command",
    "check_player_available",
    "is_process_alive",
    "next_player",
    "spawn_player",
    "terminate_process",
    # Mixer
    "set_system_volume",
    # State
    "FileSessionStore",
    "SessionRecord",
    "SessionStore",
    "PlaybackSession",
    "SessionPhase",
]
