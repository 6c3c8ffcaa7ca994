"""
Playback session state machine for tradio

At most one player process is alive at a time, system-wide. The session
store is the source of truth shared with other tradio invocations, and
every query re-checks the recorded pid so stale files never count as
"playing".

    IDLE --start--> STARTING --alive after grace--> PLAYING
    STARTING --died during grace--> IDLE (PlaybackStartFailed)
    PLAYING --stop--> STOPPING --> IDLE
"""

import subprocess
import time
from enum import Enum
from typing import Callable, Optional

from loguru import logger

from tradio.core.config import Config
from tradio.core.errors import InvalidInput, NotPlaying, PlaybackStartFailed
from tradio.core.store import Store
from tradio.domain.stations.models import Station

from .player import build_player_command, is_process_alive, spawn_player, terminate_process
from .state import FileSessionStore, SessionRecord, SessionStore

Launcher = Callable[[list[str]], subprocess.Popen]
Notifier = Callable[[Station], object]


class SessionPhase(Enum):
    IDLE = "idle"
    STARTING = "starting"
    PLAYING = "playing"
    STOPPING = "stopping"


def _default_notifier(config: Config) -> Notifier:
    from tradio.notifications import notify_now_playing

    return lambda station: notify_now_playing(station.name, config.notifications)


class PlaybackSession:
    """Starts, stops and toggles the single tracked player process.

    Args:
        config: Shared configuration; player and volume are read at each start
        store: Persistence for the history log
        session_store: Now-playing record storage (pid + marker files by default)
        launcher: Spawns the player from an argv list
        notifier: Called with the station once playback is confirmed
        sleep: Used for the start grace period
    """

    def __init__(
        self,
        config: Config,
        store: Store,
        session_store: Optional[SessionStore] = None,
        *,
        launcher: Launcher = spawn_player,
        notifier: Optional[Notifier] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self._store = store
        self._sessions = session_store if session_store is not None else FileSessionStore()
        self._launcher = launcher
        self._notifier = notifier if notifier is not None else _default_notifier(config)
        self._sleep = sleep
        self._process: Optional[subprocess.Popen] = None
        self._phase = SessionPhase.IDLE

    @property
    def phase(self) -> SessionPhase:
        """Current phase; IDLE/PLAYING are re-derived from process liveness."""
        if self._phase in (SessionPhase.STARTING, SessionPhase.STOPPING):
            return self._phase
        return SessionPhase.PLAYING if self.is_playing() else SessionPhase.IDLE

    def now_playing(self) -> Optional[SessionRecord]:
        """Return the live session record, cleaning up stale files."""
        if self._process is not None and self._process.poll() is not None:
            # Reap our own child so it does not linger as a zombie
            self._process = None

        record = self._sessions.read()
        if record is None:
            if self._sessions.exists():
                self._sessions.clear()
            return None

        if is_process_alive(record.pid, started_before=record.started_at):
            return record

        logger.info(
            f"Cleaning up stale session: {record.station_name!r} (pid {record.pid})"
        )
        self._sessions.clear()
        return None

    def is_playing(self) -> bool:
        """True if a recorded player process is alive."""
        return self.now_playing() is not None

    def start(self, station: Station) -> SessionRecord:
        """Start streaming ``station``, stopping whatever is playing first.

        Raises:
            InvalidInput: Station name or URL is empty
            PlayerUnsupported: Configured player is unknown
            PlaybackStartFailed: Player could not be spawned or exited
                within the grace period
        """
        if not station.name or not station.url:
            raise InvalidInput("Missing required parameters: station name and URL")

        player = self.config.player
        cmd = build_player_command(player.name, station.url, player.volume)

        current = self.now_playing()
        if current is not None:
            logger.info(
                f"Stopping {current.station_name!r} before starting {station.name!r}"
            )
            self.stop()

        self._phase = SessionPhase.STARTING
        logger.info(f"Starting {station.name!r} with {player.name} at volume {player.volume}")

        try:
            process = self._launcher(cmd)
        except OSError as e:
            self._rollback()
            raise PlaybackStartFailed(station.name, f"Failed to start player: {e}") from e

        self._process = process
        self._sleep(player.start_grace_seconds)

        if process.poll() is not None:
            logger.error(
                f"Player for {station.name!r} exited with {process.returncode} during startup"
            )
            self._process = None
            self._rollback()
            raise PlaybackStartFailed(station.name)

        record = self._sessions.write(process.pid, station.name)
        self._phase = SessionPhase.PLAYING

        try:
            self._store.append_history(station.name)
        except OSError as e:
            logger.warning(f"Could not record history for {station.name!r}: {e}")

        try:
            self._notifier(station)
        except Exception:
            logger.exception(f"Notification failed for {station.name!r}")

        return record

    def stop(self, missing_ok: bool = True) -> bool:
        """Stop the tracked player and remove the session files.

        A recorded pid whose process already exited is cleaned up and
        counts as stopped.

        Args:
            missing_ok: If False, raise NotPlaying when nothing is recorded

        Returns:
            True if a session was recorded, False if there was nothing to stop
        """
        record = self._sessions.read()
        if record is None:
            if self._sessions.exists():
                self._sessions.clear()
            self._phase = SessionPhase.IDLE
            if not missing_ok:
                raise NotPlaying("No station is playing")
            return False

        self._phase = SessionPhase.STOPPING
        try:
            if is_process_alive(record.pid, started_before=record.started_at):
                logger.info(f"Stopping {record.station_name!r} (pid {record.pid})")
                terminate_process(record.pid, timeout=self.config.player.stop_timeout_seconds)
            else:
                logger.debug(f"pid {record.pid} already gone, cleaning up")

            if self._process is not None:
                self._process.poll()
                self._process = None
        finally:
            self._sessions.clear()
            self._phase = SessionPhase.IDLE
        return True

    def toggle(self, station: Station) -> Optional[SessionRecord]:
        """Stop ``station`` if it is playing, otherwise switch to it.

        Returns:
            The new session record, or None if playback was stopped
        """
        current = self.now_playing()
        if current is not None and current.station_name == station.name:
            self.stop()
            return None
        return self.start(station)

    def _rollback(self) -> None:
        self._sessions.clear()
        self._phase = SessionPhase.IDLE
