"""
Now-playing state shared between tradio invocations

The pid file holds the raw player pid and the marker holds the raw station
name, both in the runtime directory with owner-only permissions. Any
running tradio can read them to learn what is playing. There is no
locking: concurrent writers race and the last one wins.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

from loguru import logger

from tradio.core.config import get_runtime_dir
from tradio.core.store import atomic_write_text

PID_FILENAME = "tradio_player.pid"
MARKER_FILENAME = "tradio_current.txt"


@dataclass(frozen=True)
class SessionRecord:
    """The persisted now-playing session."""

    pid: int
    station_name: str
    started_at: float  # Epoch seconds the pid file was written


class SessionStore(Protocol):
    """Storage for the single now-playing record."""

    def read(self) -> Optional[SessionRecord]: ...

    def write(self, pid: int, station_name: str) -> SessionRecord: ...

    def clear(self) -> None: ...

    def exists(self) -> bool: ...


class FileSessionStore:
    """Session record kept as a pid file plus a now-playing marker file."""

    def __init__(self, runtime_dir: Optional[Path] = None):
        base = Path(runtime_dir) if runtime_dir else get_runtime_dir()
        self.pid_path = base / PID_FILENAME
        self.marker_path = base / MARKER_FILENAME

    def read(self) -> Optional[SessionRecord]:
        """Return the recorded session, or None if there is no usable pid file.

        A pid file that does not hold a positive integer is removed along
        with the marker.
        """
        try:
            raw = self.pid_path.read_text(encoding="utf-8").strip()
            started_at = self.pid_path.stat().st_mtime
        except FileNotFoundError:
            return None

        try:
            pid = int(raw)
        except ValueError:
            pid = 0
        if pid <= 0:
            logger.warning(f"Removing corrupt pid file {self.pid_path}: {raw!r}")
            self.clear()
            return None

        try:
            station_name = self.marker_path.read_text(encoding="utf-8").rstrip("\n")
        except FileNotFoundError:
            station_name = ""

        return SessionRecord(pid=pid, station_name=station_name, started_at=started_at)

    def write(self, pid: int, station_name: str) -> SessionRecord:
        """Persist the session. Marker first so a visible pid always has a name."""
        # mkstemp-backed writes create both files with mode 0600
        atomic_write_text(self.marker_path, station_name + "\n")
        atomic_write_text(self.pid_path, f"{pid}\n")
        logger.debug(f"Wrote session: pid={pid} station={station_name!r}")
        return SessionRecord(
            pid=pid,
            station_name=station_name,
            started_at=self.pid_path.stat().st_mtime,
        )

    def clear(self) -> None:
        """Remove the pid file then the marker; missing files are fine."""
        for path in (self.pid_path, self.marker_path):
            try:
                path.unlink()
            except FileNotFoundError:
                pass

    def exists(self) -> bool:
        return self.pid_path.exists() or self.marker_path.exists()
