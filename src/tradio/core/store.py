"""
Flat-file persistence for tradio

Owns the config, history and favorites files under the config directory.
Every operation creates the directory lazily and treats a missing file
as empty, so callers never have to check for first use.
"""

import os
import tempfile
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from loguru import logger

from .config import Config, format_config, get_config_dir, parse_config

HISTORY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
HISTORY_SEPARATOR = " - "


@dataclass(frozen=True)
class HistoryEntry:
    """One play event from the history log."""

    timestamp: datetime
    station_name: str

    def format(self) -> str:
        return f"{self.timestamp.strftime(HISTORY_TIME_FORMAT)}{HISTORY_SEPARATOR}{self.station_name}"


def parse_history_line(line: str) -> Optional[HistoryEntry]:
    """Parse ``<timestamp> - <station name>``; None if the line is malformed."""
    stamp, sep, name = line.rstrip("\n").partition(HISTORY_SEPARATOR)
    if not sep or not name:
        return None
    try:
        timestamp = datetime.strptime(stamp, HISTORY_TIME_FORMAT)
    except ValueError:
        return None
    return HistoryEntry(timestamp=timestamp, station_name=name)


def atomic_write_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` so readers never see a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(temp_path, path)
    except BaseException:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


class Store:
    """Config, history and favorites files in one directory."""

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = Path(base_dir) if base_dir else get_config_dir()
        self.config_path = self.base_dir / "config"
        self.history_path = self.base_dir / "history"
        self.favorites_path = self.base_dir / "favorites"

    def ensure_files(self) -> None:
        """Create the directory and any missing files."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        if not self.config_path.exists():
            atomic_write_text(self.config_path, format_config(Config()))
            logger.info(f"Created default configuration at: {self.config_path}")
        self.history_path.touch(exist_ok=True)
        self.favorites_path.touch(exist_ok=True)

    def _read_lines(self, path: Path) -> list[str]:
        try:
            return path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return []

    # ---------- config ----------

    def load_config(self) -> Config:
        """Load the config file, writing defaults on first use."""
        self.ensure_files()
        try:
            text = self.config_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return Config()
        return parse_config(text)

    def save_config(self, config: Config) -> None:
        """Rewrite the config file atomically."""
        atomic_write_text(self.config_path, format_config(config))
        logger.debug(
            f"Saved config: volume={config.player.volume} player={config.player.name}"
        )

    # ---------- history ----------

    def append_history(
        self, station_name: str, timestamp: Optional[datetime] = None
    ) -> HistoryEntry:
        """Append one play event to the history log."""
        entry = HistoryEntry(timestamp=timestamp or datetime.now(), station_name=station_name)
        self.base_dir.mkdir(parents=True, exist_ok=True)
        with open(self.history_path, "a", encoding="utf-8") as f:
            f.write(entry.format() + "\n")
        return entry

    def read_history(self, limit: Optional[int] = None) -> list[HistoryEntry]:
        """Return history entries oldest-first, only the last ``limit`` if given."""
        entries = []
        for line in self._read_lines(self.history_path):
            entry = parse_history_line(line)
            if entry is None:
                if line.strip():
                    logger.debug(f"Skipping malformed history line: {line!r}")
                continue
            entries.append(entry)

        if limit is not None:
            if limit <= 0:
                return []
            return entries[-limit:]
        return entries

    # ---------- favorites ----------

    def list_favorites(self) -> list[str]:
        """Return favorite station names in file order, without duplicates."""
        seen = []
        for line in self._read_lines(self.favorites_path):
            if line and line not in seen:
                seen.append(line)
        return seen

    def is_favorite(self, name: str) -> bool:
        return name in self.list_favorites()

    def add_favorite(self, name: str) -> bool:
        """Add a favorite. Returns True if it was not already present."""
        if not name or "\n" in name:
            raise ValueError(f"Invalid favorite name: {name!r}")
        if self.is_favorite(name):
            return False
        self.base_dir.mkdir(parents=True, exist_ok=True)
        with open(self.favorites_path, "a", encoding="utf-8") as f:
            f.write(name + "\n")
        logger.info(f"Added favorite: {name}")
        return True

    def remove_favorite(self, name: str) -> bool:
        """Remove a favorite. Returns True if something was removed."""
        lines = self._read_lines(self.favorites_path)
        kept = [line for line in lines if line != name]
        if len(kept) == len(lines):
            return False
        atomic_write_text(self.favorites_path, "".join(f"{line}\n" for line in kept))
        logger.info(f"Removed favorite: {name}")
        return True
