"""
Configuration model and paths for tradio

The config file is line-oriented ``key=value`` so it stays readable and
editable by hand. File I/O lives in ``tradio.core.store``.
"""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Optional

from loguru import logger

SUPPORTED_PLAYERS = ("cvlc", "mpv")
DEFAULT_PLAYER = "cvlc"
DEFAULT_VOLUME = 100


@dataclass
class PlayerConfig:
    """Configuration for the external media player."""

    name: str = DEFAULT_PLAYER
    volume: int = DEFAULT_VOLUME
    start_grace_seconds: float = 1.0  # Wait before confirming the player stayed up
    stop_timeout_seconds: float = 2.0  # Wait for SIGTERM before escalating to SIGKILL


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = None  # Default: ~/.local/share/tradio/tradio.log


@dataclass
class NotificationsConfig:
    """Configuration for desktop notifications."""

    enabled: bool = True
    timeout_ms: int = 2000
    icon: str = "audio-x-generic"


@dataclass
class UIConfig:
    """Configuration for the interactive menu."""

    history_length: int = 10
    columns: int = 2


@dataclass
class Config:
    """Main configuration object."""

    player: PlayerConfig = field(default_factory=PlayerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    notifications: NotificationsConfig = field(default_factory=NotificationsConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "tradio"
    return Path.home() / ".config" / "tradio"


def get_data_dir() -> Path:
    """Get the data directory path (log files)."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "tradio"
    return Path.home() / ".local" / "share" / "tradio"


def get_runtime_dir() -> Path:
    """Get the directory holding the pid file and now-playing marker."""
    runtime_dir = os.environ.get("TRADIO_RUNTIME_DIR")
    if runtime_dir:
        return Path(runtime_dir)
    return Path(tempfile.gettempdir())


def clamp_volume(volume: int) -> int:
    """Clamp a volume level to 0-100."""
    return max(0, min(100, volume))


def _to_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


# key -> (section, attribute, parser, formatter)
_FIELDS: dict[str, tuple[str, str, Callable, Callable]] = {
    "volume": ("player", "volume", int, str),
    "player": ("player", "name", str.strip, str),
    "start_grace_seconds": ("player", "start_grace_seconds", float, str),
    "stop_timeout_seconds": ("player", "stop_timeout_seconds", float, str),
    "log_level": ("logging", "level", lambda v: v.strip().upper(), str),
    "log_file": ("logging", "log_file", lambda v: str(Path(v.strip()).expanduser()), str),
    "notifications": ("notifications", "enabled", _to_bool, _format_bool),
    "notification_timeout_ms": ("notifications", "timeout_ms", int, str),
    "notification_icon": ("notifications", "icon", str.strip, str),
    "history_length": ("ui", "history_length", int, str),
    "columns": ("ui", "columns", int, str),
}


def _apply_value(config: Config, key: str, raw: str) -> None:
    """Parse ``raw`` for ``key`` and set it on ``config``; bad values keep the default."""
    section_name, attr, parse, _ = _FIELDS[key]
    try:
        value = parse(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid config value: {key}={raw!r}")
        return

    if key == "volume":
        value = clamp_volume(value)
    setattr(getattr(config, section_name), attr, value)


def parse_config(text: str) -> Config:
    """Build a Config from ``key=value`` lines.

    Blank lines and ``#`` comments are skipped, unknown keys are ignored.
    """
    config = Config()
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, raw = line.partition("=")
        key = key.strip()
        if not sep or key not in _FIELDS:
            logger.debug(f"Skipping config line: {line!r}")
            continue
        _apply_value(config, key, raw)
    return config


def format_config(config: Config) -> str:
    """Serialize a Config to ``key=value`` lines."""
    lines = []
    for key, (section_name, attr, _, fmt) in _FIELDS.items():
        value = getattr(getattr(config, section_name), attr)
        if value is None:
            continue
        lines.append(f"{key}={fmt(value)}")
    return "\n".join(lines) + "\n"


def load_env_file() -> None:
    """Load ``<config dir>/.env`` into the environment if it exists."""
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)


def apply_env_overrides(config: Config) -> Config:
    """Override config values from the environment.

    - TRADIO_PLAYER
    - TRADIO_VOLUME
    - TRADIO_LOG_LEVEL
    """
    overrides = {
        "player": os.environ.get("TRADIO_PLAYER"),
        "volume": os.environ.get("TRADIO_VOLUME"),
        "log_level": os.environ.get("TRADIO_LOG_LEVEL"),
    }
    for key, raw in overrides.items():
        if raw:
            _apply_value(config, key, raw)
    return config
