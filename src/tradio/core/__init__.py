"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration model and paths
- Flat-file persistence (config, history, favorites)
- Console and log output (Rich, Loguru)
- Error types
"""

from .config import (
    Config,
    DEFAULT_PLAYER,
    DEFAULT_VOLUME,
    SUPPORTED_PLAYERS,
    apply_env_overrides,
    clamp_volume,
    get_config_dir,
    get_data_dir,
    get_runtime_dir,
    load_env_file,
)
from .errors import (
    InvalidInput,
    NotFound,
    NotPlaying,
    PlaybackStartFailed,
    PlayerUnsupported,
    TradioError,
)
from .output import get_console, log
from .store import HistoryEntry, Store

__all__ = [
    # Config
    "Config",
    "DEFAULT_PLAYER",
    "DEFAULT_VOLUME",
    "SUPPORTED_PLAYERS",
    "apply_env_overrides",
    "clamp_volume",
    "get_config_dir",
    "get_data_dir",
    "get_runtime_dir",
    "load_env_file",
    # Output
    "get_console",
    "log",
    # Errors
    "TradioError",
    "InvalidInput",
    "NotFound",
    "PlaybackStartFailed",
    "PlayerUnsupported",
    "NotPlaying",
    # Store
    "HistoryEntry",
    "Store",
]
