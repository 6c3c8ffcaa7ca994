"""
Unified output using Loguru and Rich.
User-facing messages are written to the log file and printed in colour on
the shared console.
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger
from rich.console import Console

from .config import LoggingConfig, get_data_dir

LEVEL_STYLES = {
    "debug": "cyan",
    "info": None,
    "success": "green",
    "warning": "yellow",
    "error": "red",
}

_console: Optional[Console] = None


def get_console() -> Console:
    """Get or create the shared console (menu, prompts and messages)."""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def get_log_file_path(logging_config: Optional[LoggingConfig] = None) -> Path:
    """Get the path to the log file."""
    if logging_config and logging_config.log_file:
        return Path(logging_config.log_file)
    return get_data_dir() / "tradio.log"


def setup_loguru(log_file: Path, level: str = "INFO") -> None:
    """
    Configure loguru for file-only logging (the console is for user messages).

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
    """
    logger.remove()

    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # Unwritable data dir: keep warnings visible instead of dropping them
        logger.add(sys.stderr, level="WARNING")
        logger.warning(f"Cannot create log directory {log_file.parent}: {e}")
        return

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,
        level=level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def log(message: str, level: str = "info") -> None:
    """
    Write a user-facing message to the log file and print it.

    Args:
        message: Message shown to the user
        level: debug, info, success, warning or error
    """
    getattr(logger, level)(message)
    if level == "debug":
        return
    # Messages carry station names and user input, never markup
    get_console().print(message, style=LEVEL_STYLES.get(level), markup=False)
