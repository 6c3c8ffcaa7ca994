"""Desktop notification helpers for tradio."""

import subprocess
import shutil
from typing import Literal, Optional

from loguru import logger

from tradio.core.config import NotificationsConfig

APP_TITLE = "🎵 Radio Player"


def notify(
    title: str,
    message: str,
    icon: Optional[str] = None,
    timeout_ms: Optional[int] = None,
    urgency: Literal["low", "normal", "critical"] = "normal",
) -> bool:
    """
    Show a desktop notification using notify-send.

    Args:
        title: Notification title
        message: Notification message body
        icon: Icon name or path
        timeout_ms: Expiry in milliseconds
        urgency: Urgency level ('low', 'normal', 'critical')

    Returns:
        True if notify-send ran successfully

    Note:
        Silently skips notification if notify-send is not available.
        Errors are logged but don't interrupt program flow.
    """
    if not shutil.which("notify-send"):
        return False

    cmd = ["notify-send", "--urgency", urgency, "--app-name", "tradio"]
    if icon:
        cmd += ["-i", icon]
    if timeout_ms is not None:
        cmd += ["-t", str(timeout_ms)]
    cmd += [title, message]

    try:
        result = subprocess.run(
            cmd,
            check=False,
            timeout=2.0,
            capture_output=True,
        )
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.debug(f"notify-send failed: {e}")
        return False
    return result.returncode == 0


def notify_now_playing(station_name: str, settings: NotificationsConfig) -> bool:
    """Announce a newly started station, if notifications are enabled."""
    if not settings.enabled:
        return False
    return notify(
        APP_TITLE,
        f"Now playing: {station_name}",
        icon=settings.icon,
        timeout_ms=settings.timeout_ms,
    )
