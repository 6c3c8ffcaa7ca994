"""System volume control via PulseAudio or ALSA."""

import shutil
import subprocess

from loguru import logger


def set_system_volume(volume: int) -> bool:
    """Set the default sink/master volume to ``volume`` percent.

    Tries ``pactl`` then ``amixer``. Missing tools or failures are logged
    and reported as False; callers keep going either way.
    """
    if shutil.which("pactl"):
        cmd = ["pactl", "set-sink-volume", "@DEFAULT_SINK@", f"{volume}%"]
    elif shutil.which("amixer"):
        cmd = ["amixer", "-q", "sset", "Master", f"{volume}%"]
    else:
        logger.debug("No mixer tool found (pactl/amixer)")
        return False

    try:
        result = subprocess.run(cmd, check=False, timeout=2.0, capture_output=True)
    except (subprocess.TimeoutExpired, OSError) as e:
        logger.warning(f"Mixer command failed: {cmd[0]}: {e}")
        return False

    if result.returncode != 0:
        logger.warning(f"Mixer command {cmd[0]} exited with {result.returncode}")
        return False
    return True
