"""
Station models.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Station:
    """A named internet radio stream."""

    name: str
    url: str
