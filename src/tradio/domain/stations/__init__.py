"""Stations domain - the fixed radio station registry.

This domain handles:
- The built-in station list
- Display ordering (pinned default first)
- Lookup by name and 1-based index
- Case-insensitive search
"""

from .models import Station
from .registry import DEFAULT_STATIONS, PINNED_STATION, StationRegistry

__all__ = [
    "Station",
    "StationRegistry",
    "DEFAULT_STATIONS",
    "PINNED_STATION",
]
