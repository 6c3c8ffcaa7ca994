"""
Station registry.

Fixed name -> URL map with a deterministic display order: the pinned
default station first, the rest sorted case-insensitively by name.
"""

import random
import re
from typing import Iterator, Mapping, Optional

from tradio.core.errors import InvalidInput, NotFound

from .models import Station

PINNED_STATION = "Virgin Radio"

DEFAULT_STATIONS: dict[str, str] = {
    "Virgin Radio": "http://playerservices.streamtheworld.com/api/livestream-redirect/VIRGIN_RADIO_SC",
    "Joy FM": "http://playerservices.streamtheworld.com/api/livestream-redirect/JOY_FM_SC",
    "Joy Jazz": "http://playerservices.streamtheworld.com/api/livestream-redirect/JOY_JAZZ_SC",
    "Kral 45lik": "https://ssldyg.radyotvonline.com/kralweb/smil:kral45lik.smil/chunklist_w1544647566_b64000.m3u8",
    "Metro FM": "http://playerservices.streamtheworld.com/api/livestream-redirect/METRO_FM_SC",
    "NTV Radyo": "http://ntvrdsc.radyotvonline.com/",
    "Pal Akustik": "http://shoutcast.radyogrup.com:2030/",
    "Pal Dance": "http://shoutcast.radyogrup.com:2040/",
    "Pal Nostalji": "http://shoutcast.radyogrup.com:1010/",
    "Pal Orient": "http://shoutcast.radyogrup.com:1050/",
    "Pal Slow": "http://shoutcast.radyogrup.com:2020/",
    "Pal Station": "http://shoutcast.radyogrup.com:1020/",
    "Radyo 45lik": "http://104.236.16.158:3060/",
    "Radyo Dejavu": "http://radyodejavu.canliyayinda.com:8054/",
    "Radyo Voyage": "http://voyagewmp.radyotvonline.com:80/",
    "Retro Türk": "http://playerservices.streamtheworld.com/api/livestream-redirect/RETROTURK_SC",
    "World Hits": "http://37.247.98.8/stream/34/.mp3",
}


def _sort_key(station: Station) -> tuple[str, str]:
    # casefold groups case variants, the raw name keeps the order total
    return station.name.casefold(), station.name


class StationRegistry:
    """Immutable, ordered set of stations."""

    def __init__(
        self,
        stations: Optional[Mapping[str, str]] = None,
        pinned: Optional[str] = PINNED_STATION,
    ):
        source = DEFAULT_STATIONS if stations is None else stations
        by_name = {}
        for name, url in source.items():
            if not name or not url:
                raise InvalidInput(f"Station needs a name and URL: {name!r}")
            by_name[name] = Station(name=name, url=url)

        rest = sorted(
            (s for name, s in by_name.items() if name != pinned), key=_sort_key
        )
        head = [by_name[pinned]] if pinned in by_name else []

        self._by_name = by_name
        self._ordered: tuple[Station, ...] = tuple(head + rest)

    def __len__(self) -> int:
        return len(self._ordered)

    def __iter__(self) -> Iterator[Station]:
        return iter(self._ordered)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def all_stations(self) -> list[Station]:
        """Return all stations in display order."""
        return list(self._ordered)

    def lookup(self, name: str) -> Station:
        """Return the station called ``name``.

        Raises:
            NotFound: If no station has that name
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise NotFound(name) from None

    def by_index(self, number: int) -> Station:
        """Return the station at 1-based display position ``number``.

        Raises:
            NotFound: If ``number`` is outside 1..len(registry)
        """
        if not 1 <= number <= len(self._ordered):
            raise NotFound(
                number,
                f"Invalid station number: {number} (available: 1-{len(self._ordered)})",
            )
        return self._ordered[number - 1]

    def index_of(self, name: str) -> int:
        """Return the 1-based display position of ``name``."""
        station = self.lookup(name)
        return self._ordered.index(station) + 1

    def search(self, term: str) -> list[Station]:
        """Return stations whose name matches ``term`` case-insensitively.

        ``term`` is a regular expression; an invalid pattern is matched
        as a literal substring instead.
        """
        try:
            pattern = re.compile(term, re.IGNORECASE)
        except re.error:
            pattern = re.compile(re.escape(term), re.IGNORECASE)
        return [s for s in self._ordered if pattern.search(s.name)]

    def random_station(self, rng: Optional[random.Random] = None) -> Station:
        """Pick a station at random."""
        if not self._ordered:
            raise NotFound("random", "No stations available")
        return (rng or random).choice(self._ordered)
