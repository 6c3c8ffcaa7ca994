"""Application context for explicit state passing.

The AppContext carries the configuration, persistence, station registry
and playback session so that command handlers receive everything they
need as an argument instead of reaching for module globals.
"""

from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console

from tradio.core.config import Config
from tradio.core.output import get_console
from tradio.core.store import Store
from tradio.domain.playback.session import PlaybackSession
from tradio.domain.stations.registry import StationRegistry


@dataclass
class AppContext:
    """Application context passed to all command handlers.

    Attributes:
        config: Application configuration (shared with the session)
        store: Config/history/favorites persistence
        registry: Available stations
        session: Now-playing session manager
        console: Rich Console for formatted output
    """

    config: Config
    store: Store
    registry: StationRegistry
    session: PlaybackSession
    console: Console = field(default_factory=get_console)

    @classmethod
    def create(
        cls,
        store: Optional[Store] = None,
        config: Optional[Config] = None,
        registry: Optional[StationRegistry] = None,
        session: Optional[PlaybackSession] = None,
        console: Optional[Console] = None,
    ) -> "AppContext":
        """Create an application context, filling in defaults.

        Args:
            store: Persistence layer (default: ~/.config/tradio)
            config: Configuration (default: loaded from ``store``)
            registry: Station registry (default: built-in stations)
            session: Playback session (default: file-backed, using ``config``)
            console: Rich Console (default: the shared console)

        Returns:
            New AppContext
        """
        store = store or Store()
        config = config or store.load_config()
        return cls(
            config=config,
            store=store,
            registry=registry or StationRegistry(),
            session=session or PlaybackSession(config, store),
            console=console or get_console(),
        )
