"""Exceptions raised by the station registry and playback session."""


class TradioError(Exception):
    """Base exception for tradio operations."""

    pass


class InvalidInput(TradioError):
    """Raised when a required argument is missing or malformed."""

    pass


class NotFound(TradioError):
    """Raised when a station name or index does not exist."""

    def __init__(self, key: object, message: str = None):
        self.key = key
        super().__init__(message or f"Station not found: {key}")


class PlaybackStartFailed(TradioError):
    """Raised when the player process exits before the grace period ends."""

    def __init__(self, station_name: str, message: str = None):
        self.station_name = station_name
        super().__init__(message or f"Failed to start playback: {station_name}")


class PlayerUnsupported(TradioError):
    """Raised when the configured player is not one of the known players."""

    def __init__(self, player: str):
        self.player = player
        super().__init__(f"Unsupported player: {player}")


class NotPlaying(TradioError):
    """Raised by strict stop requests when no session is alive."""

    pass
