"""Exceptions shared across the album browser."""


class SpotifyCliError(Exception):
    """Base exception for spotify-cli operations."""

    pass


class FetchError(SpotifyCliError):
    """Raised when the album collection could not be fetched completely.

    Any failed page aborts the whole fetch; the original cause is chained.
    """

    def __init__(self, offset: int, message: str = None):
        self.offset = offset
        super().__init__(message or f"Could not fetch saved albums at offset {offset}")


class RenderError(SpotifyCliError):
    """Raised when a window of the album collection cannot be rendered."""

    pass


class AuthenticationError(SpotifyCliError):
    """Raised when a Spotify request needs a token and none is usable."""

    pass
