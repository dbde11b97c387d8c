"""Application context for explicit state passing.

The AppContext carries everything startup produced (config, client and the
fetched album collection) into the UI, instead of module-level globals.
"""

from dataclasses import dataclass, replace
from typing import Optional

from spotify_cli.core.config import Config
from spotify_cli.domain.library.models import Dataset
from spotify_cli.domain.library.provider import PlayerControls


@dataclass(frozen=True)
class AppContext:
    """Immutable application context passed to the UI.

    Attributes:
        config: Application configuration
        client: Spotify (or offline debug) client used for playback
        albums: The user's saved albums, fetched once at startup
        debug: True when running against the offline client
    """

    config: Config
    client: PlayerControls
    albums: Dataset = ()
    debug: bool = False

    def with_albums(self, albums: Dataset) -> "AppContext":
        """Return new context with the fetched album collection."""
        return replace(self, albums=albums)


def describe(ctx: AppContext) -> Optional[str]:
    """Short mode label for the status bar."""
    return "debug mode (offline data)" if ctx.debug else None
