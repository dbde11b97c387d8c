"""
Provider interface for the album collection and playback.

Spotify and the offline debug client both satisfy these protocols, so the
album list can be wired to either at construction time.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol

from .models import Page


@dataclass
class ProviderConfig:
    """Configuration for a provider."""

    name: str  # "spotify" or "fake"
    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = "http://localhost:8080/callback"


@dataclass
class ProviderState:
    """Runtime state for a provider.

    Immutable state container passed to all provider functions.
    Functions return new ProviderState instead of mutating.
    """

    config: ProviderConfig
    authenticated: bool = False
    cache: Dict[str, Any] = field(default_factory=dict)

    def with_authenticated(self, authenticated: bool) -> "ProviderState":
        """Return new state with updated authentication status."""
        return ProviderState(
            config=self.config,
            authenticated=authenticated,
            cache=self.cache,
        )

    def with_cache(self, **updates) -> "ProviderState":
        """Return new state with updated cache entries."""
        return ProviderState(
            config=self.config,
            authenticated=self.authenticated,
            cache={**self.cache, **updates},
        )


class PageSource(Protocol):
    """Anything that can serve the saved-album collection page by page."""

    def get_page(self, offset: int, limit: int) -> Page:
        """Return up to `limit` albums starting at `offset`, plus the total.

        Raises on any transport or API failure.
        """
        ...


class PlaybackTarget(Protocol):
    """Anything that can start playback of an opaque context URI."""

    def play(self, uri: str) -> bool:
        """Start playback of `uri`. Returns False when the command failed."""
        ...


class PlayerControls(PlaybackTarget, Protocol):
    """Full set of transport and device controls used by the UI."""

    def pause(self) -> bool: ...

    def resume(self) -> bool: ...

    def next_track(self) -> bool: ...

    def previous_track(self) -> bool: ...

    def currently_playing(self) -> Optional[str]:
        """Return a display string for the current track, or None."""
        ...

    def devices(self) -> List[Dict[str, Any]]: ...

    def transfer_playback(self, device_id: str, play: bool = True) -> bool: ...
