"""
SpotifyClient - thin stateful wrapper around the pure API functions.

Satisfies PageSource for the album fetch and PlayerControls for the UI.
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from ...models import Page
from ...provider import ProviderState
from . import api


class SpotifyClient:
    """Holds the provider state (tokens) between API calls.

    Pattern: Thin class wrapper around pure API functions (in api.py).
    Every call stores the returned state so a refreshed token is reused.
    """

    def __init__(self, provider_state: ProviderState, device_id: Optional[str] = None):
        """Initialize Spotify client.

        Args:
            provider_state: Spotify provider state with auth tokens
            device_id: Device to target for playback (otherwise the active one)
        """
        self.provider_state = provider_state
        self.device_id = device_id or None
        logger.debug(f"Initialized SpotifyClient (device={self.device_id})")

    def get_page(self, offset: int, limit: int) -> Page:
        self.provider_state, page = api.get_saved_albums_page(
            self.provider_state, offset, limit
        )
        return page

    def play(self, uri: str) -> bool:
        self.provider_state, success = api.play_context(
            self.provider_state, uri, self.device_id
        )
        if success:
            logger.info(f"Playing Spotify context: {uri}")
        else:
            logger.error(f"Failed to play context: {uri}")
        return success

    def pause(self) -> bool:
        self.provider_state, success = api.pause(self.provider_state)
        return success

    def resume(self) -> bool:
        self.provider_state, success = api.resume(self.provider_state)
        return success

    def next_track(self) -> bool:
        self.provider_state, success = api.next_track(self.provider_state)
        return success

    def previous_track(self) -> bool:
        self.provider_state, success = api.previous_track(self.provider_state)
        return success

    def currently_playing(self) -> Optional[str]:
        self.provider_state, playing = api.get_currently_playing(self.provider_state)
        if not playing:
            return None
        return api.format_track(playing.get("item"))

    def devices(self) -> List[Dict[str, Any]]:
        self.provider_state, devices = api.get_devices(self.provider_state)
        return devices

    def transfer_playback(self, device_id: str, play: bool = True) -> bool:
        self.provider_state, success = api.transfer_playback(
            self.provider_state, device_id, play
        )
        if success:
            self.device_id = device_id
        return success
