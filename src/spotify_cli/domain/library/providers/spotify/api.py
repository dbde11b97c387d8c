"""
Spotify API operations.

Pure functions for the saved-album collection and playback control.
All functions that talk to Spotify take ProviderState and return the (possibly
refreshed) state alongside their result.
"""

from typing import Any, Dict, List, Optional, Tuple

import requests
from loguru import logger

from spotify_cli.core.errors import AuthenticationError
from spotify_cli.core.output import log

from ...models import AlbumEntry, Page
from ...provider import ProviderState

API_BASE = "https://api.spotify.com/v1"

REQUEST_TIMEOUT = 30


def _ensure_valid_token(
    state: ProviderState,
) -> Tuple[ProviderState, Optional[Dict[str, Any]]]:
    """Ensure access token is valid, refreshing if expired.

    Returns:
        (updated_state, token_data or None)
    """
    from . import auth

    token_data = state.cache.get("token_data")
    if not token_data:
        logger.debug("No token data in cache")
        return state, None

    if not auth.is_token_expired(token_data):
        return state, token_data

    logger.info("Spotify token expired, attempting refresh")
    new_token_data = auth.refresh_token(state, token_data)
    if new_token_data:
        return state.with_cache(token_data=new_token_data), new_token_data

    logger.warning("Token refresh failed, marking as unauthenticated")
    return state.with_authenticated(False), None


def _auth_headers(token: Dict[str, Any]) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token['access_token']}"}


def normalize_saved_album(item: Dict[str, Any]) -> AlbumEntry:
    """Convert a /me/albums item into an AlbumEntry.

    Only the first artist is kept, matching the two-column album table.
    """
    album = item.get("album", {})
    artists = album.get("artists") or [{}]
    return AlbumEntry(
        title=(album.get("name") or "").strip(),
        artist=(artists[0].get("name") or "").strip(),
        uri=album.get("uri", ""),
    )


def get_saved_albums_page(
    state: ProviderState, offset: int, limit: int
) -> Tuple[ProviderState, Page]:
    """Fetch one page of the user's saved albums.

    Args:
        state: Provider state
        offset: Index of the first album to return
        limit: Page size (Spotify allows at most 50)

    Returns:
        (updated_state, page)

    Raises:
        AuthenticationError: If no valid token is available
        requests.HTTPError: If Spotify rejects the request
    """
    state, token = _ensure_valid_token(state)
    if not token:
        raise AuthenticationError("Not authenticated with Spotify")

    response = requests.get(
        f"{API_BASE}/me/albums",
        params={"limit": limit, "offset": offset},
        headers=_auth_headers(token),
        timeout=REQUEST_TIMEOUT,
    )
    response.raise_for_status()
    data = response.json()

    items = [normalize_saved_album(item) for item in data.get("items", [])]
    logger.debug(f"Saved albums page offset={offset}: {len(items)} items")
    return state, Page(items=items, total=data.get("total", 0))


def _player_request(
    state: ProviderState,
    method: str,
    path: str,
    action: str,
    **kwargs: Any,
) -> Tuple[ProviderState, bool]:
    """Send a player command.

    Returns:
        (updated_state, True on success); failures are logged
    """
    state, token = _ensure_valid_token(state)
    if not token:
        logger.warning(f"Cannot {action} - not authenticated")
        return state, False

    try:
        response = requests.request(
            method,
            f"{API_BASE}{path}",
            headers=_auth_headers(token),
            timeout=REQUEST_TIMEOUT,
            **kwargs,
        )
        response.raise_for_status()
        logger.debug(f"Spotify player: {action}")
        return state, True

    except requests.HTTPError as e:
        if e.response is not None and e.response.status_code == 404:
            logger.error(f"Cannot {action} - no active Spotify device")
            log(
                "❌ No Spotify device available. Open Spotify on a device first.",
                level="error",
            )
        else:
            logger.exception(f"HTTP error during {action}")
        return state, False
    except requests.RequestException:
        logger.exception(f"Error during {action}")
        return state, False


def play_context(
    state: ProviderState, context_uri: str, device_id: Optional[str] = None
) -> Tuple[ProviderState, bool]:
    """Start playback of an album (or any context URI)."""
    params = {"device_id": device_id} if device_id else None
    return _player_request(
        state,
        "PUT",
        "/me/player/play",
        f"play {context_uri}",
        params=params,
        json={"context_uri": context_uri},
    )


def pause(state: ProviderState) -> Tuple[ProviderState, bool]:
    return _player_request(state, "PUT", "/me/player/pause", "pause")


def resume(state: ProviderState) -> Tuple[ProviderState, bool]:
    return _player_request(state, "PUT", "/me/player/play", "resume")


def next_track(state: ProviderState) -> Tuple[ProviderState, bool]:
    return _player_request(state, "POST", "/me/player/next", "skip to next")


def previous_track(state: ProviderState) -> Tuple[ProviderState, bool]:
    return _player_request(state, "POST", "/me/player/previous", "skip to previous")


def transfer_playback(
    state: ProviderState, device_id: str, play: bool = True
) -> Tuple[ProviderState, bool]:
    """Move playback to another Connect device."""
    return _player_request(
        state,
        "PUT",
        "/me/player",
        f"transfer playback to {device_id}",
        json={"device_ids": [device_id], "play": play},
    )


def get_currently_playing(
    state: ProviderState,
) -> Tuple[ProviderState, Optional[Dict[str, Any]]]:
    """Get the currently playing item, or None when nothing plays."""
    state, token = _ensure_valid_token(state)
    if not token:
        return state, None

    try:
        response = requests.get(
            f"{API_BASE}/me/player/currently-playing",
            headers=_auth_headers(token),
            timeout=REQUEST_TIMEOUT,
        )
        if response.status_code == 204:  # No content = nothing playing
            return state, None
        response.raise_for_status()
        return state, response.json()
    except requests.RequestException as e:
        logger.debug(f"Error getting playback state: {e}")
        return state, None


def get_devices(state: ProviderState) -> Tuple[ProviderState, List[Dict[str, Any]]]:
    """Get available Spotify Connect devices."""
    state, token = _ensure_valid_token(state)
    if not token:
        return state, []

    try:
        response = requests.get(
            f"{API_BASE}/me/player/devices",
            headers=_auth_headers(token),
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        devices = response.json().get("devices", [])
        logger.debug(f"Found {len(devices)} Spotify devices")
        return state, devices
    except requests.RequestException:
        logger.exception("Error getting Spotify devices")
        return state, []


def format_track(track: Optional[Dict[str, Any]]) -> str:
    """Format a track object as 'Name (Artist A, Artist B)'."""
    if not track:
        return "None"
    artists = ", ".join(
        a["name"] for a in track.get("artists", []) if a.get("name") is not None
    )
    return f"{track.get('name', '')} ({artists})"
