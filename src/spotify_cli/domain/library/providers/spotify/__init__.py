"""
Spotify provider for spotify-cli.

Implements OAuth 2.0 + PKCE authentication and API access for Spotify.
"""

from typing import Tuple

from loguru import logger

from spotify_cli.core.output import log

from ...provider import ProviderConfig, ProviderState
from . import api, auth
from .client import SpotifyClient


def init_provider(config: ProviderConfig) -> ProviderState:
    """Initialize Spotify provider from stored tokens, refreshing if expired.

    Returns:
        ProviderState, authenticated when usable tokens were found
    """
    state = ProviderState(config=config)

    token_data = auth.load_user_tokens()
    if not token_data:
        logger.debug("No stored Spotify tokens")
        return state

    if auth.is_token_expired(token_data):
        logger.info("Stored Spotify token expired, attempting refresh")
        token_data = auth.refresh_token(state, token_data)
        if not token_data:
            log("⚠ Spotify authentication expired. Run: spotify-cli auth", level="warning")
            return state

    return state.with_authenticated(True).with_cache(token_data=token_data)


def authenticate(state: ProviderState) -> Tuple[ProviderState, bool]:
    """Run the interactive OAuth flow."""
    return auth.authenticate(state)


__all__ = ["api", "auth", "SpotifyClient", "init_provider", "authenticate"]
