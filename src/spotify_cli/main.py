"""
spotify-cli - startup flow and interactive entry point
"""

import sys
from typing import Optional

from loguru import logger

from spotify_cli.context import AppContext
from spotify_cli.core import config
from spotify_cli.core.console import print_error, print_success, safe_print
from spotify_cli.core.errors import FetchError
from spotify_cli.core.output import setup_loguru
from spotify_cli.domain.library import ProviderConfig, fetch_all
from spotify_cli.domain.library.provider import PlayerControls
from spotify_cli.domain.library.providers import fake, spotify


def setup_logging(cfg: config.Config, level: Optional[str] = None) -> None:
    """Initialize loguru from config; a command-line level wins over the file."""
    setup_loguru(config.get_log_file_path(cfg), level=level or cfg.logging.level)


def provider_config(cfg: config.Config) -> ProviderConfig:
    return ProviderConfig(
        name="spotify",
        client_id=cfg.spotify.client_id,
        client_secret=cfg.spotify.client_secret,
        redirect_uri=cfg.spotify.redirect_uri,
    )


def _report_missing_client_id() -> None:
    print_error(
        "Spotify client_id not configured. "
        f"Set it in {config.get_config_path()} or SPOTIFY_CLIENT_ID"
    )


def build_client(cfg: config.Config, debug: bool = False) -> Optional[PlayerControls]:
    """
    Create the client the UI will talk to.

    Args:
        cfg: Loaded configuration
        debug: Use the offline fake client instead of the Spotify API

    Returns:
        Client, or None when Spotify is not authenticated
    """
    if debug:
        logger.info("Debug mode: using offline fake client")
        return fake.FakeSpotifyClient()

    if not cfg.spotify.client_id:
        _report_missing_client_id()
        return None

    state = spotify.init_provider(provider_config(cfg))
    if not state.authenticated:
        print_error("Not authenticated with Spotify. Run: spotify-cli auth")
        return None

    return spotify.SpotifyClient(state, device_id=cfg.spotify.preferred_device_id)


def run_auth(log_level: Optional[str] = None) -> int:
    """Run the OAuth flow and store tokens. Returns process exit code."""
    try:
        cfg = config.load_config()
    except ValueError as e:
        print_error(f"Invalid configuration: {e}")
        return 1

    setup_logging(cfg, log_level)

    if not cfg.spotify.client_id:
        _report_missing_client_id()
        return 1

    state = spotify.init_provider(provider_config(cfg))
    _, success = spotify.authenticate(state)
    if not success:
        print_error("Spotify authentication failed")
        return 1

    print_success("Spotify authentication successful")
    return 0


def interactive_mode(debug: bool = False, log_level: Optional[str] = None) -> None:
    """Load config, fetch the album collection and run the blessed UI."""
    try:
        cfg = config.load_config()
    except ValueError as e:
        print_error(f"Invalid configuration: {e}")
        sys.exit(1)

    setup_logging(cfg, log_level)

    client = build_client(cfg, debug)
    if client is None:
        sys.exit(1)

    safe_print("Loading saved albums...", style="cyan")
    try:
        albums = fetch_all(client, cfg.spotify.page_size)
    except FetchError as e:
        print_error(str(e))
        sys.exit(1)

    logger.info(f"Fetched {len(albums)} saved albums")
    ctx = AppContext(config=cfg, client=client, debug=debug).with_albums(albums)

    from .ui.blessed import run_interactive_ui

    try:
        run_interactive_ui(ctx)
    except KeyboardInterrupt:
        pass
    finally:
        logger.info("spotify-cli exiting")
