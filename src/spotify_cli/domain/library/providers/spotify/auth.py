"""
Spotify OAuth 2.0 authentication and token management.

Handles the PKCE authorization code flow, token refresh, and token storage.
"""

import base64
import hashlib
import json
import secrets
import threading
import webbrowser
from datetime import datetime, timedelta
from http.server import BaseHTTPRequestHandler, HTTPServer
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from urllib.parse import parse_qs, urlencode, urlparse

import requests
from loguru import logger

from spotify_cli.core.output import log

from ...provider import ProviderState

AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
TOKEN_URL = "https://accounts.spotify.com/api/token"

# Reading saved albums and driving playback
SPOTIFY_SCOPES = [
    "user-library-read",
    "user-read-playback-state",
    "user-modify-playback-state",
    "user-read-currently-playing",
]

CALLBACK_TIMEOUT_SECONDS = 120


def authenticate(state: ProviderState) -> Tuple[ProviderState, bool]:
    """Authenticate with Spotify using OAuth 2.0 + PKCE.

    Opens the browser for user authorization and waits for the redirect on a
    local callback server. Falls back to pasting the redirect URL by hand
    when the server cannot bind.

    Returns:
        (new_state, success)
    """
    config = state.config
    if not config.client_id or not config.client_secret:
        log(
            "❌ Set client_id and client_secret under [spotify] in config.toml "
            f"(app dashboard redirect URI: {config.redirect_uri})",
            level="error",
        )
        return state, False

    pkce = _generate_pkce()
    csrf_state = _random_token()
    auth_url = build_authorize_url(
        config.client_id, config.redirect_uri, pkce["code_challenge"], csrf_state
    )

    auth_result = _wait_for_callback(auth_url, config.redirect_uri)
    if auth_result is None:
        return state, False

    problem = callback_problem(auth_result, csrf_state)
    if problem:
        log(f"❌ {problem}", level="error")
        return state, False

    try:
        token_data = _request_token(
            config.client_id,
            config.client_secret,
            {
                "grant_type": "authorization_code",
                "code": auth_result["code"],
                "redirect_uri": config.redirect_uri,
                "code_verifier": pkce["code_verifier"],
            },
        )
    except requests.RequestException as e:
        logger.exception("Authorization code exchange failed")
        log(f"❌ Could not exchange authorization code: {e}", level="error")
        return state, False

    save_user_tokens(token_data)
    logger.info(f"Spotify tokens stored, expires: {token_data['expires_at']}")
    return state.with_authenticated(True).with_cache(token_data=token_data), True


def callback_problem(
    result: Dict[str, Optional[str]], csrf_state: str
) -> Optional[str]:
    """Describe what is wrong with a redirect, or None when it can be used."""
    if result["error"]:
        return f"Spotify refused authorization: {result['error']}"
    if not result["code"]:
        return "Redirect carried no authorization code"
    if result["state"] != csrf_state:
        logger.error(f"OAuth state mismatch: sent {csrf_state}, got {result['state']}")
        return "OAuth state mismatch, start the login again"
    return None


def build_authorize_url(
    client_id: str, redirect_uri: str, code_challenge: str, csrf_state: str
) -> str:
    """Build the Spotify authorize URL for the PKCE flow."""
    params = {
        "client_id": client_id,
        "response_type": "code",
        "redirect_uri": redirect_uri,
        "code_challenge_method": "S256",
        "code_challenge": code_challenge,
        "state": csrf_state,
        "scope": " ".join(SPOTIFY_SCOPES),
    }
    return f"{AUTHORIZE_URL}?{urlencode(params)}"


def parse_callback_url(url: str) -> Dict[str, Optional[str]]:
    """Extract code, state and error from a redirect URL."""
    params = parse_qs(urlparse(url).query)
    return {
        "code": params.get("code", [None])[0],
        "state": params.get("state", [None])[0],
        "error": params.get("error", [None])[0],
    }


def _wait_for_callback(
    auth_url: str, redirect_uri: str
) -> Optional[Dict[str, Optional[str]]]:
    """Run the local callback server (or manual paste) and return the redirect params."""
    received: Dict[str, Optional[str]] = {}

    class CallbackHandler(BaseHTTPRequestHandler):
        def do_GET(self):
            received.update(parse_callback_url(self.path))

            self.send_response(200)
            self.send_header("Content-type", "text/html")
            self.end_headers()
            if received["code"]:
                body = "<h1>Authentication successful</h1><p>Return to spotify-cli.</p>"
            else:
                body = f"<h1>Authentication failed</h1><p>{received['error']}</p>"
            self.wfile.write(f"<html><body>{body}</body></html>".encode())

        def log_message(self, format, *args):
            pass

    port = urlparse(redirect_uri).port or 8080
    server = None
    try:
        server = HTTPServer(("localhost", port), CallbackHandler)
        server_thread = threading.Thread(target=server.handle_request, daemon=True)
        server_thread.start()

        log(f"🔐 Waiting for Spotify authorization on port {port}...", level="info")
        logger.debug(f"Authorization URL: {auth_url}")
        if not webbrowser.open(auth_url):
            log("Open this URL in your browser:", level="info")
            log(auth_url, level="info")

        server_thread.join(timeout=CALLBACK_TIMEOUT_SECONDS)
    except OSError as e:
        logger.warning(f"Callback server error: {e}")
        log(f"⚠ Could not start callback server: {e}", level="warning")
        log(f"Open this URL in your browser:\n{auth_url}", level="info")
        try:
            callback_url = input("Paste the full redirect URL: ").strip()
        except (EOFError, KeyboardInterrupt):
            log("❌ Authorization cancelled", level="error")
            return None
        if callback_url:
            received.update(parse_callback_url(callback_url))
    finally:
        if server:
            server.server_close()

    if not received:
        log("❌ Authorization timeout - no response received", level="error")
        return None
    return received


def _request_token(
    client_id: str, client_secret: str, data: Dict[str, str]
) -> Dict[str, Any]:
    """POST to the token endpoint and stamp the expiry time on the result."""
    auth_header = base64.b64encode(
        f"{client_id}:{client_secret}".encode("utf-8")
    ).decode("utf-8")

    response = requests.post(
        TOKEN_URL,
        data=data,
        headers={"Authorization": f"Basic {auth_header}"},
        timeout=30,
    )
    response.raise_for_status()
    token_data = response.json()

    expires_in = token_data.get("expires_in", 3600)
    token_data["expires_at"] = (
        datetime.now() + timedelta(seconds=expires_in)
    ).isoformat()
    return token_data


def _random_token() -> str:
    return base64.urlsafe_b64encode(secrets.token_bytes(32)).decode("utf-8").rstrip("=")


def _generate_pkce() -> Dict[str, str]:
    """Generate PKCE code verifier and challenge."""
    code_verifier = _random_token()
    challenge_bytes = hashlib.sha256(code_verifier.encode("utf-8")).digest()
    code_challenge = (
        base64.urlsafe_b64encode(challenge_bytes).decode("utf-8").rstrip("=")
    )
    return {"code_verifier": code_verifier, "code_challenge": code_challenge}


def get_tokens_file() -> Path:
    """Path of the stored user tokens."""
    from spotify_cli.core.config import get_data_dir

    tokens_dir = get_data_dir() / "spotify"
    tokens_dir.mkdir(parents=True, exist_ok=True)
    return tokens_dir / "user_tokens.json"


def load_user_tokens() -> Optional[Dict[str, Any]]:
    """Load user OAuth tokens from file."""
    tokens_file = get_tokens_file()
    if not tokens_file.exists():
        return None

    try:
        with open(tokens_file) as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load Spotify tokens from file: {e}")
        return None


def save_user_tokens(token_data: Dict[str, Any]) -> None:
    """Save user OAuth tokens to file, readable by the owner only."""
    tokens_file = get_tokens_file()
    with open(tokens_file, "w") as f:
        json.dump(token_data, f, indent=2)
    tokens_file.chmod(0o600)
    logger.debug(f"Saved Spotify tokens to {tokens_file}")


def is_token_expired(token_data: Dict[str, Any]) -> bool:
    """Check if token is expired (with 5-minute buffer)."""
    if "expires_at" not in token_data:
        return True

    expires_at = datetime.fromisoformat(token_data["expires_at"])
    return datetime.now() >= (expires_at - timedelta(minutes=5))


def refresh_token(
    state: ProviderState, token_data: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """Refresh an expired OAuth token.

    Returns:
        New token data, or None if the refresh failed
    """
    config = state.config
    refresh_token_value = token_data.get("refresh_token")
    if not config.client_id or not config.client_secret or not refresh_token_value:
        logger.warning("Missing credentials or refresh token for Spotify token refresh")
        return None

    try:
        new_token_data = _request_token(
            config.client_id,
            config.client_secret,
            {"grant_type": "refresh_token", "refresh_token": refresh_token_value},
        )
    except requests.RequestException as e:
        logger.warning(f"Failed to refresh Spotify token: {e}")
        return None

    # Spotify may omit the refresh token when it is unchanged
    new_token_data.setdefault("refresh_token", refresh_token_value)
    save_user_tokens(new_token_data)
    logger.info(f"Spotify token refreshed, expires: {new_token_data['expires_at']}")
    return new_token_data
