"""Tests for Spotify API functions with HTTP mocked out."""

from datetime import datetime, timedelta
from unittest.mock import MagicMock, patch

import pytest
import requests

from spotify_cli.core.errors import AuthenticationError
from spotify_cli.domain.library.models import AlbumEntry
from spotify_cli.domain.library.provider import ProviderConfig, ProviderState
from spotify_cli.domain.library.providers.spotify import api, auth
from spotify_cli.domain.library.providers.spotify.client import SpotifyClient

API = "spotify_cli.domain.library.providers.spotify.api"


def saved_album(name: str, artists: list[str], album_id: str) -> dict:
    return {
        "added_at": "2024-01-01T00:00:00Z",
        "album": {
            "name": name,
            "artists": [{"name": artist} for artist in artists],
            "uri": f"spotify:album:{album_id}",
        },
    }


def json_response(payload: dict, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


@pytest.fixture
def token_data() -> dict:
    return {
        "access_token": "access-123",
        "refresh_token": "refresh-456",
        "expires_at": (datetime.now() + timedelta(hours=1)).isoformat(),
    }


@pytest.fixture
def state(token_data) -> ProviderState:
    config = ProviderConfig(name="spotify", client_id="id", client_secret="secret")
    return (
        ProviderState(config=config)
        .with_authenticated(True)
        .with_cache(token_data=token_data)
    )


class TestNormalizeSavedAlbum:
    def test_first_artist_only(self):
        item = saved_album("Mezzanine", ["Massive Attack", "Liz Fraser"], "abc")

        assert api.normalize_saved_album(item) == AlbumEntry(
            "Mezzanine", "Massive Attack", "spotify:album:abc"
        )

    def test_missing_artists(self):
        item = {"album": {"name": "Untitled", "artists": [], "uri": "spotify:album:x"}}

        assert api.normalize_saved_album(item).artist == ""


class TestFormatTrack:
    def test_multiple_artists(self):
        track = {"name": "Teardrop", "artists": [{"name": "A"}, {"name": "B"}]}

        assert api.format_track(track) == "Teardrop (A, B)"

    def test_nothing_playing(self):
        assert api.format_track(None) == "None"


class TestGetSavedAlbumsPage:
    def test_parses_page(self, state):
        payload = {
            "total": 3,
            "items": [
                saved_album("Dummy", ["Portishead"], "1"),
                saved_album("Untrue", ["Burial"], "2"),
            ],
        }
        with patch(f"{API}.requests.get", return_value=json_response(payload)) as get:
            _, page = api.get_saved_albums_page(state, offset=0, limit=2)

        assert page.total == 3
        assert [a.title for a in page.items] == ["Dummy", "Untrue"]
        assert get.call_args.kwargs["params"] == {"limit": 2, "offset": 0}
        assert get.call_args.kwargs["headers"] == {"Authorization": "Bearer access-123"}

    def test_requires_token(self):
        state = ProviderState(config=ProviderConfig(name="spotify"))

        with pytest.raises(AuthenticationError):
            api.get_saved_albums_page(state, offset=0, limit=25)

    def test_http_error_propagates(self, state):
        response = json_response({}, status_code=500)
        response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")

        with patch(f"{API}.requests.get", return_value=response):
            with pytest.raises(requests.HTTPError):
                api.get_saved_albums_page(state, offset=25, limit=25)


class TestPlayerCommands:
    def test_play_context(self, state):
        with patch(f"{API}.requests.request", return_value=json_response({})) as request:
            _, success = api.play_context(state, "spotify:album:1", device_id="dev")

        assert success is True

        method, url = request.call_args.args
        assert method == "PUT"
        assert url.endswith("/me/player/play")
        assert request.call_args.kwargs["json"] == {"context_uri": "spotify:album:1"}
        assert request.call_args.kwargs["params"] == {"device_id": "dev"}

    def test_no_active_device(self, state):
        response = json_response({}, status_code=404)
        response.raise_for_status.side_effect = requests.HTTPError(response=response)

        with patch(f"{API}.requests.request", return_value=response):
            assert api.pause(state) == (state, False)

    def test_network_error(self, state):
        with patch(
            f"{API}.requests.request", side_effect=requests.ConnectionError("down")
        ):
            assert api.next_track(state) == (state, False)

    def test_transfer_playback(self, state):
        with patch(f"{API}.requests.request", return_value=json_response({})) as request:
            assert api.transfer_playback(state, "phone", play=True) == (state, True)

        assert request.call_args.kwargs["json"] == {
            "device_ids": ["phone"],
            "play": True,
        }


class TestCurrentlyPlaying:
    def test_nothing_playing(self, state):
        with patch(f"{API}.requests.get", return_value=json_response({}, 204)):
            assert api.get_currently_playing(state) == (state, None)

    def test_client_formats_item(self, state):
        payload = {"item": {"name": "Roygbiv", "artists": [{"name": "Boards of Canada"}]}}
        client = SpotifyClient(state)

        with patch(f"{API}.requests.get", return_value=json_response(payload)):
            assert client.currently_playing() == "Roygbiv (Boards of Canada)"


class TestSpotifyClient:
    def test_get_page_satisfies_page_source(self, state):
        payload = {"total": 1, "items": [saved_album("Rounds", ["Four Tet"], "9")]}
        client = SpotifyClient(state)

        with patch(f"{API}.requests.get", return_value=json_response(payload)):
            page = client.get_page(0, 25)

        assert page.items == [AlbumEntry("Rounds", "Four Tet", "spotify:album:9")]

    def test_transfer_remembers_device(self, state):
        client = SpotifyClient(state)

        with patch(f"{API}.requests.request", return_value=json_response({})):
            client.transfer_playback("phone")

        assert client.device_id == "phone"


class TestTokenRefresh:
    @pytest.fixture
    def expired_state(self, state, token_data) -> ProviderState:
        expired = {
            **token_data,
            "expires_at": (datetime.now() - timedelta(hours=1)).isoformat(),
        }
        return state.with_cache(token_data=expired)

    @pytest.fixture
    def fresh_token(self, token_data) -> dict:
        return {**token_data, "access_token": "fresh-789"}

    def test_player_command_returns_refreshed_state(self, expired_state, fresh_token):
        with (
            patch.object(auth, "refresh_token", return_value=fresh_token),
            patch(f"{API}.requests.request", return_value=json_response({})),
        ):
            new_state, success = api.pause(expired_state)

        assert success is True
        assert new_state.cache["token_data"] == fresh_token

    def test_client_refreshes_once(self, expired_state, fresh_token):
        client = SpotifyClient(expired_state)

        with (
            patch.object(auth, "refresh_token", return_value=fresh_token) as refresh,
            patch(f"{API}.requests.request", return_value=json_response({})),
            patch(f"{API}.requests.get", return_value=json_response({}, 204)),
        ):
            for _ in range(5):
                client.pause()
                client.currently_playing()
            client.devices()

        assert refresh.call_count == 1
        assert client.provider_state.cache["token_data"]["access_token"] == "fresh-789"

    def test_refreshed_token_used_in_request(self, expired_state, fresh_token):
        client = SpotifyClient(expired_state)

        with (
            patch.object(auth, "refresh_token", return_value=fresh_token),
            patch(f"{API}.requests.request", return_value=json_response({})) as request,
        ):
            client.next_track()
            client.previous_track()

        assert request.call_args.kwargs["headers"] == {
            "Authorization": "Bearer fresh-789"
        }


class TestAuthHelpers:
    def test_expired_without_expiry(self):
        assert auth.is_token_expired({"access_token": "x"}) is True

    def test_expiry_buffer(self):
        soon = (datetime.now() + timedelta(minutes=2)).isoformat()
        later = (datetime.now() + timedelta(hours=1)).isoformat()

        assert auth.is_token_expired({"expires_at": soon}) is True
        assert auth.is_token_expired({"expires_at": later}) is False

    def test_authorize_url(self):
        url = auth.build_authorize_url(
            "client", "http://localhost:8080/callback", "challenge", "csrf"
        )

        assert url.startswith(auth.AUTHORIZE_URL)
        assert "code_challenge=challenge" in url
        assert "user-library-read" in url

    def test_parse_callback_url(self):
        parsed = auth.parse_callback_url(
            "http://localhost:8080/callback?code=abc&state=csrf"
        )

        assert parsed == {"code": "abc", "state": "csrf", "error": None}

    def test_tokens_round_trip(self, tmp_path, monkeypatch, token_data):
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

        auth.save_user_tokens(token_data)

        assert auth.load_user_tokens() == token_data
        assert (auth.get_tokens_file().stat().st_mode & 0o777) == 0o600

    def test_refresh_keeps_refresh_token(self, state, token_data, tmp_path, monkeypatch):
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
        response = json_response({"access_token": "new", "expires_in": 3600})

        with patch(
            "spotify_cli.domain.library.providers.spotify.auth.requests.post",
            return_value=response,
        ):
            refreshed = auth.refresh_token(state, token_data)

        assert refreshed["access_token"] == "new"
        assert refreshed["refresh_token"] == "refresh-456"
        assert "expires_at" in refreshed


class TestCallbackProblem:
    def test_usable_redirect(self):
        result = {"code": "abc", "state": "csrf", "error": None}

        assert auth.callback_problem(result, "csrf") is None

    def test_refused(self):
        result = {"code": None, "state": "csrf", "error": "access_denied"}

        assert "access_denied" in auth.callback_problem(result, "csrf")

    def test_state_mismatch(self):
        result = {"code": "abc", "state": "other", "error": None}

        assert "mismatch" in auth.callback_problem(result, "csrf")
