"""Tests for the offline client used by --debug."""

import pytest

from spotify_cli.domain.library.paging import fetch_all
from spotify_cli.domain.library.providers.fake import (
    DEFAULT_ALBUM_COUNT,
    FakeSpotifyClient,
    generate_albums,
)


@pytest.fixture
def client() -> FakeSpotifyClient:
    return FakeSpotifyClient(generate_albums(10))


class TestGenerateAlbums:
    def test_deterministic(self):
        assert generate_albums(5) == generate_albums(5)

    def test_unique_uris(self):
        albums = generate_albums(DEFAULT_ALBUM_COUNT)

        assert len({a.uri for a in albums}) == DEFAULT_ALBUM_COUNT


class TestFakeSpotifyClient:
    def test_pages_cover_collection(self, client):
        assert fetch_all(client, page_size=3) == tuple(client.albums)

    def test_page_past_end(self, client):
        page = client.get_page(20, 5)

        assert page.items == []
        assert page.total == 10

    def test_play_records_uri(self, client):
        album = client.albums[3]

        assert client.play(album.uri) is True
        assert client.played == [album.uri]
        assert client.currently_playing() == f"{album.title} ({album.artist})"

    def test_nothing_playing(self, client):
        assert client.currently_playing() is None
        assert client.next_track() is False

    def test_next_and_previous_wrap(self, client):
        client.play(client.albums[-1].uri)

        client.next_track()
        assert client.now_playing == client.albums[0]

        client.previous_track()
        assert client.now_playing == client.albums[-1]

    def test_pause_and_resume(self, client):
        client.play(client.albums[0].uri)

        client.pause()
        assert client.is_playing is False

        assert client.resume() is True
        assert client.is_playing is True

    def test_transfer_playback(self, client):
        assert client.transfer_playback("fake-phone") is True

        active = [d["id"] for d in client.devices() if d["is_active"]]
        assert active == ["fake-phone"]

    def test_transfer_to_unknown_device(self, client):
        assert client.transfer_playback("nope") is False
