"""
Offline client used by --debug.

Serves a generated album collection and accepts every playback command
without touching the network, so the UI can be exercised without an account.
"""

from typing import Any, Dict, List, Optional

from loguru import logger

from ..models import AlbumEntry, Page

DEFAULT_ALBUM_COUNT = 120

_ARTISTS = [
    "Boards of Canada",
    "Radiohead",
    "Massive Attack",
    "Portishead",
    "Aphex Twin",
    "Bonobo",
    "Four Tet",
    "Burial",
]

_TITLES = [
    "Music Has the Right to Children",
    "In Rainbows",
    "Mezzanine",
    "Dummy",
    "Selected Ambient Works 85-92",
    "Black Sands",
    "Rounds",
    "Untrue",
]


def generate_albums(count: int = DEFAULT_ALBUM_COUNT) -> List[AlbumEntry]:
    """Deterministic fake collection: numbered titles cycling through artists."""
    return [
        AlbumEntry(
            title=f"{_TITLES[i % len(_TITLES)]} #{i + 1}",
            artist=_ARTISTS[i % len(_ARTISTS)],
            uri=f"spotify:album:fake{i:05d}",
        )
        for i in range(count)
    ]


class FakeSpotifyClient:
    """In-memory stand-in for SpotifyClient."""

    def __init__(self, albums: Optional[List[AlbumEntry]] = None):
        self.albums = generate_albums() if albums is None else list(albums)
        self.device_list: List[Dict[str, Any]] = [
            {"id": "fake-desktop", "name": "Desktop", "type": "Computer", "is_active": True},
            {"id": "fake-phone", "name": "Phone", "type": "Smartphone", "is_active": False},
        ]
        self.now_playing: Optional[AlbumEntry] = None
        self.is_playing = False
        self.played: List[str] = []

    def get_page(self, offset: int, limit: int) -> Page:
        return Page(items=self.albums[offset : offset + limit], total=len(self.albums))

    def play(self, uri: str) -> bool:
        self.played.append(uri)
        self.now_playing = next((a for a in self.albums if a.uri == uri), None)
        self.is_playing = True
        logger.debug(f"Fake playback started: {uri}")
        return True

    def pause(self) -> bool:
        self.is_playing = False
        return True

    def resume(self) -> bool:
        self.is_playing = self.now_playing is not None
        return self.is_playing

    def next_track(self) -> bool:
        return self._step(1)

    def previous_track(self) -> bool:
        return self._step(-1)

    def _step(self, delta: int) -> bool:
        if self.now_playing is None:
            return False
        index = (self.albums.index(self.now_playing) + delta) % len(self.albums)
        self.now_playing = self.albums[index]
        return True

    def currently_playing(self) -> Optional[str]:
        if self.now_playing is None:
            return None
        return f"{self.now_playing.title} ({self.now_playing.artist})"

    def devices(self) -> List[Dict[str, Any]]:
        return list(self.device_list)

    def transfer_playback(self, device_id: str, play: bool = True) -> bool:
        if not any(d["id"] == device_id for d in self.device_list):
            return False
        for device in self.device_list:
            device["is_active"] = device["id"] == device_id
        if play:
            self.is_playing = self.now_playing is not None
        return True
