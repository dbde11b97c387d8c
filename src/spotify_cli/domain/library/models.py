"""
Album library domain models.

Contains data structures for the user's saved-album collection.
"""

from typing import NamedTuple


class AlbumEntry(NamedTuple):
    """A saved album as shown in the album list.

    Entries keep server order and are never deduplicated; two saved albums
    with the same title stay two entries.
    """

    title: str
    artist: str
    uri: str  # Opaque playback identifier (spotify:album:{id})


class Page(NamedTuple):
    """One page of a remote collection."""

    items: list[AlbumEntry]
    total: int  # Size of the whole collection, as reported by the server


# The full collection, fetched once per session
Dataset = tuple[AlbumEntry, ...]
