"""Saved-album library: models, provider protocols and pagination."""

from .models import AlbumEntry, Dataset, Page
from .paging import DEFAULT_PAGE_SIZE, fetch_all
from .provider import (
    PageSource,
    PlaybackTarget,
    PlayerControls,
    ProviderConfig,
    ProviderState,
)

__all__ = [
    "AlbumEntry",
    "Dataset",
    "Page",
    "DEFAULT_PAGE_SIZE",
    "fetch_all",
    "PageSource",
    "PlaybackTarget",
    "PlayerControls",
    "ProviderConfig",
    "ProviderState",
]
