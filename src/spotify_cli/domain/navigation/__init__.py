"""Windowed navigation over the album collection."""

from .activation import ActivationHandler
from .album_list import DEFAULT_VISIBLE_ALBUMS, AlbumList
from .ports import FIRST_DATA_ROW, HEADER_ROW, Row, TableView
from .state import NavigationState, Transition
from .window import HEADER, WindowRenderer, WindowSpec, build_rows, truncate

__all__ = [
    "ActivationHandler",
    "AlbumList",
    "DEFAULT_VISIBLE_ALBUMS",
    "FIRST_DATA_ROW",
    "HEADER_ROW",
    "Row",
    "TableView",
    "NavigationState",
    "Transition",
    "HEADER",
    "WindowRenderer",
    "WindowSpec",
    "build_rows",
    "truncate",
]
