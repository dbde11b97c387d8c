"""Rendering bounded windows of the album collection into a table."""

from typing import NamedTuple

from loguru import logger

from spotify_cli.core.errors import RenderError

from ..library.models import AlbumEntry, Dataset
from .ports import Row, TableView

HEADER: Row = ("Title", "Artist")
ELLIPSIS = "..."
DEFAULT_COLUMN_WIDTH = 20


class WindowSpec(NamedTuple):
    """Half-open range [start, end) into the dataset."""

    start: int
    end: int

    @classmethod
    def clamped(cls, start: int, size: int, dataset_size: int) -> "WindowSpec":
        """Window of `size` rows from `start`, with end clamped to the dataset."""
        return cls(start, min(start + size, dataset_size))

    @property
    def size(self) -> int:
        return max(0, self.end - self.start)


def truncate(text: str, width: int) -> str:
    """Fit text into `width` characters, replacing the tail with '...'.

    Examples:
        >>> truncate("Short", 20)
        'Short'
        >>> truncate("Selected Ambient Works 85-92", 20)
        'Selected Ambient ...'
    """
    if len(text) <= width:
        return text
    if width <= len(ELLIPSIS):
        return text[:width]
    return text[: width - len(ELLIPSIS)] + ELLIPSIS


def build_rows(
    dataset: Dataset, start: int, end: int, column_width: int = DEFAULT_COLUMN_WIDTH
) -> list[Row]:
    """Header plus one truncated row per entry in dataset[start:end].

    `end` past the dataset is clamped rather than rejected.
    """
    end = min(end, len(dataset))
    rows: list[Row] = [HEADER]
    rows.extend(_album_row(album, column_width) for album in dataset[start:end])
    return rows


def _album_row(album: AlbumEntry, column_width: int) -> Row:
    return (truncate(album.title, column_width), truncate(album.artist, column_width))


class WindowRenderer:
    """Replaces a table's rows with one window of the dataset."""

    def __init__(self, table: TableView, column_width: int = DEFAULT_COLUMN_WIDTH):
        self.table = table
        self.column_width = column_width

    def render(self, dataset: Dataset, start: int, end: int) -> WindowSpec:
        """Render dataset[start:end] below the header row.

        Returns:
            The window actually rendered, with end clamped to the dataset

        Raises:
            RenderError: If the dataset is empty (the table keeps only the header)
        """
        if not dataset:
            self.table.set_rows([HEADER])
            raise RenderError("Cannot render a window of an empty album list")

        window = WindowSpec(start, min(end, len(dataset)))
        self.table.set_rows(build_rows(dataset, *window, self.column_width))
        logger.debug(f"Rendered albums [{window.start}, {window.end})")
        return window
