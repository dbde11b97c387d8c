"""Ports the navigator needs from the table widget."""

from typing import Callable, Protocol, Sequence

Row = tuple[str, ...]

# Row 0 of every table is the header; data rows start right after it.
HEADER_ROW = 0
FIRST_DATA_ROW = 1

RowHandler = Callable[[int], None]


class TableView(Protocol):
    """Minimal contract for a selectable table with a header row.

    Implementations notify selection-changed on every move request (even when
    the selection is already at an edge and does not change) and on select().
    """

    @property
    def selected(self) -> int:
        """Currently selected row index (HEADER_ROW for the header)."""
        ...

    def set_rows(self, rows: Sequence[Row]) -> None:
        """Replace all rows, header included. Does not notify."""

    def select(self, row: int) -> None:
        """Move the selection to `row` and notify selection-changed."""

    def on_selection_changed(self, handler: RowHandler) -> None:
        """Register a handler receiving the newly selected row."""

    def on_item_activated(self, handler: RowHandler) -> None:
        """Register a handler receiving the activated row."""
