"""Selectable table widget with a header row."""

from typing import Sequence

from blessed import Terminal

from spotify_cli.domain.navigation.ports import HEADER_ROW, Row, RowHandler

from ..helpers import calculate_scroll_offset, clamp_selection, write_at

COLUMN_GAP = 2


class Table:
    """Rows of text columns; row 0 is the header.

    Moving up or down clamps at the edges and always notifies, so listeners
    can tell "pressed down on the last row" from no key press at all.
    """

    def __init__(self, rows: Sequence[Row] = ()):
        self.rows: list[Row] = list(rows)
        self._selected = HEADER_ROW
        self.scroll = 0
        self._selection_handlers: list[RowHandler] = []
        self._activation_handlers: list[RowHandler] = []

    @property
    def selected(self) -> int:
        return self._selected

    def set_rows(self, rows: Sequence[Row]) -> None:
        self.rows = list(rows)
        self._selected = clamp_selection(self._selected, len(self.rows))

    def select(self, row: int) -> None:
        self._selected = clamp_selection(row, len(self.rows))
        self._notify(self._selection_handlers, self._selected)

    def move_up(self) -> None:
        self.select(self._selected - 1)

    def move_down(self) -> None:
        self.select(self._selected + 1)

    def activate(self) -> None:
        self._notify(self._activation_handlers, self._selected)

    def on_selection_changed(self, handler: RowHandler) -> None:
        self._selection_handlers.append(handler)

    def on_item_activated(self, handler: RowHandler) -> None:
        self._activation_handlers.append(handler)

    @staticmethod
    def _notify(handlers: list[RowHandler], row: int) -> None:
        for handler in handlers:
            handler(row)


def column_widths(rows: Sequence[Row]) -> list[int]:
    """Widest cell per column."""
    widths: list[int] = []
    for row in rows:
        for i, cell in enumerate(row):
            if i >= len(widths):
                widths.append(len(cell))
            else:
                widths[i] = max(widths[i], len(cell))
    return widths


def format_row(row: Row, widths: Sequence[int]) -> str:
    return (" " * COLUMN_GAP).join(
        cell.ljust(width) for cell, width in zip(row, widths)
    )


def render_table(
    term: Terminal,
    table: Table,
    x: int,
    y: int,
    width: int,
    height: int,
    focused: bool = False,
) -> int:
    """
    Render the table inside the given area.

    The header stays pinned; data rows scroll to keep the selection visible
    when the area is shorter than the table.

    Returns:
        Number of lines rendered
    """
    if height <= 0 or not table.rows:
        return 0

    widths = column_widths(table.rows)
    blank = " " * width

    header = format_row(table.rows[0], widths)[:width]
    write_at(term, x, y, term.bold(header.ljust(width)), clear=False)

    data_rows = table.rows[1:]
    body_height = height - 1
    # Selection index within data rows; the header is always drawn
    selected_data = table.selected - 1
    table.scroll = calculate_scroll_offset(
        max(selected_data, 0), table.scroll, body_height, len(data_rows)
    )

    line = 1
    for index in range(table.scroll, min(len(data_rows), table.scroll + body_height)):
        text = format_row(data_rows[index], widths)[:width].ljust(width)
        if index == selected_data:
            text = term.black_on_yellow(text) if focused else term.reverse(text)
        write_at(term, x, y + line, text, clear=False)
        line += 1

    while line < height:
        write_at(term, x, y + line, blank, clear=False)
        line += 1

    return line
