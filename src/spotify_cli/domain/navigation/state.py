"""Selection state machine for the windowed album list.

The table only reports "row N is now selected", with no direction and no
hint that the user pushed against an edge. Two remembered rows are enough to
tell an ordinary one-row move from a move past the first or last row of the
window, which is when the window has to shift.

Every decision is returned as a Transition; the caller re-renders the window
and forces the selection. A forced selection is reported back by the table
like any other, and the history sentinels below are chosen so that this echo
moves the absolute index onto the newly highlighted entry.
"""

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .ports import FIRST_DATA_ROW, HEADER_ROW
from .window import WindowSpec

NO_ROW = -1
NO_HISTORY = (NO_ROW, NO_ROW)

# Transition kinds
ORDINARY = "ordinary"
FORWARD = "forward"
BACKWARD = "backward"
HEADER_BOUNCE = "header_bounce"


@dataclass(frozen=True)
class Transition:
    """Side effects the caller applies after a selection change."""

    kind: str
    window: Optional[WindowSpec] = None  # Window to render, if it changed
    select: Optional[int] = None  # Row to force the selection to


class NavigationState:
    """Tracks the absolute position in the dataset behind a fixed-size window.

    Attributes:
        absolute_index: Dataset index of the highlighted album
        history: Last two reported rows, oldest first
        window: Currently rendered range of the dataset
    """

    def __init__(self, dataset_size: int, window_size: int):
        if window_size < 1:
            raise ValueError(f"window_size must be positive, got {window_size}")
        self.dataset_size = dataset_size
        self.window_size = window_size
        self.absolute_index = 0
        self.history: tuple[int, int] = NO_HISTORY
        self.window = WindowSpec.clamped(0, window_size, dataset_size)

    @property
    def last_row(self) -> int:
        """Row index of the last data row in a full window."""
        return self.window_size

    @property
    def current_row(self) -> int:
        """Table row that should be highlighted for absolute_index."""
        return self.absolute_index - self.window.start + FIRST_DATA_ROW

    def on_selection_changed(self, row: int) -> Transition:
        """Classify a reported row and update the state.

        Args:
            row: Newly selected table row (HEADER_ROW for the header)

        Returns:
            Transition describing the window/selection to apply
        """
        if self._is_forward_boundary(row):
            return self._shift(
                FORWARD,
                self.window_size,
                # The echo of FIRST_DATA_ROW then reads as one step down
                history=(NO_ROW, HEADER_ROW),
                select=FIRST_DATA_ROW,
            )

        if self._is_backward_boundary(row):
            return self._shift(
                BACKWARD,
                -self.window_size,
                # The echo of last_row then reads as one step up
                history=(self.last_row + 2, self.last_row + 1),
                select=self.last_row,
            )

        if row == HEADER_ROW:
            # Nothing above the first window; bounce back without moving
            self.history = NO_HISTORY
            return Transition(HEADER_BOUNCE, select=FIRST_DATA_ROW)

        self._record(row)
        return Transition(ORDINARY)

    def _is_forward_boundary(self, row: int) -> bool:
        # Down pressed on the last row: the table reports that row again
        return (
            self.history[1] == self.last_row
            and row == self.last_row
            and self._implied_start() + self.window_size < self.dataset_size
        )

    def _is_backward_boundary(self, row: int) -> bool:
        # Up pressed on the first data row: the header gets selected
        return (
            self.history[1] == FIRST_DATA_ROW
            and row == HEADER_ROW
            and self.absolute_index >= self.window_size
        )

    def _implied_start(self) -> int:
        return (self.absolute_index // self.window_size) * self.window_size

    def _shift(
        self, kind: str, delta: int, history: tuple[int, int], select: int
    ) -> Transition:
        self.window = WindowSpec.clamped(
            self._implied_start() + delta, self.window_size, self.dataset_size
        )
        self.history = history
        logger.debug(
            f"Window shift ({kind}) to [{self.window.start}, {self.window.end}) "
            f"at absolute index {self.absolute_index}"
        )
        return Transition(kind, window=self.window, select=select)

    def _record(self, row: int) -> None:
        previous = self.history[1]
        self.history = (previous, row)
        if previous == NO_ROW:
            return  # First report after a reset only sets the baseline
        if previous > row:
            self.absolute_index -= 1
        elif previous < row:
            self.absolute_index += 1
