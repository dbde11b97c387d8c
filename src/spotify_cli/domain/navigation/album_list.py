"""
Album list: the fetched collection wired to a table widget.

Owns the dataset and connects WindowRenderer, NavigationState and
ActivationHandler to the table's notifications.
"""

from typing import Optional

from loguru import logger

from ..library.models import Dataset
from ..library.provider import PlaybackTarget
from .activation import ActivationHandler
from .ports import FIRST_DATA_ROW, TableView
from .state import NavigationState, Transition
from .window import DEFAULT_COLUMN_WIDTH, HEADER, WindowRenderer

DEFAULT_VISIBLE_ALBUMS = 45


class AlbumList:
    """Windowed view over the user's saved albums."""

    def __init__(
        self,
        dataset: Dataset,
        table: TableView,
        playback: PlaybackTarget,
        visible_albums: int = DEFAULT_VISIBLE_ALBUMS,
        column_width: int = DEFAULT_COLUMN_WIDTH,
    ):
        self.dataset = dataset
        self.table = table
        self.renderer = WindowRenderer(table, column_width)
        self.state = NavigationState(len(dataset), visible_albums)
        self.activation = ActivationHandler(dataset, self.state, playback)

    def start(self) -> None:
        """Render the first window and subscribe to the table."""
        if not self.dataset:
            logger.warning("No saved albums to show")
            self.table.set_rows([HEADER])
            return

        window = self.state.window
        self.renderer.render(self.dataset, window.start, window.end)
        self.table.on_selection_changed(self.handle_selection_changed)
        self.table.on_item_activated(self.activation.on_item_activated)
        # Reported back as the baseline for the first move
        self.table.select(FIRST_DATA_ROW)

    def handle_selection_changed(self, row: int) -> Transition:
        """Apply the state machine's decision for a newly selected row.

        May re-enter itself: forcing the selection makes the table report it.
        """
        transition = self.state.on_selection_changed(row)
        if transition.window is not None:
            self.renderer.render(
                self.dataset, transition.window.start, transition.window.end
            )
        if transition.select is not None:
            self.table.select(transition.select)
        return transition

    @property
    def absolute_index(self) -> int:
        return self.state.absolute_index

    def status(self) -> Optional[str]:
        """Position summary for the box title, e.g. '12/240'."""
        if not self.dataset:
            return None
        return f"{self.state.absolute_index + 1}/{len(self.dataset)}"
