"""Playing the album under the cursor when a row is activated."""

from typing import Optional

from loguru import logger

from ..library.models import AlbumEntry, Dataset
from ..library.provider import PlaybackTarget
from .ports import HEADER_ROW
from .state import NavigationState


class ActivationHandler:
    """Issues a play command for the highlighted album.

    Reads NavigationState's absolute index and never changes it.
    """

    def __init__(
        self, dataset: Dataset, state: NavigationState, playback: PlaybackTarget
    ):
        self.dataset = dataset
        self.state = state
        self.playback = playback

    def on_item_activated(self, row: int) -> Optional[AlbumEntry]:
        """Play the album behind the activated row.

        Returns:
            The album a play command was issued for, or None for the header
        """
        if row == HEADER_ROW or not self.dataset:
            return None

        if row != self.state.current_row:
            logger.warning(
                f"Activated row {row} but cursor is on row {self.state.current_row}"
            )

        album = self.dataset[self.state.absolute_index]
        logger.info(f"Playing album: {album.title} - {album.artist}")
        # Failures are logged by the playback target; nothing to retry here
        self.playback.play(album.uri)
        return album
