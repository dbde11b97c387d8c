"""Tests for scrolling helper functions."""

from spotify_cli.ui.blessed.helpers.scrolling import (
    calculate_scroll_offset,
    clamp_selection,
)


class TestScrollOffset:
    """Test scroll offset computation logic."""

    def test_no_scroll_when_fits(self):
        """When all items fit, never scroll."""
        assert calculate_scroll_offset(4, 0, 10, 5) == 0

    def test_scroll_down_to_selection(self):
        """Selection below the viewport scrolls it into the last line."""
        assert calculate_scroll_offset(15, 0, 10, 20) == 6

    def test_scroll_up_to_selection(self):
        """Selection above the viewport scrolls it into the first line."""
        assert calculate_scroll_offset(2, 10, 10, 20) == 2

    def test_keep_scroll_when_visible(self):
        assert calculate_scroll_offset(12, 8, 10, 20) == 8

    def test_clamped_to_end(self):
        """Scroll never leaves empty lines at the bottom."""
        assert calculate_scroll_offset(19, 15, 10, 20) == 10

    def test_zero_height_viewport(self):
        assert calculate_scroll_offset(5, 3, 0, 20) == 0


class TestClampSelection:
    def test_in_range(self):
        assert clamp_selection(3, 10) == 3

    def test_edges(self):
        assert clamp_selection(-1, 10) == 0
        assert clamp_selection(10, 10) == 9

    def test_empty(self):
        assert clamp_selection(3, 0) == 0
