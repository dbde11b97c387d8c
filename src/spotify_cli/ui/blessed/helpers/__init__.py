"""Blessed UI helper functions."""

from .scrolling import calculate_scroll_offset, clamp_selection
from .terminal import draw_box, write_at

__all__ = ["write_at", "draw_box", "calculate_scroll_offset", "clamp_selection"]
