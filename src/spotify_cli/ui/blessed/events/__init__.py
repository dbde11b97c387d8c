"""Keyboard event handling for the blessed UI."""

from .keyboard import ACTIVATE, HOTKEYS, MOVE_DOWN, MOVE_UP, handle_key, parse_key

__all__ = ["ACTIVATE", "HOTKEYS", "MOVE_DOWN", "MOVE_UP", "handle_key", "parse_key"]
