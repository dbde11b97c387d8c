"""Keyboard event handling.

Key Functions:
    - parse_key: Normalise a blessed Keystroke into an event dictionary
    - handle_key: Update UI state and name the action the app should run
"""

from typing import Optional

from blessed.keyboard import Keystroke

from ..state import (
    UIState,
    cycle_focus,
    move_control,
    request_quit,
    selected_control,
)

# Actions returned to the app loop
MOVE_UP = "move_up"
MOVE_DOWN = "move_down"
ACTIVATE = "activate"

# Single-key playback shortcuts, available in any focus
HOTKEYS = {
    "p": "play",
    "s": "stop",
    "n": "next",
    "b": "previous",
}


def parse_key(key: Keystroke) -> dict:
    """
    Parse keystroke into event dictionary.

    Args:
        key: blessed Keystroke

    Returns:
        Event dictionary describing the key press
    """
    event = {
        "type": "unknown",
        "key": key,
        "name": getattr(key, "name", None),
        "char": str(key) if key and key.isprintable() else None,
    }

    if key.name == "KEY_ENTER" or key == "\n" or key == "\r":
        event["type"] = "enter"
    elif key.name == "KEY_ESCAPE":
        event["type"] = "escape"
    elif key.name == "KEY_TAB" or key == "\t":
        event["type"] = "tab"
    elif key.name == "KEY_BTAB":  # Shift+Tab
        event["type"] = "shift_tab"
    elif key.name == "KEY_UP":
        event["type"] = "arrow_up"
    elif key.name == "KEY_DOWN":
        event["type"] = "arrow_down"
    elif key.name == "KEY_LEFT":
        event["type"] = "arrow_left"
    elif key.name == "KEY_RIGHT":
        event["type"] = "arrow_right"
    elif key == "\x03":  # Ctrl+C
        event["type"] = "ctrl_c"
    elif key and key.isprintable():
        event["type"] = "char"

    return event


def handle_key(state: UIState, key: Keystroke) -> tuple[UIState, Optional[str]]:
    """
    Handle keyboard input and return updated state.

    Table moves are one row per key press; the album navigator relies on it.

    Returns:
        (new_state, action) where action is MOVE_UP, MOVE_DOWN, ACTIVATE,
        a playback control name, or None
    """
    event = parse_key(key)
    event_type = event["type"]
    char = event["char"]

    if event_type in ("escape", "ctrl_c") or char == "q":
        return request_quit(state), None

    if event_type == "tab":
        return cycle_focus(state), None
    if event_type == "shift_tab":
        return cycle_focus(state, -1), None

    if char in HOTKEYS:
        return state, HOTKEYS[char]

    if state.focus == "controls":
        if event_type == "arrow_left" or char == "h":
            return move_control(state, -1), None
        if event_type == "arrow_right" or char == "l":
            return move_control(state, 1), None
        if event_type == "enter":
            return state, selected_control(state)
        return state, None

    if event_type == "arrow_up" or char == "k":
        return state, MOVE_UP
    if event_type == "arrow_down" or char == "j":
        return state, MOVE_DOWN
    if event_type == "enter":
        return state, ACTIVATE

    return state, None
