"""UI state management - immutable state updates."""

from dataclasses import dataclass, replace
from typing import Optional

# Focus chain, cycled with Tab
FOCUS_ORDER = ("albums", "devices", "controls")

# Playback controls, left to right
CONTROLS = ("previous", "play", "stop", "next")
CONTROL_LABELS = {
    "previous": "[ |◄ Previous ]",
    "play": "[ ▷ Play ]",
    "stop": "[ ■ Stop ]",
    "next": "[ ►| Next ]",
}


@dataclass(frozen=True)
class UIState:
    """Everything the renderer needs besides the table widgets."""

    focus: str = "albums"
    control_index: int = 1  # "play"
    now_playing: str = "None"
    status_message: str = ""
    status_color: str = "white"
    should_quit: bool = False
    dirty: bool = True  # Full redraw needed
    use_colors: bool = True


def cycle_focus(state: UIState, delta: int = 1) -> UIState:
    index = FOCUS_ORDER.index(state.focus)
    return replace(
        state, focus=FOCUS_ORDER[(index + delta) % len(FOCUS_ORDER)], dirty=True
    )


def move_control(state: UIState, delta: int) -> UIState:
    """Move the highlighted control, wrapping at both ends."""
    return replace(
        state, control_index=(state.control_index + delta) % len(CONTROLS), dirty=True
    )


def selected_control(state: UIState) -> str:
    return CONTROLS[state.control_index]


def set_status(state: UIState, message: str, color: str = "white") -> UIState:
    return replace(state, status_message=message, status_color=color, dirty=True)


def set_now_playing(state: UIState, track: Optional[str]) -> UIState:
    return replace(state, now_playing=track or "None", dirty=True)


def request_quit(state: UIState) -> UIState:
    return replace(state, should_quit=True)


def mark_clean(state: UIState) -> UIState:
    return replace(state, dirty=False)


def mark_dirty(state: UIState) -> UIState:
    return replace(state, dirty=True)
