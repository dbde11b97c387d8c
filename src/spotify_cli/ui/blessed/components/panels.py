"""Rendering of the album box, the currently-playing panel and the status bar."""

from typing import Optional

from blessed import Terminal

from ..helpers import draw_box, write_at
from ..state import CONTROL_LABELS, CONTROLS, UIState
from .table import Table, render_table

DEVICES_WIDTH = 32


def _border_style(term: Terminal, state: UIState, focused: bool):
    return term.yellow if focused and state.use_colors else None


def render_albums(
    term: Terminal,
    table: Table,
    state: UIState,
    layout: dict[str, int],
    position: Optional[str] = None,
) -> None:
    """Bordered 'User albums' box around the album table."""
    height = layout["albums_height"]
    if height < 3:
        return
    focused = state.focus == "albums"
    title = f"User albums {position}" if position else "User albums"

    draw_box(
        term, 0, layout["albums_y"], layout["width"], height, title,
        _border_style(term, state, focused),
    )
    render_table(
        term, table, 1, layout["albums_y"] + 1, layout["width"] - 2, height - 2,
        focused and state.use_colors,
    )


def render_now_playing(
    term: Terminal, devices_table: Table, state: UIState, layout: dict[str, int]
) -> None:
    """'Currently playing' panel: track label, devices table and controls."""
    y = layout["now_playing_y"]
    height = layout["now_playing_height"]
    width = layout["width"]
    if height < 3:
        return

    draw_box(term, 0, y, width, height, "Currently playing")
    inner_width = width - 2
    devices_width = min(DEVICES_WIDTH, max(0, inner_width // 3))
    label_width = max(0, inner_width - devices_width - 1)

    track = state.now_playing[:label_width].ljust(label_width)
    controls = term.truncate(_controls_line(term, state), label_width)
    write_at(term, 1, y + 1, track, clear=False)
    write_at(term, 1, y + 2, controls, clear=False)

    devices_x = 1 + label_width + 1
    devices_focused = state.focus == "devices"
    draw_box(
        term, devices_x - 1, y, devices_width + 2, height, "Devices",
        _border_style(term, state, devices_focused),
    )
    render_table(
        term, devices_table, devices_x, y + 1, devices_width, height - 2,
        devices_focused and state.use_colors,
    )


def _controls_line(term: Terminal, state: UIState) -> str:
    parts = []
    for index, control in enumerate(CONTROLS):
        label = CONTROL_LABELS[control]
        if state.focus == "controls" and index == state.control_index:
            label = term.black_on_yellow(label) if state.use_colors else term.reverse(label)
        parts.append(label)
    return " ".join(parts)


def render_status(term: Terminal, state: UIState, layout: dict[str, int]) -> None:
    """Last user-facing message, plus key hints when there is none."""
    message = state.status_message or "↑/↓ move  Enter play  Tab focus  Esc quit"
    paint = getattr(term, state.status_color, term.white) if state.use_colors else str
    write_at(term, 0, layout["status_y"], paint(message[: layout["width"]]))
