"""Blessed UI components."""

from .devices import bind_devices, device_rows
from .layout import calculate_layout
from .panels import render_albums, render_now_playing, render_status
from .table import Table, render_table

__all__ = [
    "Table",
    "bind_devices",
    "calculate_layout",
    "device_rows",
    "render_albums",
    "render_now_playing",
    "render_status",
    "render_table",
]
