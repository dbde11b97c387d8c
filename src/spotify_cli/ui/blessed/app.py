"""Main event loop and entry point for blessed UI."""

import sys

import requests
from blessed import Terminal
from loguru import logger

from spotify_cli.context import AppContext, describe
from spotify_cli.core.output import (
    clear_blessed_mode,
    drain_pending_messages,
    log,
    set_blessed_mode,
)
from spotify_cli.domain.navigation import AlbumList

from .components import (
    Table,
    bind_devices,
    calculate_layout,
    render_albums,
    render_now_playing,
    render_status,
)
from .events.keyboard import ACTIVATE, MOVE_DOWN, MOVE_UP, handle_key
from .state import UIState, mark_clean, mark_dirty, set_now_playing, set_status

# Refresh the currently-playing label every 50 frames (~5 seconds)
PLAYER_POLL_INTERVAL = 50


def run_interactive_ui(ctx: AppContext) -> AppContext:
    """
    Run the main interactive UI event loop.

    Args:
        ctx: Application context with config, client and fetched albums

    Returns:
        AppContext after UI session ends
    """
    term = Terminal()

    with term.fullscreen(), term.cbreak(), term.hidden_cursor():
        try:
            ctx = main_loop(term, ctx)
        except KeyboardInterrupt:
            pass  # Cleanup already done in main_loop

    return ctx


def run_control(ctx: AppContext, control: str) -> bool:
    """
    Run a playback control against the client.

    Args:
        ctx: Application context
        control: One of "previous", "play", "stop", "next"

    Returns:
        True if the client accepted the command
    """
    client = ctx.client
    actions = {
        "previous": client.previous_track,
        "play": client.resume,
        "stop": client.pause,
        "next": client.next_track,
    }
    action = actions.get(control)
    if action is None:
        logger.warning(f"Unknown control: {control}")
        return False

    try:
        return action()
    except requests.RequestException as e:
        log(f"❌ {control} failed: {e}", level="error")
        return False


def refresh_now_playing(ctx: AppContext, ui_state: UIState) -> UIState:
    """Ask the client what is playing and update the label if it changed."""
    try:
        track = ctx.client.currently_playing()
    except requests.RequestException as e:
        logger.warning(f"Could not read currently playing track: {e}")
        return ui_state

    if (track or "None") == ui_state.now_playing:
        return ui_state
    return set_now_playing(ui_state, track)


def apply_pending_messages(ui_state: UIState) -> UIState:
    """Show the newest message queued by log() on the status line."""
    messages = drain_pending_messages()
    if not messages:
        return ui_state
    message, color = messages[-1]
    return set_status(ui_state, message, color)


def render(
    term: Terminal,
    ctx: AppContext,
    ui_state: UIState,
    album_list: AlbumList,
    devices_table: Table,
    device_count: int,
) -> None:
    """Full redraw of every region."""
    layout = calculate_layout(term, ctx.config.ui.visible_albums, device_count)

    sys.stdout.write(term.home + term.clear)
    render_albums(term, album_list.table, ui_state, layout, album_list.status())
    render_now_playing(term, devices_table, ui_state, layout)
    render_status(term, ui_state, layout)
    sys.stdout.flush()


def main_loop(term: Terminal, ctx: AppContext) -> AppContext:
    """
    Main event loop - functional style.

    Args:
        term: blessed Terminal instance
        ctx: Application context

    Returns:
        AppContext after loop exits
    """
    # Enable blessed mode globally in log() function
    set_blessed_mode()

    try:
        album_list, devices_table, device_count = setup_tables(ctx)

        ui_state = UIState(use_colors=ctx.config.ui.use_colors)
        mode = describe(ctx)
        if mode:
            ui_state = set_status(ui_state, mode, "cyan")
        ui_state = refresh_now_playing(ctx, ui_state)

        frame_count = 0
        while not ui_state.should_quit:
            if frame_count and frame_count % PLAYER_POLL_INTERVAL == 0:
                ui_state = refresh_now_playing(ctx, ui_state)

            ui_state = apply_pending_messages(ui_state)

            if ui_state.dirty:
                render(term, ctx, ui_state, album_list, devices_table, device_count)
                ui_state = mark_clean(ui_state)

            # Wait for input (with timeout for background updates)
            key = term.inkey(timeout=0.1)

            if key:
                ui_state, action = handle_key(ui_state, key)
                if action:
                    ui_state = dispatch(
                        ctx, ui_state, action, album_list.table, devices_table
                    )
                    ui_state = mark_dirty(ui_state)

            frame_count += 1
    except KeyboardInterrupt:
        logger.info("Ctrl+C detected - cleaning up")
        raise
    finally:
        # Restore normal logging mode (CLI)
        clear_blessed_mode()

    return ctx


def setup_tables(ctx: AppContext) -> tuple[AlbumList, Table, int]:
    """
    Build the album list and the devices table from the context.

    Returns:
        (album_list, devices_table, device_count)
    """
    ui = ctx.config.ui

    album_list = AlbumList(
        ctx.albums,
        Table(),
        ctx.client,
        visible_albums=ui.visible_albums,
        column_width=ui.column_width,
    )
    album_list.start()

    devices_table = Table()
    try:
        devices = bind_devices(devices_table, ctx.client)
    except requests.RequestException as e:
        logger.exception("Failed to list devices")
        devices = []
        log(f"⚠ Could not list devices: {e}", level="warning")

    return album_list, devices_table, len(devices)


def dispatch(
    ctx: AppContext,
    ui_state: UIState,
    action: str,
    albums_table: Table,
    devices_table: Table,
) -> UIState:
    """
    Route an action from the keyboard to the focused table or the client.

    Returns:
        Updated UI state
    """
    table = devices_table if ui_state.focus == "devices" else albums_table

    if action == MOVE_UP:
        table.move_up()
        return ui_state
    if action == MOVE_DOWN:
        table.move_down()
        return ui_state
    if action == ACTIVATE:
        try:
            table.activate()
        except requests.RequestException as e:
            log(f"❌ Playback request failed: {e}", level="error")
        return refresh_now_playing(ctx, ui_state)

    run_control(ctx, action)
    return refresh_now_playing(ctx, ui_state)
