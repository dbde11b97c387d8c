"""Layout calculation functions."""

from blessed import Terminal

STATUS_HEIGHT = 1
MIN_NOW_PLAYING_HEIGHT = 5


def calculate_layout(
    term: Terminal, visible_albums: int, device_count: int
) -> dict[str, int]:
    """
    Pure function: calculate y-positions for all regions.

    Albums box on top (header + visible_albums rows + border), the
    currently-playing panel below it and a one-line status bar at the bottom.
    The albums box shrinks first when the terminal is short.

    Args:
        term: blessed Terminal instance
        visible_albums: Data rows per album window
        device_count: Number of rows in the devices table (without header)

    Returns:
        Dictionary with region positions and sizes
    """
    try:
        term_height = term.height
        term_width = term.width
    except Exception:
        term_height, term_width = 24, 80  # Safe fallback

    now_playing_height = max(MIN_NOW_PLAYING_HEIGHT, device_count + 3)
    now_playing_height = min(now_playing_height, max(0, term_height - STATUS_HEIGHT - 3))

    albums_height = min(
        visible_albums + 3, term_height - STATUS_HEIGHT - now_playing_height
    )

    return {
        "width": term_width,
        "albums_y": 0,
        "albums_height": max(0, albums_height),
        "now_playing_y": max(0, albums_height),
        "now_playing_height": now_playing_height,
        "status_y": term_height - STATUS_HEIGHT,
    }
