"""Pure helper functions for scrolling table bodies."""


def calculate_scroll_offset(
    selected: int,
    current_scroll: int,
    visible_items: int,
    total_items: int,
) -> int:
    """First visible body row, moved just enough to show `selected`.

    Only matters when the terminal is shorter than the album window; the
    offset is clamped so the last body line is never left empty.

    Examples:
        >>> calculate_scroll_offset(15, 0, visible_items=10, total_items=20)
        6
        >>> calculate_scroll_offset(2, 10, visible_items=10, total_items=20)
        2
        >>> calculate_scroll_offset(19, 15, visible_items=10, total_items=20)
        10
    """
    if visible_items <= 0 or total_items <= visible_items:
        return 0

    offset = current_scroll
    if selected < offset:
        offset = selected
    elif selected >= offset + visible_items:
        offset = selected - visible_items + 1

    return max(0, min(offset, total_items - visible_items))


def clamp_selection(selection: int, total_items: int) -> int:
    """Row index limited to the table, 0 for an empty table.

    Examples:
        >>> clamp_selection(15, 10)
        9
        >>> clamp_selection(-1, 10)
        0
    """
    if total_items <= 0:
        return 0
    return min(max(selection, 0), total_items - 1)
