"""Terminal output utilities that prevent rendering artifacts."""

import sys
from typing import Callable, Optional

from blessed import Terminal


def write_at(
    term: Terminal, x: int, y: int, content: str, *, clear: bool = True
) -> None:
    """Write content at position, clearing the rest of the line by default.

    Args:
        term: Blessed terminal instance
        x: Column position (0-indexed)
        y: Row position (0-indexed)
        content: Text to write (can include terminal formatting)
        clear: Whether to clear to end of line (default True). Set to False
               when other content shares the line to the right.
    """
    if clear:
        sys.stdout.write(term.move_xy(x, y) + term.clear_eol + content)
    else:
        sys.stdout.write(term.move_xy(x, y) + content)


def draw_box(
    term: Terminal,
    x: int,
    y: int,
    width: int,
    height: int,
    title: str = "",
    style: Optional[Callable[[str], str]] = None,
) -> None:
    """Draw a single-line border, with an optional title in the top edge.

    Args:
        style: Formatter applied to the border (e.g. term.yellow when focused)
    """
    if width < 2 or height < 2:
        return
    paint = style or (lambda text: text)

    top = "─" * (width - 2)
    if title:
        label = f" {title} "[: width - 2]
        top = label + top[len(label) :]
    write_at(term, x, y, paint("┌" + top + "┐"), clear=False)
    for row in range(1, height - 1):
        write_at(term, x, y + row, paint("│"), clear=False)
        write_at(term, x + width - 1, y + row, paint("│"), clear=False)
    write_at(term, x, y + height - 1, paint("└" + "─" * (width - 2) + "┘"), clear=False)
