"""Shared Rich Console for output outside the full-screen UI.

Startup errors and the auth subcommand print through here; once the blessed
UI owns the terminal, output goes through core.output.log instead.
"""

import os

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Lazily built console; honours NO_COLOR like the blessed UI's use_colors."""
    global _console
    if _console is None:
        _console = Console(no_color="NO_COLOR" in os.environ, highlight=False)
    return _console


def safe_print(message: str, style: str | None = None) -> None:
    """Print a message, optionally with a Rich style (e.g. "bold red")."""
    get_console().print(message, style=style)


def print_error(message: str) -> None:
    safe_print(f"❌ {message}", style="red")


def print_success(message: str) -> None:
    safe_print(f"✓ {message}", style="green")
