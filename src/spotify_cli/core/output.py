"""
Unified output system using Loguru.
Every user-facing message goes to the log file and to either stdout or the
blessed status line, depending on which mode is active.
"""

import threading
from pathlib import Path
from typing import Optional

from loguru import logger

# Global blessed mode tracking (set when blessed UI starts)
_blessed_mode_active = False
_blessed_mode_lock = threading.Lock()

# Messages logged while the blessed UI owns the terminal, drained by the UI loop
_pending_messages: list[tuple[str, str]] = []

LEVEL_COLORS = {
    "debug": "cyan",
    "info": "white",
    "warning": "yellow",
    "error": "red",
}


def setup_loguru(log_file: Path, level: str = "INFO") -> None:
    """
    Configure loguru for file-only logging (blessed UI handles console display).

    Args:
        log_file: Path to log file
        level: Minimum level for file logging (DEBUG, INFO, WARNING, ERROR)
    """
    logger.remove()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        rotation="10 MB",
        retention=5,
        level=level.upper(),
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{line} | {message}",
        enqueue=False,
    )

    logger.info(f"Loguru initialized: {log_file} (level={level})")


def set_blessed_mode() -> None:
    """Enable blessed mode - suppresses stdout printing, queues messages for the UI."""
    global _blessed_mode_active
    with _blessed_mode_lock:
        _blessed_mode_active = True
    logger.debug("Blessed mode enabled - log() will queue messages for the UI")


def clear_blessed_mode() -> None:
    """Disable blessed mode - restores stdout printing."""
    global _blessed_mode_active
    with _blessed_mode_lock:
        _blessed_mode_active = False
        _pending_messages.clear()
    logger.debug("Blessed mode disabled - log() will print to stdout")


def drain_pending_messages() -> list[tuple[str, str]]:
    """
    Get and clear all messages queued while in blessed mode.

    Returns:
        List of (message, color) tuples, oldest first
    """
    with _blessed_mode_lock:
        messages = _pending_messages[:]
        _pending_messages.clear()
    return messages


def log(message: str, level: str = "info", color: Optional[str] = None) -> None:
    """
    Unified logging: writes to file AND shows the message to the user.

    Args:
        message: User-facing message
        level: Log level (debug, info, warning, error)
        color: Status line color override (blessed mode only)
    """
    getattr(logger.opt(depth=1), level)(message)

    with _blessed_mode_lock:
        if _blessed_mode_active:
            _pending_messages.append(
                (message, color or LEVEL_COLORS.get(level, "white"))
            )
            return

    print(message)
