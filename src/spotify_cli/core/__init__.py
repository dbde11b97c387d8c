"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging and user-facing output (Loguru)
- Console management (Rich)
- Shared exceptions
"""

from .config import (
    Config,
    LoggingConfig,
    SpotifyConfig,
    UIConfig,
    create_default_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_log_file_path,
    load_config,
)
from .console import get_console, print_error, print_success, safe_print
from .errors import AuthenticationError, FetchError, RenderError, SpotifyCliError

__all__ = [
    # Config
    "Config",
    "LoggingConfig",
    "SpotifyConfig",
    "UIConfig",
    "create_default_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_log_file_path",
    "load_config",
    # Console
    "get_console",
    "print_error",
    "print_success",
    "safe_print",
    # Errors
    "AuthenticationError",
    "FetchError",
    "RenderError",
    "SpotifyCliError",
]
