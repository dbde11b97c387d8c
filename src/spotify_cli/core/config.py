"""
Configuration management for spotify-cli
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

APP_NAME = "spotify-cli"

# Spotify rejects page sizes above 50 for /me/albums
MAX_PAGE_SIZE = 50


@dataclass
class SpotifyConfig:
    """Configuration for Spotify Web API access."""

    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = "http://localhost:8080/callback"
    page_size: int = 25
    preferred_device_id: str = ""

    def validate(self) -> None:
        """Validate Spotify configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not 1 <= self.page_size <= MAX_PAGE_SIZE:
            raise ValueError(
                f"Invalid page_size: {self.page_size}. "
                f"Must be between 1 and {MAX_PAGE_SIZE}"
            )


@dataclass
class UIConfig:
    """Configuration for the terminal interface."""

    visible_albums: int = 45
    column_width: int = 20
    use_colors: bool = True

    def validate(self) -> None:
        """Validate UI configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if self.visible_albums < 1:
            raise ValueError(
                f"Invalid visible_albums: {self.visible_albums}. Must be at least 1"
            )
        if self.column_width < 4:
            raise ValueError(
                f"Invalid column_width: {self.column_width}. Must be at least 4"
            )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/spotify-cli/spotify-cli.log)
    )


@dataclass
class Config:
    """Main configuration object."""

    spotify: SpotifyConfig = field(default_factory=SpotifyConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        self.spotify.validate()
        self.ui.validate()


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Current working directory
    2. XDG_CONFIG_HOME/spotify-cli (or ~/.config/spotify-cli)
    """
    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path (tokens, logs)."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / APP_NAME
    return Path.home() / ".local" / "share" / APP_NAME


def get_log_file_path(config: Config) -> Path:
    """Resolve the log file, honouring a custom path from config."""
    if config.logging.log_file:
        return Path(config.logging.log_file).expanduser()
    return get_data_dir() / f"{APP_NAME}.log"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# spotify-cli Configuration

[spotify]
# Spotify API credentials (create an app at https://developer.spotify.com/dashboard)
# Can also be set with SPOTIFY_CLIENT_ID / SPOTIFY_CLIENT_SECRET
# client_id = "your-client-id-here"
# client_secret = "your-client-secret-here"

# OAuth redirect URI (must match your app settings)
redirect_uri = "http://localhost:8080/callback"

# Albums requested per API call (1-50)
page_size = 25

# Device to use when none is active
# preferred_device_id = ""

[ui]
# Number of album rows shown at once
visible_albums = 45

# Width of the title and artist columns
column_width = 20

# Use colors in terminal output
use_colors = true

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/spotify-cli/spotify-cli.log)
# log_file = "/path/to/custom/spotify-cli.log"
""".strip()


def load_config() -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - SPOTIFY_CLIENT_ID
    - SPOTIFY_CLIENT_SECRET
    """
    # Load .env file from config directory if it exists
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = get_config_path()
    config = Config()

    if not config_path.exists():
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(create_default_config())
        print(f"Created default configuration at: {config_path}")
    else:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
        config = parse_config(toml_data)

    config.spotify.client_id = os.environ.get(
        "SPOTIFY_CLIENT_ID", config.spotify.client_id
    )
    config.spotify.client_secret = os.environ.get(
        "SPOTIFY_CLIENT_SECRET", config.spotify.client_secret
    )

    config.validate()
    return config


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML, falling back to defaults per key."""
    config = Config()

    if "spotify" in toml_data:
        spotify_data = toml_data["spotify"]
        config.spotify = SpotifyConfig(
            client_id=spotify_data.get("client_id", config.spotify.client_id),
            client_secret=spotify_data.get(
                "client_secret", config.spotify.client_secret
            ),
            redirect_uri=spotify_data.get("redirect_uri", config.spotify.redirect_uri),
            page_size=spotify_data.get("page_size", config.spotify.page_size),
            preferred_device_id=spotify_data.get(
                "preferred_device_id", config.spotify.preferred_device_id
            ),
        )

    if "ui" in toml_data:
        ui_data = toml_data["ui"]
        config.ui = UIConfig(
            visible_albums=ui_data.get("visible_albums", config.ui.visible_albums),
            column_width=ui_data.get("column_width", config.ui.column_width),
            use_colors=ui_data.get("use_colors", config.ui.use_colors),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level),
            log_file=logging_data.get("log_file"),
        )

    return config
