"""spotify-cli - browse and play your saved Spotify albums from the terminal."""

__version__ = "0.1.0"
