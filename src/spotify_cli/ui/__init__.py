"""User interface for spotify-cli."""
