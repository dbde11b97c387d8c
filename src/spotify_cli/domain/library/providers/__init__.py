"""Album collection providers: Spotify and the offline debug client."""

from . import fake, spotify

__all__ = ["fake", "spotify"]
