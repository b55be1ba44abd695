"""Library entities, JSON configuration and a playback queue for a music player."""

__version__ = "1.0.0"

__all__ = [
    "album",
    "artist",
    "config",
    "dates",
    "entity",
    "history",
    "playback_queue",
    "playlist",
    "song",
    "user",
]