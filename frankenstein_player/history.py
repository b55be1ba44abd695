"""Playback history records."""

from __future__ import annotations

import time

from .entity import Entity
from .song import Song
from .user import User


class HistoryPlayback(Entity):
    """A record that a user played a song at a given time."""

    def __init__(
        self,
        user: User | None = None,
        song: Song | None = None,
        played_at: int | None = None,
        id: int = 0,
    ) -> None:
        super().__init__(id)
        self.user = user if user is not None else User()
        self.song = song if song is not None else Song()
        self.played_at = int(time.time()) if played_at is None else played_at

    def __str__(self) -> str:
        when = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(self.played_at))
        return (
            f"HistoryPlayback(id={self.id}, user={self.user.username}, "
            f"song={self.song.title}, played_at={when})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HistoryPlayback):
            return NotImplemented
        return (self.id, self.user, self.song, self.played_at) == (
            other.id,
            other.user,
            other.song,
            other.played_at,
        )

    def __hash__(self) -> int:
        return hash((self.id, self.user, self.song, self.played_at))