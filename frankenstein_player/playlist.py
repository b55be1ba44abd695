"""Playlists: user-chosen, ordered collections of songs."""

from __future__ import annotations

from typing import Callable

from .entity import Entity
from .song import Song
from .user import User

SongsLoader = Callable[[], list]


class Playlist(Entity):
    """An ordered list of songs owned by a user."""

    def __init__(self, id: int = 0, title: str = "") -> None:
        super().__init__(id)
        self.title = title
        self.user = User()
        self._songs: list[Song] = []
        self._loader: SongsLoader | None = None
        self._loaded = False

    def _ensure_loaded(self) -> None:
        if not self._loaded and self._loader is not None:
            self._songs = list(self._loader()) + self._songs
            self._loaded = True

    def songs(self) -> list[Song]:
        """The songs in playlist order."""
        self._ensure_loaded()
        return list(self._songs)

    def set_songs_loader(self, loader: SongsLoader) -> None:
        self._loader = loader
        self._loaded = False

    def add_song(self, song: Song) -> None:
        self._ensure_loaded()
        self._songs.append(song)

    def _position(self, song_id: int) -> int | None:
        self._ensure_loaded()
        return next(
            (pos for pos, song in enumerate(self._songs) if song.id == song_id), None
        )

    def switch_song(self, id: int, index: int) -> bool:
        """Move the song with ``id`` to position ``index``."""
        pos = self._position(id)
        if pos is None or not 0 <= index < len(self._songs):
            return False
        song = self._songs.pop(pos)
        self._songs.insert(index, song)
        return True

    def remove_song(self, id: int) -> bool:
        pos = self._position(id)
        if pos is None:
            return False
        del self._songs[pos]
        return True

    def find_song_by_id(self, song_id: int) -> Song | None:
        pos = self._position(song_id)
        return None if pos is None else self._songs[pos]

    def find_song_by_title(self, title: str) -> Song | None:
        self._ensure_loaded()
        return next((song for song in self._songs if song.title == title), None)

    def total_duration(self) -> int:
        """Sum of song durations in seconds."""
        self._ensure_loaded()
        return sum(song.duration for song in self._songs)

    def formatted_duration(self) -> str:
        """Total duration as ``HH:MM``."""
        hours, rest = divmod(self.total_duration(), 3600)
        return f"{hours:02d}:{rest // 60:02d}"

    def _index_of(self, song: Song) -> int | None:
        self._ensure_loaded()
        return next((pos for pos, s in enumerate(self._songs) if s == song), None)

    def next_song(self, current: Song) -> Song | None:
        pos = self._index_of(current)
        if pos is None or pos + 1 >= len(self._songs):
            return None
        return self._songs[pos + 1]

    def previous_song(self, current: Song) -> Song | None:
        pos = self._index_of(current)
        if pos is None or pos == 0:
            return None
        return self._songs[pos - 1]

    def song_at(self, index: int) -> Song | None:
        self._ensure_loaded()
        if not 0 <= index < len(self._songs):
            return None
        return self._songs[index]

    def playable_objects(self) -> list[Song]:
        return self.songs()

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._songs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Playlist):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Playlist(id={self.id}, title={self.title!r})"