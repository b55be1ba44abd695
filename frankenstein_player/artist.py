"""Artists: a musician's catalogue of songs and albums."""

from __future__ import annotations

from typing import Callable

from .album import Album
from .entity import Entity
from .song import Song
from .user import User

SongsLoader = Callable[[], list]
AlbumsLoader = Callable[[], list]


class Artist(Entity):
    """A musical artist with their songs and albums.

    Songs and albums may be supplied lazily through loader callables,
    consulted on first access.
    """

    def __init__(
        self,
        name: str = "",
        genre: str = "",
        id: int = 0,
        user: User | None = None,
    ) -> None:
        super().__init__(id)
        self.name = name
        self.genre = genre
        self.user = user if user is not None else User()
        self._songs: list[Song] = []
        self._albums: list[Album] = []
        self._songs_loader: SongsLoader | None = None
        self._albums_loader: AlbumsLoader | None = None
        self._songs_loaded = False
        self._albums_loaded = False

    # Loading -------------------------------------------------------------

    def _ensure_songs(self) -> None:
        if not self._songs_loaded and self._songs_loader is not None:
            self._songs = list(self._songs_loader()) + self._songs
            self._songs_loaded = True

    def _ensure_albums(self) -> None:
        if not self._albums_loaded and self._albums_loader is not None:
            self._albums = list(self._albums_loader()) + self._albums
            self._albums_loaded = True

    def songs(self) -> list[Song]:
        self._ensure_songs()
        return list(self._songs)

    def albums(self) -> list[Album]:
        self._ensure_albums()
        return list(self._albums)

    def set_songs_loader(self, loader: SongsLoader) -> None:
        self._songs_loader = loader
        self._songs_loaded = False

    def set_albums_loader(self, loader: AlbumsLoader) -> None:
        self._albums_loader = loader
        self._albums_loaded = False

    # Songs ---------------------------------------------------------------

    def add_song(self, song: Song) -> None:
        self._ensure_songs()
        self._songs.append(song)

    def add_album(self, album: Album) -> None:
        self._ensure_albums()
        self._albums.append(album)

    def _position(self, song_id: int) -> int | None:
        self._ensure_songs()
        return next(
            (pos for pos, song in enumerate(self._songs) if song.id == song_id), None
        )

    def switch_song(self, id: int, index: int) -> bool:
        """Move the song with ``id`` to position ``index``."""
        pos = self._position(id)
        if pos is None or not 0 <= index < len(self._songs):
            return False
        self._songs.insert(index, self._songs.pop(pos))
        return True

    def remove_song(self, id: int) -> bool:
        pos = self._position(id)
        if pos is None:
            return False
        del self._songs[pos]
        return True

    def remove_album(self, album_id: int) -> bool:
        self._ensure_albums()
        for pos, album in enumerate(self._albums):
            if album.id == album_id:
                del self._albums[pos]
                return True
        return False

    def find_song_by_id(self, song_id: int) -> Song | None:
        pos = self._position(song_id)
        return None if pos is None else self._songs[pos]

    def find_song_by_title(self, title: str) -> Song | None:
        self._ensure_songs()
        return next((song for song in self._songs if song.title == title), None)

    def find_album_by_name(self, album_name: str) -> Album | None:
        self._ensure_albums()
        return next((a for a in self._albums if a.name == album_name), None)

    def total_duration(self) -> int:
        """Sum of the artist's song durations in seconds."""
        self._ensure_songs()
        return sum(song.duration for song in self._songs)

    def formatted_duration(self) -> str:
        """Total duration as ``HH:MM:SS``, or ``MM:SS`` under an hour."""
        hours, rest = divmod(self.total_duration(), 3600)
        minutes, seconds = divmod(rest, 60)
        if hours:
            return f"{hours:02d}:{minutes:02d}:{seconds:02d}"
        return f"{minutes:02d}:{seconds:02d}"

    def has_songs(self) -> bool:
        self._ensure_songs()
        return bool(self._songs)

    def has_albums(self) -> bool:
        self._ensure_albums()
        return bool(self._albums)

    def _index_of(self, song: Song) -> int | None:
        self._ensure_songs()
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
        self._ensure_songs()
        if not 0 <= index < len(self._songs):
            return None
        return self._songs[index]

    # Albums --------------------------------------------------------------

    def _album(self, album_id: int) -> Album | None:
        self._ensure_albums()
        return next((a for a in self._albums if a.id == album_id), None)

    def album_songs(self, album_id: int) -> list[Song]:
        """Songs of the artist's album ``album_id``; empty if there is none."""
        album = self._album(album_id)
        return album.songs() if album is not None else []

    def add_song_to_album(self, song: Song, album_id: int) -> None:
        album = self._album(album_id)
        if album is None:
            raise KeyError(f"album {album_id} not found")
        album.add_song(song)

    def remove_song_from_album(self, song_id: int, album_id: int) -> bool:
        album = self._album(album_id)
        return album is not None and album.remove_song(song_id)

    def next_song_in_album(self, current: Song, album_id: int) -> Song | None:
        album = self._album(album_id)
        return album.next_song(current) if album is not None else None

    def previous_song_in_album(self, current: Song, album_id: int) -> Song | None:
        album = self._album(album_id)
        return album.previous_song(current) if album is not None else None

    def song_at_in_album(self, index: int, album_id: int) -> Song | None:
        album = self._album(album_id)
        return album.song_at(index) if album is not None else None

    def playable_objects(self) -> list[Song]:
        """An artist plays as all of their songs."""
        return self.songs()

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.genre}) - {len(self.songs())} songs, "
            f"{len(self.albums())} albums, {self.formatted_duration()}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Artist):
            return NotImplemented
        return (self.id, self.name) == (other.id, other.name)

    def __hash__(self) -> int:
        return hash((self.id, self.name))

    def __repr__(self) -> str:
        return f"Artist(id={self.id}, name={self.name!r})"