"""Albums: an artist's ordered collection of songs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from .entity import Entity
from .song import Song
from .user import User

if TYPE_CHECKING:
    from .artist import Artist

SongsLoader = Callable[[], list]
ArtistLoader = Callable[[], Any]
ArtistsLoader = Callable[[], list]


class Album(Entity):
    """A music album keeping its tracks in their original order.

    The main artist, the collaborating artists and the songs may be
    supplied lazily through loader callables, consulted on first access.
    """

    def __init__(
        self,
        name: str = "",
        artist: Artist | None = None,
        genre: str = "",
        year: int = 0,
        id: int = 0,
        user: User | None = None,
    ) -> None:
        super().__init__(id)
        self.name = name
        self.genre = genre
        self.year = year
        self.file_path = ""
        self.user = user if user is not None else User()
        self.artist_id = getattr(artist, "id", 0) if artist is not None else 0
        self._artist = artist
        self._artist_loader: ArtistLoader | None = None
        self._featuring: list[Any] = []
        self._featuring_loader: ArtistsLoader | None = None
        self._featuring_loaded = False
        self._songs: list[Song] = []
        self._songs_loader: SongsLoader | None = None
        self._songs_loaded = False

    # Relations -----------------------------------------------------------

    def artist(self) -> Artist | None:
        """The main artist, loaded on first access if a loader is set."""
        if self._artist is None and self._artist_loader is not None:
            self._artist = self._artist_loader()
            if self._artist is not None:
                self.artist_id = getattr(self._artist, "id", self.artist_id)
        return self._artist

    def set_artist(self, artist: Artist) -> None:
        self._artist = artist
        self.artist_id = getattr(artist, "id", self.artist_id)

    def set_artist_loader(self, loader: ArtistLoader) -> None:
        self._artist_loader = loader

    def featuring_artists(self) -> list[Any]:
        """Collaborating artists, loaded on first access if a loader is set."""
        if not self._featuring_loaded and self._featuring_loader is not None:
            self._featuring = list(self._featuring_loader()) + self._featuring
            self._featuring_loaded = True
        return list(self._featuring)

    def set_featuring_artists_loader(self, loader: ArtistsLoader) -> None:
        self._featuring_loader = loader
        self._featuring_loaded = False

    # Songs ---------------------------------------------------------------

    def _ensure_loaded(self) -> None:
        if not self._songs_loaded and self._songs_loader is not None:
            self._songs = list(self._songs_loader()) + self._songs
            self._songs_loaded = True

    def songs(self) -> list[Song]:
        """The tracks in album order."""
        self._ensure_loaded()
        return list(self._songs)

    def set_songs_loader(self, loader: SongsLoader) -> None:
        self._songs_loader = loader
        self._songs_loaded = False

    def song_count(self) -> int:
        self._ensure_loaded()
        return len(self._songs)

    def __len__(self) -> int:
        return self.song_count()

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
        self._songs.insert(index, self._songs.pop(pos))
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
        """Sum of track durations in seconds."""
        self._ensure_loaded()
        return sum(song.duration for song in self._songs)

    def formatted_duration(self) -> str:
        """Total duration as ``HH:MM:SS``."""
        hours, rest = divmod(self.total_duration(), 3600)
        minutes, seconds = divmod(rest, 60)
        return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

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
        """An album plays as its tracks, in order."""
        return self.songs()

    def audio_file_path(self) -> str:
        return self.file_path

    def __str__(self) -> str:
        artist = self.artist()
        artist_name = getattr(artist, "name", "Unknown Artist")
        return (
            f"{self.name} - {artist_name} ({self.year}) "
            f"[{self.song_count()} songs]"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Album):
            return NotImplemented
        return (self.id, self.name) == (other.id, other.name)

    def __hash__(self) -> int:
        return hash((self.id, self.name))

    def __repr__(self) -> str:
        return f"Album(id={self.id}, name={self.name!r})"