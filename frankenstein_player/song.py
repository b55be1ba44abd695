"""Songs: a single audio track with its metadata."""

from __future__ import annotations

from typing import Any, Callable

from .entity import Entity
from .user import User

ArtistLoader = Callable[[], Any]
ArtistsLoader = Callable[[], list]
AlbumLoader = Callable[[], Any]


class Song(Entity):
    """A track with title, artist, album, duration and other metadata.

    Related artists and albums can be given directly or supplied lazily
    through loader callables, which are consulted the first time the
    relation is read.
    """

    def __init__(
        self,
        title: str = "",
        file_path: str = "",
        artist: Any = None,
        album: Any = None,
        id: int = 0,
        artist_id: int = 0,
        user: User | None = None,
    ) -> None:
        super().__init__(id)
        self.title = title
        self.file_path = file_path
        self.user = user if user is not None else User()
        self.duration = 0
        self.genre = ""
        self.year = 0
        self.track_number = 0
        self.artist_id = artist_id
        self.album_id = 0
        self.featuring_artist_ids: list[int] = []
        self._artist: Any = None
        self._album: Any = None
        self._featuring: list[Any] = []
        self._artist_loader: ArtistLoader | None = None
        self._featuring_loader: ArtistsLoader | None = None
        self._album_loader: AlbumLoader | None = None
        if artist is not None:
            self.artist = artist
        if artist_id:
            self.artist_id = artist_id
        if album is not None:
            self.album = album

    @property
    def artist(self) -> Any:
        """The main artist, loaded on first access if a loader is set."""
        if self._artist is None and self._artist_loader is not None:
            self._artist = self._artist_loader()
        return self._artist

    @artist.setter
    def artist(self, artist: Any) -> None:
        self._artist = artist
        if artist is not None:
            self.artist_id = getattr(artist, "id", self.artist_id)

    @property
    def album(self) -> Any:
        """The album, loaded on first access if a loader is set."""
        if self._album is None and self._album_loader is not None:
            self._album = self._album_loader()
        return self._album

    @album.setter
    def album(self, album: Any) -> None:
        self._album = album
        if album is not None:
            self.album_id = getattr(album, "id", self.album_id)

    def set_artist_loader(self, loader: ArtistLoader) -> None:
        self._artist_loader = loader

    def set_featuring_artists_loader(self, loader: ArtistsLoader) -> None:
        self._featuring_loader = loader

    def set_album_loader(self, loader: AlbumLoader) -> None:
        self._album_loader = loader

    def add_featuring_artist(self, artist: Any) -> None:
        """Add a collaborating artist to the track."""
        self._featuring.append(artist)
        artist_id = getattr(artist, "id", None)
        if artist_id is not None:
            self.featuring_artist_ids.append(artist_id)

    def featuring_artists(self) -> list[Any]:
        """Collaborating artists, loaded on first access if a loader is set."""
        if not self._featuring and self._featuring_loader is not None:
            for artist in self._featuring_loader():
                self.add_featuring_artist(artist)
        return list(self._featuring)

    def formatted_duration(self) -> str:
        """Duration as ``MM:SS``."""
        minutes, seconds = divmod(max(self.duration, 0), 60)
        return f"{minutes:02d}:{seconds:02d}"

    def audio_file_path(self) -> str:
        """Path of the audio file to play."""
        return self.file_path

    def playable_objects(self) -> list[Song]:
        """A song plays as itself."""
        return [self]

    def __str__(self) -> str:
        artist_name = getattr(self.artist, "name", "Unknown Artist")
        album_name = getattr(self.album, "name", "Unknown Album")
        return (
            f"Title: {self.title}\n"
            f"Artist: {artist_name}\n"
            f"Album: {album_name}\n"
            f"Genre: {self.genre}\n"
            f"Year: {self.year}\n"
            f"Track: {self.track_number}\n"
            f"Duration: {self.formatted_duration()}"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Song):
            return NotImplemented
        return (self.id, self.title, self.file_path) == (
            other.id,
            other.title,
            other.file_path,
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title, self.file_path))

    def __repr__(self) -> str:
        return f"Song(id={self.id}, title={self.title!r})"