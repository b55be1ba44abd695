"""The queue of songs waiting to be played, with shuffle and loop modes."""

from __future__ import annotations

import random
from typing import Any, Protocol

from .song import Song
from .user import User

MAX_SIZE_DEFAULT = 1000


class QueueFullError(OverflowError):
    """Raised when adding would grow the queue past its maximum size."""


class Playable(Protocol):
    def playable_objects(self) -> list[Any]: ...


class PlaybackQueue:
    """An ordered queue of songs with a cursor on the one playing.

    In aleatory (shuffle) mode, positions are read through a permutation
    of the underlying queue, so the cursor walks the shuffled order.
    """

    def __init__(
        self,
        current_user: User | None = None,
        playable: Playable | PlaybackQueue | None = None,
        history_repo: Any = None,
        max_size: int = MAX_SIZE_DEFAULT,
    ) -> None:
        self.current_user = current_user
        self.history_repo = history_repo
        self.max_size = max_size
        self._queue: list[Song] = []
        self._order: list[int] = []
        self._current = 0
        self._aleatory = False
        self._loop = False
        if playable is not None:
            self.add(playable)

    # Modes ---------------------------------------------------------------

    @property
    def aleatory(self) -> bool:
        return self._aleatory

    @property
    def loop(self) -> bool:
        return self._loop

    def set_aleatory(self, aleatory: bool) -> None:
        self._aleatory = aleatory
        if aleatory:
            self.shuffle()

    def toggle_aleatory(self) -> bool:
        self.set_aleatory(not self._aleatory)
        return self._aleatory

    def set_loop(self, loop: bool) -> None:
        self._loop = loop

    def toggle_loop(self) -> bool:
        self.set_loop(not self._loop)
        return self._loop

    def shuffle(self) -> None:
        """Reshuffle the play order; does nothing on an empty queue."""
        if not self._queue:
            return
        random.shuffle(self._order)

    # Positions -----------------------------------------------------------

    def _actual(self, position: int) -> int:
        return self._order[position] if self._aleatory else position

    def current_index(self) -> int:
        """Index in the underlying queue of the song under the cursor."""
        return self._actual(self._current)

    def find_current_index(self) -> int | None:
        if not self._queue:
            return None
        return self.current_index()

    def find_previous_index(self) -> int | None:
        if not self._queue:
            return None
        return max(self.current_index() - 1, 0)

    def find_next_index(self, song: Song) -> int | None:
        """Position of the next occurrence of ``song`` after the cursor."""
        for position in range(self._current + 1, len(self._queue)):
            if self._queue[self._actual(position)] == song:
                return position
        return None

    # Adding and removing -------------------------------------------------

    def _append(self, song: Any) -> None:
        if not isinstance(song, Song):
            raise TypeError(f"only songs can be queued, not {type(song).__name__}")
        if len(self._queue) >= self.max_size:
            raise QueueFullError("PlaybackQueue reached its maximum size")
        self._queue.append(song)

    def add(self, tracks: Playable | PlaybackQueue) -> None:
        """Append the songs of a playable, or of another queue in its play order."""
        if isinstance(tracks, PlaybackQueue):
            new_songs = [tracks.at(position) for position in range(len(tracks))]
        else:
            new_songs = list(tracks.playable_objects())

        if self._aleatory:
            random.shuffle(self._order)

        try:
            for song in new_songs:
                self._append(song)
                self._order.append(len(self._queue) - 1)
        finally:
            pass

    def __iadd__(self, tracks: Playable | PlaybackQueue) -> PlaybackQueue:
        self.add(tracks)
        return self

    def remove(self, index: int) -> bool:
        """Remove the song at play position ``index``; False if out of range."""
        if not 0 <= index < len(self._queue):
            return False
        actual = self._actual(index)
        del self._queue[actual]
        self._order = [i - 1 if i > actual else i for i in self._order if i != actual]

        if (self._current > actual and self._current > 0) or (
            self._current == actual
            and self._current == len(self._queue)
            and self._current > 0
        ):
            self._current -= 1
        return True

    def clear(self) -> None:
        self._queue.clear()
        self._order.clear()
        self._current = 0

    # Reading -------------------------------------------------------------

    def at(self, index: int) -> Song | None:
        """Song at play position ``index``, or None if out of range."""
        if not 0 <= index < len(self._queue):
            return None
        return self._queue[self._actual(index)]

    def current_song(self) -> Song | None:
        if not self._queue or self._current >= len(self._queue):
            return None
        return self._queue[self.current_index()]

    def peek_next(self) -> Song | None:
        """The song after the cursor, without moving it."""
        if not self._queue or self._current >= len(self._queue):
            return None
        if self._current + 1 >= len(self._queue):
            return None
        return self.at(self._current + 1)

    def peek_previous(self) -> Song | None:
        """The song before the cursor, wrapping when looping, without moving it."""
        if not self._queue or (self._current == 0 and not self._loop):
            return None
        if self._current == 0:
            return self.at(len(self._queue) - 1)
        return self.at(self._current - 1)

    def next(self) -> Song | None:
        """Advance the cursor and return the new current song."""
        if not self._queue or self._current >= len(self._queue):
            return None
        if self._current + 1 == len(self._queue) and self._loop:
            self._current = 0
        elif self._current + 1 >= len(self._queue):
            return None
        else:
            self._current += 1
        return self._queue[self.current_index()]

    def previous(self) -> Song | None:
        """Move the cursor back and return the new current song."""
        if not self._queue or (self._current == 0 and not self._loop):
            return None
        if self._current == 0:
            self._current = len(self._queue) - 1
        else:
            self._current -= 1
        return self._queue[self.current_index()]

    def queue_view(self, before: int, after: int) -> list[Song]:
        """Songs from ``before`` positions behind the cursor to ``after`` ahead."""
        if not self._queue:
            return []
        start = max(self._current - before, 0)
        end = min(self._current + after, len(self._queue) - 1)
        return [self.at(position) for position in range(start, end + 1)]

    def queue_segment(self, start: int, count: int) -> list[Song]:
        """Up to ``count`` songs in play order starting at ``start``."""
        if not self._queue or start >= len(self._queue):
            return []
        end = min(start + count, len(self._queue))
        return [self.at(position) for position in range(start, end)]

    def __len__(self) -> int:
        return len(self._queue)

    def __str__(self) -> str:
        mode = "aleatory" if self._aleatory else "sequential"
        looping = "looping" if self._loop else "not looping"
        return f"PlaybackQueue ({len(self._queue)} songs) in {mode} mode, {looping}.\n"

    def detailed(self) -> str:
        """A multi-line description listing every queued song."""
        entries = ",".join(
            f" ({index}, {song.title}) " for index, song in enumerate(self._queue)
        )
        return (
            "PlaybackQueue:\n"
            f"Total Songs: {len(self._queue)}\n"
            f"Current Index: {self._current}\n"
            f"Mode: {'Aleatory' if self._aleatory else 'Sequential'}\n"
            f"Looping: {'Enabled' if self._loop else 'Disabled'}\n"
            "Songs:\n"
            f"[{entries}]\n"
        )