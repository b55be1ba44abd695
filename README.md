# frankenstein_player

The core of a music player, in pure Python with no third-party dependencies:

- library entities: `User`, `Song`, `Album`, `Artist`, `Playlist` and
  `HistoryPlayback`, all built on a common `Entity` base with an `id` and a
  creation date;
- `ConfigManager`, a reader for the player's JSON configuration file;
- `PlaybackQueue`, an ordered queue of songs with a cursor and sequential,
  shuffled ("aleatory") and looping modes.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Configuration

`frankenstein_player.config.ConfigManager` reads a JSON file such as:

```json
{
    "enviroment": "development",
    "database": {
        "filename": "frankenstein.db",
        "schema_path": "config/schema.sql"
    },
    "paths": {
        "user_home": "music/user",
        "public_user": "music/public",
        "input_public": "input/public",
        "input_user": "input/user"
    }
}
```

```python
from frankenstein_player.config import ConfigManager, ConfigError

config = ConfigManager("config/frankenstein.config.json")
config.load_config()
print(config.database_path())          # "frankenstein.db" if no filename is set
print(config.database_schema_path())
print(config.user_music_directory())
print(config.environment())            # Environment.DEVELOPMENT
```

- `load_config()` raises `ConfigError` when the file does not exist, cannot
  be read, or is not valid JSON.
- `database_path()` and `database_schema_path()` raise `ConfigError` when the
  `database` section is missing; the schema path must also be present and
  non-empty.
- `user_music_directory()`, `public_music_directory()`, `input_public_path()`
  and `input_user_path()` first call `validate_config_paths()`, which raises
  `ConfigError` unless all four `paths` entries are present and non-empty.
- `get_config_value(key)` returns a top-level string value, or `""` if the
  key is absent.
- `environment()` reads the `enviroment` key: `"production"` (also the
  default) and `"testing"` map to `Environment.PRODUCTION` and
  `Environment.TESTING`; any other value means `Environment.DEVELOPMENT`.
- `str(config)` shows the file path and the loaded data as indented JSON.

## Library entities

```python
from frankenstein_player.song import Song
from frankenstein_player.playlist import Playlist

song = Song("Short Song", file_path="music/short.mp3", id=1)
song.duration = 95
print(song.formatted_duration())       # "01:35"

playlist = Playlist(1, "Favourites")
playlist.add_song(song)
print(playlist.formatted_duration())   # "HH:MM"
```

`Playlist`, `Album` and `Artist` hold ordered songs and share the same
operations: `add_song`, `switch_song(id, index)` to move a song,
`remove_song(id)`, `find_song_by_id`, `find_song_by_title`, `song_at(index)`,
`next_song(current)` / `previous_song(current)`, `total_duration()` in seconds
and `formatted_duration()`. Lookups that find nothing return `None`; moves and
removals report success as `True` or `False`.

Collections and relations can be filled lazily: `set_songs_loader` (and, on
`Artist`, `set_albums_loader`; on `Song` and `Album`, `set_artist_loader` and
`set_featuring_artists_loader`; on `Song`, `set_album_loader`) take a
function that is called on first access.

`Artist` also manages its albums: `add_album`, `remove_album`,
`find_album_by_name`, `album_songs`, `add_song_to_album`,
`remove_song_from_album`, `next_song_in_album`, `previous_song_in_album` and
`song_at_in_album`.

`frankenstein_player.dates.Datetime` is a day-precision date. Built with no
argument it is "now"; built from text of 8 to 10 characters it reads
whitespace-separated day, month and year, with the month counted from 0
(`Datetime("15 5 2024")` prints as `2024/06/15`). Two values are equal when
they fall on the same day; `is_before` and `is_after` compare across days.

## Playback queue

```python
from frankenstein_player.playback_queue import PlaybackQueue, QueueFullError

queue = PlaybackQueue(max_size=100)
queue.add(playlist)          # anything with playable_objects(), or another queue
queue.set_loop(True)
queue.toggle_aleatory()      # shuffle the play order
current = queue.current_song()
following = queue.next()     # wraps to the start when looping
print(queue)
print(queue.detailed())
```

- Adding beyond `max_size` (1000 by default) raises `QueueFullError`; only
  `Song` objects can be queued.
- Positions (`at`, `remove`, `queue_segment`, `queue_view`) are in play
  order, which is the shuffled order when aleatory mode is on.
- `peek_next()` and `peek_previous()` look around the cursor without moving
  it; `next()` and `previous()` move it and return the new current song, or
  `None` at the ends when not looping.

## What this package does not do

It keeps entities and a queue in memory only. It does not decode or play
audio, read tags from audio files, store anything in a database, discover
operating-system users, or provide a command-line program.