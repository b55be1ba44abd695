from types import SimpleNamespace

import pytest

from frankenstein_player.song import Song
from frankenstein_player.user import User

MEDIA_PATH = "tests/fixtures/media/"

SONG_MOCKS = {
    "Short_Song_Test_The_Testers": dict(
        path=MEDIA_PATH + "Short_Song_Test_The_Testers.mp3",
        duration=1, title="Short Song", artist="The Testers",
        album="Test", year=2025, genre="Testing", track=1,
    ),
    "Medium_Song_Test_The_Testers": dict(
        path=MEDIA_PATH + "Medium_Song_Test_The_Testers.mp3",
        duration=4, title="Medium Song", artist="The Testers",
        album="Test", year=2025, genre="Testing", track=2,
    ),
    "Short_Song_Examples_Example_Band": dict(
        path=MEDIA_PATH + "Short_Song_Example_Band.mp3",
        duration=2, title="Short Song", artist="Example Band",
        album="Examples", year=2025, genre="Example Genre", track=1,
    ),
    "Medium_Song_Examples_Example_Band": dict(
        path=MEDIA_PATH + "Medium_Song_Example_Band.mp3",
        duration=5, title="Medium Song", artist="Example Band",
        album="Examples", year=2025, genre="Example Genre", track=2,
    ),
}

EXPECTED_DURATIONS = {
    "Short_Song_Test_The_Testers": "00:01",
    "Medium_Song_Test_The_Testers": "00:04",
    "Short_Song_Examples_Example_Band": "00:02",
    "Medium_Song_Examples_Example_Band": "00:05",
}


def _song_from_mock(key, artist_id=1, album_id=1):
    mock = SONG_MOCKS[key]
    artist = SimpleNamespace(id=artist_id, name=mock["artist"])
    album = SimpleNamespace(id=album_id, name=mock["album"])
    song = Song(mock["title"], mock["path"], artist, album)
    song.duration = mock["duration"]
    song.year = mock["year"]
    song.genre = mock["genre"]
    song.track_number = mock["track"]
    return song


@pytest.mark.parametrize("key", sorted(SONG_MOCKS))
def test_mock_metadata(key):
    mock = SONG_MOCKS[key]
    song = _song_from_mock(key)
    assert song.title == mock["title"]
    assert song.artist.name == mock["artist"]
    assert song.album.name == mock["album"]
    assert song.genre == mock["genre"]
    assert song.year == mock["year"]
    assert song.track_number == mock["track"]
    assert song.audio_file_path() == mock["path"]
    assert song.formatted_duration() == EXPECTED_DURATIONS[key]


def test_defaults():
    song = Song()
    assert song.title == ""
    assert song.duration == 0
    assert song.formatted_duration() == "00:00"
    assert song.artist is None
    assert song.album is None
    assert song.featuring_artists() == []


def test_artist_and_album_ids_follow_objects():
    song = Song("x", artist=SimpleNamespace(id=7, name="A"), album=SimpleNamespace(id=9, name="B"))
    assert song.artist_id == 7
    assert song.album_id == 9


def test_explicit_artist_id():
    song = Song("x", id=3, artist_id=12)
    assert song.artist_id == 12
    assert song.id == 3


def test_artist_loader_is_lazy_and_called_once():
    calls = []
    artist = SimpleNamespace(id=4, name="Loaded")

    def loader():
        calls.append(1)
        return artist

    song = Song("x")
    song.set_artist_loader(loader)
    assert calls == []
    assert song.artist is artist
    assert song.artist is artist
    assert len(calls) == 1


def test_album_loader():
    album = SimpleNamespace(id=2, name="Loaded Album")
    song = Song("x")
    song.set_album_loader(lambda: album)
    assert song.album is album


def test_featuring_artists_added_and_ids_tracked():
    song = Song("x")
    a = SimpleNamespace(id=5, name="A")
    b = SimpleNamespace(id=6, name="B")
    song.add_featuring_artist(a)
    song.add_featuring_artist(b)
    assert song.featuring_artists() == [a, b]
    assert song.featuring_artist_ids == [5, 6]


def test_featuring_loader():
    a = SimpleNamespace(id=5, name="A")
    song = Song("x")
    song.set_featuring_artists_loader(lambda: [a])
    assert song.featuring_artists() == [a]
    assert song.featuring_artist_ids == [5]


def test_playable_objects_is_self():
    song = Song("x")
    assert song.playable_objects() == [song]
    assert song.playable_objects()[0] is song


def test_str_contains_metadata():
    song = _song_from_mock("Short_Song_Test_The_Testers")
    text = str(song)
    assert "Short Song" in text
    assert "The Testers" in text
    assert "Test" in text
    assert "00:01" in text


def test_equality_and_hash():
    a = Song("t", "p", id=1)
    b = Song("t", "p", id=1)
    c = Song("u", "p", id=1)
    assert a == b
    assert hash(a) == hash(b)
    assert not (a == c)


def test_user_default_and_given():
    user = User("alice", uid=1001)
    assert Song("x", user=user).user is user
    assert Song("x").user.username == ""