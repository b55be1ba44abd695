import time

from frankenstein_player.history import HistoryPlayback
from frankenstein_player.song import Song
from frankenstein_player.user import User


def _user():
    return User("listener", "/home/listener", "/home/listener/in", 1001)


def _song():
    return Song("Track", "/music/track.mp3", id=4)


def test_fields_are_kept():
    user, song = _user(), _song()
    record = HistoryPlayback(user, song, 1_700_000_000, id=9)
    assert record.user is user
    assert record.song is song
    assert record.played_at == 1_700_000_000
    assert record.id == 9


def test_default_played_at_is_now():
    before = int(time.time())
    record = HistoryPlayback(_user(), _song())
    after = int(time.time())
    assert before <= record.played_at <= after


def test_str_mentions_user_and_song():
    text = str(HistoryPlayback(_user(), _song(), 1_700_000_000, id=2))
    assert "listener" in text
    assert "Track" in text
    assert "id=2" in text


def test_equality_and_hash():
    a = HistoryPlayback(_user(), _song(), 100, id=1)
    b = HistoryPlayback(_user(), _song(), 100, id=1)
    c = HistoryPlayback(_user(), _song(), 200, id=1)
    assert a == b
    assert hash(a) == hash(b)
    assert not (a == c)


def test_defaults_without_arguments():
    record = HistoryPlayback()
    assert record.user.username == ""
    assert record.song.title == ""
    assert record.id == 0