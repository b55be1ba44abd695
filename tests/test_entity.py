from frankenstein_player.dates import Datetime
from frankenstein_player.entity import Entity


def test_default_id_is_zero():
    assert Entity().id == 0


def test_id_is_kept_and_settable():
    entity = Entity(7)
    assert entity.id == 7
    entity.id = 9
    assert entity.id == 9


def test_equality_by_id():
    assert Entity(3) == Entity(3)
    assert Entity(3) != Entity(4)


def test_ordering_by_id():
    assert Entity(1) < Entity(2)
    assert not Entity(2) < Entity(1)
    assert sorted([Entity(5), Entity(2), Entity(9)])[0].id == 2


def test_hash_consistent_with_equality():
    assert len({Entity(1), Entity(1), Entity(2)}) == 2


def test_created_at_is_today():
    assert Entity().created_at == Datetime()


def test_created_at_can_be_replaced():
    entity = Entity()
    stamp = Datetime("10 5 2020")
    entity.created_at = stamp
    assert entity.created_at == stamp