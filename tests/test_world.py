import pytest

from penumbra.world import RoomType, World


@pytest.mark.parametrize(
    "room_type, title",
    [
        (RoomType.NORMAL, "Room"),
        (RoomType.SANCTUARY, "Sanctuary"),
        (RoomType.TREASURE, "Treasury"),
        (RoomType.BOSS, "Boss Chamber"),
    ],
)
def test_room_type_titles(room_type, title):
    assert room_type.title() == title


def test_world_current_room():
    world = World(["room0", "room1"])
    assert world.current_room == 0
    assert world.current() == "room0"


def test_world_current_none_when_empty():
    assert World([]).current() is None


def test_world_next_room_advances():
    world = World(["room0", "room1"])
    assert world.next_room() is True
    assert world.current_room == 1
    assert world.current() == "room1"


def test_world_next_room_returns_false_at_end():
    world = World(["room0"])
    assert world.next_room() is False
    assert world.current_room == 0


def test_world_is_last_room():
    world = World(["room0", "room1"])
    assert world.is_last_room() is False
    world.next_room()
    assert world.is_last_room() is True


def test_empty_world_is_last_room():
    assert World([]).is_last_room() is True