import random
from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from penumbra.generator import (
    EventCategory,
    calculate_room_size,
    calculate_room_size_from_intensity,
    determine_room_type,
    determine_room_type_from_events,
    generate_dungeon,
    generate_dungeon_from_calendar,
    generate_room,
    generate_room_from_events,
    place_connections,
)
from penumbra.room import Room
from penumbra.tiles import Tile
from penumbra.world import RoomType


@dataclass
class FileCategories:
    test_files: int = 0
    config_files: int = 0
    doc_files: int = 0
    other_files: int = 0


@dataclass
class Commit:
    hash: str
    message: str
    insertions: int
    deletions: int = 0
    is_merge: bool = False
    date: datetime = field(default_factory=lambda: datetime(2026, 2, 15, 10, tzinfo=timezone.utc))
    file_categories: FileCategories = field(default_factory=FileCategories)


@dataclass
class Event:
    summary: str
    category: EventCategory
    duration_minutes: int
    attendee_count: int
    start: datetime = field(default_factory=lambda: datetime(2026, 2, 15, 10, tzinfo=timezone.utc))

    def intensity(self):
        return self.duration_minutes // 30 + self.attendee_count


def commit(lines, merge=False, message="Change"):
    return Commit(f"hash_{lines}", message, lines, is_merge=merge)


def test_room_size_thresholds():
    assert calculate_room_size(0) == (3, 3)
    assert calculate_room_size(19) == (3, 3)
    assert calculate_room_size(20) == (5, 5)
    assert calculate_room_size(49) == (5, 5)
    assert calculate_room_size(50) == (7, 7)
    assert calculate_room_size(199) == (7, 7)
    assert calculate_room_size(200) == (9, 9)
    assert calculate_room_size(499) == (9, 9)
    assert calculate_room_size(500) == (9, 9)
    assert calculate_room_size(1000) == (9, 9)


def test_room_type_boss_for_merge():
    assert determine_room_type([commit(100, True, "Merge branch")]) is RoomType.BOSS


def test_room_type_sanctuary_for_tests():
    commits = [commit(50, message="Add test for auth"), commit(50, message="Test coverage increase")]
    assert determine_room_type(commits) is RoomType.SANCTUARY


def test_room_type_treasure_for_config():
    commits = [commit(30, message="Update config file"), commit(30, message="Add settings")]
    assert determine_room_type(commits) is RoomType.TREASURE


def test_room_type_normal_for_regular():
    assert determine_room_type([commit(100, message="Fix bug in auth")]) is RoomType.NORMAL


def test_boss_overrides_other_types():
    commits = [commit(50, message="Add test"), commit(50, True, "Merge feature")]
    assert determine_room_type(commits) is RoomType.BOSS


def test_file_categories_take_precedence_over_messages():
    c = commit(50, message="Add test")
    c.file_categories = FileCategories(config_files=3, other_files=1)
    assert determine_room_type([c]) is RoomType.TREASURE
    c.file_categories = FileCategories(test_files=1, other_files=1)
    assert determine_room_type([c]) is RoomType.NORMAL


def test_generate_dungeon_deterministic():
    commits = [commit(50), commit(100)]
    a = generate_dungeon(commits, 12345)
    b = generate_dungeon(commits, 12345)
    assert [r.tiles for r in a.rooms] == [r.tiles for r in b.rooms]


def test_generate_dungeon_orders_days_and_connects():
    late = commit(10, message="later")
    late.date = datetime(2026, 2, 16, 9, tzinfo=timezone.utc)
    early = commit(10, message="earlier")
    world = generate_dungeon([late, early], 1)
    assert [r.source_date for r in world.rooms] == [date(2026, 2, 15), date(2026, 2, 16)]
    assert world.rooms[0].get_tile(2, 1) == Tile.EXIT
    assert world.rooms[0].get_tile(0, 1) == Tile.WALL
    assert world.rooms[1].get_tile(0, 1) == Tile.ENTRANCE
    assert world.rooms[1].get_tile(2, 1) == Tile.WALL


def test_generate_room_walls_and_sanctuary_floor():
    room = generate_room(date(2026, 1, 1), [commit(30, message="Add test")], 3, random.Random(0))
    assert room.id == 3
    assert room.room_type is RoomType.SANCTUARY
    assert room.get_tile(0, 0) == Tile.WALL
    assert room.get_tile(4, 2) == Tile.WALL
    assert room.get_tile(2, 2) == Tile.HEALING_ZONE


def test_place_connections_middle_room():
    rooms = [Room(i, 5, 5, RoomType.NORMAL, date(2026, 1, 1)) for i in range(3)]
    place_connections(rooms)
    assert rooms[1].get_tile(0, 2) == Tile.ENTRANCE
    assert rooms[1].get_tile(4, 2) == Tile.EXIT
    assert rooms[0].get_tile(0, 2) == Tile.FLOOR


def test_room_size_from_intensity():
    assert calculate_room_size_from_intensity(2) == (3, 3)
    assert calculate_room_size_from_intensity(7) == (5, 5)
    assert calculate_room_size_from_intensity(15) == (7, 7)
    assert calculate_room_size_from_intensity(30) == (9, 9)


def test_all_hands_creates_boss_room():
    events = [Event("All-Hands Meeting", EventCategory.ALL_HANDS, 60, 50)]
    assert determine_room_type_from_events(events) is RoomType.BOSS


def test_large_meeting_creates_boss_room():
    events = [Event("Sprint Planning", EventCategory.MEETING, 90, 15)]
    assert determine_room_type_from_events(events) is RoomType.BOSS


def test_focus_time_creates_sanctuary():
    events = [
        Event("Focus Time", EventCategory.FOCUS_TIME, 120, 1),
        Event("Deep Work", EventCategory.FOCUS_TIME, 60, 1),
    ]
    assert determine_room_type_from_events(events) is RoomType.SANCTUARY


def test_one_on_ones_create_treasure():
    events = [
        Event("1:1 with Bob", EventCategory.ONE_ON_ONE, 30, 2),
        Event("1:1 with Alice", EventCategory.ONE_ON_ONE, 30, 2),
        Event("Team Standup", EventCategory.MEETING, 15, 5),
    ]
    assert determine_room_type_from_events(events) is RoomType.TREASURE


def test_mixed_day_creates_normal():
    events = [
        Event("Sprint Planning", EventCategory.MEETING, 60, 8),
        Event("Code Review", EventCategory.MEETING, 30, 3),
        Event("Standup", EventCategory.MEETING, 15, 5),
    ]
    assert determine_room_type_from_events(events) is RoomType.NORMAL


def test_no_events_is_normal():
    assert determine_room_type_from_events([]) is RoomType.NORMAL


def test_generate_dungeon_from_calendar():
    events = [
        Event("Meeting", EventCategory.MEETING, 60, 5),
        Event(
            "1:1",
            EventCategory.ONE_ON_ONE,
            60,
            2,
            start=datetime(2026, 2, 16, 9, tzinfo=timezone.utc),
        ),
    ]
    world = generate_dungeon_from_calendar(events, 42)
    assert len(world.rooms) == 2
    assert world.rooms[1].room_type is RoomType.TREASURE


def test_generate_room_from_events_size():
    events = [Event("Meeting", EventCategory.MEETING, 60, 5)]
    room = generate_room_from_events(date(2026, 2, 15), events, 0, random.Random(1))
    assert (room.width, room.height) == (5, 5)
    assert room.source_commits == []
    assert room.get_tile(0, 0) == Tile.WALL