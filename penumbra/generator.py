"""Dungeon generation from commit history or calendar events."""

from __future__ import annotations

import random
from collections import defaultdict
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Iterable

from penumbra.room import Room
from penumbra.tiles import Tile
from penumbra.world import RoomType, World


class EventCategory(Enum):
    """Kind of calendar event."""

    MEETING = "Meeting"
    ONE_ON_ONE = "OneOnOne"
    ALL_HANDS = "AllHands"
    FOCUS_TIME = "FocusTime"
    BREAK = "Break"


def _utc_date(moment: datetime) -> date:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.date()


def _group_by_day(records: Iterable[Any], when) -> list[tuple[date, list[Any]]]:
    groups: dict[date, list[Any]] = defaultdict(list)
    for record in records:
        groups[_utc_date(when(record))].append(record)
    return sorted(groups.items())


def generate_dungeon(commits: list[Any], seed: int) -> World:
    """Build a world with one room per day of commits, oldest day first."""
    rng = random.Random(seed)
    rooms = [
        generate_room(day, day_commits, index, rng)
        for index, (day, day_commits) in enumerate(
            _group_by_day(commits, lambda c: c.date)
        )
    ]
    place_connections(rooms)
    return World(rooms)


def generate_room(date: date, commits: list[Any], index: int, rng: random.Random) -> Room:
    """Build the room for one day of commits."""
    total_lines = sum(c.insertions + c.deletions for c in commits)
    width, height = calculate_room_size(total_lines)
    room = Room(index, width, height, determine_room_type(commits), date)
    room.source_commits = list(commits)
    _generate_layout(room)
    return room


def calculate_room_size(total_lines: int) -> tuple[int, int]:
    """Room dimensions, from 3x3 up to 9x9, by lines changed."""
    if total_lines < 20:
        return (3, 3)
    if total_lines < 50:
        return (5, 5)
    if total_lines < 200:
        return (7, 7)
    return (9, 9)


def _mentions(message: str, *words: str) -> bool:
    lowered = message.lower()
    return any(word in lowered for word in words)


def determine_room_type(commits: list[Any]) -> RoomType:
    """Room type from merges, then file categories, then commit messages."""
    if any(c.is_merge for c in commits):
        return RoomType.BOSS

    tests = sum(c.file_categories.test_files for c in commits)
    configs = sum(c.file_categories.config_files for c in commits)
    docs = sum(c.file_categories.doc_files for c in commits)
    others = sum(c.file_categories.other_files for c in commits)
    total_files = tests + configs + docs + others

    if total_files > 0:
        if tests * 2 > total_files:
            return RoomType.SANCTUARY
        if configs * 2 > total_files:
            return RoomType.TREASURE
        return RoomType.NORMAL

    total = len(commits)
    if total > 0:
        test_commits = sum(_mentions(c.message, "test", "spec") for c in commits)
        config_commits = sum(_mentions(c.message, "config", "setting") for c in commits)
        if test_commits * 2 > total:
            return RoomType.SANCTUARY
        if config_commits * 2 > total:
            return RoomType.TREASURE
    return RoomType.NORMAL


def _generate_layout(room: Room) -> None:
    w, h = room.width, room.height
    for x in range(w):
        room.set_tile(x, 0, Tile.WALL)
        room.set_tile(x, h - 1, Tile.WALL)
    for y in range(h):
        room.set_tile(0, y, Tile.WALL)
        room.set_tile(w - 1, y, Tile.WALL)
    if room.room_type is RoomType.SANCTUARY:
        for y in range(1, h - 1):
            for x in range(1, w - 1):
                room.set_tile(x, y, Tile.HEALING_ZONE)


def place_connections(rooms: list[Room]) -> None:
    """Put an entrance on the west wall and an exit on the east wall of each room.

    The first room has no entrance and the last no exit.
    """
    last = len(rooms) - 1
    for i, room in enumerate(rooms):
        mid_y = room.height // 2
        if i > 0:
            room.set_tile(0, mid_y, Tile.ENTRANCE)
        if i < last:
            room.set_tile(room.width - 1, mid_y, Tile.EXIT)


def generate_dungeon_from_calendar(events: list[Any], seed: int) -> World:
    """Build a world with one room per day of calendar events."""
    rng = random.Random(seed)
    rooms = [
        generate_room_from_events(day, day_events, index, rng)
        for index, (day, day_events) in enumerate(
            _group_by_day(events, lambda e: e.start)
        )
    ]
    place_connections(rooms)
    return World(rooms)


def generate_room_from_events(
    date: date, events: list[Any], index: int, rng: random.Random
) -> Room:
    """Build the room for one day of calendar events."""
    intensity = sum(e.intensity() for e in events)
    width, height = calculate_room_size_from_intensity(intensity)
    room = Room(index, width, height, determine_room_type_from_events(events), date)
    _generate_layout(room)
    return room


def calculate_room_size_from_intensity(intensity: int) -> tuple[int, int]:
    """Room dimensions by how busy the day was."""
    if intensity <= 4:
        return (3, 3)
    if intensity <= 10:
        return (5, 5)
    if intensity <= 20:
        return (7, 7)
    return (9, 9)


def determine_room_type_from_events(events: list[Any]) -> RoomType:
    """Room type from a day's event categories and meeting sizes."""
    if any(
        e.category is EventCategory.ALL_HANDS or e.attendee_count >= 10 for e in events
    ):
        return RoomType.BOSS
    total = len(events)
    if total == 0:
        return RoomType.NORMAL
    restful = sum(
        e.category in (EventCategory.FOCUS_TIME, EventCategory.BREAK) for e in events
    )
    one_on_one = sum(e.category is EventCategory.ONE_ON_ONE for e in events)
    if restful * 2 > total:
        return RoomType.SANCTUARY
    if one_on_one * 2 > total:
        return RoomType.TREASURE
    return RoomType.NORMAL