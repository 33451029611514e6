"""Room types and the world that strings rooms together."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class RoomType(Enum):
    """Kind of room, decided by the data it was generated from."""

    NORMAL = "Normal"
    SANCTUARY = "Sanctuary"
    TREASURE = "Treasure"
    BOSS = "Boss"

    def title(self) -> str:
        """Display name of this room type."""
        return _TITLES[self]


_TITLES = {
    RoomType.NORMAL: "Room",
    RoomType.SANCTUARY: "Sanctuary",
    RoomType.TREASURE: "Treasury",
    RoomType.BOSS: "Boss Chamber",
}


@dataclass
class World:
    """The dungeon: an ordered run of rooms and the one the player is in."""

    rooms: list[Any] = field(default_factory=list)
    current_room: int = 0

    def current(self) -> Optional[Any]:
        """The room the player is in, or None if there is none."""
        if 0 <= self.current_room < len(self.rooms):
            return self.rooms[self.current_room]
        return None

    def next_room(self) -> bool:
        """Move to the next room; False if already in the last one."""
        if self.current_room + 1 < len(self.rooms):
            self.current_room += 1
            return True
        return False

    def is_last_room(self) -> bool:
        """Whether the player is in the last room."""
        return self.current_room + 1 >= len(self.rooms)