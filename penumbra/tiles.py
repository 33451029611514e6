"""Tiles and directions of the dungeon grid."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar, Optional


class Direction(Enum):
    """A cardinal direction."""

    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"

    def opposite(self) -> Direction:
        """The direction pointing the other way."""
        return _OPPOSITES[self]

    def delta(self) -> tuple[int, int]:
        """The (dx, dy) step for this direction."""
        return _DELTAS[self]


_OPPOSITES = {
    Direction.NORTH: Direction.SOUTH,
    Direction.SOUTH: Direction.NORTH,
    Direction.EAST: Direction.WEST,
    Direction.WEST: Direction.EAST,
}

_DELTAS = {
    Direction.NORTH: (0, -1),
    Direction.SOUTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.WEST: (-1, 0),
}


class DoorState(Enum):
    """Whether a door is open or closed."""

    CLOSED = "Closed"
    OPEN = "Open"


class TileKind(Enum):
    """The kind of a tile."""

    FLOOR = "Floor"
    WALL = "Wall"
    DOOR = "Door"
    EXIT = "Exit"
    ENTRANCE = "Entrance"
    HEALING_ZONE = "HealingZone"


_SYMBOLS = {
    TileKind.FLOOR: ".",
    TileKind.WALL: "#",
    TileKind.EXIT: ">",
    TileKind.ENTRANCE: "<",
    TileKind.HEALING_ZONE: "*",
}


@dataclass(frozen=True)
class Tile:
    """A single tile; doors also carry a facing and a state."""

    kind: TileKind
    direction: Optional[Direction] = None
    state: Optional[DoorState] = None

    FLOOR: ClassVar[Tile]
    WALL: ClassVar[Tile]
    EXIT: ClassVar[Tile]
    ENTRANCE: ClassVar[Tile]
    HEALING_ZONE: ClassVar[Tile]

    def __post_init__(self) -> None:
        if self.kind is TileKind.DOOR:
            if self.direction is None or self.state is None:
                raise ValueError("a door needs a direction and a state")
        elif self.direction is not None or self.state is not None:
            raise ValueError(f"{self.kind.value} tile takes no direction or state")

    @classmethod
    def door(cls, direction: Direction, state: DoorState = DoorState.CLOSED) -> Tile:
        """A door facing the given direction."""
        return cls(TileKind.DOOR, direction, state)

    def is_walkable(self) -> bool:
        """Whether entities can stand on this tile."""
        if self.kind is TileKind.WALL:
            return False
        if self.kind is TileKind.DOOR:
            return self.state is DoorState.OPEN
        return True

    def is_blocking(self) -> bool:
        """Whether this tile blocks line of sight."""
        if self.kind is TileKind.WALL:
            return True
        return self.kind is TileKind.DOOR and self.state is DoorState.CLOSED

    def symbol(self) -> str:
        """The ASCII character drawn for this tile."""
        if self.kind is TileKind.DOOR:
            return "/" if self.state is DoorState.OPEN else "+"
        return _SYMBOLS[self.kind]

    def is_door(self) -> bool:
        """Whether this tile is a door."""
        return self.kind is TileKind.DOOR

    def toggle_door(self) -> Tile:
        """Return the door with its state flipped; other tiles come back as is."""
        if not self.is_door():
            return self
        flipped = DoorState.CLOSED if self.state is DoorState.OPEN else DoorState.OPEN
        return replace(self, state=flipped)


Tile.FLOOR = Tile(TileKind.FLOOR)
Tile.WALL = Tile(TileKind.WALL)
Tile.EXIT = Tile(TileKind.EXIT)
Tile.ENTRANCE = Tile(TileKind.ENTRANCE)
Tile.HEALING_ZONE = Tile(TileKind.HEALING_ZONE)