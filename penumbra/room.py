"""Rooms of the dungeon and what spawns in them."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Any, Callable, Optional

from penumbra.items import Buff, Heal, Item, ItemType, Rarity, RestoreEnergy, RevealMap, Stat
from penumbra.tiles import Tile
from penumbra.world import RoomType

MAX_ENEMIES = 10


class EnemyKind(Enum):
    """Kind of enemy a commit turns into."""

    BUG = "Bug"
    REGRESSION = "Regression"
    TECH_DEBT = "TechDebt"
    MERGE_CONFLICT = "MergeConflict"


EnemyFactory = Callable[[EnemyKind, int, int, str], Any]


def _lines_changed(commit: Any) -> int:
    return commit.insertions + commit.deletions


def enemy_kind_for_commit(commit: Any) -> EnemyKind:
    """Pick the enemy kind for a commit from its merge flag, message and size."""
    if commit.is_merge:
        return EnemyKind.MERGE_CONFLICT
    msg = commit.message.lower()
    if "revert" in msg or "rollback" in msg:
        return EnemyKind.REGRESSION
    if "debt" in msg or "refactor" in msg or "cleanup" in msg:
        return EnemyKind.TECH_DEBT
    if _lines_changed(commit) < 20:
        return EnemyKind.BUG
    return EnemyKind.TECH_DEBT


def _rarity_from_lines(lines: int) -> Rarity:
    if lines > 500:
        return Rarity.LEGENDARY
    if lines > 200:
        return Rarity.RARE
    if lines > 50:
        return Rarity.UNCOMMON
    return Rarity.COMMON


_HEAL = {Rarity.COMMON: 10, Rarity.UNCOMMON: 20, Rarity.RARE: 35, Rarity.LEGENDARY: 50}
_FOCUS = {Rarity.COMMON: 2, Rarity.UNCOMMON: 4, Rarity.RARE: 6, Rarity.LEGENDARY: 10}
_ENERGY = {Rarity.COMMON: 5, Rarity.UNCOMMON: 10, Rarity.RARE: 20, Rarity.LEGENDARY: 30}


def item_for_commit(commit: Any) -> Item:
    """Make the item a commit leaves behind in a room."""
    msg = commit.message.lower()
    rarity = _rarity_from_lines(_lines_changed(commit))

    if "doc" in msg or "readme" in msg:
        item = Item("Map Scroll", ItemType.SCROLL, RevealMap(), rarity)
    elif "test" in msg:
        item = Item("Health Potion", ItemType.CONSUMABLE, Heal(_HEAL[rarity]), rarity)
    elif "config" in msg or "settings" in msg:
        item = Item(
            "Focus Crystal",
            ItemType.CONSUMABLE,
            Buff(Stat.FOCUS, _FOCUS[rarity], 5),
            rarity,
        )
    else:
        item = Item("Energy Vial", ItemType.CONSUMABLE, RestoreEnergy(_ENERGY[rarity]), rarity)
    return item.from_commit(commit.hash)


@dataclass
class Room:
    """A single room: a grid of tiles with enemies and items in it."""

    id: int
    width: int
    height: int
    room_type: RoomType
    source_date: date
    tiles: list[list[Tile]] = field(default_factory=list)
    enemies: list[Any] = field(default_factory=list)
    items: list[Item] = field(default_factory=list)
    source_commits: list[Any] = field(default_factory=list)
    cleared: bool = False

    def __post_init__(self) -> None:
        if not self.tiles:
            self.tiles = [[Tile.FLOOR] * self.width for _ in range(self.height)]

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= y < len(self.tiles) and 0 <= x < len(self.tiles[y])

    def is_walkable(self, x: int, y: int) -> bool:
        """Whether the position is inside the room and can be stood on."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return False
        return self.tiles[y][x].is_walkable()

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        """The tile at a position, or None outside the room."""
        if not self._in_bounds(x, y):
            return None
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Put a tile at a position; positions outside the room are ignored."""
        if self._in_bounds(x, y):
            self.tiles[y][x] = tile

    def get_enemy_at(self, x: int, y: int) -> Optional[Any]:
        """The first enemy standing at a position, if any."""
        return next((e for e in self.enemies if e.x == x and e.y == y), None)

    def get_item_at(self, x: int, y: int) -> Optional[Item]:
        """The first item lying at a position, if any."""
        return next((i for i in self.items if i.x == x and i.y == y), None)

    def is_cleared(self) -> bool:
        """Whether the room has no enemies left or was marked cleared."""
        return not self.enemies or self.cleared

    def free_positions(self) -> list[tuple[int, int]]:
        """Inner walkable positions with no enemy and no item on them."""
        return [
            (x, y)
            for y in range(1, self.height - 1)
            for x in range(1, self.width - 1)
            if self.is_walkable(x, y)
            and self.get_enemy_at(x, y) is None
            and self.get_item_at(x, y) is None
        ]

    def spawn_enemies(
        self, commits: list[Any], rng: random.Random, make_enemy: EnemyFactory
    ) -> None:
        """Place one enemy per commit, up to a quarter of the room area and at most ten.

        Sanctuaries stay empty. ``make_enemy`` builds an enemy from its kind,
        position and source commit hash.
        """
        if self.room_type is RoomType.SANCTUARY:
            return
        count = min(len(commits), (self.width * self.height) // 4, MAX_ENEMIES)
        positions = self.free_positions()
        for commit in commits[:count]:
            if not positions:
                break
            x, y = positions.pop(rng.randrange(len(positions)))
            self.enemies.append(make_enemy(enemy_kind_for_commit(commit), x, y, commit.hash))

    def spawn_items(self, commits: list[Any], rng: random.Random) -> None:
        """Place items made from commits; treasure rooms get two or three."""
        positions = self.free_positions()
        if not positions:
            return
        if self.room_type is RoomType.TREASURE:
            count = rng.randint(2, 3)
        else:
            count = max(1, min(len(commits) // 4, 3))
        for commit in commits[:count]:
            if not positions:
                break
            x, y = positions.pop(rng.randrange(len(positions)))
            self.items.append(item_for_commit(commit).at(x, y))