"""Items, their effects, and how commits turn into loot."""

from __future__ import annotations

import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Union


class ItemType(Enum):
    """Category of item."""

    CONSUMABLE = "Consumable"
    EQUIPMENT = "Equipment"
    SCROLL = "Scroll"


class Rarity(Enum):
    """Item rarity, from most to least common."""

    COMMON = "Common"
    UNCOMMON = "Uncommon"
    RARE = "Rare"
    LEGENDARY = "Legendary"


class Stat(Enum):
    """A player stat that a buff can raise."""

    MAX_HP = "MaxHP"
    MAX_ENERGY = "MaxEnergy"
    FOCUS = "Focus"
    DAMAGE = "Damage"


@dataclass(frozen=True)
class Heal:
    """Restore hit points."""

    amount: int


@dataclass(frozen=True)
class RestoreEnergy:
    """Restore energy."""

    amount: int


@dataclass(frozen=True)
class Damage:
    """Deal damage to an enemy."""

    amount: int


@dataclass(frozen=True)
class Buff:
    """Raise a stat by an amount for a number of turns."""

    stat: Stat
    amount: int
    duration: int


@dataclass(frozen=True)
class RevealMap:
    """Reveal the whole map."""


ItemEffect = Union[Heal, RestoreEnergy, Damage, Buff, RevealMap]


@dataclass
class Item:
    """An item lying in the dungeon or carried by the player."""

    name: str
    item_type: ItemType
    effect: ItemEffect
    rarity: Rarity
    source_commit: Optional[str] = None
    x: int = 0
    y: int = 0

    def at(self, x: int, y: int) -> Item:
        """Return a copy of this item placed at the given position."""
        return replace(self, x=x, y=y)

    def from_commit(self, commit_hash: str) -> Item:
        """Return a copy of this item tagged with its source commit."""
        return replace(self, source_commit=commit_hash)


def apply_effect(effect: ItemEffect, player: Any) -> str:
    """Apply an effect to the player and describe what happened."""
    match effect:
        case Heal(amount=amount):
            player.heal(amount)
            return f"Healed for {amount} HP"
        case RestoreEnergy(amount=amount):
            player.regen_energy(amount)
            return f"Restored {amount} energy"
        case Damage():
            return "Damage items target enemies"
        case Buff(stat=stat, amount=amount):
            if stat is Stat.MAX_HP:
                player.max_hp += amount
                player.hp += amount
            elif stat is Stat.MAX_ENERGY:
                player.max_energy += amount
                player.energy += amount
            elif stat is Stat.FOCUS:
                player.focus += amount
                player.max_focus += amount
            else:
                player.damage += amount
            return f"Increased {stat.value} by {amount}"
        case RevealMap():
            return "Map revealed"
    raise TypeError(f"unknown item effect: {effect!r}")


def calculate_rarity(lines_changed: int) -> Rarity:
    """Rarity of an item made from a commit of the given size."""
    if lines_changed < 50:
        return Rarity.COMMON
    if lines_changed < 200:
        return Rarity.UNCOMMON
    if lines_changed < 500:
        return Rarity.RARE
    return Rarity.LEGENDARY


_HEAL_BY_RARITY = {
    Rarity.COMMON: 10,
    Rarity.UNCOMMON: 20,
    Rarity.RARE: 35,
    Rarity.LEGENDARY: 50,
}

_ENERGY_BY_RARITY = {
    Rarity.COMMON: 20,
    Rarity.UNCOMMON: 40,
    Rarity.RARE: 60,
    Rarity.LEGENDARY: 100,
}


def generate_item(commit: Any, rng: random.Random) -> Item:
    """Make an item from a commit's message and size."""
    rarity = calculate_rarity(commit.insertions + commit.deletions)
    msg = commit.message.lower()

    effect: ItemEffect
    if "doc" in msg or "readme" in msg:
        name, effect, item_type = "Map Scroll", RevealMap(), ItemType.SCROLL
    elif "test" in msg or "spec" in msg:
        name, effect, item_type = (
            "Healing Commit",
            Heal(_HEAL_BY_RARITY[rarity]),
            ItemType.CONSUMABLE,
        )
    elif "config" in msg or "setting" in msg:
        name, effect, item_type = (
            "Config Scroll",
            RestoreEnergy(_ENERGY_BY_RARITY[rarity]),
            ItemType.SCROLL,
        )
    else:
        roll = rng.randrange(3)
        if roll == 0:
            name, effect, item_type = "Small Heal", Heal(10), ItemType.CONSUMABLE
        elif roll == 1:
            name, effect, item_type = "Energy Drink", RestoreEnergy(20), ItemType.CONSUMABLE
        else:
            name, effect, item_type = "Mystery Scroll", RevealMap(), ItemType.SCROLL

    return Item(name, item_type, effect, rarity).from_commit(commit.hash)