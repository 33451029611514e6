"""Mapping of key presses to game intents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from penumbra.tiles import Direction

UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
ESC = "esc"
ENTER = "enter"

_ARROW_MOVES = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

_DIRECTIONS = {
    UP: Direction.NORTH,
    "k": Direction.NORTH,
    DOWN: Direction.SOUTH,
    "j": Direction.SOUTH,
    LEFT: Direction.WEST,
    "h": Direction.WEST,
    RIGHT: Direction.EAST,
    "l": Direction.EAST,
}


@dataclass
class Keybinds:
    """Characters bound to each command."""

    move_up: str = "k"
    move_down: str = "j"
    move_left: str = "h"
    move_right: str = "l"
    wait: str = "."
    quit: str = "q"
    help: str = "?"
    inventory: str = "i"
    attack: str = "a"


def _is_char(key: str) -> bool:
    return len(key) == 1


def key_to_move(key: str, keybinds: Keybinds) -> Optional[tuple[int, int]]:
    """The (dx, dy) step a key asks for, or None if it is not a movement key."""
    if key in _ARROW_MOVES:
        return _ARROW_MOVES[key]
    if not _is_char(key):
        return None
    bound = {
        keybinds.move_up: (0, -1),
        keybinds.move_down: (0, 1),
        keybinds.move_left: (-1, 0),
        keybinds.move_right: (1, 0),
    }
    for char, step in ((keybinds.move_up, (0, -1)), (keybinds.move_down, (0, 1)),
                       (keybinds.move_left, (-1, 0)), (keybinds.move_right, (1, 0))):
        if key == char:
            return step
    return bound.get(key)


def is_wait_key(key: str, keybinds: Keybinds) -> bool:
    """Whether a key means waiting a turn; movement bindings take precedence."""
    if not _is_char(key) or key_to_move(key, keybinds) is not None:
        return False
    return key == keybinds.wait or key in (".", " ")


def is_quit_key(key: str, keybinds: Keybinds) -> bool:
    """Whether a key quits: Esc or the bound quit character."""
    if key == ESC:
        return True
    return _is_char(key) and key == keybinds.quit


def is_help_key(key: str, keybinds: Keybinds) -> bool:
    """Whether a key opens the help overlay."""
    return _is_char(key) and key == keybinds.help


def is_inventory_key(key: str, keybinds: Keybinds) -> bool:
    """Whether a key opens the inventory."""
    return _is_char(key) and key == keybinds.inventory


def is_attack_key(key: str, keybinds: Keybinds) -> bool:
    """Whether a key starts an attack."""
    return _is_char(key) and key == keybinds.attack


def key_to_direction(key: str) -> Optional[Direction]:
    """The direction an arrow key or one of hjkl points, if any."""
    return _DIRECTIONS.get(key)