"""Text rendering of the game screen: map, message log, status and overlays."""

from __future__ import annotations

from collections import Counter
from enum import Enum
from typing import Any, Iterable, Sequence

from penumbra.items import Item, Rarity
from penumbra.room import EnemyKind
from penumbra.tiles import TileKind

MIN_WIDTH = 80
MIN_HEIGHT = 24
LOG_HEIGHT = 6
TOO_SMALL = "Terminal too small (min 80x24)"
ATTACK_PROMPT = "Attack mode - press direction"


class Color(Enum):
    """Terminal colours, valued by their ANSI foreground code."""

    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    GRAY = "37"
    DARK_GRAY = "90"
    LIGHT_RED = "91"
    LIGHT_GREEN = "92"
    LIGHT_MAGENTA = "95"
    WHITE = "97"
    FOG = "38;2;40;40;40"


FLOOR_COLOR = Color.DARK_GRAY
WALL_COLOR = Color.GRAY
DOOR_COLOR = Color.YELLOW
EXIT_COLOR = Color.GREEN
ENTRANCE_COLOR = Color.CYAN
HEALING_ZONE_COLOR = Color.LIGHT_GREEN
FOG_COLOR = Color.FOG

PLAYER_COLOR = Color.WHITE
BUG_COLOR = Color.RED
REGRESSION_COLOR = Color.MAGENTA
TECH_DEBT_COLOR = Color.LIGHT_RED
MERGE_CONFLICT_COLOR = Color.LIGHT_MAGENTA

ITEM_COMMON = Color.GRAY
ITEM_UNCOMMON = Color.GREEN
ITEM_RARE = Color.BLUE
ITEM_LEGENDARY = Color.YELLOW

UI_BORDER = Color.DARK_GRAY
UI_TITLE = Color.WHITE
UI_TEXT = Color.GRAY
UI_HIGHLIGHT = Color.CYAN
HP_HIGH = Color.GREEN
HP_MED = Color.YELLOW
HP_LOW = Color.RED
ENERGY_COLOR = Color.CYAN
FOCUS_COLOR = Color.MAGENTA

_TILE_COLORS = {
    TileKind.FLOOR: FLOOR_COLOR,
    TileKind.WALL: WALL_COLOR,
    TileKind.DOOR: DOOR_COLOR,
    TileKind.EXIT: EXIT_COLOR,
    TileKind.ENTRANCE: ENTRANCE_COLOR,
    TileKind.HEALING_ZONE: HEALING_ZONE_COLOR,
}

_ENEMY_COLORS = {
    EnemyKind.BUG: BUG_COLOR,
    EnemyKind.REGRESSION: REGRESSION_COLOR,
    EnemyKind.TECH_DEBT: TECH_DEBT_COLOR,
    EnemyKind.MERGE_CONFLICT: MERGE_CONFLICT_COLOR,
}

_RARITY_COLORS = {
    Rarity.COMMON: ITEM_COMMON,
    Rarity.UNCOMMON: ITEM_UNCOMMON,
    Rarity.RARE: ITEM_RARE,
    Rarity.LEGENDARY: ITEM_LEGENDARY,
}

Cell = tuple[str, Color]


def hp_color(hp: int, max_hp: int) -> Color:
    """Colour of the HP readout: green when healthy, yellow when hurt, red when low."""
    pct = hp / max_hp if max_hp > 0 else 0.0
    if pct > 0.6:
        return HP_HIGH
    if pct > 0.3:
        return HP_MED
    return HP_LOW


def format_enemy_breakdown(enemies: Iterable[Any]) -> str:
    """Summarise the enemies in a room by kind."""
    counts = Counter(enemy.enemy_type for enemy in enemies)
    parts = []
    bugs = counts[EnemyKind.BUG]
    if bugs:
        parts.append(f"{bugs} Bug{'s' if bugs > 1 else ''}")
    regressions = counts[EnemyKind.REGRESSION]
    if regressions:
        parts.append(f"{regressions} Reg{'s' if regressions > 1 else ''}")
    if counts[EnemyKind.TECH_DEBT]:
        parts.append(f"{counts[EnemyKind.TECH_DEBT]} Debt")
    if counts[EnemyKind.MERGE_CONFLICT]:
        parts.append(f"{counts[EnemyKind.MERGE_CONFLICT]} Merge")
    if not parts:
        return "Enemies: 0"
    return "Enemies: " + ", ".join(parts)


def map_cells(state: Any) -> list[list[Cell]]:
    """The current room as rows of (character, colour), with fog outside the view."""
    room = state.world.current()
    if room is None:
        return []
    player = state.player
    visible = state.visible_tiles
    rows: list[list[Cell]] = []
    for y in range(room.height):
        row: list[Cell] = []
        for x in range(room.width):
            row.append(_cell_at(room, x, y, player, (x, y) in visible))
        rows.append(row)
    return rows


def _cell_at(room: Any, x: int, y: int, player: Any, visible: bool) -> Cell:
    if player.x == x and player.y == y:
        return ("@", PLAYER_COLOR)
    if visible:
        enemy = room.get_enemy_at(x, y)
        if enemy is not None:
            return (str(enemy.symbol()), _ENEMY_COLORS[enemy.enemy_type])
        item = room.get_item_at(x, y)
        if item is not None:
            return ("!", _RARITY_COLORS[item.rarity])
    tile = room.get_tile(x, y)
    if tile is None or not visible:
        return (" ", FOG_COLOR)
    return (tile.symbol(), _TILE_COLORS[tile.kind])


def message_lines(messages: Sequence[str], height: int) -> list[str]:
    """The most recent messages that fit in the given number of lines, oldest first."""
    if height <= 0:
        return []
    return list(messages[-height:])


def _commit_headline(message: str) -> str:
    first = next(iter(message.splitlines()), "")
    if len(first) > 20:
        return first[:17] + "..."
    return first


def status_lines(state: Any) -> list[str]:
    """Lines of the status sidebar: player stats, turn and the current room."""
    player = state.player
    lines = [
        f"HP: {player.hp}/{player.max_hp}",
        f"EN: {player.energy}/{player.max_energy}",
        f"FO: {player.focus}/{player.max_focus}",
        "",
        f"Level: {player.level}",
        f"XP: {player.xp}/{player.level * 100}",
        f"Turn: {state.turn}",
        "",
    ]
    room = state.world.current()
    if room is not None:
        lines.append(f"Room {state.world.current_room + 1}/{len(state.world.rooms)}")
        lines.append(room.room_type.title())
        lines.append(str(room.source_date))
        lines.append(format_enemy_breakdown(room.enemies))
        if room.source_commits:
            commit = room.source_commits[0]
            lines.append("")
            lines.append(f'"{_commit_headline(commit.message)}"')
            lines.append(f"+{commit.insertions}/\u2212{commit.deletions}")
    return lines


def help_lines() -> list[str]:
    """Text of the help overlay."""
    return [
        "=== PENUMBRA HELP ===",
        "",
        "Movement: Arrow keys or hjkl",
        "Attack:   a + direction",
        "Defend:   d",
        "Wait:     . or space",
        "Inventory: i",
        "Help:     ?",
        "Quit:     q or Esc",
        "",
        "Press Esc to close",
    ]


def inventory_lines(inventory: Sequence[Item], selected: int) -> list[str]:
    """Text of the inventory overlay, marking the selected item."""
    if not inventory:
        return ["(empty)"]
    return [
        f"{'> ' if index == selected else '  '}{item.name}"
        for index, item in enumerate(inventory)
    ]


def game_over_lines(state: Any) -> list[str]:
    """Text of the end-of-run screen."""
    title = "=== VICTORY ===" if state.victory else "=== GAME OVER ==="
    return [
        title,
        "",
        f"Turns: {state.turn}",
        f"Rooms: {state.world.current_room + 1}/{len(state.world.rooms)}",
        f"Level: {state.player.level}",
        "",
        "Press Q to quit",
    ]


class _Canvas:
    """A grid of characters that clips everything written outside it."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.rows = [[" "] * self.width for _ in range(self.height)]

    def put(self, x: int, y: int, text: str, limit: int | None = None) -> None:
        if not 0 <= y < self.height:
            return
        if limit is not None:
            text = text[: max(limit, 0)]
        for offset, ch in enumerate(text):
            col = x + offset
            if 0 <= col < self.width:
                self.rows[y][col] = ch

    def clear(self, x: int, y: int, w: int, h: int) -> None:
        for row in range(y, y + h):
            self.put(x, row, " " * w)

    def box(self, x: int, y: int, w: int, h: int, title: str = "") -> None:
        if w < 2 or h < 2:
            return
        self.put(x, y, "\u250c" + "\u2500" * (w - 2) + "\u2510")
        for row in range(y + 1, y + h - 1):
            self.put(x, row, "\u2502")
            self.put(x + w - 1, row, "\u2502")
        self.put(x, y + h - 1, "\u2514" + "\u2500" * (w - 2) + "\u2518")
        if title:
            self.put(x + 1, y, title, limit=w - 2)

    def text(self, x: int, y: int, w: int, h: int, lines: Iterable[str]) -> None:
        for row, line in enumerate(lines):
            if row >= h:
                break
            self.put(x, y + row, line, limit=w)

    def lines(self) -> list[str]:
        return ["".join(row) for row in self.rows]


def _overlay(canvas: _Canvas, w: int, h: int, title: str, lines: Sequence[str], center: bool = False) -> None:
    x = (canvas.width - w) // 2
    y = (canvas.height - h) // 2
    canvas.clear(x, y, w, h)
    canvas.box(x, y, w, h, title)
    inner_w = w - 2
    if center:
        lines = [" " * max((inner_w - len(line)) // 2, 0) + line for line in lines]
    canvas.text(x + 1, y + 1, inner_w, h - 2, lines)


def render_screen(
    state: Any,
    width: int,
    height: int,
    show_help: bool = False,
    show_inventory: bool = False,
    selected_item: int = 0,
    attack_mode: bool = False,
) -> list[str]:
    """Draw the whole screen as ``height`` lines of ``width`` characters."""
    canvas = _Canvas(width, height)
    if width < MIN_WIDTH or height < MIN_HEIGHT:
        canvas.put(0, 0, TOO_SMALL)
        return canvas.lines()

    left_w = width * 70 // 100
    right_w = width - left_w
    map_h = height - LOG_HEIGHT

    canvas.box(0, 0, left_w, map_h, " Map ")
    for y, row in enumerate(map_cells(state)):
        if y >= map_h - 2:
            break
        canvas.put(1, 1 + y, "".join(ch for ch, _ in row), limit=left_w - 2)

    canvas.box(0, map_h, left_w, LOG_HEIGHT, " Messages ")
    canvas.text(
        1, map_h + 1, left_w - 2, LOG_HEIGHT - 2,
        message_lines(state.messages, LOG_HEIGHT - 2),
    )

    canvas.box(left_w, 0, right_w, height, " Status ")
    canvas.text(left_w + 1, 1, right_w - 2, height - 2, status_lines(state))

    if show_help:
        lines = help_lines()
        _overlay(canvas, 40, len(lines) + 2, " Help ", lines)

    if show_inventory:
        _overlay(canvas, 50, 15, " Inventory ", inventory_lines(state.player.inventory, selected_item))

    if state.game_over:
        lines = game_over_lines(state)
        _overlay(canvas, 40, len(lines) + 2, "", lines, center=True)

    if attack_mode:
        canvas.put(0, height - 1, ATTACK_PROMPT.ljust(width))

    return canvas.lines()