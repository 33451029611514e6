# penumbra

The building blocks of a roguelike whose dungeons come from your own
history. Each day of commits (or calendar events) becomes a room: how much
changed decides how big the room is, what kind of work it was decides what
kind of room it is, and the commits themselves become the enemies and the
loot inside.

The package needs nothing beyond the standard library.

## Modules

- `penumbra.items`: `ItemType`, `Rarity`, `Stat`, the effects `Heal`,
  `RestoreEnergy`, `Damage`, `Buff` and `RevealMap`, and `Item`.
  `Item.at(x, y)` and `Item.from_commit(hash)` return changed copies.
  `apply_effect(effect, player)` applies an effect to a player object and
  returns a message, `calculate_rarity(lines_changed)` grades a commit's
  size, and `generate_item(commit, rng)` makes an item from a commit.
- `penumbra.tiles`: `Tile` (with `Tile.FLOOR`, `Tile.WALL`, `Tile.EXIT`,
  `Tile.ENTRANCE`, `Tile.HEALING_ZONE` and `Tile.door(direction, state)`),
  `TileKind`, `Direction` and `DoorState`. Tiles are immutable.
  `toggle_door()` returns the flipped door.
- `penumbra.world`: `RoomType` (with `title()`) and `World`, the ordered
  chain of rooms. It has `current()`, `next_room()` and `is_last_room()`.
- `penumbra.room`: `Room` holds a tile grid, enemies and items. It spawns
  enemies with `spawn_enemies(commits, rng, make_enemy)` and items with
  `spawn_items(commits, rng)`. The module also has `EnemyKind`,
  `enemy_kind_for_commit` and `item_for_commit`.
- `penumbra.generator`: `generate_dungeon(commits, seed)` and
  `generate_dungeon_from_calendar(events, seed)`, the per-room builders, and
  the sizing and room-type rules. `EventCategory` names the kinds of
  calendar event.
- `penumbra.render`: plain-text drawing of a game screen.
  `render_screen(state, width, height, ...)` returns `height` strings of
  `width` characters. Its pieces are also available on their own:
  `map_cells` gives `(char, Color)` pairs, and there are `status_lines`,
  `message_lines`, `help_lines`, `inventory_lines`, `game_over_lines`,
  `format_enemy_breakdown` and `hp_color`. `Color` values are ANSI
  foreground codes.
- `penumbra.keys`: `Keybinds` (default `k j h l` to move, `.` to wait, `q`
  to quit, `?` for help, `i` for inventory, `a` to attack). There are also
  helpers that turn a key into a move, a direction or a command. A key is a
  single character, or one of `"up"`, `"down"`, `"left"`, `"right"` and
  `"esc"`.

## Input data

The modules take duck-typed objects:

- **Commit.** It needs `hash`, `date` (a `datetime`), `message`,
  `insertions`, `deletions`, `is_merge`, and `file_categories`. The last one
  has `test_files`, `config_files`, `doc_files` and `other_files`.
- **Calendar event.** It needs `start` (a `datetime`), `category` (an
  `EventCategory`), `attendee_count` and an `intensity()` method.
- **Enemy.** `Room.spawn_enemies` builds each enemy with
  `make_enemy(kind, x, y, commit_hash)`. The render functions expect an
  enemy to have `x`, `y`, `enemy_type` (an `EnemyKind`) and `symbol()`.

## How a dungeon is shaped

Commits and events are grouped by UTC day, oldest day first, with one room
per day. Room size follows the lines changed on that day:

| lines changed | room  |
|---------------|-------|
| 0–19          | 3 × 3 |
| 20–49         | 5 × 5 |
| 50–199        | 7 × 7 |
| 200 and more  | 9 × 9 |

Room types are decided like this:

- A day with a merge commit becomes a boss chamber.
- A day where more than half the changed files are tests becomes a sanctuary
  floored with healing tiles.
- A day where more than half are config files becomes a treasury.
- If no file data is present, commit messages decide instead.

Every room is walled, and the connections are placed as follows:

- Every room except the first has an entrance at the middle of its west
  wall.
- Every room except the last has an exit at the middle of its east wall.

```python
from penumbra.generator import calculate_room_size, calculate_room_size_from_intensity
from penumbra.items import calculate_rarity
from penumbra.render import format_enemy_breakdown

calculate_room_size(75)                 # (7, 7)
calculate_room_size_from_intensity(3)   # (3, 3)
calculate_rarity(250)                   # Rarity.RARE
format_enemy_breakdown([])              # "Enemies: 0"
```

Generation is seeded, so the same history and the same seed give the same
dungeon:

```python
from penumbra.generator import generate_dungeon

world = generate_dungeon(commits, 42)
room = world.current()
while world.next_room():
    room = world.current()
```

## What the package does not do

- It does not read a git repository or an ICS file. You supply the commit
  and event objects yourself.
- It has no player or enemy classes, combat, field-of-view or game-state
  logic. The render functions only read a state object you provide.
- It has no command, no interactive terminal loop and no saved games.
`render_screen` produces text lines, and drawing them to a terminal and
reading keys is left to the caller.