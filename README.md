# babaengine

A grid puzzle engine where the rules of each level are written on the board
itself. Text blocks such as `TEXT_BABA`, `IS` and `YOU` line up to form
rules, and pushing them around changes how the level behaves. The game can
be played from the terminal or driven by a program over a small HTTP API.

## Installation

```
pip install .
```

## Running

```
babaengine -mode keyboard            # play from the terminal
babaengine -mode api -port 8000      # HTTP API plus terminal input
babaengine -headless -port 8000      # HTTP API only, nothing is printed per turn
```

The port defaults to 8000. Bad or missing options print an error and the
usage line, and the command exits with status 1.

Levels are read from these files in `resources/maps/`, relative to the
working directory, in this order and wrapping round after the last:
`baba_is_you.txt`, `off_limits.txt`, `off_limits_bug.txt`,
`out_of_reach.txt`, `volcano.txt`.

### Terminal input

Terminal input is line based: type a key name and press Enter. After every
change the level is printed as a grid of characters (`.` for an empty cell,
the first letter of the block's name otherwise, lower case for text).

| Input                              | Action         |
|------------------------------------|----------------|
| `w`, `up`                          | move up        |
| `a`, `left`                        | move left      |
| `s`, `down`                        | move down      |
| `d`, `right`                       | move right     |
| `space` or an empty line           | wait one turn  |
| `r`                                | restart level  |
| `n`, `q`                           | next level     |
| `escape`, `esc`, `p`, end of input | quit           |

Key names are case-insensitive. (`q` and `p` share their command numbers
with `n` and quit respectively, so they act the same way.)

### HTTP API

| Route                      | Effect                                                      |
|----------------------------|-------------------------------------------------------------|
| `GET /hello`               | a plain-text greeting                                       |
| `GET /status`              | JSON status of the current level (see below)                |
| `GET`, `POST /move/<d>`    | `d` is one of `up`, `down`, `left`, `right`, `still`        |
| `GET`, `POST /level/<a>`   | `a` is one of `restart`, `next`                             |

An unknown direction or action returns 400 and lists the valid values; an
unknown route returns 404 `Route not found`; a wrong method on a known
route returns 405. The status request waits until the game loop answers it.
Its body looks like:

```json
{
  "levelId": 0,
  "levelName": "baba_is_you",
  "levelSize": [5, 1],
  "levelCompleted": false,
  "blocks": {"BABA": [{"x": 3, "y": 0}]},
  "rules": {"BABA": [{"subject": "BABA", "verb": "IS", "object": "YOU"}]}
}
```

When a level is won, `Level Completed!` is printed. A `restart` or `next`
in the next three seconds is obeyed; otherwise the game moves on to the
next level by itself.

## Rules of play

A rule is three text blocks in a row, read left to right or top to bottom:
a noun (`TEXT_<object>`), a verb (`IS`, `HAS`, `MAKE`, ...) and either a
property or another noun. `NOUN IS PROPERTY` gives every block of that
object the property; `NOUN IS NOUN` turns every block of the first object
into the second. Text is always pushable.

The properties are `YOU` (moves with input), `STOP`, `PUSH`, `WIN`,
`DEFEAT` (destroys a YOU block on its cell), `HOT` (destroys a MELT block
on its cell), `MELT`, `SHUT` (stops movers; destroyed together with an
OPEN block on its cell), `OPEN` and `SINK` (destroys everything on its
cell, itself included). A level is won when a YOU block shares a cell with
a WIN block.

## Library use

The rule engine can be used without any front end:

```python
from babaengine.blocks import MoveDirection
from babaengine.logic import GameLogic

logic = GameLogic(5, 1, {
    "TEXT_BABA": [(0, 0)], "IS": [(1, 0)], "YOU": [(2, 0)],
    "BABA": [(3, 0)],
})
logic.move(MoveDirection.RIGHT)
print(logic.level_map())       # {'BABA': [(4, 0)], 'IS': [(1, 0)], ...}
print(logic.rules_summary())
print(logic.level_completed())
```

Other pieces:

- `babaengine.loader`: `load_from_string` and `parse_level` read JSON
  levels (`"level id"`, `"level name"`, `"sizeX"`, `"sizeY"` and
  `"blocks"` mapping names to `[x, y]` pairs); `load_from_txt_file` reads
  text grids (width, height, then one block-type index per cell) given a
  table of block-type names; `LevelLoader` walks a list of level files.
- `babaengine.game.Game` runs the command loop over any set of event
  sources, with an optional renderer callback.
- `babaengine.server.GameServer` serves the HTTP API, in the foreground
  (`run`) or on a background thread (`run_in_background`), and its
  `handle(method, path)` can be called directly.
- `babaengine.layout.compute_playing_area` fits a grid into a window of
  given pixel size, and `babaengine.sprites.sprite_rect` gives where a
  block's picture lies on the sprite sheets.

## What it does not do

- There is no graphical window. The layout and sprite tables describe
  where cells and pictures would go, but nothing draws them; play is
  shown as text in the terminal.
- No level files and no sprite images are included.
- No table of block-type names for text grid levels is included. The
  `babaengine` command loads its `.txt` levels with an empty table, so it
  cannot decode their cells and stops with an error. To play text grid
  levels, build a `LevelLoader` with `block_type_names` from the library;
  JSON levels need no table.

## Tests

```
pip install .[test]
pytest
```