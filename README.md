# solong

A small top-down puzzle game. You walk a player across a rectangular map,
pick up every collectible and then step onto the exit. Step onto an enemy
and the game is over.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
solong maps/level1.ber
```

The same entry point can be started with `python -m solong.cli maps/level1.ber`.

The command takes exactly one argument, the path of a map file; any other
number of arguments prints `Wrong number of arguments`. A path with no `.` in
it, or a file that cannot be opened, is rejected with `Invalid path`. A map
that fails validation is rejected with `Invalid map`. In each of these cases
the exit status is 1.

### Controls

| Key                      | Action     |
|--------------------------|------------|
| `W` / `w` / Up arrow     | Move up    |
| `S` / `s` / Down arrow   | Move down  |
| `A` / `a` / Left arrow   | Move left  |
| `D` / `d` / Right arrow  | Move right |
| `Escape`, closing window | Quit       |

Moves act when a key is released. Walls block a move. The number of moves is
drawn near the bottom of the window, and collectibles are animated between
two frames. While collectibles remain, the exit can be walked over and shows
again once the player leaves it. Reaching the exit with everything collected
prints `You win!!!` and ends the game; stepping onto an enemy prints
`Game Over!!!` and ends it.

## Map format

A map is a plain text file, one row per line. Blank lines before the map are
skipped, and the map ends at the first blank line after it; anything further
is ignored. Trailing whitespace is trimmed from every row except the first.

| Character | Meaning     |
|-----------|-------------|
| `1`       | Wall        |
| `0`       | Empty floor |
| `P`       | Player      |
| `C`       | Collectible |
| `E`       | Exit        |
| `B`       | Enemy       |

A valid map:

* has at least two rows, all of the same length;
* has a first and a last row made only of walls, and every row in between
  starts and ends with a wall;
* holds exactly one player, exactly one exit and at least one collectible;
* holds no other characters;
* lets the player reach every collectible and the exit without passing
  through walls or enemies.

Example:

```
1111111111
1P0C000001
1011110B01
1C00000CE1
1111111111
```

## Textures

The command draws 60×60 pixel tiles from a `textures/` directory in the
current working directory, holding `B.xpm` (floor), `W.xpm` (wall),
`P.xpm` (player), `E.xpm` (exit), `V.xpm` (enemy) and `C1.xpm` / `C2.xpm`,
the two frames of the collectible. The window is drawn with pygame.

## Using it as a library

```python
from solong.mapfile import load_map, MapPathError
from solong.validation import validate_map, InvalidMapError
from solong.game import Game, Direction

try:
    info = validate_map(load_map("maps/level1.ber"))
except (MapPathError, InvalidMapError) as exc:
    raise SystemExit(f"Invalid map: {exc}")

game = Game.from_map(info)
outcome = game.step(Direction.RIGHT)   # Outcome.MOVED, BLOCKED, WON or LOST
print(outcome, game.moves, game.rows())
```

* `solong.mapfile` — `load_map`, `read_lines`, `read_map_lines`,
  `is_blank_line`, `is_valid_map_name` and `MapPathError`.
* `solong.validation` — `validate_map` returns a `MapInfo` (rows, size,
  counts, player and exit positions) or raises `InvalidMapError`;
  also `is_wall_row`, `flood_fill` and `all_reachable`.
* `solong.game` — `Game`, `Direction` and `Outcome`. Calling `Game.step`
  after the game has been won or lost raises `RuntimeError`.
* `solong.render` — `run(game, textures_dir)` opens a window and plays a
  prepared `Game`, returning the final `Outcome`, or `None` if the player
  quits; also `direction_for_key`, `sprite_name` and `collectible_frame`.
* `solong.cli` — `main(argv=None)`, the command above.

The package also carries small general helpers: `solong.chars` (ASCII
character tests, case mapping, `atoi`, `itoa`), `solong.textops` (string
searching, trimming, splitting and bounded copying), `solong.byteops`
(operations on byte buffers), `solong.chain` (a doubly linked `Chain` of
`Node`s) and `solong.output` (writing characters, strings and numbers to a
stream).