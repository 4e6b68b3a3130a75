# solong

A small top-down puzzle game. You walk a player around a walled map, pick
up every collectible, and then step onto the exit to win. Each move
increases the move counter and prints it to standard output as
`Moves : N`.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
solong path/to/level.ber
```

The same entry point can be started with `python -m solong.display
path/to/level.ber`.

Controls:

- `W` / `A` / `S` / `D`: move up, left, down and right
- `Esc` or closing the window: quit

Walls block movement. The exit only lets you through once every
collectible has been picked up; you may walk over it before then. Reaching
it with nothing left to collect ends the game (that last step is not
counted as a move).

Each tile is drawn as a 64×64 image. The command loads the images from a
directory named `xpm` in the current working directory, which must hold
these files:

| File                  | Tile        |
|-----------------------|-------------|
| `lier.xpm`            | player      |
| `walls.xpm`           | wall        |
| `album.xpm`           | collectible |
| `freespace.xpm`       | free space  |
| `nather_portale.xpm`  | exit        |

The window is titled `I AM LIER`.

## Map files

A map is a plain text file whose name ends in `.ber`. Each line is one
row, and it uses these characters:

| Char | Meaning     |
|------|-------------|
| `1`  | wall        |
| `0`  | free space  |
| `P`  | player      |
| `E`  | exit        |
| `C`  | collectible |

A map is accepted only if:

- the file name has something before `.ber`,
- it is not empty and has no blank lines in it,
- every row has the same length,
- it is fully enclosed by walls,
- it has exactly one `P`, exactly one `E` and at least one `C`, and no
  other characters,
- every collectible and the exit can be reached from the player.

Example:

```
1111111
1P0C0E1
1111111
```

If the command gets other than one argument, or the map is rejected, or
the window or images cannot be set up, it prints an `ERROR` message giving
the reason to standard error and exits with status 1. Quitting or winning
exits with status 0.

## Using it from Python

```python
from solong.mapcheck import load_map, MapError
from solong.game import Game, Direction

try:
    game_map = load_map("level.ber")
except MapError as exc:
    print(exc.message)
else:
    game = Game(game_map)
    game.move(Direction.RIGHT)
    print(game.render_text())
```

- `solong.mapcheck`: `load_map(path)` and `parse_map(text)` return a
  frozen `GameMap` (`rows`, `player` and `exit` as `(x, y)`,
  `collectibles`, `width`, `height`) or raise `MapError`. The single checks
  `check_filename`, `check_rectangular`, `check_walls`, `find_components`
  and `is_reachable` are available on their own; `Tile` enumerates the map
  characters.
- `solong.game`: `Game` holds the mutable grid, the player position, the
  move count (`moves`) and whether the game is `finished`. `move(direction)`
  returns `True` when the player moved; `has_collectibles()` and
  `render_text()` inspect the current state.
- `solong.display`: `load_images(directory)` returns `TileImages`,
  `draw(surface, game, images)` blits the grid, `direction_for_key(key)`
  maps W/A/S/D key codes to a `Direction`, and `run(game, image_dir)`
  opens a window and plays until the game ends, returning the exit status.

## What it does not include

The package ships no tile images; you provide the `xpm` directory
described above. There is no score keeping, level selection or enemies:
one map is played per run.

## Tests

```
pip install .[test]
pytest
```