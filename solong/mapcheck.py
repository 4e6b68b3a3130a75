"""Loading and validation of ``.ber`` map files."""

from __future__ import annotations

import os
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

EXTENSION = ".ber"
GAME_NAME = "I AM LIER"

INPUT_ERROR = "ERROR\n input -> ./so_long <map.ber>\n"
READ_ERROR = "ERROR\n read nothing \n"
NEWLINE_ERROR = "ERROR\n there is a new line in your map\n"
FILE_ERROR = "ERROR\n invalid map name or wrong extension\n"
EXTENSION_ERROR = "ERROR\n wrong or no extension\n"
OPEN_ERROR = "ERROR\n no such a file or permission denied\n"
SHAPE_ERROR = "ERROR\n the shape of map incoerrect \n"
WALLS_ERROR = "ERROR\n messing walls \n"
COMPONENT_ERROR = "ERROR\n miss or more (P, E, C)\n"
MAP_ERROR = "ERROR\n invalide map \n"

Position = tuple[int, int]


class Tile(str, Enum):
    """Characters that may appear in a map."""

    PLAYER = "P"
    WALL = "1"
    COLLECTIBLE = "C"
    FREE = "0"
    EXIT = "E"


class MapError(Exception):
    """Raised when a map file name or its content is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class GameMap:
    """A validated map with the positions of its components (x, y)."""

    rows: tuple[str, ...]
    player: Position
    exit: Position
    collectibles: int

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)


def check_filename(path: str | os.PathLike[str]) -> str:
    """Check that the path names a ``.ber`` file and return it as a string."""
    name = os.fspath(path)
    stem_len = len(name) - len(EXTENSION)
    if stem_len <= 0 or name[stem_len - 1] == "/":
        raise MapError(FILE_ERROR)
    if name[stem_len:] != EXTENSION:
        raise MapError(EXTENSION_ERROR)
    return name


def check_rectangular(rows: Sequence[str]) -> bool:
    """Return True if every row has the length of the first one."""
    width = len(rows[0])
    return all(len(row) == width for row in rows[1:])


def check_walls(rows: Sequence[str]) -> bool:
    """Return True if the map is enclosed by walls."""
    wall = Tile.WALL.value
    top, bottom = rows[0], rows[-1]
    if any(ch != wall for ch in top):
        return False
    if len(bottom) < len(top) or any(ch != wall for ch in bottom[: len(top)]):
        return False
    last = len(top) - 1
    for row in rows[1:]:
        if not row or row[0] != wall or len(row) <= last or row[last] != wall:
            return False
    return True


def find_components(rows: Sequence[str]) -> tuple[Position, Position, int]:
    """Locate the player, the exit and count collectibles.

    Raises MapError unless there is exactly one player, exactly one exit,
    at least one collectible and no unknown character.
    """
    allowed = {tile.value for tile in Tile}
    player: Position | None = None
    exit_pos: Position | None = None
    players = exits = collectibles = 0
    for y, row in enumerate(rows[1:], start=1):
        for x, ch in enumerate(row[1:], start=1):
            if ch not in allowed:
                raise MapError(COMPONENT_ERROR)
            if ch == Tile.PLAYER:
                player = (x, y)
                players += 1
            elif ch == Tile.EXIT:
                exit_pos = (x, y)
                exits += 1
            elif ch == Tile.COLLECTIBLE:
                collectibles += 1
    if players != 1 or exits != 1 or collectibles < 1:
        raise MapError(COMPONENT_ERROR)
    assert player is not None and exit_pos is not None
    return player, exit_pos, collectibles


def is_reachable(rows: Sequence[str], start: Position) -> bool:
    """Return True if every player, exit and collectible is reachable from start.

    Cells that are not walls are walkable; unreachable free space is allowed.
    """
    wall = Tile.WALL.value
    grid = [list(row) for row in rows]
    queue: deque[Position] = deque([start])
    while queue:
        x, y = queue.popleft()
        if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
            continue
        if grid[y][x] == wall:
            continue
        grid[y][x] = wall
        queue.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return all(ch in (wall, Tile.FREE.value) for row in grid for ch in row)


def parse_map(text: str) -> GameMap:
    """Validate map text and build a GameMap from it."""
    if "\n\n" in text:
        raise MapError(NEWLINE_ERROR)
    rows = [line for line in text.split("\n") if line]
    if not rows:
        raise MapError(READ_ERROR)
    if not check_rectangular(rows):
        raise MapError(SHAPE_ERROR)
    if not check_walls(rows):
        raise MapError(WALLS_ERROR)
    player, exit_pos, collectibles = find_components(rows)
    if not is_reachable(rows, player):
        raise MapError(MAP_ERROR)
    return GameMap(tuple(rows), player, exit_pos, collectibles)


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read and validate the map stored at path."""
    name = check_filename(path)
    try:
        with open(name, "rb") as handle:
            data = handle.read()
    except IsADirectoryError as exc:
        raise MapError(READ_ERROR) from exc
    except OSError as exc:
        raise MapError(OPEN_ERROR) from exc
    return parse_map(data.decode("latin-1"))