"""Game state and player movement on a validated map."""

from __future__ import annotations

from enum import Enum

from solong.mapcheck import GameMap, Position, Tile


class Direction(Enum):
    """A step on the grid as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Game:
    """Mutable state of a running game."""

    def __init__(self, game_map: GameMap) -> None:
        self.game_map = game_map
        self.grid: list[list[str]] = [list(row) for row in game_map.rows]
        self.player: Position = game_map.player
        self.exit: Position = game_map.exit
        self.moves = 0
        self.finished = False

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)

    def tile_at(self, position: Position) -> str:
        """Return the character at (x, y)."""
        x, y = position
        return self.grid[y][x]

    def has_collectibles(self) -> bool:
        """Return True while any collectible is left on the map."""
        return any(Tile.COLLECTIBLE.value in row for row in self.grid)

    def move(self, direction: Direction) -> bool:
        """Try to move the player one step.

        Returns True if the player moved; each move is counted and printed.
        Stepping onto the exit with every collectible taken ends the game
        without counting a move. Walls block movement.
        """
        if self.finished:
            return False
        x, y = self.player
        target = (x + direction.dx, y + direction.dy)
        tx, ty = target
        if self.grid[ty][tx] == Tile.WALL.value:
            return False
        if self.grid[ty][tx] == Tile.EXIT.value and not self.has_collectibles():
            self.finished = True
            return False
        left_behind = Tile.EXIT if self.player == self.exit else Tile.FREE
        self.grid[y][x] = left_behind.value
        self.grid[ty][tx] = Tile.PLAYER.value
        self.moves += 1
        print(f"Moves : {self.moves}")
        self.player = target
        return True

    def render_text(self) -> str:
        """Return the current map as lines of tile characters."""
        return "\n".join("".join(row) for row in self.grid)