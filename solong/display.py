"""Window, drawing and the command line entry point."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

import pygame

from solong.game import Direction, Game
from solong.mapcheck import GAME_NAME, INPUT_ERROR, MapError, Tile, load_map

TILE_SIZE = 64

INIT_ERROR = "ERROR\n faild to make connection\n"
WINDOW_ERROR = "ERROR\n faild to creat a window\n"
IMAGE_ERROR = "ERROR\n no such a file or diractory\n"

_IMAGE_FILES = {
    "collectible": "album.xpm",
    "exit": "nather_portale.xpm",
    "player": "lier.xpm",
    "wall": "walls.xpm",
    "free": "freespace.xpm",
}

_KEYS = {
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_d: Direction.RIGHT,
    pygame.K_a: Direction.LEFT,
}


@dataclass
class TileImages:
    """One image per kind of tile."""

    player: pygame.Surface
    wall: pygame.Surface
    collectible: pygame.Surface
    free: pygame.Surface
    exit: pygame.Surface

    def for_tile(self, char: str) -> pygame.Surface | None:
        return {
            Tile.PLAYER.value: self.player,
            Tile.WALL.value: self.wall,
            Tile.COLLECTIBLE.value: self.collectible,
            Tile.FREE.value: self.free,
            Tile.EXIT.value: self.exit,
        }.get(char)


def load_images(directory: str | os.PathLike[str] = "xpm") -> TileImages:
    """Load the tile images from directory; raise FileNotFoundError if any fails."""
    loaded = {}
    for name, filename in _IMAGE_FILES.items():
        path = os.path.join(os.fspath(directory), filename)
        try:
            loaded[name] = pygame.image.load(path)
        except (pygame.error, OSError) as exc:
            raise FileNotFoundError(IMAGE_ERROR) from exc
    return TileImages(**loaded)


def draw(surface: pygame.Surface, game: Game, images: TileImages) -> None:
    """Blit every tile of the game onto surface."""
    for y, row in enumerate(game.grid):
        for x, char in enumerate(row):
            image = images.for_tile(char)
            if image is not None:
                surface.blit(image, (TILE_SIZE * x, TILE_SIZE * y))


def direction_for_key(key: int) -> Direction | None:
    """Map a W/A/S/D key code to a direction."""
    return _KEYS.get(key)


def run(game: Game, image_dir: str | os.PathLike[str] = "xpm") -> int:
    """Open a window and play until the game ends; return the exit status."""
    pygame.init()
    if not pygame.display.get_init():
        sys.stderr.write(INIT_ERROR)
        return 1
    try:
        try:
            screen = pygame.display.set_mode(
                (game.width * TILE_SIZE, game.height * TILE_SIZE)
            )
        except pygame.error:
            sys.stderr.write(WINDOW_ERROR)
            return 1
        pygame.display.set_caption(GAME_NAME)
        try:
            images = load_images(image_dir)
        except FileNotFoundError as exc:
            sys.stderr.write(str(exc))
            return 1
        draw(screen, game, images)
        pygame.display.flip()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type != pygame.KEYDOWN:
                continue
            if event.key == pygame.K_ESCAPE:
                return 0
            direction = direction_for_key(event.key)
            if direction is not None:
                game.move(direction)
            if game.finished:
                return 0
            draw(screen, game, images)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: list[str] | None = None) -> int:
    """Command entry point: play the map named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stderr.write(INPUT_ERROR)
        return 1
    try:
        game_map = load_map(args[0])
    except MapError as exc:
        sys.stderr.write(exc.message)
        return 1
    return run(Game(game_map))


if __name__ == "__main__":
    sys.exit(main())