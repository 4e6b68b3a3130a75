import pygame
import pytest

from solong.display import (
    IMAGE_ERROR,
    TILE_SIZE,
    TileImages,
    direction_for_key,
    draw,
    load_images,
    main,
)
from solong.game import Direction, Game
from solong.mapcheck import EXTENSION_ERROR, INPUT_ERROR, WALLS_ERROR, parse_map

COLORS = {
    "player": (255, 0, 0),
    "wall": (0, 255, 0),
    "collectible": (0, 0, 255),
    "free": (255, 255, 0),
    "exit": (0, 255, 255),
}


def _images():
    surfaces = {}
    for name, color in COLORS.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(color)
        surfaces[name] = surface
    return TileImages(**surfaces)


def test_draw_places_each_tile():
    game = Game(parse_map("11111\n1PC01\n1E001\n11111"))
    surface = pygame.Surface((game.width * TILE_SIZE, game.height * TILE_SIZE))
    draw(surface, game, _images())
    expected = {
        "P": COLORS["player"],
        "1": COLORS["wall"],
        "C": COLORS["collectible"],
        "0": COLORS["free"],
        "E": COLORS["exit"],
    }
    for y, row in enumerate(game.grid):
        for x, char in enumerate(row):
            pixel = surface.get_at((x * TILE_SIZE + 1, y * TILE_SIZE + 1))
            assert tuple(pixel)[:3] == expected[char]


def test_draw_follows_moves():
    game = Game(parse_map("11111\n1PC01\n1E001\n11111"))
    surface = pygame.Surface((game.width * TILE_SIZE, game.height * TILE_SIZE))
    game.move(Direction.RIGHT)
    draw(surface, game, _images())
    assert tuple(surface.get_at((2 * TILE_SIZE, TILE_SIZE)))[:3] == COLORS["player"]
    assert tuple(surface.get_at((TILE_SIZE, TILE_SIZE)))[:3] == COLORS["free"]


@pytest.mark.parametrize(
    "key, direction",
    [
        (pygame.K_w, Direction.UP),
        (pygame.K_s, Direction.DOWN),
        (pygame.K_a, Direction.LEFT),
        (pygame.K_d, Direction.RIGHT),
    ],
)
def test_direction_for_key(key, direction):
    assert direction_for_key(key) is direction


def test_direction_for_other_key():
    assert direction_for_key(pygame.K_q) is None


def test_load_images_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError) as info:
        load_images(tmp_path / "missing")
    assert str(info.value) == IMAGE_ERROR


def test_main_wrong_argument_count(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err == INPUT_ERROR
    assert main(["a.ber", "b.ber"]) == 1


def test_main_bad_extension(capsys):
    assert main(["map.txt"]) == 1
    assert capsys.readouterr().err == EXTENSION_ERROR


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "open.ber"
    path.write_text("1111\n1PCE\n1111")
    assert main([str(path)]) == 1
    assert capsys.readouterr().err == WALLS_ERROR