import pygame
import pytest

from sotile.game import Facing, Game
from sotile.gamemap import parse_map
from sotile.render import TILE_SIZE, Sprites, draw, image_to_surface, load_sprites, tile_sprite
from sotile.xpm import TRANSPARENT, XpmError, XpmImage

XPM_TEXT = (
    "/* XPM */\n"
    "static char *img[] = {\n"
    '"2 2 2 1",\n'
    '"a c #FF0000",\n'
    '"b c None",\n'
    '"ab",\n'
    '"ba"\n'
    "};\n"
)

SPRITE_NAMES = [
    "wall.xpm", "floor.xpm", "collectibles.xpm", "exit.xpm", "enemy.xpm",
    "player_up.xpm", "player_down.xpm", "player_left.xpm", "player_right.xpm",
]


def _solid(color):
    surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
    surface.fill(color)
    return surface


def _sprites():
    return Sprites(
        wall=_solid((10, 10, 10)),
        floor=_solid((20, 20, 20)),
        collectible=_solid((30, 30, 30)),
        exit=_solid((40, 40, 40)),
        enemy=_solid((50, 50, 50)),
        players={
            Facing.UP: _solid((60, 60, 60)),
            Facing.DOWN: _solid((70, 70, 70)),
            Facing.LEFT: _solid((80, 80, 80)),
            Facing.RIGHT: _solid((90, 90, 90)),
        },
    )


def test_image_to_surface_colours_and_transparency():
    image = XpmImage(2, 1, ((0xFF0000, TRANSPARENT),))
    surface = image_to_surface(image)
    assert surface.get_size() == (2, 1)
    assert tuple(surface.get_at((0, 0))) == (255, 0, 0, 255)
    assert surface.get_at((1, 0)).a == 0


def test_tile_sprite_mapping():
    sprites = _sprites()
    assert tile_sprite(sprites, "1") is sprites.wall
    assert tile_sprite(sprites, "C") is sprites.collectible
    assert tile_sprite(sprites, "E") is sprites.exit
    assert tile_sprite(sprites, "0") is sprites.floor
    assert tile_sprite(sprites, "P") is sprites.floor
    assert tile_sprite(sprites, "X") is sprites.floor


def test_load_sprites_reads_every_file(tmp_path):
    for name in SPRITE_NAMES:
        (tmp_path / name).write_text(XPM_TEXT)
    sprites = load_sprites(tmp_path)
    assert sprites.wall.get_size() == (2, 2)
    assert set(sprites.players) == set(Facing)
    assert tuple(sprites.players[Facing.LEFT].get_at((0, 0))) == (255, 0, 0, 255)


def test_load_sprites_missing_file(tmp_path):
    for name in SPRITE_NAMES[:-1]:
        (tmp_path / name).write_text(XPM_TEXT)
    with pytest.raises(XpmError):
        load_sprites(tmp_path)


def test_draw_places_tiles_player_and_enemies():
    game_map = parse_map(["111111", "1PC0E1", "10X001", "111111"])
    game = Game(game_map, echo=None)
    sprites = _sprites()
    surface = pygame.Surface((6 * TILE_SIZE, 4 * TILE_SIZE))
    draw(game, sprites, surface)
    assert surface.get_at((0, 0))[:3] == sprites.wall.get_at((0, 0))[:3]
    assert surface.get_at((TILE_SIZE + 1, TILE_SIZE + 1))[:3] == sprites.players[Facing.DOWN].get_at((0, 0))[:3]
    assert surface.get_at((2 * TILE_SIZE + 1, TILE_SIZE + 1))[:3] == sprites.collectible.get_at((0, 0))[:3]
    assert surface.get_at((4 * TILE_SIZE + 1, TILE_SIZE + 1))[:3] == sprites.exit.get_at((0, 0))[:3]
    assert surface.get_at((2 * TILE_SIZE + 1, 2 * TILE_SIZE + 1))[:3] == sprites.enemy.get_at((0, 0))[:3]
    assert surface.get_at((TILE_SIZE + 1, 2 * TILE_SIZE + 1))[:3] == sprites.floor.get_at((0, 0))[:3]


def test_draw_follows_player_facing():
    game_map = parse_map(["11111", "1P0C1", "10E01", "11111"])
    game = Game(game_map, echo=None)
    game.move(1, 0)
    sprites = _sprites()
    surface = pygame.Surface((5 * TILE_SIZE, 4 * TILE_SIZE))
    draw(game, sprites, surface)
    assert surface.get_at((2 * TILE_SIZE + 1, TILE_SIZE + 1))[:3] == sprites.players[Facing.RIGHT].get_at((0, 0))[:3]
    assert surface.get_at((TILE_SIZE + 1, TILE_SIZE + 1))[:3] == sprites.floor.get_at((0, 0))[:3]