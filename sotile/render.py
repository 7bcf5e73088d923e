"""Turning the game state into pixels with pygame."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from sotile.game import Facing, Game
from sotile.gamemap import COLLECTIBLE, EXIT, WALL
from sotile.xpm import TRANSPARENT, XpmImage, read_xpm_file

TILE_SIZE = 64
TEXT_COLOR = (255, 255, 255)
TEXT_POSITION = (10, 20)

_SPRITE_FILES = {
    "wall": "wall.xpm",
    "floor": "floor.xpm",
    "collectible": "collectibles.xpm",
    "exit": "exit.xpm",
    "enemy": "enemy.xpm",
}

_PLAYER_FILES = {
    Facing.UP: "player_up.xpm",
    Facing.DOWN: "player_down.xpm",
    Facing.LEFT: "player_left.xpm",
    Facing.RIGHT: "player_right.xpm",
}


@dataclass
class Sprites:
    """The images used to draw tiles, enemies and the player."""

    wall: pygame.Surface
    floor: pygame.Surface
    collectible: pygame.Surface
    exit: pygame.Surface
    enemy: pygame.Surface
    players: dict[Facing, pygame.Surface]


def image_to_surface(image: XpmImage) -> pygame.Surface:
    """Convert a decoded XPM image into an RGBA surface.

    Transparent XPM pixels become fully transparent.
    """
    data = bytearray()
    for row in image.pixels:
        for pixel in row:
            if pixel == TRANSPARENT:
                data += b"\x00\x00\x00\x00"
            else:
                data += bytes(((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF, 0xFF))
    surface = pygame.image.frombuffer(bytes(data), (image.width, image.height), "RGBA")
    return surface.copy()


def load_sprites(directory: str | Path = "assets") -> Sprites:
    """Read every sprite from XPM files in a directory.

    Raises XpmError if any of them is missing or unreadable.
    """
    base = Path(directory)
    loaded = {
        field: image_to_surface(read_xpm_file(base / name))
        for field, name in _SPRITE_FILES.items()
    }
    players = {
        facing: image_to_surface(read_xpm_file(base / name))
        for facing, name in _PLAYER_FILES.items()
    }
    return Sprites(players=players, **loaded)


def tile_sprite(sprites: Sprites, tile: str) -> pygame.Surface:
    """Return the image drawn for a map tile; anything unknown is floor."""
    if tile == WALL:
        return sprites.wall
    if tile == COLLECTIBLE:
        return sprites.collectible
    if tile == EXIT:
        return sprites.exit
    return sprites.floor


def draw(game: Game, sprites: Sprites, surface: pygame.Surface, font: pygame.font.Font | None = None) -> None:
    """Draw the map, the player, the move counter and the enemies."""
    for y, row in enumerate(game.map.grid):
        for x, tile in enumerate(row):
            surface.blit(tile_sprite(sprites, tile), (x * TILE_SIZE, y * TILE_SIZE))
    player_x, player_y = game.map.player
    surface.blit(sprites.players[game.facing], (player_x * TILE_SIZE, player_y * TILE_SIZE))
    if font is not None:
        text = font.render(f"Moves: {game.moves}", True, TEXT_COLOR)
        x, baseline = TEXT_POSITION
        surface.blit(text, (x, baseline - font.get_ascent()))
    for enemy_x, enemy_y in game.map.enemies:
        surface.blit(sprites.enemy, (enemy_x * TILE_SIZE, enemy_y * TILE_SIZE))