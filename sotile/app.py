"""Command-line entry point that opens a window and plays a map."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from sotile.game import Game, Key, Outcome
from sotile.gamemap import MapError, read_map
from sotile.render import TILE_SIZE, draw, load_sprites
from sotile.xpm import XpmError

MAP_EXTENSION = ".ber"
WINDOW_TITLE = "sotile"
FONT_SIZE = 24
FRAME_RATE = 60


def check_map_path(path: str) -> str:
    """Return the path if its last dot starts the map extension, else raise ValueError."""
    dot = path.rfind(".")
    if dot == -1 or path[dot:] != MAP_EXTENSION:
        raise ValueError(f"map file must end in {MAP_EXTENSION}: {path!r}")
    return path


def translate_key(pygame_key: int) -> int:
    """Map a pygame key code to the key symbol the game understands."""
    if pygame_key == pygame.K_ESCAPE:
        return int(Key.ESC)
    return int(pygame_key)


def run(path: str | Path, assets: str | Path = "assets") -> Outcome:
    """Play a map in a window until the game ends; return how it ended.

    Raises MapError for a bad map and XpmError or pygame.error when the
    window or sprites cannot be set up.
    """
    game_map = read_map(path)
    pygame.init()
    try:
        sprites = load_sprites(assets)
        screen = pygame.display.set_mode((game_map.width * TILE_SIZE, game_map.height * TILE_SIZE))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, FONT_SIZE)
        game = Game(game_map)
        draw(game, sprites, screen, font)
        pygame.display.flip()
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return Outcome.QUIT
                if event.type != pygame.KEYDOWN:
                    continue
                outcome = game.key_press(translate_key(event.key))
                if game.over:
                    return outcome
                if outcome is Outcome.MOVED:
                    draw(game, sprites, screen, font)
                    pygame.display.flip()
            clock.tick(FRAME_RATE)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("ERROR: Invalid arguments")
        return 1
    try:
        path = check_map_path(args[0])
    except ValueError:
        print("ERROR: Invalid map file")
        return 1
    try:
        run(path)
    except MapError as exc:
        print(f"Error\n{exc}")
        print("ERROR: Invalid map")
        return 1
    except (XpmError, pygame.error):
        print("ERROR: Game init failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())