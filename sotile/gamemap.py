"""Loading and checking tile maps for the game."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "X"

VALID_TILES = frozenset({FLOOR, WALL, COLLECTIBLE, EXIT, PLAYER, ENEMY})

Position = tuple[int, int]


class MapError(ValueError):
    """Raised when a map cannot be read or breaks the map rules."""


@dataclass
class GameMap:
    """A rectangular grid of tiles, indexed as grid[y][x]."""

    grid: list[list[str]]
    player: Position
    collectibles: int
    enemies: tuple[Position, ...] = field(default_factory=tuple)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def tile(self, x: int, y: int) -> str:
        """Return the tile at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"position ({x}, {y}) is outside the map")
        return self.grid[y][x]

    def count(self, tile: str) -> int:
        """Return how many cells hold the given tile."""
        return sum(row.count(tile) for row in self.grid)

    def is_path_valid(self) -> bool:
        """Tell whether every collectible and the exit can be reached.

        Walls and enemies block the way; the search starts at the player.
        """
        seen: set[Position] = set()
        stack = [self.player]
        while stack:
            x, y = stack.pop()
            if (x, y) in seen or not (0 <= x < self.width and 0 <= y < self.height):
                continue
            if self.grid[y][x] in (WALL, ENEMY):
                continue
            seen.add((x, y))
            stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
        reached = [self.grid[y][x] for x, y in seen]
        return reached.count(COLLECTIBLE) == self.collectibles and EXIT in reached


def _positions(grid: list[list[str]], tile: str) -> list[Position]:
    return [
        (x, y)
        for y, row in enumerate(grid)
        for x, cell in enumerate(row)
        if cell == tile
    ]


def _surrounded(grid: list[list[str]], width: int) -> bool:
    height = len(grid)
    for y, row in enumerate(grid):
        for x, cell in enumerate(row[:width]):
            on_border = y in (0, height - 1) or x in (0, width - 1)
            if on_border and cell != WALL:
                return False
    return True


def parse_map(lines: Iterable[str]) -> GameMap:
    """Build and check a map from its text lines.

    A single trailing newline is removed from each line.  The checks run in
    a fixed order: characters, shape, border walls, element counts, and
    finally reachability.
    """
    rows = [line[:-1] if line.endswith("\n") else line for line in lines]
    if not rows:
        raise MapError("empty map")
    grid = [list(row) for row in rows]
    width = len(grid[0])

    for row in grid:
        if len(row) < width or any(cell not in VALID_TILES for cell in row[:width]):
            raise MapError("Invalid characters")
    if any(len(row) != width for row in grid):
        raise MapError("Map not rectangular")

    players = _positions(grid, PLAYER)
    exits = _positions(grid, EXIT)
    collectibles = len(_positions(grid, COLLECTIBLE))

    if not _surrounded(grid, width):
        raise MapError("Missing walls")
    if len(players) != 1 or len(exits) != 1 or collectibles < 1:
        raise MapError("Invalid P/E/C count")

    game_map = GameMap(
        grid=grid,
        player=players[-1],
        collectibles=collectibles,
        enemies=tuple(_positions(grid, ENEMY)),
    )
    if not game_map.is_path_valid():
        raise MapError("Unreachable elements")
    return game_map


def read_map(path: str | Path) -> GameMap:
    """Read a map file and check it."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise MapError(f"cannot read {path}") from exc
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return parse_map(lines)