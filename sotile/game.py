"""Game state and player movement."""

from __future__ import annotations

import enum
from collections.abc import Callable

from sotile.gamemap import COLLECTIBLE, EXIT, FLOOR, WALL, GameMap


class Key(enum.IntEnum):
    """Key symbols the game reacts to."""

    ESC = 0xFF1B
    W = ord("w")
    A = ord("a")
    S = ord("s")
    D = ord("d")


class Facing(enum.Enum):
    """Direction the player sprite faces."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Outcome(enum.Enum):
    """Result of a key press or move."""

    IGNORED = "ignored"
    BLOCKED = "blocked"
    MOVED = "moved"
    CAUGHT = "caught"
    WON = "won"
    QUIT = "quit"


_TERMINAL = frozenset({Outcome.CAUGHT, Outcome.WON, Outcome.QUIT})

_MOVES = {
    Key.W: (0, -1),
    Key.A: (-1, 0),
    Key.S: (0, 1),
    Key.D: (1, 0),
}


class Game:
    """A running game on a checked map."""

    def __init__(self, game_map: GameMap, echo: Callable[[str], None] | None = print):
        self.map = game_map
        self.moves = 0
        self.collected = 0
        self.facing = Facing.DOWN
        self.outcome: Outcome | None = None
        self._echo = echo

    @property
    def over(self) -> bool:
        return self.outcome in _TERMINAL

    def _say(self, message: str) -> None:
        if self._echo is not None:
            self._echo(message)

    def _can_enter(self, x: int, y: int) -> bool:
        if not (0 <= x < self.map.width and 0 <= y < self.map.height):
            return False
        tile = self.map.grid[y][x]
        if tile == WALL:
            return False
        return not (tile == EXIT and self.collected != self.map.collectibles)

    def _turn(self, dx: int, dy: int) -> None:
        if dx == 1:
            self.facing = Facing.RIGHT
        elif dx == -1:
            self.facing = Facing.LEFT
        elif dy == 1:
            self.facing = Facing.DOWN
        elif dy == -1:
            self.facing = Facing.UP

    def move(self, dx: int, dy: int) -> Outcome:
        """Try to move the player by (dx, dy) and report what happened."""
        if self.over:
            return self.outcome  # type: ignore[return-value]
        old_x, old_y = self.map.player
        new_x, new_y = old_x + dx, old_y + dy
        if not self._can_enter(new_x, new_y):
            return Outcome.BLOCKED
        self._say(f"Player moving to: ({new_x}, {new_y})")
        if (new_x, new_y) in self.map.enemies:
            self._say("💀 Game Over! You were caught by an enemy.")
            self.outcome = Outcome.CAUGHT
            return self.outcome

        self.moves += 1
        self._say(f"Moves: {self.moves}")
        self._turn(dx, dy)
        grid = self.map.grid
        if grid[new_y][new_x] == COLLECTIBLE:
            self.collected += 1
            grid[new_y][new_x] = FLOOR
        grid[old_y][old_x] = FLOOR
        self.map.player = (new_x, new_y)

        if grid[new_y][new_x] == EXIT and self.collected == self.map.collectibles:
            self._say(f"CONGRATS! Total moves: {self.moves}")
            self.outcome = Outcome.WON
        else:
            self.outcome = Outcome.MOVED
        return self.outcome

    def key_press(self, key: int) -> Outcome:
        """React to a key symbol: Escape quits, W/A/S/D move."""
        self._say(f"Key pressed: {int(key)}")
        if key == Key.ESC:
            self.outcome = Outcome.QUIT
            return self.outcome
        try:
            step = _MOVES[Key(key)]
        except (ValueError, KeyError):
            return Outcome.IGNORED
        return self.move(*step)