"""Game state: the player's moves, exits and the end of a game."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

from solong.game_map import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap

OPEN_EXIT = "X"
"""Tile of an exit that opened once every collectible was taken."""

KEY_ESCAPE = 65307
KEY_A = 97
KEY_D = 100
KEY_S = 115
KEY_W = 119


class Direction(Enum):
    """A direction the player can step in, as a (dx, dy) step."""

    DOWN = (0, 1)
    UP = (0, -1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_KEY_DIRECTIONS = {
    KEY_A: Direction.DOWN,
    KEY_W: Direction.UP,
    KEY_D: Direction.RIGHT,
    KEY_S: Direction.LEFT,
}


class Game:
    """A game in progress on a validated map.

    Every successful step is counted and the new count is written, one per
    line, to ``out`` (standard output when not given).
    """

    def __init__(self, game_map: GameMap, out: TextIO | None = None) -> None:
        self.map = game_map
        self._cells = list(game_map.cells)
        self._out = out
        self.moves = 0
        self.exits = 0
        self.facing = Direction.DOWN

    @property
    def cells(self) -> str:
        """The current tiles, row after row."""
        return "".join(self._cells)

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def rows(self) -> list[str]:
        """The shown rows of the map, top to bottom."""
        width = self.map.width
        cells = self.cells
        return [cells[y * width:(y + 1) * width] for y in range(self.map.height)]

    def move(self, direction: Direction) -> bool:
        """Step the player one tile; return whether the player moved.

        Walls and closed exits block the way. The player faces
        ``direction`` whether or not the step succeeds.
        """
        self.facing = direction
        position = self._cells.index(PLAYER)
        target = position + direction.dx + direction.dy * self.map.width
        if not 0 <= target < len(self._cells):
            return False
        if self._cells[target] in (WALL, EXIT):
            return False
        self._cells[target] = PLAYER
        self._cells[position] = FLOOR
        self.moves += 1
        self.out.write(f"{self.moves}\n")
        return True

    def unlock_exits(self) -> None:
        """Open every exit once no collectible is left on the map."""
        if COLLECTIBLE in self._cells:
            return
        for index, cell in enumerate(self._cells):
            if cell == EXIT:
                self._cells[index] = OPEN_EXIT
                self.exits += 1

    def is_finished(self) -> bool:
        """Whether the player stands on an opened exit."""
        if EXIT in self._cells:
            return False
        if self.exits <= 1 and OPEN_EXIT not in self._cells:
            return True
        return self._cells.count(OPEN_EXIT) == self.exits - 1

    def key_press(self, keycode: int) -> bool:
        """Handle one key; return False when the game should end."""
        self.unlock_exits()
        if keycode == KEY_ESCAPE:
            return False
        direction = _KEY_DIRECTIONS.get(keycode)
        if direction is not None:
            self.move(direction)
        return not self.is_finished()