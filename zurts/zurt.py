"""Zurt - a colored, health-bearing actor with random or forced movement."""
from __future__ import annotations

import random
from typing import TYPE_CHECKING

from zurts.movement import attempt_move
from zurts.types import COLORS, ZURT_HEALTH, ArenaError, Direction

if TYPE_CHECKING:
    from zurts.grid import Grid


class Zurt:
    """A zurt at a 1-based (row, col) position.

    The grid is passed into each move rather than stored, so a zurt never
    holds a reference to the arena that owns it.
    """

    def __init__(self, grid: Grid, row: int, col: int, color: str) -> None:
        if not grid.in_bounds(row, col):
            raise ArenaError(
                f"Zurt created with invalid coordinates ({row},{col})!"
            )
        if color not in COLORS:
            raise ArenaError(f"Zurt created with invalid color {color}")
        self._row = row
        self._col = col
        self._color = color
        self._health = ZURT_HEALTH

    def __repr__(self) -> str:
        return (
            f"Zurt({self._color!r} at ({self._row},{self._col}), "
            f"health={self._health})"
        )

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def position(self) -> tuple[int, int]:
        return (self._row, self._col)

    @property
    def color(self) -> str:
        return self._color

    @property
    def health(self) -> int:
        return self._health

    def is_dead(self) -> bool:
        return self._health == 0

    def force_move(self, grid: Grid, direction: Direction) -> bool:
        """Move in *direction*; lose one health if the move is blocked."""
        if self.is_dead():
            return False
        dest = attempt_move(grid, direction, self._row, self._col)
        if dest is None:
            self._health -= 1
            return False
        self._row, self._col = dest
        return True

    def move(self, grid: Grid, rng: random.Random) -> bool:
        """Try one random direction; a blocked random move costs nothing."""
        if self.is_dead():
            return False
        direction = Direction(rng.randint(0, len(Direction) - 1))
        dest = attempt_move(grid, direction, self._row, self._col)
        if dest is None:
            return False
        self._row, self._col = dest
        return True
