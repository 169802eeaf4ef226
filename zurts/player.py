"""Player - the single user-directed entity in an arena."""
from __future__ import annotations

from typing import TYPE_CHECKING

from zurts.movement import attempt_move
from zurts.types import ArenaError, Direction

if TYPE_CHECKING:
    from zurts.arena import Arena

STOOD = "Player stands."
BLOCKED = "Player couldn't move; player stands."
WALKED_INTO_ZURT = "Player walked into a zurt and died."


class Player:
    def __init__(self, arena: Arena, row: int, col: int) -> None:
        if not arena.grid.in_bounds(row, col):
            raise ArenaError(
                f"Player created with invalid coordinates ({row},{col})!"
            )
        self._row = row
        self._col = col
        self._dead = False

    def __repr__(self) -> str:
        state = "dead" if self._dead else "alive"
        return f"Player(({self._row},{self._col}), {state})"

    @property
    def row(self) -> int:
        return self._row

    @property
    def col(self) -> int:
        return self._col

    @property
    def position(self) -> tuple[int, int]:
        return (self._row, self._col)

    def is_dead(self) -> bool:
        return self._dead

    def set_dead(self) -> None:
        self._dead = True

    def stand(self) -> str:
        return STOOD

    def move(self, arena: Arena, direction: Direction) -> str:
        """Step in *direction*, dying if the destination holds a zurt."""
        direction = Direction(direction)
        dest = attempt_move(arena.grid, direction, self._row, self._col)
        if dest is None:
            return BLOCKED
        self._row, self._col = dest
        if arena.number_of_zurts_at(*dest) > 0:
            self.set_dead()
            return WALKED_INTO_ZURT
        return f"Player moved {direction.name.lower()}."
