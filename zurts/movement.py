"""Single-step movement resolution shared by zurts, the player and the advisor."""
from __future__ import annotations

from typing import TYPE_CHECKING

from zurts.types import CellStatus, Direction, Position

if TYPE_CHECKING:
    from zurts.grid import Grid


def attempt_move(
    grid: Grid, direction: Direction, row: int, col: int
) -> Position | None:
    """Return the cell one step from (row, col) in *direction*.

    Returns None without touching anything if that step would leave the
    grid or land on a wall.
    """
    dr, dc = Direction(direction).delta
    nr, nc = row + dr, col + dc
    if not grid.in_bounds(nr, nc):
        return None
    if grid.status_at(nr, nc) == CellStatus.WALL:
        return None
    return (nr, nc)
