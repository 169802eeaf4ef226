"""Advisor - one-ply danger estimate and greedy move recommendation."""
from __future__ import annotations

from typing import TYPE_CHECKING

from zurts.movement import attempt_move
from zurts.types import CERTAIN_DEATH, Direction

if TYPE_CHECKING:
    from zurts.arena import Arena


def compute_danger(arena: Arena, row: int, col: int) -> int:
    """Number of zurts that could step onto (row, col) next turn.

    A zurt already on the cell is fatal, reported as CERTAIN_DEATH, which
    exceeds any attainable zurt count.
    """
    if arena.number_of_zurts_at(row, col) > 0:
        return CERTAIN_DEATH
    return sum(
        arena.number_of_zurts_at(nr, nc)
        for nr, nc in arena.grid.neighbors(row, col)
    )


def recommend_move(arena: Arena, row: int, col: int) -> Direction | None:
    """Recommend a direction for a player at (row, col), or None to stand.

    Only a direction strictly safer than standing is recommended; among
    equally safe directions the first in N, E, S, W order wins. The arena
    is never mutated.
    """
    stand_danger = compute_danger(arena, row, col)
    if stand_danger == 0:
        return None

    best_danger = stand_danger
    best_dir: Direction | None = None
    for direction in Direction:
        dest = attempt_move(arena.grid, direction, row, col)
        if dest is None:
            continue
        danger = compute_danger(arena, *dest)
        if danger < best_danger:
            best_danger = danger
            best_dir = direction
    return best_dir
