"""Text rendering of an arena for terminal play."""
from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, TextIO

from zurts.types import CellStatus

if TYPE_CHECKING:
    from zurts.arena import Arena

EMPTY_CHAR = "."
WALL_CHAR = "*"
PLAYER_CHAR = "@"
DEAD_PLAYER_CHAR = "X"


def render(arena: Arena, message: str = "") -> str:
    """Return the grid followed by the status lines."""
    grid = [
        [
            EMPTY_CHAR if arena.get_cell_status(r, c) == CellStatus.EMPTY else WALL_CHAR
            for c in range(1, arena.cols + 1)
        ]
        for r in range(1, arena.rows + 1)
    ]

    # Stacked zurts show just one color.
    for zurt in arena.zurts:
        grid[zurt.row - 1][zurt.col - 1] = zurt.color

    player = arena.player
    if player is not None:
        grid[player.row - 1][player.col - 1] = (
            DEAD_PLAYER_CHAR if player.is_dead() else PLAYER_CHAR
        )

    lines = ["".join(row) for row in grid]
    lines.append("")
    if message:
        lines.append(message)
    lines.append(f"There are {arena.zurt_count()} zurts remaining.")
    if player is None:
        lines.append("There is no player!")
    elif player.is_dead():
        lines.append("The player is dead.")
    return "\n".join(lines)


def clear_screen(stream: TextIO | None = None) -> None:
    out = stream if stream is not None else sys.stdout
    term = os.environ.get("TERM")
    if term is None or term == "dumb":
        out.write("\n")
    else:
        out.write("\x1b[2J\x1b[H")
    out.flush()
