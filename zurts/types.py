"""Shared constants, enums and exceptions for zurts."""
from __future__ import annotations

from enum import IntEnum

MAXROWS = 20
MAXCOLS = 20
MAXZURTS = 100
ZURT_HEALTH = 3
WALL_DENSITY = 0.13

COLORS = ("R", "Y", "B")

# Returned by compute_danger for a cell that already holds a zurt.
CERTAIN_DEATH = MAXZURTS + 1

Position = tuple[int, int]


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def delta(self) -> Position:
        return _DELTAS[self]


_DELTAS: dict[Direction, Position] = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}


class CellStatus(IntEnum):
    EMPTY = 0
    WALL = 1


class ZurtsError(Exception):
    """Base class for all zurts errors."""


class ArenaError(ZurtsError, ValueError):
    """Raised on contract violations: bad arena size, position or color."""


class GameSetupError(ZurtsError, ValueError):
    """Raised when a game cannot be built from its configuration."""


class CommandError(ZurtsError, ValueError):
    """Raised when driver input cannot be parsed into a command."""
