"""Grid - bounded 2D cell classification, 1-based."""
from __future__ import annotations

from zurts.types import MAXCOLS, MAXROWS, ArenaError, CellStatus


class Grid:
    def __init__(self, rows: int, cols: int) -> None:
        if not (1 <= rows <= MAXROWS and 1 <= cols <= MAXCOLS):
            raise ArenaError(f"Arena created with invalid size {rows} by {cols}!")
        self._rows = rows
        self._cols = cols
        self._cells: list[list[CellStatus]] = [
            [CellStatus.EMPTY] * cols for _ in range(rows)
        ]

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    def in_bounds(self, row: int, col: int) -> bool:
        return 1 <= row <= self._rows and 1 <= col <= self._cols

    def _check_pos(self, row: int, col: int) -> None:
        if not self.in_bounds(row, col):
            raise ArenaError(f"Invalid arena position ({row},{col})")

    def status_at(self, row: int, col: int) -> CellStatus:
        self._check_pos(row, col)
        return self._cells[row - 1][col - 1]

    def set_status(self, row: int, col: int, status: CellStatus) -> None:
        self._check_pos(row, col)
        self._cells[row - 1][col - 1] = CellStatus(status)

    def neighbors(self, row: int, col: int) -> list[tuple[int, int]]:
        """In-bounds orthogonal neighbors of (row, col), in N, S, W, E order."""
        result: list[tuple[int, int]] = []
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = row + dr, col + dc
            if self.in_bounds(nr, nc):
                result.append((nr, nc))
        return result

    def empty_cells(self) -> list[tuple[int, int]]:
        return [
            (r, c)
            for r in range(1, self._rows + 1)
            for c in range(1, self._cols + 1)
            if self._cells[r - 1][c - 1] == CellStatus.EMPTY
        ]
