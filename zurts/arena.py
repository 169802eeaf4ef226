"""Arena - the grid, the player and the zurt population."""
from __future__ import annotations

import random
from typing import TYPE_CHECKING, Any

from zurts.grid import Grid
from zurts.player import WALKED_INTO_ZURT, Player
from zurts.types import COLORS, MAXZURTS, CellStatus, Direction, Position
from zurts.zurt import Zurt

if TYPE_CHECKING:
    from zurts.signals import SignalBus

SOME_DESTROYED = "Some zurts have been destroyed."
NONE_DESTROYED = "No zurts were destroyed."


class Arena:
    """Owns the grid, at most one player and up to MAXZURTS zurts.

    All randomness comes from *rng*; pass a seeded ``random.Random`` for
    reproducible games. When *bus* is given, every state change is
    published on it as a signal.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        rng: random.Random | None = None,
        bus: SignalBus | None = None,
    ) -> None:
        self._grid = Grid(rows, cols)
        self._player: Player | None = None
        self._zurts: list[Zurt] = []
        self._rng = rng if rng is not None else random.Random()
        self._bus = bus

    # -- Queries --

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def player(self) -> Player | None:
        return self._player

    @property
    def zurts(self) -> tuple[Zurt, ...]:
        return tuple(self._zurts)

    def zurt_count(self) -> int:
        return len(self._zurts)

    def get_cell_status(self, row: int, col: int) -> CellStatus:
        return self._grid.status_at(row, col)

    def number_of_zurts_at(self, row: int, col: int) -> int:
        return sum(1 for z in self._zurts if z.row == row and z.col == col)

    def player_position(self) -> Position | None:
        if self._player is None:
            return None
        return self._player.position

    def player_is_dead(self) -> bool:
        return self._player is not None and self._player.is_dead()

    # -- Setup --

    def set_cell_status(self, row: int, col: int, status: CellStatus) -> None:
        self._grid.set_status(row, col, status)

    def add_zurt(self, row: int, col: int, color: str) -> bool:
        if not self._grid.in_bounds(row, col):
            return False
        if self._grid.status_at(row, col) != CellStatus.EMPTY:
            return False
        if self._player is not None and self._player.position == (row, col):
            return False
        if color not in COLORS:
            return False
        if len(self._zurts) == MAXZURTS:
            return False
        self._zurts.append(Zurt(self._grid, row, col, color))
        return True

    def add_player(self, row: int, col: int) -> bool:
        if self._player is not None or not self._grid.in_bounds(row, col):
            return False
        if self._grid.status_at(row, col) != CellStatus.EMPTY:
            return False
        if self.number_of_zurts_at(row, col) > 0:
            return False
        self._player = Player(self, row, col)
        return True

    # -- Turns --

    def _publish(self, signal_name: str, **data: Any) -> None:
        if self._bus is not None:
            self._bus.publish(signal_name, **data)

    def _require_player(self) -> Player:
        if self._player is None:
            raise RuntimeError("Arena has no player")
        return self._player

    def player_stand(self) -> str:
        player = self._require_player()
        self._publish("player_stood", row=player.row, col=player.col)
        return player.stand()

    def move_player(self, direction: Direction) -> str:
        player = self._require_player()
        direction = Direction(direction)
        before = player.position
        msg = player.move(self, direction)
        row, col = player.position
        if msg == WALKED_INTO_ZURT:
            self._publish(
                "player_died", row=row, col=col, cause="walked_into_zurt"
            )
        elif player.position == before:
            self._publish(
                "player_blocked", row=row, col=col, direction=direction.name
            )
        else:
            self._publish(
                "player_moved", row=row, col=col, direction=direction.name
            )
        return msg

    def move_zurts(self, color: str, direction: Direction) -> str:
        """Run one population turn for the thrown *color* and *direction*.

        A single coin flip decides whether every zurt of that color follows
        the throw this turn; all others move randomly. Traversal runs from
        the back so a destroyed zurt can be replaced by the last one,
        which has already been visited.
        """
        direction = Direction(direction)
        will_follow = self._rng.randint(0, 1) == 0

        originally = len(self._zurts)
        for k in range(len(self._zurts) - 1, -1, -1):
            zurt = self._zurts[k]
            forced = will_follow and zurt.color == color
            if forced:
                moved = zurt.force_move(self._grid, direction)
            else:
                moved = zurt.move(self._grid, self._rng)
            self._publish(
                "zurt_moved",
                row=zurt.row,
                col=zurt.col,
                color=zurt.color,
                forced=forced,
                moved=moved,
            )
            if forced and not moved:
                self._publish(
                    "zurt_damaged",
                    row=zurt.row,
                    col=zurt.col,
                    color=zurt.color,
                    health=zurt.health,
                )

            player = self._player
            if player is not None and zurt.position == player.position:
                if not player.is_dead():
                    self._publish(
                        "player_died",
                        row=player.row,
                        col=player.col,
                        cause="zurt_collision",
                    )
                player.set_dead()

            if zurt.is_dead():
                self._zurts[k] = self._zurts[-1]
                self._zurts.pop()
                self._publish(
                    "zurt_destroyed", row=zurt.row, col=zurt.col, color=zurt.color
                )

        destroyed = originally - len(self._zurts)
        self._publish(
            "zurts_turn",
            color=color,
            direction=direction.name,
            followed=will_follow,
            destroyed=destroyed,
            remaining=len(self._zurts),
        )
        return SOME_DESTROYED if destroyed > 0 else NONE_DESTROYED
