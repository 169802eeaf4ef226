"""Game - level setup and the alternating player/zurt turn loop."""
from __future__ import annotations

import os
import random
from typing import Any, Callable

from zurts.advisor import recommend_move
from zurts.arena import Arena
from zurts.commands import (
    FollowAdvice,
    MovePlayer,
    StandPlayer,
    ThrowColor,
    parse_player_move,
    parse_throw,
)
from zurts.config import GameConfig
from zurts.display import clear_screen, render
from zurts.signals import SignalBus
from zurts.types import COLORS, MAXZURTS, CellStatus, CommandError, GameSetupError

PLAYER_PROMPT = "Your move (n/e/s/w/x or nothing): "
THROW_PROMPT = "Color thrown and direction (e.g., Rn or bw): "

Reader = Callable[[str], str]
Writer = Callable[[str], None]


class Game:
    def __init__(self, config: GameConfig, bus: SignalBus | None = None) -> None:
        rows, cols, n_zurts = config.rows, config.cols, config.zurts
        if n_zurts < 0 or n_zurts > MAXZURTS:
            raise GameSetupError(
                f"Game created with invalid number of zurts:  {n_zurts}"
            )
        n_empty = rows * cols - n_zurts - 1
        if n_empty < 0:
            raise GameSetupError(
                f"Game created with a {rows} by {cols} arena, which is too "
                f"small too hold a player and {n_zurts} zurts!"
            )

        seed = config.seed
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._bus = bus if bus is not None else SignalBus()
        self._turn = 0
        self._arena = Arena(rows, cols, rng=self._rng, bus=self._bus)

        self._handlers: dict[type[Any], Callable[[Any], str]] = {
            MovePlayer: self._handle_move,
            StandPlayer: self._handle_stand,
            FollowAdvice: self._handle_advice,
            ThrowColor: self._handle_throw,
        }

        self._place_walls(int(config.wall_density * n_empty))
        self._place_player()
        self._place_zurts(n_zurts)

    # -- Setup --

    def _random_cell(self) -> tuple[int, int]:
        return (
            self._rng.randint(1, self._arena.rows),
            self._rng.randint(1, self._arena.cols),
        )

    def _place_walls(self, n_walls: int) -> None:
        while n_walls > 0:
            r, c = self._random_cell()
            if self._arena.get_cell_status(r, c) == CellStatus.WALL:
                continue
            self._arena.set_cell_status(r, c, CellStatus.WALL)
            n_walls -= 1

    def _place_player(self) -> None:
        while True:
            r, c = self._random_cell()
            if self._arena.get_cell_status(r, c) == CellStatus.EMPTY:
                break
        self._arena.add_player(r, c)

    def _place_zurts(self, n_zurts: int) -> None:
        while n_zurts > 0:
            r, c = self._random_cell()
            if self._arena.get_cell_status(r, c) != CellStatus.EMPTY:
                continue
            if self._arena.player_position() == (r, c):
                continue
            self._arena.add_zurt(r, c, self._rng.choice(COLORS))
            n_zurts -= 1

    # -- Properties --

    @property
    def arena(self) -> Arena:
        return self._arena

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def turn(self) -> int:
        return self._turn

    def is_over(self) -> bool:
        return self._arena.player_is_dead() or self._arena.zurt_count() == 0

    def player_won(self) -> bool:
        return not self._arena.player_is_dead() and self._arena.zurt_count() == 0

    # -- Commands --

    def _handle_move(self, cmd: MovePlayer) -> str:
        return self._arena.move_player(cmd.direction)

    def _handle_stand(self, cmd: StandPlayer) -> str:
        return self._arena.player_stand()

    def _handle_advice(self, cmd: FollowAdvice) -> str:
        player = self._arena.player
        if player is None:
            raise RuntimeError("Arena has no player")
        direction = recommend_move(self._arena, player.row, player.col)
        if direction is None:
            return self._arena.player_stand()
        return self._arena.move_player(direction)

    def _handle_throw(self, cmd: ThrowColor) -> str:
        return self._arena.move_zurts(cmd.color, cmd.direction)

    def apply(self, cmd: Any) -> str:
        """Run one turn for *cmd* and flush its signals.

        Raises ``TypeError`` if the command type is unknown.
        """
        handler = self._handlers.get(type(cmd))
        if handler is None:
            raise TypeError(f"No handler registered for {type(cmd).__qualname__}")
        self._turn += 1
        msg = handler(cmd)
        self._bus.flush()
        return msg

    # -- Loop --

    def _prompt(
        self, read: Reader, write: Writer, prompt: str, parse: Callable[[str], Any]
    ) -> Any:
        while True:
            try:
                return parse(read(prompt))
            except CommandError as exc:
                write(str(exc))

    def take_player_turn(self, read: Reader, write: Writer) -> str:
        return self.apply(self._prompt(read, write, PLAYER_PROMPT, parse_player_move))

    def take_zurts_turn(self, read: Reader, write: Writer) -> str:
        return self.apply(self._prompt(read, write, THROW_PROMPT, parse_throw))

    def play(
        self,
        read: Reader = input,
        write: Writer = print,
        display: Writer | None = None,
    ) -> bool:
        """Play until the player dies or every zurt is gone.

        Returns True if the player won.
        """
        def show(text: str) -> None:
            if display is not None:
                display(text)
            else:
                clear_screen()
                write(text)

        show(render(self._arena))
        while not self.is_over():
            msg = self.take_player_turn(read, write)
            show(render(self._arena, msg))
            if self._arena.player_is_dead():
                break
            msg = self.take_zurts_turn(read, write)
            show(render(self._arena, msg))

        won = self.player_won()
        write("You win." if won else "You lose.")
        return won
