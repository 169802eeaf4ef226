"""Driver commands and the text parsers that build them."""
from __future__ import annotations

from dataclasses import dataclass

from zurts.types import COLORS, CommandError, Direction

_DIR_CHARS = {
    "n": Direction.NORTH,
    "e": Direction.EAST,
    "s": Direction.SOUTH,
    "w": Direction.WEST,
}


@dataclass(frozen=True)
class MovePlayer:
    direction: Direction


@dataclass(frozen=True)
class StandPlayer:
    pass


@dataclass(frozen=True)
class FollowAdvice:
    """Let the advisor choose between standing and moving."""


@dataclass(frozen=True)
class ThrowColor:
    color: str
    direction: Direction


PlayerCommand = MovePlayer | StandPlayer | FollowAdvice


def char_to_dir(ch: str) -> Direction | None:
    return _DIR_CHARS.get(ch.lower())


def parse_player_move(text: str) -> PlayerCommand:
    """Parse a player-turn line: empty, ``x``, or one of ``n e s w``."""
    if text == "":
        return FollowAdvice()
    if len(text) == 1:
        if text.lower() == "x":
            return StandPlayer()
        direction = char_to_dir(text)
        if direction is not None:
            return MovePlayer(direction)
    raise CommandError("Player move must be nothing, or 1 character n/e/s/w/x.")


def parse_throw(text: str) -> ThrowColor:
    """Parse a zurt-turn line such as ``Rn`` or ``bw``."""
    if len(text) != 2:
        raise CommandError("You must specify a color followed by a direction.")
    color = text[0].upper()
    if color not in COLORS:
        raise CommandError("Color must be upper or lower R, Y, or B.")
    direction = char_to_dir(text[1])
    if direction is None:
        raise CommandError("Direction must be n, e, s, or w.")
    return ThrowColor(color, direction)
