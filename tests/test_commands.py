"""Tests for driver input parsing."""
from __future__ import annotations

import pytest

from zurts import (
    CommandError,
    Direction,
    FollowAdvice,
    MovePlayer,
    StandPlayer,
    ThrowColor,
    parse_player_move,
    parse_throw,
)
from zurts.commands import char_to_dir


class TestCharToDir:
    @pytest.mark.parametrize(
        "ch,expected",
        [("n", Direction.NORTH), ("E", Direction.EAST), ("s", Direction.SOUTH), ("W", Direction.WEST)],
    )
    def test_known(self, ch: str, expected: Direction) -> None:
        assert char_to_dir(ch) == expected

    def test_unknown(self) -> None:
        assert char_to_dir("q") is None


class TestParsePlayerMove:
    def test_empty_follows_advice(self) -> None:
        assert parse_player_move("") == FollowAdvice()

    @pytest.mark.parametrize("text", ["x", "X"])
    def test_stand(self, text: str) -> None:
        assert parse_player_move(text) == StandPlayer()

    def test_direction(self) -> None:
        assert parse_player_move("s") == MovePlayer(Direction.SOUTH)
        assert parse_player_move("N") == MovePlayer(Direction.NORTH)

    @pytest.mark.parametrize("text", ["q", "nn", " ", "north"])
    def test_rejects(self, text: str) -> None:
        with pytest.raises(CommandError, match="Player move must be nothing"):
            parse_player_move(text)


class TestParseThrow:
    def test_valid(self) -> None:
        assert parse_throw("Rn") == ThrowColor("R", Direction.NORTH)
        assert parse_throw("bw") == ThrowColor("B", Direction.WEST)
        assert parse_throw("yE") == ThrowColor("Y", Direction.EAST)

    @pytest.mark.parametrize("text", ["", "R", "Rnn"])
    def test_wrong_length(self, text: str) -> None:
        with pytest.raises(CommandError, match="color followed by a direction"):
            parse_throw(text)

    def test_bad_color(self) -> None:
        with pytest.raises(CommandError, match="Color must be upper or lower R, Y, or B."):
            parse_throw("Gn")

    def test_bad_direction(self) -> None:
        with pytest.raises(CommandError, match="Direction must be n, e, s, or w."):
            parse_throw("Rx")

    def test_commands_are_frozen(self) -> None:
        cmd = parse_throw("Rs")
        with pytest.raises(AttributeError):
            cmd.color = "B"  # type: ignore[misc]
