"""zurts - a turn-based grid game of dodging colored zurts."""

from zurts.advisor import compute_danger, recommend_move
from zurts.arena import Arena
from zurts.chronicle import ChronicleRecorder
from zurts.commands import (
    FollowAdvice,
    MovePlayer,
    StandPlayer,
    ThrowColor,
    parse_player_move,
    parse_throw,
)
from zurts.config import GameConfig
from zurts.display import render
from zurts.game import Game
from zurts.grid import Grid
from zurts.player import Player
from zurts.signals import SignalBus
from zurts.types import (
    CERTAIN_DEATH,
    COLORS,
    MAXCOLS,
    MAXROWS,
    MAXZURTS,
    ZURT_HEALTH,
    ArenaError,
    CellStatus,
    CommandError,
    Direction,
    GameSetupError,
    ZurtsError,
)
from zurts.zurt import Zurt

__all__ = [
    "Arena",
    "Grid",
    "Zurt",
    "Player",
    "Game",
    "GameConfig",
    "SignalBus",
    "ChronicleRecorder",
    "compute_danger",
    "recommend_move",
    "render",
    "MovePlayer",
    "StandPlayer",
    "FollowAdvice",
    "ThrowColor",
    "parse_player_move",
    "parse_throw",
    "Direction",
    "CellStatus",
    "COLORS",
    "CERTAIN_DEATH",
    "MAXROWS",
    "MAXCOLS",
    "MAXZURTS",
    "ZURT_HEALTH",
    "ZurtsError",
    "ArenaError",
    "GameSetupError",
    "CommandError",
]
