"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from zurts.types import WALL_DENSITY, GameSetupError


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one game.

    Attributes:
        rows: Arena height, 1..MAXROWS.
        cols: Arena width, 1..MAXCOLS.
        zurts: Starting zurt population, 0..MAXZURTS.
        seed: RNG seed. None draws one from os.urandom.
        wall_density: Fraction of the free cells turned into walls.
    """

    rows: int = 10
    cols: int = 12
    zurts: int = 50
    seed: int | None = None
    wall_density: float = WALL_DENSITY

    def __post_init__(self) -> None:
        if not 0.0 <= self.wall_density <= 1.0:
            raise GameSetupError(
                f"wall_density must be in [0, 1], got {self.wall_density}"
            )

    @classmethod
    def mini(cls, seed: int | None = None) -> GameConfig:
        """A 3x5 arena with two zurts."""
        return cls(rows=3, cols=5, zurts=2, seed=seed)
