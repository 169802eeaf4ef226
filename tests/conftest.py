"""Shared fixtures for zurts tests."""
from __future__ import annotations

from typing import Sequence

import pytest

from zurts import Arena, SignalBus


class FixedRandom:
    """Stand-in for random.Random with fixed, inspectable draws.

    ``randint(0, 1)`` answers the follow coin (0 means follow) and every
    other ``randint`` call returns *direction* clamped into its range.
    """

    def __init__(self, follow: bool = True, direction: int = 0) -> None:
        self.follow = follow
        self.direction = direction
        self.coin_flips = 0
        self.direction_draws = 0

    def randint(self, a: int, b: int) -> int:
        if (a, b) == (0, 1):
            self.coin_flips += 1
            return 0 if self.follow else 1
        self.direction_draws += 1
        return min(max(self.direction, a), b)

    def choice(self, seq: Sequence[str]) -> str:
        return seq[0]


@pytest.fixture
def bus() -> SignalBus:
    return SignalBus()


@pytest.fixture
def rng() -> FixedRandom:
    return FixedRandom()


@pytest.fixture
def open3x3(rng: FixedRandom, bus: SignalBus) -> Arena:
    return Arena(3, 3, rng=rng, bus=bus)  # type: ignore[arg-type]
