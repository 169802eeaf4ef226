"""
Test suite for the advisor.

Tests cover:
- compute_danger on occupied, adjacent and edge cells
- recommend_move choices, tie order and the never-worse-than-standing rule
"""
from __future__ import annotations

import random

import pytest

from zurts import (
    CERTAIN_DEATH,
    Arena,
    CellStatus,
    Direction,
    compute_danger,
    recommend_move,
)
from zurts.movement import attempt_move


class TestComputeDanger:
    def test_empty_arena_is_safe(self) -> None:
        assert compute_danger(Arena(3, 3), 2, 2) == 0

    def test_occupied_cell_is_certain_death(self) -> None:
        arena = Arena(3, 3)
        arena.add_zurt(2, 2, "R")
        assert compute_danger(arena, 2, 2) == CERTAIN_DEATH
        assert CERTAIN_DEATH > 100

    def test_sums_orthogonal_neighbors(self) -> None:
        arena = Arena(3, 3)
        arena.add_zurt(1, 2, "R")
        arena.add_zurt(1, 2, "Y")
        arena.add_zurt(2, 3, "B")
        arena.add_zurt(1, 1, "B")  # diagonal, ignored
        assert compute_danger(arena, 2, 2) == 3

    def test_edge_cell_only_counts_in_bounds(self) -> None:
        arena = Arena(3, 3)
        arena.add_zurt(1, 2, "R")
        arena.add_zurt(2, 1, "R")
        assert compute_danger(arena, 1, 1) == 2

    def test_walls_do_not_shield(self) -> None:
        arena = Arena(3, 3)
        arena.add_zurt(1, 2, "R")
        arena.set_cell_status(2, 2, CellStatus.WALL)
        assert compute_danger(arena, 1, 1) == 1

    def test_matches_definition_on_random_arenas(self) -> None:
        rng = random.Random(5)
        for _ in range(20):
            arena = Arena(rng.randint(1, 6), rng.randint(1, 6))
            for _ in range(rng.randint(0, 15)):
                arena.add_zurt(
                    rng.randint(1, arena.rows), rng.randint(1, arena.cols), "R"
                )
            for r in range(1, arena.rows + 1):
                for c in range(1, arena.cols + 1):
                    here = arena.number_of_zurts_at(r, c)
                    danger = compute_danger(arena, r, c)
                    if here > 0:
                        assert danger == CERTAIN_DEATH
                    else:
                        expected = sum(
                            arena.number_of_zurts_at(r + dr, c + dc)
                            for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1))
                            if arena.grid.in_bounds(r + dr, c + dc)
                        )
                        assert danger == expected


class TestRecommendMove:
    def test_stand_when_safe(self) -> None:
        arena = Arena(3, 3)
        arena.add_zurt(1, 1, "R")
        assert recommend_move(arena, 3, 3) is None

    def test_moves_away_from_adjacent_zurt(self) -> None:
        arena = Arena(3, 3)
        arena.add_zurt(2, 1, "R")
        arena.add_player(2, 2)
        assert compute_danger(arena, 2, 2) == 1
        choice = recommend_move(arena, 2, 2)
        assert choice is not None
        assert choice != Direction.WEST
        # North is the first zero-danger cell in N, E, S, W order.
        assert choice == Direction.NORTH

    def test_tie_goes_to_first_in_scan_order(self) -> None:
        arena = Arena(3, 3)
        arena.add_zurt(2, 1, "R")
        arena.set_cell_status(1, 2, CellStatus.WALL)
        assert recommend_move(arena, 2, 2) == Direction.EAST

    def test_stand_when_nothing_is_better(self) -> None:
        arena = Arena(1, 3)
        arena.add_zurt(1, 1, "R")
        arena.add_zurt(1, 3, "R")
        assert recommend_move(arena, 1, 2) is None

    def test_stand_when_boxed_in_by_walls(self) -> None:
        arena = Arena(3, 3)
        arena.add_zurt(1, 1, "R")
        for r, c in [(1, 2), (2, 1), (2, 3), (3, 2)]:
            arena.set_cell_status(r, c, CellStatus.WALL)
        arena.add_zurt(1, 3, "Y")
        # (2, 2) only neighbors walls, so it is safe and standing is advised.
        assert recommend_move(arena, 2, 2) is None

    def test_prefers_lowest_danger_over_first_improvement(self) -> None:
        arena = Arena(3, 5)
        arena.add_zurt(2, 2, "R")
        arena.add_zurt(2, 2, "Y")
        arena.add_zurt(1, 2, "B")
        # At (2, 3): standing scores 2, north (1, 3) scores 1, east (2, 4)
        # scores 0.
        assert compute_danger(arena, 2, 3) == 2
        assert compute_danger(arena, 1, 3) == 1
        assert compute_danger(arena, 2, 4) == 0
        assert recommend_move(arena, 2, 3) == Direction.EAST

    def test_never_recommends_move_into_zurt(self) -> None:
        arena = Arena(2, 2)
        arena.add_zurt(1, 2, "R")
        arena.add_zurt(2, 1, "R")
        assert recommend_move(arena, 1, 1) is None

    def test_does_not_mutate_arena(self) -> None:
        arena = Arena(3, 3)
        arena.add_zurt(2, 1, "R")
        arena.add_player(2, 2)
        recommend_move(arena, 2, 2)
        assert arena.player_position() == (2, 2)
        assert [z.position for z in arena.zurts] == [(2, 1)]

    @pytest.mark.parametrize("seed", range(10))
    def test_never_worse_than_standing(self, seed: int) -> None:
        rng = random.Random(seed)
        arena = Arena(6, 6)
        for _ in range(8):
            r, c = rng.randint(1, 6), rng.randint(1, 6)
            arena.set_cell_status(r, c, CellStatus.WALL)
        for _ in range(12):
            arena.add_zurt(rng.randint(1, 6), rng.randint(1, 6), "B")

        for r in range(1, 7):
            for c in range(1, 7):
                if arena.get_cell_status(r, c) == CellStatus.WALL:
                    continue
                stand = compute_danger(arena, r, c)
                choice = recommend_move(arena, r, c)
                if choice is None:
                    continue
                dest = attempt_move(arena.grid, choice, r, c)
                assert dest is not None
                assert compute_danger(arena, *dest) < stand
