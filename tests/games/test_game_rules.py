"""
Tests for maze_search.games.game_rules
"""

import numpy as np

from maze_search.games.game_rules import (
    MAX_POINT,
    generate_points,
    greedy_step,
    in_bounds,
    legal_actions_from,
    render,
)
from maze_search.games.game_state import Coord


class TestInBounds:

    def test_inside_and_outside(self):
        board = np.zeros((2, 3))
        assert in_bounds(board, 1, 2)
        assert not in_bounds(board, 2, 0)
        assert not in_bounds(board, 0, -1)


class TestCoord:

    def test_step(self):
        assert Coord(1, 1).step(0) == Coord(1, 2)
        assert Coord(1, 1).step(1) == Coord(1, 0)
        assert Coord(1, 1).step(2) == Coord(2, 1)
        assert Coord(1, 1).step(3) == Coord(0, 1)


class TestLegalActionsFrom:

    def test_bottom_right_corner(self):
        board = np.zeros((3, 3))
        assert legal_actions_from(board, Coord(2, 2)) == [1, 3]


class TestGreedyStep:

    def test_prefers_higher_points(self):
        board = np.array([[0, 1, 0], [8, 0, 2], [0, 3, 0]])
        assert greedy_step(board, Coord(1, 1)) == Coord(1, 0)

    def test_all_empty_takes_first_legal(self):
        board = np.zeros((2, 2), dtype=np.int64)
        assert greedy_step(board, Coord(1, 1)) == Coord(1, 0)


class TestGeneratePoints:

    def test_range_and_skip(self):
        points = generate_points(np.random.default_rng(0), 6, 6, skip=Coord(2, 3))
        assert points.shape == (6, 6)
        assert points[2, 3] == 0
        assert 0 <= points.min() and points.max() < MAX_POINT


class TestRender:

    def test_rows(self):
        board = np.array([[5, 0], [0, 1]])
        assert render(board, [Coord(1, 0)]) == ["5.", "@1"]
