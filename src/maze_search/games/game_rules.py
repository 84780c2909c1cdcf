"""
NumPy utilities for maze boards.

Boards are 2-D int64 arrays of per-cell points, indexed [y, x].
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from maze_search.core.types import NUM_ACTIONS
from maze_search.games.game_state import Coord

# Points per cell are drawn from [0, MAX_POINT)
MAX_POINT = 10


def in_bounds(board: np.ndarray, y: int, x: int) -> bool:
    """Return True if (y, x) is inside the board."""
    rows, cols = board.shape
    return 0 <= y < rows and 0 <= x < cols


def legal_actions_from(board: np.ndarray, pos: Coord) -> List[int]:
    """Actions from `pos` that stay on the board, in action order."""
    actions = []
    for action in range(NUM_ACTIONS):
        ty, tx = pos.step(action)
        if in_bounds(board, ty, tx):
            actions.append(action)
    return actions


def greedy_step(board: np.ndarray, pos: Coord) -> Coord:
    """
    Neighbour of `pos` holding the most points.

    Ties go to the first action in action order. With no on-board
    neighbour (1x1 board) the position is returned unchanged.
    """
    best_point = -1
    best = pos
    for action in range(NUM_ACTIONS):
        ty, tx = pos.step(action)
        if in_bounds(board, ty, tx):
            point = int(board[ty, tx])
            if point > best_point:
                best_point = point
                best = Coord(ty, tx)
    return best


def random_coord(rng: np.random.Generator, height: int, width: int) -> Coord:
    """Uniformly random cell."""
    return Coord(int(rng.integers(height)), int(rng.integers(width)))


def generate_points(
    rng: np.random.Generator,
    height: int,
    width: int,
    skip: Optional[Coord] = None,
) -> np.ndarray:
    """
    Fresh board with points in [0, MAX_POINT) on every cell.

    The `skip` cell (usually the starting agent position) is left at 0.
    """
    points = rng.integers(0, MAX_POINT, size=(height, width), dtype=np.int64)
    if skip is not None:
        points[skip.y, skip.x] = 0
    return points


def render(board: np.ndarray, characters: List[Coord]) -> List[str]:
    """Board rows: '@' for a character, the digit for points, '.' when empty."""
    occupied = set(characters)
    rows = []
    for y in range(board.shape[0]):
        row = []
        for x in range(board.shape[1]):
            if (y, x) in occupied:
                row.append("@")
            elif board[y, x] > 0:
                row.append(str(int(board[y, x])))
            else:
                row.append(".")
        rows.append("".join(row))
    return rows
