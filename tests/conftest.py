"""
Shared test fixtures for maze_search tests.

Design principles:
- Small hand-built boards where exact answers matter
- Seeded boards where only properties matter
- Minimal, focused fixtures
"""

from typing import List

import numpy as np
import pytest

from maze_search.core.types import NO_ACTION
from maze_search.games.auto_move_maze import AutoMoveMazeState
from maze_search.games.game_base import GameBase
from maze_search.games.game_state import Coord
from maze_search.games.maze import MazeState
from maze_search.utils.config import Config


# =============================================================================
# Helpers
# =============================================================================

def brute_force_best(state: GameBase) -> int:
    """Highest reachable final score by enumerating every action sequence."""
    if state.is_done():
        return state.game_score
    legal = state.legal_actions()
    if not legal:
        return state.game_score
    best = 0
    for action in legal:
        child = state.clone()
        child.advance(action)
        best = max(best, brute_force_best(child))
    return best


def play_out(state: GameBase, choose) -> List[int]:
    """Play `state` to the end with `choose`; returns the actions taken."""
    actions = []
    while not state.is_done():
        action = choose(state)
        assert action != NO_ACTION
        state.advance(action)
        actions.append(action)
    return actions


@pytest.fixture
def brute_force():
    return brute_force_best


@pytest.fixture
def play():
    return play_out


# =============================================================================
# Maze Fixtures
# =============================================================================

@pytest.fixture
def scenario_state() -> MazeState:
    """
    2x2 board, horizon 2, agent at (0,0):

        @ 3
        1 5
    """
    points = np.array([[0, 3], [1, 5]], dtype=np.int64)
    return MazeState(points, Coord(0, 0), end_turn=2)


@pytest.fixture
def lure_state() -> MazeState:
    """
    1x5 corridor, horizon 2, agent in the middle:

        0 3 @ 1 9

    Greedy takes the 3 (total 3); two-step lookahead takes 1 then 9 (total 10).
    """
    points = np.array([[0, 3, 0, 1, 9]], dtype=np.int64)
    return MazeState(points, Coord(0, 2), end_turn=2)


@pytest.fixture
def single_cell_state() -> MazeState:
    """1x1 board: not done, but no legal action."""
    return MazeState(np.array([[0]], dtype=np.int64), Coord(0, 0), end_turn=3)


@pytest.fixture
def seeded_state() -> MazeState:
    return MazeState.from_seed(0, height=3, width=4, end_turn=4)


# =============================================================================
# Auto-move Fixtures
# =============================================================================

@pytest.fixture
def auto_state() -> AutoMoveMazeState:
    return AutoMoveMazeState.from_seed(0, height=5, width=5, end_turn=5, character_n=3)


# =============================================================================
# Config Fixtures
# =============================================================================

@pytest.fixture
def small_config() -> Config:
    return Config(height=3, width=4, end_turn=4, hill_climb_iterations=50)
