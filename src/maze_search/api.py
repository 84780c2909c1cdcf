"""
Public API for maze search strategies.

Usage:
    from maze_search import MazeState, beam_search_action

    state = MazeState.from_seed(0, height=3, width=4, end_turn=4)
    while not state.is_done():
        state.advance(beam_search_action(state, beam_width=2, beam_depth=4))
    print(state.game_score)

Or through the play loop:
    from maze_search import Config, create_agent, average_score

    config = Config(height=10, width=10, end_turn=10)
    print(average_score(create_agent("chokudai", config), 100, config, seed=0))
"""

from __future__ import annotations

from maze_search.core import NO_ACTION, Frontier, ScoredState, accumulated_score
from maze_search.games import AutoMoveMazeState, MazeState
from maze_search.search import (
    beam_search_action,
    chokudai_search_action,
    greedy_action,
    hill_climb,
    random_action,
    random_placement,
)
from maze_search.simulation import average_score, play_auto_game, play_game, run_game
from maze_search.utils.config import DEFAULT_CONFIG, Config
from maze_search.utils.factory import STRATEGIES, create_agent, create_state

__all__ = [
    # Engines
    "greedy_action",
    "random_action",
    "beam_search_action",
    "chokudai_search_action",
    "hill_climb",
    "random_placement",
    # State model
    "MazeState",
    "AutoMoveMazeState",
    "ScoredState",
    "Frontier",
    "accumulated_score",
    "NO_ACTION",
    # Play loop
    "play_game",
    "play_auto_game",
    "run_game",
    "average_score",
    # Configuration
    "Config",
    "DEFAULT_CONFIG",
    "STRATEGIES",
    "create_agent",
    "create_state",
]
