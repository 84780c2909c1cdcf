"""
Maze Search - lookahead strategies for a deterministic point-collecting grid game.

This package provides interchangeable action-selection engines that all
work by cloning, advancing and scoring a common state model.

Quick Start:
    from maze_search import MazeState, chokudai_search_action

    state = MazeState.from_seed(42)
    action = chokudai_search_action(state, beam_width=1, beam_depth=4, beam_number=2)
    state.advance(action)

Modules:
    core       - Action encoding, ScoredState, Frontier, scoring policies, errors
    games      - MazeState and AutoMoveMazeState state models
    search     - Greedy, beam, chokudai and hill-climbing engines
    simulation - Play loops and score averaging
"""

from maze_search.api import (
    greedy_action,
    random_action,
    beam_search_action,
    chokudai_search_action,
    hill_climb,
    random_placement,
    MazeState,
    AutoMoveMazeState,
    ScoredState,
    Frontier,
    NO_ACTION,
    play_game,
    average_score,
    Config,
    create_agent,
    create_state,
)

__version__ = "1.0.0"

__all__ = [
    # Engines
    "greedy_action",
    "random_action",
    "beam_search_action",
    "chokudai_search_action",
    "hill_climb",
    "random_placement",
    # Types
    "MazeState",
    "AutoMoveMazeState",
    "ScoredState",
    "Frontier",
    "NO_ACTION",
    # Play loop
    "play_game",
    "average_score",
    "Config",
    "create_agent",
    "create_state",
]
