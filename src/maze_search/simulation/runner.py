"""
Play loop and score averaging.

play_game drives an action agent turn by turn on a seeded MazeState;
play_auto_game lets a placement agent set up an AutoMoveMazeState and
scores its playout. average_score repeats either over many seeds.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import numpy as np

from maze_search.agent.agent import Agent, Kind
from maze_search.core.errors import DegenerateBoardError
from maze_search.core.types import NO_ACTION
from maze_search.utils.config import DEFAULT_CONFIG, Config
from maze_search.utils.factory import create_state

logger = logging.getLogger(__name__)

# Seeds for averaged runs are drawn from [0, MAX_SEED)
MAX_SEED = 2**31 - 1


def play_game(
    agent: Agent,
    seed: Optional[int],
    config: Config = DEFAULT_CONFIG,
    *,
    verbose: bool = False,
) -> int:
    """
    Play one maze episode with an action agent.

    Returns:
        Final game score
    """
    state = create_state("maze", seed, config)
    if verbose:
        print(state.state_string())

    while not state.is_done():
        action = agent(state)
        if action == NO_ACTION:
            raise DegenerateBoardError(state.turn, state.end_turn)
        state.advance(action)
        if verbose:
            print(state.state_string())

    logger.info("%s scored %d on seed %s", agent, state.game_score, seed)
    return state.game_score


def play_auto_game(
    agent: Agent,
    seed: Optional[int],
    config: Config = DEFAULT_CONFIG,
    *,
    verbose: bool = False,
) -> int:
    """
    Let a placement agent set up an auto-move maze and play it out.

    Returns:
        Playout score of the chosen placement
    """
    state = agent(create_state("auto_move_maze", seed, config))
    if verbose:
        print(state.state_string())
    score = state.get_score(on_turn=(lambda s: print(s.state_string())) if verbose else None)
    logger.info("%s scored %d on seed %s", agent, score, seed)
    return score


def run_game(agent: Agent, seed: Optional[int], config: Config = DEFAULT_CONFIG, *, verbose: bool = False) -> int:
    """Dispatch on agent kind."""
    if agent.kind is Kind.PLACEMENT:
        return play_auto_game(agent, seed, config, verbose=verbose)
    return play_game(agent, seed, config, verbose=verbose)


def average_score(
    agent: Agent,
    game_number: int,
    config: Config = DEFAULT_CONFIG,
    *,
    seed: Optional[int] = None,
) -> float:
    """
    Mean score over `game_number` games on randomly drawn boards.

    Args:
        agent: Strategy to evaluate
        game_number: Number of episodes
        config: Board and search settings
        seed: Seed for drawing board seeds (reproducible when given)
    """
    if game_number < 1:
        raise ValueError(f"game_number must be positive, got {game_number}")

    rng = np.random.default_rng(seed)
    scores: List[int] = []
    try:
        for _ in range(game_number):
            board_seed = int(rng.integers(MAX_SEED))
            scores.append(run_game(agent, board_seed, config))
    except Exception:
        logger.exception("Fatal error after %d of %d games", len(scores), game_number)
        raise

    return float(np.mean(scores))
