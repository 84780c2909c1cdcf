"""
Hill climbing over starting placements of an AutoMoveMazeState.

The whole episode is fixed once the characters are placed, so a
placement is a complete policy. The climber mutates one character at a
time and keeps the mutation only if the full playout scores strictly
higher. Worse or equal neighbours are always rejected, so it can and
will stop on local optima.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from maze_search.games.auto_move_maze import AutoMoveMazeState

logger = logging.getLogger(__name__)


def random_placement(
    state: AutoMoveMazeState,
    rng: Optional[np.random.Generator] = None,
) -> AutoMoveMazeState:
    """Copy of `state` with every character placed uniformly at random."""
    rng = rng if rng is not None else np.random.default_rng()
    now_state = state.clone()
    now_state.init(rng)
    return now_state


def hill_climb(
    state: AutoMoveMazeState,
    number: int,
    *,
    rng: Optional[np.random.Generator] = None,
) -> AutoMoveMazeState:
    """
    Best placement found in `number` mutate-and-compare steps.

    Args:
        state: Board to place characters on (never mutated)
        number: Iteration budget; all of it is spent
        rng: Source of randomness (fresh generator if omitted)

    Returns:
        A placed copy of `state`
    """
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")
    rng = rng if rng is not None else np.random.default_rng()

    now_state = random_placement(state, rng)
    best_score = now_state.get_score()
    accepted = 0

    for _ in range(number):
        next_state = now_state.clone()
        next_state.transition(rng)
        next_score = next_state.get_score()
        if next_score > best_score:
            best_score = next_score
            now_state = next_state
            accepted += 1

    logger.debug(
        "Hill climb: %d/%d mutations accepted, best score %d",
        accepted, number, best_score,
    )
    return now_state
