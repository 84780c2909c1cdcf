"""
One-step strategies: greedy lookahead and the uniform random baseline.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np

from maze_search.core.scoring import ScoringPolicy, accumulated_score
from maze_search.core.types import NO_ACTION

if TYPE_CHECKING:
    from maze_search.games.game_base import GameBase


def greedy_action(state: "GameBase", *, scoring: ScoringPolicy = accumulated_score) -> int:
    """
    Action whose successor scores strictly highest.

    Ties keep the first action in legal_actions() order.
    Returns NO_ACTION when there is nothing to play.
    """
    best_score = float("-inf")
    best_action = NO_ACTION

    for action in state.legal_actions():
        next_state = state.clone()
        next_state.advance(action, validated=True)
        score = scoring(next_state)
        if score > best_score:
            best_score = score
            best_action = action

    return best_action


def random_action(state: "GameBase", rng: Optional[np.random.Generator] = None) -> int:
    """Uniformly random legal action (NO_ACTION when there is none)."""
    legal = state.legal_actions()
    if not legal:
        return NO_ACTION
    rng = rng if rng is not None else np.random.default_rng()
    return legal[int(rng.integers(len(legal)))]
