"""
Beam search.

Keeps the `beam_width` best states per depth level and expands them for
up to `beam_depth` levels. The answer is the root action that started the
best surviving lineage.

    level 0:  [root]
    level 1:  children of root              (tagged with their action)
    level 2:  children of the best W of 1   (tag copied from parent)
    ...
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from maze_search.core.frontier import Frontier
from maze_search.core.scoring import ScoringPolicy, accumulated_score, evaluate
from maze_search.core.types import NO_ACTION, ScoredState

if TYPE_CHECKING:
    from maze_search.games.game_base import GameBase

logger = logging.getLogger(__name__)


def expand(node: ScoredState, depth: int, scoring: ScoringPolicy):
    """Yield one scored successor per legal action of `node`."""
    for action in node.state.legal_actions():
        next_state = node.state.clone()
        next_state.advance(action, validated=True)
        yield node.child(next_state, scoring(next_state), action, depth)


def beam_search_action(
    state: "GameBase",
    beam_width: int,
    beam_depth: int,
    *,
    scoring: ScoringPolicy = accumulated_score,
) -> int:
    """
    Choose an action by width-bounded beam search.

    Args:
        state: Current state (never mutated)
        beam_width: States expanded per level
        beam_depth: Maximum lookahead in turns
        scoring: Evaluation applied to every successor

    Returns:
        First action of the best state found, or NO_ACTION if no
        successor could be generated.
    """
    if beam_width < 1 or beam_depth < 1:
        raise ValueError(
            f"beam_width and beam_depth must be positive, got {beam_width}, {beam_depth}"
        )

    now_beam = Frontier()
    now_beam.push(evaluate(state.clone(), scoring))
    best = None

    for t in range(beam_depth):
        next_beam = Frontier()
        for _ in range(beam_width):
            if now_beam.is_empty():
                break
            node = now_beam.pop()
            for child in expand(node, t, scoring):
                next_beam.push(child)

        now_beam = next_beam
        if now_beam.is_empty():
            logger.debug("Beam emptied at depth %d", t)
            break

        best = now_beam.peek()
        if best.is_done:
            logger.debug("Beam reached the horizon at depth %d", t + 1)
            break

    if best is None:
        return NO_ACTION
    return best.first_action
