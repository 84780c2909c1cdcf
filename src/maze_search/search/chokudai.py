"""
Chokudai search.

A beam search that spreads its work over several shallow rounds. Each
depth keeps its own persistent frontier. Every round walks the depths in
order and expands the `beam_width` best entries of each level into the
next one, so deep levels fill up gradually even with a tiny width.

Entries are drained from a copy of each level, never from the level
itself, so they stay available to later rounds. Levels therefore only
grow; `max_frontier_size` bounds them when that matters.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List, Optional

from maze_search.core.frontier import Frontier
from maze_search.core.scoring import ScoringPolicy, accumulated_score, evaluate
from maze_search.core.types import NO_ACTION
from maze_search.search.beam import expand

if TYPE_CHECKING:
    from maze_search.games.game_base import GameBase

logger = logging.getLogger(__name__)


def chokudai_search_action(
    state: "GameBase",
    beam_width: int,
    beam_depth: int,
    beam_number: int,
    *,
    scoring: ScoringPolicy = accumulated_score,
    max_frontier_size: Optional[int] = None,
) -> int:
    """
    Choose an action by chokudai search.

    Args:
        state: Current state (never mutated)
        beam_width: Entries expanded per level per round
        beam_depth: Number of lookahead levels
        beam_number: Number of rounds
        scoring: Evaluation applied to every successor
        max_frontier_size: Optional cap on each level's size

    Returns:
        First action of the best entry on the deepest non-empty level,
        or NO_ACTION if no level below the root was reached.
    """
    if beam_width < 1 or beam_depth < 1 or beam_number < 1:
        raise ValueError(
            "beam_width, beam_depth and beam_number must be positive, "
            f"got {beam_width}, {beam_depth}, {beam_number}"
        )

    beams: List[Frontier] = [Frontier(max_frontier_size) for _ in range(beam_depth + 1)]
    beams[0].push(evaluate(state.clone(), scoring))

    for _ in range(beam_number):
        for t in range(beam_depth):
            now_beam = beams[t].copy()
            next_beam = beams[t + 1]
            for _ in range(beam_width):
                if now_beam.is_empty():
                    break
                node = now_beam.pop()
                if node.is_done:
                    break
                for child in expand(node, t, scoring):
                    next_beam.push(child)

    for t in range(beam_depth, -1, -1):
        if not beams[t].is_empty():
            logger.debug(
                "Chokudai answered from depth %d (sizes %s)",
                t, [len(b) for b in beams],
            )
            return beams[t].peek().first_action

    return NO_ACTION
