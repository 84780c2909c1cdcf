"""
Core types and constants.

This module contains the fundamental types shared by every search engine:
- Action encoding (four cardinal moves)
- ScoredState: a state snapshot paired with its evaluation
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from maze_search.games.game_base import GameBase


# ─── Action Encoding ──────────────────────────────────────────────────────────
#
#   action:   0       1       2       3
#   move:     right   left    down    up
#
DX = (1, -1, 0, 0)
DY = (0, 0, 1, -1)

ACTION_NAMES = ("right", "left", "down", "up")

NUM_ACTIONS = len(DX)

# Sentinel for "no action available" / "first action not yet assigned"
NO_ACTION = -1


class ScoredState(NamedTuple):
    """
    A state paired with its evaluated score and originating root action.

    `first_action` stays NO_ACTION on the root and is set on children
    expanded at depth 0; deeper descendants copy it unchanged.
    Entries are never mutated after creation.
    """

    state: "GameBase"
    evaluated_score: float
    first_action: int = NO_ACTION

    def child(self, state: "GameBase", evaluated_score: float, action: int, depth: int) -> "ScoredState":
        """Successor entry, tagged with `action` when expanded from depth 0."""
        first_action = action if depth == 0 else self.first_action
        return ScoredState(state, evaluated_score, first_action)

    @property
    def is_done(self) -> bool:
        return self.state.is_done()
