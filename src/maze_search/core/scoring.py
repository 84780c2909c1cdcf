"""
Scoring policies.

A scoring policy maps a state snapshot to a comparable number. Engines
compare ScoredState entries only through this value, never through the
state itself. Any policy used with greedy / beam / chokudai search should
be monotone non-decreasing across advance(), as accumulated_score is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from maze_search.core.types import NO_ACTION, ScoredState

if TYPE_CHECKING:
    from maze_search.games.game_base import GameBase


ScoringPolicy = Callable[["GameBase"], float]


def accumulated_score(state: "GameBase") -> float:
    """Points collected so far."""
    return state.game_score


def evaluate(state: "GameBase", scoring: ScoringPolicy = accumulated_score) -> ScoredState:
    """Wrap a state as a root entry (first action unset)."""
    return ScoredState(state, scoring(state), NO_ACTION)
