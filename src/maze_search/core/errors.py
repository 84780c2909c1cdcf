"""
Error hierarchy for maze_search.

All custom exceptions inherit from MazeSearchError for easy catching.

Usage:
    from maze_search.core.errors import InvalidActionError

    try:
        state.advance(action)
    except InvalidActionError as e:
        logger.warning("Rejected action %s at %s", e.action, e.position)
"""

from __future__ import annotations

from typing import Optional, Tuple

__all__ = [
    "MazeSearchError",
    "InvalidActionError",
    "DegenerateBoardError",
]


class MazeSearchError(Exception):
    """Base class for all maze_search errors."""


class InvalidActionError(MazeSearchError, ValueError):
    """An action outside the legal set was passed to advance()."""

    def __init__(self, action: int, position: Optional[Tuple[int, int]] = None):
        self.action = action
        self.position = position
        where = f" from {position}" if position is not None else ""
        super().__init__(f"Illegal action {action}{where}")


class DegenerateBoardError(MazeSearchError):
    """No action is available from a state that is not yet done."""

    def __init__(self, turn: int, end_turn: int):
        self.turn = turn
        self.end_turn = end_turn
        super().__init__(
            f"No legal action at turn {turn} of {end_turn}; board is degenerate"
        )
