"""
Core module - action encoding, scored states, frontier and scoring.

This module provides the building blocks shared by every search engine.
"""

from maze_search.core.types import (
    ACTION_NAMES,
    DX,
    DY,
    NO_ACTION,
    NUM_ACTIONS,
    ScoredState,
)
from maze_search.core.errors import (
    DegenerateBoardError,
    InvalidActionError,
    MazeSearchError,
)
from maze_search.core.frontier import Frontier
from maze_search.core.scoring import ScoringPolicy, accumulated_score, evaluate

__all__ = [
    # Types
    "ScoredState",
    "Frontier",
    "ScoringPolicy",
    # Constants
    "DX",
    "DY",
    "ACTION_NAMES",
    "NUM_ACTIONS",
    "NO_ACTION",
    # Errors
    "MazeSearchError",
    "InvalidActionError",
    "DegenerateBoardError",
    # Functions
    "accumulated_score",
    "evaluate",
]
