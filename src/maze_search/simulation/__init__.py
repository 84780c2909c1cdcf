"""
Simulation module - play loops and score averaging.

Drives strategies against seeded boards; the search engines themselves
never depend on this module.
"""

from maze_search.simulation.runner import (
    MAX_SEED,
    average_score,
    play_auto_game,
    play_game,
    run_game,
)

__all__ = [
    "MAX_SEED",
    "average_score",
    "play_auto_game",
    "play_game",
    "run_game",
]
