"""
Games module - state models consumed by the search engines.
"""

from maze_search.games.game_state import Coord
from maze_search.games.game_base import GameBase
from maze_search.games.game_rules import in_bounds, generate_points, greedy_step, legal_actions_from
from maze_search.games.maze import MazeState
from maze_search.games.auto_move_maze import AutoMoveMazeState

__all__ = [
    "Coord",
    "GameBase",
    "MazeState",
    "AutoMoveMazeState",
    "in_bounds",
    "generate_points",
    "greedy_step",
    "legal_actions_from",
]
