"""
Search module - action selection strategies.

Provides the engines:
- greedy_action(): one-step lookahead
- beam_search_action(): width-bounded beam search
- chokudai_search_action(): multi-round beam search with per-depth frontiers
- hill_climb(): placement search for auto-move mazes

plus the random baselines random_action() and random_placement().
"""

from maze_search.search.greedy import greedy_action, random_action
from maze_search.search.beam import beam_search_action
from maze_search.search.chokudai import chokudai_search_action
from maze_search.search.hill_climb import hill_climb, random_placement

__all__ = [
    "greedy_action",
    "random_action",
    "beam_search_action",
    "chokudai_search_action",
    "hill_climb",
    "random_placement",
]
