"""
Maze game - single agent collecting points.

Each turn the agent moves one cell right/left/down/up. Stepping on a cell
adds its points to the score and clears the cell; cleared cells never
refill. The goal is the highest score at end_turn.

Board encoding (int64, indexed [y, x]):
    0     = empty / already collected
    1..9  = points available
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np

from maze_search.core.errors import InvalidActionError
from maze_search.core.types import NUM_ACTIONS
from maze_search.games.game_base import GameBase
from maze_search.games.game_rules import (
    generate_points,
    in_bounds,
    legal_actions_from,
    random_coord,
    render,
)
from maze_search.games.game_state import Coord


class MazeState(GameBase):
    """Single-agent maze state."""

    __slots__ = ("points", "character", "_turn", "_end_turn", "_game_score")

    def __init__(
        self,
        points: np.ndarray,
        character: Coord,
        end_turn: int,
        turn: int = 0,
        game_score: int = 0,
    ):
        self.points = points
        self.character = Coord(*character)
        self._end_turn = end_turn
        self._turn = turn
        self._game_score = game_score

    @classmethod
    def from_seed(
        cls,
        seed: Optional[int],
        height: int = 3,
        width: int = 4,
        end_turn: int = 4,
    ) -> "MazeState":
        """
        Deterministic initial state for `seed`.

        The agent starts on a uniformly random cell holding 0 points;
        every other cell gets 0..9 points.
        """
        if height < 1 or width < 1:
            raise ValueError(f"Board must be at least 1x1, got {height}x{width}")
        rng = np.random.default_rng(seed)
        character = random_coord(rng, height, width)
        points = generate_points(rng, height, width, skip=character)
        return cls(points, character, end_turn)

    @property
    def turn(self) -> int:
        return self._turn

    @property
    def end_turn(self) -> int:
        return self._end_turn

    @property
    def game_score(self) -> int:
        return self._game_score

    def game_id(self) -> str:
        return "maze"

    def clone(self) -> "MazeState":
        s = MazeState.__new__(MazeState)
        s.points = self.points.copy()
        s.character = self.character
        s._turn = self._turn
        s._end_turn = self._end_turn
        s._game_score = self._game_score
        return s

    def legal_actions(self) -> List[int]:
        return legal_actions_from(self.points, self.character)

    def advance(self, action: int, *, validated: bool = False) -> None:
        if not validated:
            if not 0 <= action < NUM_ACTIONS:
                raise InvalidActionError(action, tuple(self.character))
            ty, tx = self.character.step(action)
            if not in_bounds(self.points, ty, tx):
                raise InvalidActionError(action, tuple(self.character))

        self.character = self.character.step(action)
        y, x = self.character
        point = int(self.points[y, x])
        if point > 0:
            self._game_score += point
            self.points[y, x] = 0
        self._turn += 1

    def is_done(self) -> bool:
        return self._turn == self._end_turn

    def state_string(self) -> str:
        rows = render(self.points, [self.character])
        rows.append(f"turn: {self._turn} score: {self._game_score}")
        return "\n".join(rows)
