"""
Auto-move maze - several characters that play themselves.

Same board as MazeState, but nobody chooses actions during play: every
turn each character steps to its best-scoring neighbour (see
game_rules.greedy_step). The only decision is where the characters start,
which makes the starting placement the search variable for hill climbing.
"""

from __future__ import annotations

from typing import Callable, List, Optional

import numpy as np

from maze_search.games.game_rules import generate_points, greedy_step, random_coord, render
from maze_search.games.game_state import Coord


class AutoMoveMazeState:
    """Multi-character auto-play state."""

    __slots__ = ("points", "characters", "turn", "end_turn", "game_score")

    def __init__(
        self,
        points: np.ndarray,
        characters: List[Coord],
        end_turn: int,
        turn: int = 0,
        game_score: int = 0,
    ):
        self.points = points
        self.characters = [Coord(*c) for c in characters]
        self.end_turn = end_turn
        self.turn = turn
        self.game_score = game_score

    @classmethod
    def from_seed(
        cls,
        seed: Optional[int],
        height: int = 5,
        width: int = 5,
        end_turn: int = 5,
        character_n: int = 3,
    ) -> "AutoMoveMazeState":
        """Deterministic board for `seed`; characters start unplaced at (0, 0)."""
        if height < 1 or width < 1:
            raise ValueError(f"Board must be at least 1x1, got {height}x{width}")
        if character_n < 1:
            raise ValueError(f"Need at least one character, got {character_n}")
        rng = np.random.default_rng(seed)
        points = generate_points(rng, height, width)
        return cls(points, [Coord(0, 0)] * character_n, end_turn)

    @property
    def height(self) -> int:
        return self.points.shape[0]

    @property
    def width(self) -> int:
        return self.points.shape[1]

    def game_id(self) -> str:
        return "auto_move_maze"

    def clone(self) -> "AutoMoveMazeState":
        s = AutoMoveMazeState.__new__(AutoMoveMazeState)
        s.points = self.points.copy()
        s.characters = list(self.characters)
        s.turn = self.turn
        s.end_turn = self.end_turn
        s.game_score = self.game_score
        return s

    def set_character(self, character_id: int, y: int, x: int) -> None:
        self.characters[character_id] = Coord(y, x)

    def move_player(self, character_id: int) -> None:
        self.characters[character_id] = greedy_step(self.points, self.characters[character_id])

    def is_done(self) -> bool:
        return self.turn == self.end_turn

    def advance(self) -> None:
        """All characters move, then collect in character order."""
        for character_id in range(len(self.characters)):
            self.move_player(character_id)
        for y, x in self.characters:
            self.game_score += int(self.points[y, x])
            self.points[y, x] = 0
        self.turn += 1

    def get_score(self, on_turn: Optional[Callable[["AutoMoveMazeState"], None]] = None) -> int:
        """
        Final score of a full playout from the current placement.

        Runs on a private clone. Cells under the starting characters are
        cleared first and do not count.
        """
        tmp = self.clone()
        for y, x in tmp.characters:
            tmp.points[y, x] = 0
        while not tmp.is_done():
            tmp.advance()
            if on_turn is not None:
                on_turn(tmp)
        return tmp.game_score

    def init(self, rng: np.random.Generator) -> None:
        """Place every character on a uniformly random cell."""
        for character_id in range(len(self.characters)):
            self.characters[character_id] = random_coord(rng, self.height, self.width)

    def transition(self, rng: np.random.Generator) -> None:
        """Relocate one randomly chosen character to a uniformly random cell."""
        character_id = int(rng.integers(len(self.characters)))
        self.characters[character_id] = random_coord(rng, self.height, self.width)

    def state_string(self) -> str:
        rows = [f"turn:\t{self.turn}", f"score:\t{self.game_score}"]
        rows.extend(render(self.points, self.characters))
        return "\n".join(rows)

    def __str__(self) -> str:
        return self.state_string()
