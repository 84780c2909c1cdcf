"""
Configuration and game registry.
"""

from typing import Optional

from maze_search.games import AutoMoveMazeState, MazeState


# ---------------------------------------------------------------------------
# Game Registry
# ---------------------------------------------------------------------------

GAMES = {
    "maze": MazeState,
    "auto_move_maze": AutoMoveMazeState,
}


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

def _require_positive(**values: int) -> None:
    for name, value in values.items():
        if value < 1:
            raise ValueError(f"{name} must be positive, got {value}")


class Config:
    """Board and search configuration with sensible defaults."""

    def __init__(
        self,
        height: int = 3,
        width: int = 4,
        end_turn: int = 4,
        character_n: int = 3,
        beam_width: int = 2,
        beam_depth: Optional[int] = None,
        beam_number: int = 2,
        chokudai_width: int = 1,
        hill_climb_iterations: int = 10_000,
    ):
        self.height = height
        self.width = width
        self.end_turn = end_turn
        self.character_n = character_n
        self.beam_width = beam_width
        self.beam_number = beam_number
        self.chokudai_width = chokudai_width
        self.hill_climb_iterations = hill_climb_iterations

        # Derive dependent values: look ahead to the horizon by default
        self.beam_depth = end_turn if beam_depth is None else beam_depth

        _require_positive(
            height=height,
            width=width,
            end_turn=end_turn,
            character_n=character_n,
            beam_width=beam_width,
            beam_depth=self.beam_depth,
            beam_number=beam_number,
            chokudai_width=chokudai_width,
        )
        if hill_climb_iterations < 0:
            raise ValueError(
                f"hill_climb_iterations must be non-negative, got {hill_climb_iterations}"
            )

    def __repr__(self) -> str:
        return (
            f"Config({self.height}x{self.width}, end_turn={self.end_turn}, "
            f"characters={self.character_n}, beam={self.beam_width}x{self.beam_depth}, "
            f"rounds={self.beam_number}, iterations={self.hill_climb_iterations})"
        )


# Default configuration
DEFAULT_CONFIG = Config()
