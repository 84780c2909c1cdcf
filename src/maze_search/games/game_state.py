"""
Coord - board position value.
"""

from __future__ import annotations

from typing import NamedTuple

from maze_search.core.types import DX, DY


class Coord(NamedTuple):
    """Board position as (y, x); y is the row, x the column."""

    y: int
    x: int

    def step(self, action: int) -> "Coord":
        """Position reached by taking `action` (no bounds check)."""
        return Coord(self.y + DY[action], self.x + DX[action])
