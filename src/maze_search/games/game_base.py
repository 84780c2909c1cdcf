"""
GameBase - abstract base class for action-driven grid games.
"""

from abc import ABC, abstractmethod
from typing import List


class GameBase(ABC):
    """
    Abstract base class for the state model every search engine consumes.

    IMPORTANT ARCHITECTURE NOTE:
    -----------------------------
    - Engines only ever clone(), advance() and score states.
    - advance() mutates in place; engines clone before advancing,
      so the caller's state is never touched by a search.
    - Clones must be fully independent (no shared board).
    """

    @abstractmethod
    def game_id(self) -> str:
        """Return a stable identifier (e.g. 'maze')."""
        pass

    @property
    @abstractmethod
    def turn(self) -> int:
        """Number of turns played so far."""
        pass

    @property
    @abstractmethod
    def end_turn(self) -> int:
        """Horizon: the turn at which the episode ends."""
        pass

    @property
    @abstractmethod
    def game_score(self) -> int:
        """Points accumulated so far."""
        pass

    @abstractmethod
    def clone(self) -> "GameBase":
        """
        Deep copy of the state.
        Used for every expansion step of every engine.
        """
        pass

    @abstractmethod
    def legal_actions(self) -> List[int]:
        """
        Return every action that does not leave the board.
        May be empty on a degenerate board.
        """
        pass

    @abstractmethod
    def advance(self, action: int, *, validated: bool = False) -> None:
        """
        Play one turn. Mutates internal state.

        Args:
            action: The action to apply.
            validated:  If True, skip validation (caller guarantees
                        the action came from legal_actions()).
        """
        pass

    @abstractmethod
    def is_done(self) -> bool:
        """Return True once the horizon is reached."""
        pass

    @abstractmethod
    def state_string(self) -> str:
        """Pretty string representation of the state."""
        pass

    def __str__(self) -> str:
        return self.state_string()
