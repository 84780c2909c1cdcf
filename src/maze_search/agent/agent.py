"""
A named strategy that the play loop can drive.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Callable, Dict


class Kind(Enum):
    ACTION = auto()  # state -> action index, called every turn
    PLACEMENT = auto()  # auto-move state -> placed auto-move state, called once


@dataclass
class Agent:
    _name: str
    _function: Callable[[Any], Any]
    _kind: Kind = Kind.ACTION
    _params: Dict[str, Any] = field(
        default_factory=dict
    )  # Parameters bound into the function (for display only)

    @property
    def name(self) -> str:
        """Returns the strategy name (e.g. 'beam')."""
        return self._name

    @property
    def kind(self) -> Kind:
        """Returns whether the agent picks actions or placements."""
        return self._kind

    @property
    def params(self) -> Dict[str, Any]:
        """Returns the parameters bound into the strategy."""
        return self._params

    def __call__(self, state):
        return self._function(state)

    def __str__(self) -> str:
        if not self._params:
            return self._name
        bound = ", ".join(f"{k}={v}" for k, v in self._params.items())
        return f"{self._name}({bound})"
