"""
Frontier - ordered container of ScoredState entries.

Backed by a binary heap keyed on (-evaluated_score, insertion order), so
the maximum is the highest score and, among equal scores, the entry that
was pushed first. That makes every engine's tie-break deterministic.
"""

from __future__ import annotations

import heapq
from typing import Iterator, List, Optional, Tuple

from maze_search.core.types import ScoredState

_Entry = Tuple[float, int, ScoredState]


class Frontier:
    """
    Max-priority container of ScoredState.

    Optional `max_size` caps the container; on overflow the lowest-scoring
    entry (latest pushed on ties) is evicted.
    """

    __slots__ = ("_heap", "_counter", "max_size")

    def __init__(self, max_size: Optional[int] = None):
        if max_size is not None and max_size < 1:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self._heap: List[_Entry] = []
        self._counter = 0
        self.max_size = max_size

    def push(self, node: ScoredState) -> None:
        heapq.heappush(self._heap, (-node.evaluated_score, self._counter, node))
        self._counter += 1
        if self.max_size is not None and len(self._heap) > self.max_size:
            self._evict_worst()

    def peek(self) -> ScoredState:
        """Best entry without removing it. Raises IndexError if empty."""
        if not self._heap:
            raise IndexError("peek from an empty frontier")
        return self._heap[0][2]

    def pop(self) -> ScoredState:
        """Remove and return the best entry. Raises IndexError if empty."""
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def copy(self) -> "Frontier":
        """Independent container over the same (immutable) entries."""
        f = Frontier.__new__(Frontier)
        f._heap = list(self._heap)
        f._counter = self._counter
        f.max_size = self.max_size
        return f

    def _evict_worst(self) -> None:
        worst = max(range(len(self._heap)), key=self._heap.__getitem__)
        last = self._heap.pop()
        if worst < len(self._heap):
            self._heap[worst] = last
            heapq.heapify(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __iter__(self) -> Iterator[ScoredState]:
        """Entries in best-first order (does not consume the frontier)."""
        return (entry[2] for entry in sorted(self._heap))

    def __repr__(self) -> str:
        best = self._heap[0][2].evaluated_score if self._heap else None
        return f"Frontier(size={len(self._heap)}, best={best})"
