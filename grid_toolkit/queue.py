"""Max-priority queue.

A binary heap (``heapq``) of ``(item, priority)`` entries ordered by priority
alone, highest first. Items are never compared, so they need not be orderable
and duplicates may coexist. Ties between equal priorities come out in no
particular order.

Typical use is the frontier of a best-first search: push successors with a
priority where larger means "explore sooner" (e.g. negated path cost).
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple

from grid_toolkit.types import P, T

logger = logging.getLogger(__name__)


@dataclass
class _QueueEntry(Generic[T, P]):
    priority: P
    item: T = field(compare=False)

    def __lt__(self, other: "_QueueEntry[T, P]") -> bool:
        # Inverted so heapq's min-heap pops the highest priority first
        return other.priority < self.priority


class PriorityQueue(Generic[T, P]):
    """Max-priority queue over arbitrary items."""

    def __init__(self) -> None:
        self._heap: List[_QueueEntry[T, P]] = []

    def push(self, item: T, priority: P) -> None:
        heapq.heappush(self._heap, _QueueEntry(priority, item))

    def pop(self) -> Optional[T]:
        """Remove and return the highest-priority item, or ``None`` if empty."""
        entry = self._pop_entry()
        return entry.item if entry is not None else None

    def pop_with_priority(self) -> Optional[Tuple[T, P]]:
        """Like :meth:`pop` but also returns the priority."""
        entry = self._pop_entry()
        return (entry.item, entry.priority) if entry is not None else None

    def peek(self) -> Optional[T]:
        return self._heap[0].item if self._heap else None

    def peek_priority(self) -> Optional[P]:
        return self._heap[0].priority if self._heap else None

    def is_empty(self) -> bool:
        return not self._heap

    def len(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def clear(self) -> None:
        self._heap.clear()

    def truncate(self, length: int) -> None:
        """Keep only the ``length`` highest-priority entries.

        No-op when the queue already holds ``length`` entries or fewer.
        """
        if length < 0:
            raise ValueError(f"Cannot truncate to a negative length: {length}")
        if len(self._heap) <= length:
            return
        before = len(self._heap)
        # nsmallest under the inverted ordering is the highest priorities
        kept = heapq.nsmallest(length, self._heap)
        heapq.heapify(kept)
        self._heap = kept
        logger.debug("Truncated priority queue from %d to %d entries", before, length)

    def __repr__(self) -> str:
        return f"PriorityQueue(len={len(self._heap)})"

    # -------- Internal helpers --------

    def _pop_entry(self) -> Optional[_QueueEntry[T, P]]:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)
