"""
Frontier disciplines.

- FifoFrontier: first in, first out (breadth-first search)
- PriorityFrontier: smallest priority first, ties broken by push order

Both hold (candidate, parent) pairs and never inspect the states beyond
what their discipline needs: the FIFO queue looks at nothing, the heap only
calls candidate.priority() once at push time.
"""

from __future__ import annotations
from collections import deque
from itertools import count
import heapq


class FifoFrontier:
    """Pending (candidate, parent) entries in arrival order."""

    def __init__(self):
        self._queue = deque()
        self.pushed = 0
        self.peak_size = 0

    def push(self, candidate, parent) -> None:
        self._queue.append((candidate, parent))
        self.pushed += 1
        if len(self._queue) > self.peak_size:
            self.peak_size = len(self._queue)

    def pop(self) -> tuple:
        """Remove and return the oldest (candidate, parent). IndexError if empty."""
        return self._queue.popleft()

    def clear(self) -> None:
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)


class PriorityFrontier:
    """
    Min-heap of (priority, seq, candidate, parent).

    Notes:
        - priority is the candidate's own priority(), not the parent's
        - seq is a monotonically increasing push counter, so entries with
          equal priority pop in push order and states are never compared
    """

    def __init__(self):
        self._heap = []
        self._seq = count()
        self.pushed = 0
        self.peak_size = 0

    def push(self, candidate, parent) -> None:
        heapq.heappush(self._heap, (candidate.priority(), next(self._seq), candidate, parent))
        self.pushed += 1
        if len(self._heap) > self.peak_size:
            self.peak_size = len(self._heap)

    def pop(self) -> tuple:
        """Remove and return the most promising (candidate, parent). IndexError if empty."""
        _, _, candidate, parent = heapq.heappop(self._heap)
        return candidate, parent

    def peek_priority(self):
        """Priority of the next entry to pop (None if empty)."""
        return self._heap[0][0] if self._heap else None

    def clear(self) -> None:
        self._heap.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
