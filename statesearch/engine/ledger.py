"""
Visited Ledger (Step 2 of a search run).

The ledger maps every discovered state to the state it was discovered from.
It is used both as the dedup set and as the index for path reconstruction.

Invariants (validated by validate_invariants()):
    - L1: A state is recorded at most once, never overwritten
    - L2: The root is the only entry without a parent
    - L3: Every parent was recorded strictly before its child
          (insertion order, so reconstruction always terminates)
"""

from __future__ import annotations
from typing import Hashable, Iterator, Optional


class VisitedLedger:
    """
    Insertion-ordered mapping state → parent (None for the root).

    Example:
        >>> ledger = VisitedLedger()
        >>> ledger.record_root("a")
        >>> ledger.record("b", "a")
        True
        >>> ledger.record("b", "x")  # already recorded, kept as is
        False
        >>> ledger.path_to("b")
        ['a', 'b']
    """

    def __init__(self):
        self._parents: dict = {}
        self._root = None
        self._has_root = False

    def record_root(self, state: Hashable) -> None:
        """
        Record the start state with no parent.

        Raises:
            ValueError: If a root was already recorded
        """
        if self._has_root:
            raise ValueError(f"Ledger already has a root: {self._root!r}")
        self._parents[state] = None
        self._root = state
        self._has_root = True

    def record(self, state: Hashable, parent: Hashable) -> bool:
        """
        Record state as discovered from parent.

        Returns:
            True if recorded, False if the state was already present
            (the existing entry is left untouched)
        """
        if state in self._parents:
            return False
        self._parents[state] = parent
        return True

    def parent_of(self, state: Hashable) -> Optional[Hashable]:
        """Parent of a recorded state (None for the root). KeyError if unknown."""
        return self._parents[state]

    @property
    def root(self):
        return self._root

    def __contains__(self, state) -> bool:
        return state in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def __iter__(self) -> Iterator:
        return iter(self._parents)

    def path_to(self, goal: Hashable) -> list:
        """
        Reconstruct the path root → goal.

        Walks parent links back from goal until the root (no parent),
        then reverses.

        Raises:
            KeyError: If goal was never recorded
        """
        path = [goal]
        parent = self._parents[goal]
        while parent is not None:
            path.append(parent)
            parent = self._parents[parent]
        path.reverse()
        return path

    def clear(self) -> None:
        self._parents.clear()
        self._root = None
        self._has_root = False

    def validate_invariants(self):
        """
        Validate ledger invariants.

        Raises:
            ValueError: If any invariant is violated

        Notes:
            - L1 holds by construction (dict keys, record() never overwrites)
        """
        order = {}
        for index, state in enumerate(self._parents):
            order[state] = index

        roots = [s for s, p in self._parents.items() if p is None]
        if self._parents and (len(roots) != 1 or roots[0] != self._root):
            raise ValueError(
                f"L2 violated: expected exactly one root ({self._root!r}), found {roots!r}"
            )

        for state, parent in self._parents.items():
            if parent is None:
                continue
            if parent not in order:
                raise ValueError(f"L3 violated: parent {parent!r} of {state!r} was never recorded")
            if order[parent] >= order[state]:
                raise ValueError(
                    f"L3 violated: parent {parent!r} recorded after child {state!r}"
                )
