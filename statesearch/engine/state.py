"""
State Contract for the search engines.

A searchable state is any hashable value that can enumerate its neighbors
and tell whether it is a goal. Best-first search additionally needs a
priority (lower = expanded sooner).

Contract (caller-enforced, not checked at runtime):
- __eq__ / __hash__ consistent: equal states hash equal
- neighbors(), is_goal(), priority() are pure functions of the state
- neighbors() of a finite graph is finite; an empty result is a dead end
"""

from __future__ import annotations
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class SearchState(Protocol):
    """
    Capability every searchable state provides.

    Example:
        >>> class Counter:
        ...     def __init__(self, n): self.n = n
        ...     def __eq__(self, o): return isinstance(o, Counter) and o.n == self.n
        ...     def __hash__(self): return hash(self.n)
        ...     def neighbors(self): return [Counter(self.n + 1)] if self.n < 3 else []
        ...     def is_goal(self): return self.n == 3
        >>> isinstance(Counter(0), SearchState)
        True
    """

    def neighbors(self) -> Iterable[SearchState]:
        ...

    def is_goal(self) -> bool:
        ...


@runtime_checkable
class PrioritizedState(SearchState, Protocol):
    """SearchState refinement used by best-first search."""

    def priority(self) -> int:
        ...


def is_prioritized(state) -> bool:
    """True if the state can drive best-first search (has a callable priority())."""
    return callable(getattr(state, "priority", None))
