"""Shared fixtures: small explicit graphs wrapped as search states."""

from __future__ import annotations
from dataclasses import dataclass, field

import pytest

from statesearch.config import SearchConfig


@dataclass
class Graph:
    """Adjacency lists + goal set (+ optional priorities) for hand-built test graphs."""
    edges: dict[str, list[str]]
    goals: set[str] = field(default_factory=set)
    priorities: dict[str, int] = field(default_factory=dict)

    def node(self, name: str) -> Node:
        return Node(name, self)

    def ranked(self, name: str) -> RankedNode:
        return RankedNode(name, self)


@dataclass(frozen=True)
class Node:
    """State identified by name only (graph excluded from eq/hash)."""
    name: str
    graph: Graph = field(compare=False, repr=False)

    def neighbors(self):
        return [type(self)(n, self.graph) for n in self.graph.edges.get(self.name, [])]

    def is_goal(self) -> bool:
        return self.name in self.graph.goals


@dataclass(frozen=True)
class RankedNode(Node):
    def priority(self) -> int:
        return self.graph.priorities.get(self.name, 0)


def names(path) -> list[str]:
    return [s.name for s in path]


@pytest.fixture
def diamond():
    """A → {B, C} → D → E (goal); D reachable twice."""
    return Graph(
        edges={"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": ["E"]},
        goals={"E"},
    )


@pytest.fixture
def greedy_trap():
    """Short route via B looks bad (priority 5), long route via C looks good."""
    return Graph(
        edges={"A": ["B", "C"], "B": ["G"], "C": ["D"], "D": ["G"]},
        goals={"G"},
        priorities={"A": 9, "B": 5, "C": 1, "D": 1, "G": 0},
    )


@pytest.fixture
def cycle():
    """A ↔ B, B → C (goal)."""
    return Graph(edges={"A": ["B"], "B": ["A", "C"]}, goals={"C"})


@pytest.fixture
def strict_config():
    """Config that validates ledger invariants after every run."""
    return SearchConfig(validate_ledger=True, track_frontier=True)
