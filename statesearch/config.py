"""Configuration dataclasses for state-space search."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class SearchStrategy(Enum):
    """Traversal disciplines offered by the engine."""
    BFS = "bfs"  # FIFO frontier, shortest path in edge count
    BEST_FIRST = "best_first"  # priority heap, greedy, no optimality guarantee

    @classmethod
    def parse(cls, value: SearchStrategy | str) -> SearchStrategy:
        """
        Resolve a strategy from an enum member or its string value.

        Raises:
            ValueError: If the name matches no strategy
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("-", "_")
        for strategy in cls:
            if strategy.value == key or strategy.name.lower() == key:
                return strategy
        valid = ", ".join(s.value for s in cls)
        raise ValueError(f"Unknown search strategy: {value!r}. Must be one of: {valid}")


@dataclass
class SearchConfig:
    """
    Run-time options for one search run.

    Attributes:
        strategy: Engine to use when going through solve(); None = automatic
                  (best-first if the start state has priority(), else BFS)
        check_start_goal: Goal-check the start state before searching.
                          False keeps the seed unchecked, so a start that is
                          already a goal is only reported through another goal
        validate_ledger: Check ledger invariants after the run
        track_frontier: Sample the frontier size after every expansion
        verbose: Print start, progress and result lines
        progress_every: Expansions between two progress lines (verbose only)

    Notes:
        - No depth or size limit: a run ends only when a goal is found or the
          frontier is exhausted
    """
    strategy: SearchStrategy | None = None
    check_start_goal: bool = True
    validate_ledger: bool = False
    track_frontier: bool = False
    verbose: bool = False
    progress_every: int = 10000

    def __post_init__(self):
        if self.strategy is not None:
            self.strategy = SearchStrategy.parse(self.strategy)
        if self.progress_every < 1:
            raise ValueError(f"progress_every must be >= 1, got {self.progress_every}")


# Performance monitoring global flag (outside dataclass to make it a true class variable)
SearchConfig.enable_performance_logging = False
