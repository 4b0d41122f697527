"""
Search Result Models.

This module defines the records a search run hands back to its caller:
- SearchStatus: Outcome enum
- SearchStats: Counters collected during one run
- SearchResult: Path + status + stats, returned by solve()

NOTE: The engines themselves return a plain list (or None) from run().
      SearchResult is the facade's wrapper around that outcome.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional
import numpy as np

from statesearch.config import SearchStrategy


class SearchStatus(Enum):
    """
    Outcome of a search run.

    Values:
        FOUND: A goal was reached, path holds root..goal
        NO_PATH: Frontier exhausted without reaching a goal
    """
    FOUND = "FOUND"
    NO_PATH = "NO_PATH"


@dataclass
class SearchStats:
    """
    Counters for one search run.

    Attributes:
        expanded: States whose neighbors were enumerated
        pushed: Frontier entries pushed (including the seed neighbors)
        duplicates: Entries discarded at pop time because already visited
        peak_frontier: Largest frontier size seen
        visited: Ledger size when the run ended
        elapsed_s: Wall time of run() in seconds
        frontier_sizes: Frontier size after each expansion
                        (only filled when SearchConfig.track_frontier is set)
    """
    expanded: int = 0
    pushed: int = 0
    duplicates: int = 0
    peak_frontier: int = 0
    visited: int = 0
    elapsed_s: float = 0.0
    frontier_sizes: list[int] = field(default_factory=list)

    @property
    def branching_factor(self) -> float:
        """Mean pushes per expanded state (0.0 before any expansion)."""
        if self.expanded == 0:
            return 0.0
        return self.pushed / self.expanded

    def summary(self) -> dict[str, Any]:
        """
        Flatten the stats into a dict.

        Returns:
            Dict with all counters; frontier_mean / frontier_max are added
            when frontier samples were recorded
        """
        out = {
            "expanded": self.expanded,
            "pushed": self.pushed,
            "duplicates": self.duplicates,
            "peak_frontier": self.peak_frontier,
            "visited": self.visited,
            "elapsed_s": self.elapsed_s,
            "branching_factor": self.branching_factor,
        }
        if self.frontier_sizes:
            sizes = np.asarray(self.frontier_sizes, dtype=float)
            out["frontier_mean"] = float(np.mean(sizes))
            out["frontier_max"] = int(np.max(sizes))
        return out


@dataclass
class SearchResult:
    """
    Result of solve().

    Attributes:
        status: FOUND or NO_PATH
        path: States from start to goal inclusive (empty for NO_PATH)
        stats: Counters of the run
        strategy: Engine that produced the result
    """
    status: SearchStatus
    path: list
    stats: SearchStats
    strategy: SearchStrategy

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    @property
    def moves(self) -> Optional[int]:
        """Number of transitions in the path, None if no path was found."""
        if not self.found:
            return None
        return len(self.path) - 1

    @property
    def goal(self):
        return self.path[-1] if self.path else None
