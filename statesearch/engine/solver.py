"""
Search Engine Main Loop.

This module implements the two engines sharing one pop/dedup/record/goal/expand loop:
- BreadthFirstEngine: FIFO frontier, returns a shortest path in edge count
- BestFirstEngine: priority frontier, greedy, returns a valid path only

Key Concepts:
- Seeding: start recorded as root, its neighbors pushed with start as parent
- Late dedup: neighbors are pushed unconditionally, visited states are
  discarded when popped
- One run per engine: ledger and frontier live for exactly one run()
"""

from __future__ import annotations
from typing import Optional
import time

from statesearch.config import SearchConfig, SearchStrategy
from statesearch.engine.frontier import FifoFrontier, PriorityFrontier
from statesearch.engine.ledger import VisitedLedger
from statesearch.engine.state import is_prioritized
from statesearch.models import SearchStats
from statesearch.performance import timed, time_block


class SearchAlreadyRunError(RuntimeError):
    """Raised when run() is called a second time on the same engine."""


class SearchEngine:
    """
    Shared driver for both traversal disciplines.

    Subclasses only choose the frontier (_make_frontier) and the strategy tag.

    Args:
        start: Start state (must satisfy the SearchState contract)
        config: Optional SearchConfig (defaults used if None)

    Example:
        >>> engine = BreadthFirstEngine(Towers.new(3, 2))
        >>> path = engine.run()
        >>> len(path) - 1
        3
    """

    strategy: SearchStrategy = None

    def __init__(self, start, config: Optional[SearchConfig] = None):
        self.config = config if config is not None else SearchConfig()
        self.start = start
        self.stats = SearchStats()
        self._finished = False

        self._ledger = VisitedLedger()
        self._frontier = self._make_frontier()

        # Seeding: root recorded, neighbors queued. The root itself is not
        # goal-checked here (see run()).
        self._ledger.record_root(start)
        for neighbor in start.neighbors():
            self._frontier.push(neighbor, start)

    def _make_frontier(self):
        raise NotImplementedError

    @property
    def finished(self) -> bool:
        return self._finished

    def _log(self, message: str):
        if self.config.verbose:
            print(f"[{self.strategy.value}] {message}")

    @timed
    def run(self) -> Optional[list]:
        """
        Search from the start state until a goal is found or the frontier empties.

        Returns:
            List of states start..goal (inclusive), or None if no goal is reachable

        Raises:
            SearchAlreadyRunError: If run() was already called on this engine

        Algorithm:
            1. Optional: start already a goal → [start] (config.check_start_goal)
            2. Loop while frontier non-empty:
               a. Pop (candidate, parent)
               b. Already in ledger → discard
               c. Record candidate → parent
               d. Goal → reconstruct path and stop
               e. Push every neighbor with candidate as parent
            3. Frontier exhausted → None
        """
        if self._finished:
            raise SearchAlreadyRunError(
                f"{type(self).__name__}.run() may only be called once per instance"
            )
        self._finished = True
        t0 = time.perf_counter()
        self._log(f"Search started, {len(self._frontier)} seed entries")

        try:
            path = self._search()
        finally:
            self._finish_stats(t0)

        if path is None:
            self._log(
                f"No path found: frontier exhausted after {self.stats.expanded} expansions, "
                f"{self.stats.visited} states visited"
            )
        else:
            self._log(
                f"Goal found: {len(path) - 1} moves, {self.stats.expanded} expansions, "
                f"{self.stats.visited} states visited"
            )

        if self.config.validate_ledger:
            self._ledger.validate_invariants()

        # Structures belong to this run only
        self._frontier.clear()
        self._ledger.clear()
        return path

    def _search(self) -> Optional[list]:
        if self.config.check_start_goal and self.start.is_goal():
            return [self.start]

        frontier = self._frontier
        ledger = self._ledger
        stats = self.stats
        track = self.config.track_frontier
        progress_every = self.config.progress_every

        with time_block("search loop"):
            while frontier:
                candidate, parent = frontier.pop()
                if not ledger.record(candidate, parent):
                    stats.duplicates += 1
                    continue

                if candidate.is_goal():
                    with time_block("path reconstruction"):
                        return ledger.path_to(candidate)

                for neighbor in candidate.neighbors():
                    frontier.push(neighbor, candidate)
                stats.expanded += 1

                if track:
                    stats.frontier_sizes.append(len(frontier))
                if stats.expanded % progress_every == 0:
                    self._log(
                        f"{stats.expanded} expanded, frontier {len(frontier)}, "
                        f"visited {len(ledger)}"
                    )
        return None

    def _finish_stats(self, t0: float):
        self.stats.pushed = self._frontier.pushed
        self.stats.peak_frontier = self._frontier.peak_size
        self.stats.visited = len(self._ledger)
        self.stats.elapsed_s = time.perf_counter() - t0


class BreadthFirstEngine(SearchEngine):
    """Breadth-first search: the returned path has the fewest possible moves."""

    strategy = SearchStrategy.BFS

    def _make_frontier(self):
        return FifoFrontier()


class BestFirstEngine(SearchEngine):
    """
    Greedy best-first search ordered by each state's priority().

    Notes:
        - Priority is a per-state heuristic, not an accumulated cost, so the
          returned path is valid but not necessarily the shortest
        - Equal priorities pop in push order (deterministic runs)
    """

    strategy = SearchStrategy.BEST_FIRST

    def __init__(self, start, config: Optional[SearchConfig] = None):
        if not is_prioritized(start):
            raise TypeError(
                f"Best-first search needs states with priority(), got {type(start).__name__}"
            )
        super().__init__(start, config)

    def _make_frontier(self):
        return PriorityFrontier()


ENGINES = {
    SearchStrategy.BFS: BreadthFirstEngine,
    SearchStrategy.BEST_FIRST: BestFirstEngine,
}
