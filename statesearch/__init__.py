"""
statesearch: Generic state-space search over implicit graphs.

A graph is given only by its states: each state enumerates its neighbors
and knows whether it is a goal. Two engines walk such a graph:
- BreadthFirstEngine: shortest path in number of moves
- BestFirstEngine: greedy, expands the lowest priority() first

Main API:
    solve(start, strategy=None, config=None) -> SearchResult
"""

from typing import Optional

from .config import SearchConfig, SearchStrategy
from .models import SearchStatus, SearchStats, SearchResult
from .engine import (
    SearchState,
    PrioritizedState,
    VisitedLedger,
    BreadthFirstEngine,
    BestFirstEngine,
    SearchAlreadyRunError,
    ENGINES,
    is_prioritized,
)


__all__ = [
    # Main API
    "solve",
    # Config
    "SearchConfig",
    "SearchStrategy",
    # Models
    "SearchStatus",
    "SearchStats",
    "SearchResult",
    # Engine
    "SearchState",
    "PrioritizedState",
    "VisitedLedger",
    "BreadthFirstEngine",
    "BestFirstEngine",
    "SearchAlreadyRunError",
]


def solve(start, strategy=None, config: Optional[SearchConfig] = None) -> SearchResult:
    """
    Search from start to the nearest (BFS) or most promising (best-first) goal.

    Args:
        start: Start state (neighbors() + is_goal(), hashable)
        strategy: SearchStrategy or its string value ("bfs", "best_first").
                  Falls back to config.strategy, then to automatic choice:
                  best-first if start has priority(), else BFS
        config: Optional SearchConfig

    Returns:
        SearchResult with status FOUND (path start..goal) or NO_PATH (empty path)

    Raises:
        ValueError: Unknown strategy name
        TypeError: Best-first requested for a state without priority()

    Example:
        >>> from statesearch.puzzles import Towers
        >>> result = solve(Towers.new(3, 3), "bfs")
        >>> result.moves
        7
    """
    config = config if config is not None else SearchConfig()
    if strategy is None:
        strategy = config.strategy
    if strategy is None:
        strategy = SearchStrategy.BEST_FIRST if is_prioritized(start) else SearchStrategy.BFS
    strategy = SearchStrategy.parse(strategy)

    engine = ENGINES[strategy](start, config)
    path = engine.run()

    if path is None:
        return SearchResult(SearchStatus.NO_PATH, [], engine.stats, strategy)
    return SearchResult(SearchStatus.FOUND, path, engine.stats, strategy)
