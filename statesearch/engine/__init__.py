"""
Search Engine Module.

Generic state-space search over implicit graphs.

Public exports:
- SearchState / PrioritizedState: State contract
- VisitedLedger: Dedup set + parent index for path reconstruction
- FifoFrontier / PriorityFrontier: Frontier disciplines
- BreadthFirstEngine / BestFirstEngine: Engines (one run() per instance)
"""

from statesearch.engine.state import SearchState, PrioritizedState, is_prioritized
from statesearch.engine.ledger import VisitedLedger
from statesearch.engine.frontier import FifoFrontier, PriorityFrontier
from statesearch.engine.solver import (
    SearchEngine,
    BreadthFirstEngine,
    BestFirstEngine,
    SearchAlreadyRunError,
    ENGINES,
)

__all__ = [
    'SearchState',
    'PrioritizedState',
    'is_prioritized',
    'VisitedLedger',
    'FifoFrontier',
    'PriorityFrontier',
    'SearchEngine',
    'BreadthFirstEngine',
    'BestFirstEngine',
    'SearchAlreadyRunError',
    'ENGINES',
]
