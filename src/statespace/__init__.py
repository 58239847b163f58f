"""Generic state-space search engine.

Breadth-first, depth-first, iterative-deepening and best-first (A*) search
over caller-defined states and actions.
"""

from statespace.frontier import (
    Frontier, WeightedFrontier, FIFOFrontier, LIFOFrontier, SortedWeightedFrontier
)
from statespace.search import (
    Action, State, StateHeuristic, SearchEngine, SearchConfig, Statistics,
    MissingHeuristicError, create_search_engine
)
from statespace.utils import setup_logging

__version__ = "0.1.0"

__all__ = [
    'Frontier',
    'WeightedFrontier',
    'FIFOFrontier',
    'LIFOFrontier',
    'SortedWeightedFrontier',
    'Action',
    'State',
    'StateHeuristic',
    'SearchEngine',
    'SearchConfig',
    'Statistics',
    'MissingHeuristicError',
    'create_search_engine',
    'setup_logging'
]
