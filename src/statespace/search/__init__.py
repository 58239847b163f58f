"""Generic state-space search.

This module implements breadth-first, depth-first, iterative-deepening and
best-first (A*) search over caller-defined states and actions, sharing a
single traversal core parameterized by the frontier discipline.
"""

from .contracts import Action, State, StateHeuristic
from .visited import VisitedStates
from .engine import (
    SearchEngine, SearchConfig, Statistics, MissingHeuristicError, create_search_engine
)

__all__ = [
    'Action',
    'State',
    'StateHeuristic',
    'VisitedStates',
    'SearchEngine',
    'SearchConfig',
    'Statistics',
    'MissingHeuristicError',
    'create_search_engine'
]
