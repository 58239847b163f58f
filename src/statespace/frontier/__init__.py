"""Frontier (open list) containers for state-space search.

This module provides the unweighted FIFO/LIFO containers backing breadth-first
and depth-first search, and the sorted weighted container backing best-first
search.
"""

from .base import Frontier, WeightedFrontier
from .fifo import FIFOFrontier
from .lifo import LIFOFrontier
from .weighted import SortedWeightedFrontier

__all__ = [
    'Frontier',
    'WeightedFrontier',
    'FIFOFrontier',
    'LIFOFrontier',
    'SortedWeightedFrontier'
]
