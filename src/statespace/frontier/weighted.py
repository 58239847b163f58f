"""Sorted-insertion priority list used by best-first search.

Elements and their weights are kept in two parallel columns, always in
ascending weight order. Insertion and removal are O(n); `peek` is O(1).
"""

from typing import List, Optional

import numpy as np

from .base import WeightedFrontier, T


class SortedWeightedFrontier(WeightedFrontier[T]):
    """Priority list with ascending weights and FIFO order among ties."""

    def __init__(self):
        self._elements: List[T] = []
        self._weights: np.ndarray = np.empty(0, dtype=np.float64)

    def add(self, element: T, weight: float) -> None:
        # Insert after every weight <= the new one so ties keep arrival order.
        position = int(np.searchsorted(self._weights, weight, side='right'))
        self._elements.insert(position, element)
        self._weights = np.insert(self._weights, position, float(weight))

    def get(self) -> Optional[T]:
        if not self._elements:
            return None
        self._weights = self._weights[1:]
        return self._elements.pop(0)

    def peek(self) -> Optional[T]:
        if not self._elements:
            return None
        return self._elements[0]

    def peek_weight(self) -> Optional[float]:
        """Weight of the element ``peek`` would return."""
        if not self._elements:
            return None
        return float(self._weights[0])

    def __len__(self) -> int:
        return len(self._elements)

    def clear(self) -> None:
        self._elements.clear()
        self._weights = np.empty(0, dtype=np.float64)

    def __repr__(self) -> str:
        if self._elements:
            return (f"SortedWeightedFrontier(size={len(self._elements)}, "
                    f"min_weight={self._weights[0]:.3f})")
        return "SortedWeightedFrontier(size=0)"
