"""Closed list of processed states.

Membership is decided by ``==`` alone. Hashable states are additionally kept
in a set so the common case avoids a linear scan; states that cannot be
hashed are compared one by one, exactly as a plain list would.
"""

from typing import Iterator, List, Set

from statespace.search.contracts import State


class VisitedStates:
    """Ordered, append-only sequence of visited states with an equality index."""

    def __init__(self):
        self._order: List[State] = []
        self._index: Set[State] = set()
        self._unhashable: List[State] = []

    def add(self, state: State) -> None:
        self._order.append(state)
        try:
            self._index.add(state)
        except TypeError:
            self._unhashable.append(state)

    def __contains__(self, state: object) -> bool:
        try:
            if state in self._index:
                return True
        except TypeError:
            return any(state == visited for visited in self._order)
        return any(state == visited for visited in self._unhashable)

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[State]:
        return iter(self._order)

    def clear(self) -> None:
        self._order.clear()
        self._index.clear()
        self._unhashable.clear()
