"""Last-in-first-out frontier used by depth-first search."""

from typing import List, Optional

from .base import Frontier, T


class LIFOFrontier(Frontier[T]):
    """Stack: the most recently added element leaves first."""

    def __init__(self):
        self._stack: List[T] = []

    def add(self, element: T) -> None:
        self._stack.append(element)

    def get(self) -> Optional[T]:
        if not self._stack:
            return None
        return self._stack.pop()

    def peek(self) -> Optional[T]:
        if not self._stack:
            return None
        return self._stack[-1]

    def __len__(self) -> int:
        return len(self._stack)

    def clear(self) -> None:
        self._stack.clear()

    def __repr__(self) -> str:
        return f"LIFOFrontier(size={len(self._stack)})"
