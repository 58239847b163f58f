"""First-in-first-out frontier used by breadth-first search."""

from collections import deque
from typing import Deque, Optional

from .base import Frontier, T


class FIFOFrontier(Frontier[T]):
    """Queue: elements leave in insertion order."""

    def __init__(self):
        self._queue: Deque[T] = deque()

    def add(self, element: T) -> None:
        self._queue.append(element)

    def get(self) -> Optional[T]:
        if not self._queue:
            return None
        return self._queue.popleft()

    def peek(self) -> Optional[T]:
        if not self._queue:
            return None
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)

    def clear(self) -> None:
        self._queue.clear()

    def __repr__(self) -> str:
        return f"FIFOFrontier(size={len(self._queue)})"
