"""Abstract frontier contracts."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class Frontier(ABC, Generic[T]):
    """Open list whose ordering is fixed by its insertion discipline."""

    @abstractmethod
    def add(self, element: T) -> None:
        """Insert an element."""
        pass

    @abstractmethod
    def get(self) -> Optional[T]:
        """Remove and return the next element, or None when empty."""
        pass

    @abstractmethod
    def peek(self) -> Optional[T]:
        """Return the next element without removing it, or None when empty."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    def is_empty(self) -> bool:
        return len(self) == 0


class WeightedFrontier(ABC, Generic[T]):
    """Open list ordered by a numeric weight attached at insertion."""

    @abstractmethod
    def add(self, element: T, weight: float) -> None:
        """Insert an element with its ranking weight (lower leaves first)."""
        pass

    @abstractmethod
    def get(self) -> Optional[T]:
        """Remove and return the lowest-weight element, or None when empty."""
        pass

    @abstractmethod
    def peek(self) -> Optional[T]:
        """Return the lowest-weight element without removing it."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def clear(self) -> None:
        pass

    def is_empty(self) -> bool:
        return len(self) == 0
