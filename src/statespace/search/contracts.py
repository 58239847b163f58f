"""Capability contract a problem domain implements to be searchable.

States must be immutable once built: the engine shares one state object
between the frontier and the visited sequence, and deduplicates purely by
``==``.
"""

from abc import ABC, abstractmethod
from typing import Sequence


class Action(ABC):
    """A transition between two states."""

    @abstractmethod
    def cost(self) -> float:
        """Non-negative cost of taking this action."""
        pass


class State(ABC):
    """A node of the state graph."""

    @abstractmethod
    def apply_action(self, action: Action) -> 'State':
        """Return the successor reached by ``action``; must not mutate self."""
        pass

    @abstractmethod
    def applicable_actions(self) -> Sequence[Action]:
        """Actions legal from this state, in expansion order."""
        pass

    @abstractmethod
    def partial_solution(self) -> Sequence[Action]:
        """Actions taken from the initial state to reach this one."""
        pass

    @abstractmethod
    def solution_cost(self) -> float:
        """Accumulated cost of ``partial_solution``."""
        pass

    @abstractmethod
    def is_solution(self) -> bool:
        """Goal test."""
        pass

    @abstractmethod
    def state_level(self) -> int:
        """Depth of this state; equals ``len(partial_solution())``."""
        pass

    @abstractmethod
    def __eq__(self, other: object) -> bool:
        """Content equality; the sole deduplication key of the engine."""
        pass


class StateHeuristic(ABC):
    """Optional capability required by best-first search."""

    @abstractmethod
    def heuristic(self) -> float:
        """Estimated remaining cost from this state to a goal."""
        pass
