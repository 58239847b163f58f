"""Search engine shared by every strategy.

A single traversal loop is run against a pluggable frontier: a FIFO queue for
breadth-first search, a LIFO stack for depth-first and iterative-deepening
search, and a sorted weighted list for best-first (A*) search. The weighted
driver mirrors the unweighted one step for step; only the insertion call
differs.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional, Sequence, Tuple

from statespace.config import get_parameter
from statespace.frontier import (
    Frontier, WeightedFrontier, FIFOFrontier, LIFOFrontier, SortedWeightedFrontier
)
from statespace.search.contracts import Action, State, StateHeuristic
from statespace.search.visited import VisitedStates

logger = logging.getLogger(__name__)

Solution = List[Action]


class MissingHeuristicError(TypeError):
    """Raised when best-first search is asked for a state without a heuristic."""
    pass


@dataclass
class Statistics:
    """Running counters for the lifetime of one engine."""
    nodes_explored: int = 0  # distinct states dequeued and processed
    max_depth: int = 0  # deepest state_level seen
    solutions: int = 0  # goal states found

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return (f"[ nodes_explored: {self.nodes_explored}, "
                f"max_depth: {self.max_depth}, solutions: {self.solutions} ]")


@dataclass
class SearchConfig:
    """Configuration for the search engine."""
    iterative_deepening_step: int = 1  # depth bound increment per round
    log_statistics: bool = True  # log a statistics line after each strategy


class SearchEngine:
    """Explores a state graph and returns action sequences reaching a goal.

    Statistics and the visited sequence persist across calls on the same
    instance; only iterative deepening clears the visited sequence, between
    its rounds. An instance must not be shared between threads.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize search engine.

        Args:
            config: Engine configuration
        """
        self.config = config or SearchConfig()
        self.statistics = Statistics()
        self._visited = VisitedStates()

        logger.info(f"Search engine initialized with "
                    f"iterative_deepening_step={self.config.iterative_deepening_step}")

    @property
    def visited(self) -> Tuple[State, ...]:
        """Snapshot of the states processed so far."""
        return tuple(self._visited)

    # Breadth-first

    def search_breadth_first(self, initial_state: State) -> Optional[Solution]:
        """Return the shallowest solution, or None."""
        solutions = self._search_breadth(initial_state, all_solutions=False)
        self._log_summary("breadth-first", solutions)
        return solutions[-1] if solutions else None

    def search_breadth_all(self, initial_state: State) -> List[Solution]:
        """Return every solution, shallowest first."""
        solutions = self._search_breadth(initial_state, all_solutions=True)
        self._log_summary("breadth-all", solutions)
        return solutions

    # Depth-first

    def search_depth_first(self, initial_state: State) -> Optional[Solution]:
        """Return the first solution found depth-first, or None."""
        solutions = self._search_depth(initial_state, all_solutions=False, limit=0)
        self._log_summary("depth-first", solutions)
        return solutions[-1] if solutions else None

    def search_depth_all(self, initial_state: State) -> List[Solution]:
        """Return every solution found depth-first."""
        solutions = self._search_depth(initial_state, all_solutions=True, limit=0)
        self._log_summary("depth-all", solutions)
        return solutions

    def search_depth_limited(self, initial_state: State, limit: int,
                             all_solutions: bool = False) -> List[Solution]:
        """Depth-first search that never expands states at depth ``limit`` or deeper.

        Args:
            initial_state: State to start from
            limit: Depth bound; 0 means unlimited
            all_solutions: Keep searching after the first goal

        Returns:
            Solutions found, possibly empty
        """
        solutions = self._search_depth(initial_state, all_solutions, limit)
        self._log_summary(f"depth-limited({limit})", solutions)
        return solutions

    def search_iterative_deepening_first(self, initial_state: State,
                                         step: Optional[int] = None) -> Optional[Solution]:
        """Depth-limited search with a bound growing by ``step`` each round.

        Gives up once the bound exceeds the deepest state ever observed by this
        engine. That bound is an observation, not a proof that the space is
        exhausted.

        Args:
            initial_state: State to start from
            step: Bound increment; defaults to the configured step

        Returns:
            The first solution found, or None
        """
        if step is None:
            step = self.config.iterative_deepening_step
        if step < 1:
            raise ValueError(f"iterative deepening step must be >= 1, got {step}")

        limit = step
        while True:
            logger.debug(f"Iterative deepening round with limit={limit}")
            solutions = self._search_depth(initial_state, all_solutions=False, limit=limit)
            if solutions:
                self._log_summary("iterative-deepening", solutions)
                return solutions[-1]
            if limit > self.statistics.max_depth:
                self._log_summary("iterative-deepening", solutions)
                return None
            limit += step
            self._visited.clear()

    # Best-first

    def search_best_first(self, initial_state: State) -> Optional[Solution]:
        """Return the first goal reached in order of cost plus heuristic."""
        solutions = self._search_best(initial_state, all_solutions=False)
        self._log_summary("best-first", solutions)
        return solutions[-1] if solutions else None

    def search_best_all(self, initial_state: State) -> List[Solution]:
        """Return every goal in the order best-first search reaches them."""
        solutions = self._search_best(initial_state, all_solutions=True)
        self._log_summary("best-all", solutions)
        return solutions

    # Drivers

    def _search_breadth(self, initial_state: State, all_solutions: bool) -> List[Solution]:
        return self._find_solutions(initial_state, FIFOFrontier(), all_solutions, 0)

    def _search_depth(self, initial_state: State, all_solutions: bool,
                      limit: int) -> List[Solution]:
        return self._find_solutions(initial_state, LIFOFrontier(), all_solutions, limit)

    def _search_best(self, initial_state: State, all_solutions: bool) -> List[Solution]:
        if not isinstance(initial_state, StateHeuristic):
            raise MissingHeuristicError(
                f"best-first search needs a StateHeuristic, got {type(initial_state).__name__}"
            )
        return self._find_solutions_weighted(
            initial_state, SortedWeightedFrontier(), all_solutions, 0
        )

    def _find_solutions(self, state: State, frontier: Frontier,
                        all_solutions: bool, limit: int) -> List[Solution]:
        solutions: List[Solution] = []

        frontier.clear()
        frontier.add(state)
        while not frontier.is_empty():
            current = frontier.get()
            if current in self._visited:
                continue
            self._record_visit(current)

            if current.is_solution():
                self._record_solution(current, solutions)
                if not all_solutions:
                    return solutions
                continue

            if self._may_expand(current, limit):
                for successor in self._successors(current):
                    frontier.add(successor)

        return solutions

    def _find_solutions_weighted(self, state: State, frontier: WeightedFrontier,
                                 all_solutions: bool, limit: int) -> List[Solution]:
        solutions: List[Solution] = []

        frontier.clear()
        frontier.add(state, self._rank(state))
        while not frontier.is_empty():
            current = frontier.get()
            if current in self._visited:
                continue
            self._record_visit(current)

            if current.is_solution():
                self._record_solution(current, solutions)
                if not all_solutions:
                    return solutions
                continue

            if self._may_expand(current, limit):
                for successor in self._successors(current):
                    frontier.add(successor, self._rank(successor))

        return solutions

    # Helpers

    def _record_visit(self, state: State) -> None:
        self._visited.add(state)
        self.statistics.nodes_explored += 1
        self.statistics.max_depth = max(self.statistics.max_depth, state.state_level())

    def _record_solution(self, state: State, solutions: List[Solution]) -> None:
        self.statistics.solutions += 1
        solution = list(state.partial_solution())
        solutions.append(solution)
        logger.debug(f"Solution found at level {state.state_level()} "
                     f"with cost {state.solution_cost()}")

    @staticmethod
    def _may_expand(state: State, limit: int) -> bool:
        return limit < 1 or state.state_level() < limit

    def _successors(self, state: State) -> List[State]:
        successors = (state.apply_action(action) for action in state.applicable_actions())
        return [s for s in successors if s not in self._visited]

    @staticmethod
    def _rank(state: State) -> float:
        return state.solution_cost() + state.heuristic()

    def _log_summary(self, strategy: str, solutions: Sequence[Solution]) -> None:
        if self.config.log_statistics:
            logger.info(f"{strategy} search finished with {len(solutions)} solution(s): "
                        f"{self.statistics}")


def create_search_engine(iterative_deepening_step: Optional[int] = None,
                         log_statistics: Optional[bool] = None) -> SearchEngine:
    """Factory function to create a search engine.

    Values not given explicitly are read from the loaded configuration
    (``search.iterative_deepening.step`` and ``search.log_statistics``), then
    fall back to the ``SearchConfig`` defaults.

    Args:
        iterative_deepening_step: Bound increment for iterative deepening
        log_statistics: Log statistics after each strategy call

    Returns:
        Configured SearchEngine instance
    """
    defaults = SearchConfig()
    if iterative_deepening_step is None:
        iterative_deepening_step = int(get_parameter(
            'search.iterative_deepening.step', defaults.iterative_deepening_step
        ))
    if log_statistics is None:
        log_statistics = bool(get_parameter(
            'search.log_statistics', defaults.log_statistics
        ))

    config = SearchConfig(
        iterative_deepening_step=iterative_deepening_step,
        log_statistics=log_statistics
    )

    return SearchEngine(config)
