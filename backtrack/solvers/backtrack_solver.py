"""Generic depth-first backtracking solver with pluggable cell selection."""

from __future__ import annotations
import logging
import time
from typing import Any, Callable, Hashable, Optional

from .base_solver import BaseSolver
from .settings import SolveSettings
from .strategies import find_min_empty
from ..core.puzzle import Puzzle, difference

log = logging.getLogger(__name__)


# Called as observer(event, puzzle, pos, value) with event "assign" or "undo".
Observer = Callable[[str, Puzzle, Hashable, Any], None]


def log_observer(event: str, puzzle: Puzzle, pos: Hashable, value: Any) -> None:
    """Default trace observer: log the event and the board at DEBUG level."""
    log.debug(f"{event} {value} at {pos}\n{puzzle}")


class BackTrackSolver(BaseSolver):
    """
    Depth-first search with chronological backtracking.

    Works on any Puzzle. At every step the selection strategy picks a
    position, the puzzle lists the legal values for it, and each value is
    tried in turn. The first complete assignment found wins.

    Features:
    - Pluggable selection strategy (any callable puzzle -> position or None)
    - Optional deterministic propagation before each branch
    - Trace observer and paced delay, both injected
    """

    def __init__(
        self,
        strategy: Callable[[Puzzle], Optional[Hashable]] = find_min_empty,
        settings: Optional[SolveSettings] = None,
        observer: Optional[Observer] = None,
        sleep: Callable[[float], None] = time.sleep,
        track_memory: bool = True,
    ):
        """
        Initialize the solver.

        Args:
            strategy: Picks the next position to branch on; None means
                      nothing is left to assign.
            settings: Solve options (defaults to SolveSettings()).
            observer: Receives assign/undo events when settings.trace is
                      on. Defaults to logging through this module's logger.
            sleep: Called with settings.step_delay after each assignment.
            track_memory: Record peak memory with tracemalloc.
        """
        self.name = f"Backtracking ({getattr(strategy, '__name__', 'custom')})"
        super().__init__(track_memory=track_memory)
        self.strategy = strategy
        self.settings = settings or SolveSettings()
        self.observer = observer or log_observer
        self.sleep = sleep

    def _solve(self, puzzle: Puzzle) -> Optional[Puzzle]:
        """Solve using recursive backtracking."""
        if not puzzle.is_consistent():
            log.info("Givens conflict with each other, no solution")
            self.stats.extra["reason"] = "inconsistent givens"
            return None

        original = puzzle.copy()
        solution = self._search(puzzle, 0)

        if solution is None:
            log.info(f"No solution after {self.stats.iterations} iterations")
            self.stats.extra["reason"] = "exhausted"
            return None

        log.info(
            f"Solved after {self.stats.iterations} iterations, "
            f"{self.stats.backtracks} backtracks"
        )
        if self.settings.report_difference:
            return difference(solution, original)
        return solution

    def _search(self, puzzle: Puzzle, depth: int) -> Optional[Puzzle]:
        """
        One search frame.

        Returns the solved puzzle, or None after restoring `puzzle` to the
        state it was passed in with.
        """
        self.stats.iterations += 1
        self.stats.max_depth = max(self.stats.max_depth, depth)

        # Propagation works on a copy so a failed frame leaves no trace.
        if self.settings.pre_pass_propagation:
            puzzle = puzzle.copy()
            puzzle.solve_simple()

        pos = self.strategy(puzzle)
        if pos is None:
            return puzzle if puzzle.is_solved() else None

        self.stats.nodes_explored += 1

        for value in puzzle.possible(pos):
            puzzle.set(pos, value)
            self._notify("assign", puzzle, pos, value)
            if self.settings.step_delay > 0:
                self.sleep(self.settings.step_delay)

            solution = self._search(puzzle, depth + 1)
            if solution is not None:
                return solution

            puzzle.clear(pos)
            self.stats.backtracks += 1
            self._notify("undo", puzzle, pos, value)

        return None

    def _notify(self, event: str, puzzle: Puzzle, pos: Hashable, value: Any) -> None:
        if self.settings.trace:
            self.observer(event, puzzle, pos, value)
