"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, Tuple
import time
import tracemalloc

from ..core.puzzle import Puzzle


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0
    max_depth: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "max_depth": self.max_depth,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for puzzle solvers."""

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = True):
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, puzzle: Puzzle) -> Tuple[Optional[Puzzle], SolverStats]:
        """
        Solve a puzzle with timing and memory tracking.

        The puzzle passed in is never modified. Failing to find a solution
        is reported as a None result, not an exception; errors raised by
        the puzzle (bad positions or values) propagate to the caller.

        Args:
            puzzle: The puzzle to solve.

        Returns:
            Tuple of (solution or None, stats).
        """
        self.stats = SolverStats(algorithm=self.name)

        if self.track_memory:
            tracemalloc.start()
        start_time = time.perf_counter()

        try:
            solution = self._solve(puzzle.copy())
        finally:
            self.stats.time_seconds = time.perf_counter() - start_time
            if self.track_memory:
                _, peak = tracemalloc.get_traced_memory()
                tracemalloc.stop()
                self.stats.memory_bytes = peak

        self.stats.solved = solution is not None
        return solution, self.stats

    @abstractmethod
    def _solve(self, puzzle: Puzzle) -> Optional[Puzzle]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            puzzle: A copy of the puzzle to solve (can be modified).

        Returns:
            The solved puzzle, or None if no solution found.
        """
        pass
