"""Solvers module: the backtracking engine and its selection strategies."""

from .base_solver import BaseSolver, SolverStats
from .settings import SolveSettings
from .strategies import find_empty, find_min_empty, find_freq_empty, STRATEGIES
from .backtrack_solver import BackTrackSolver, log_observer

__all__ = [
    "BaseSolver",
    "SolverStats",
    "SolveSettings",
    "BackTrackSolver",
    "log_observer",
    "find_empty",
    "find_min_empty",
    "find_freq_empty",
    "STRATEGIES",
]
