"""Core module for the puzzle interface and the Sudoku board."""

from .puzzle import Puzzle, difference
from .board import SudokuBoard, Position, propagate_naked_singles
from .validator import is_valid_placement, validate_solution, merge

__all__ = [
    "Puzzle",
    "difference",
    "SudokuBoard",
    "Position",
    "propagate_naked_singles",
    "is_valid_placement",
    "validate_solution",
    "merge",
]
