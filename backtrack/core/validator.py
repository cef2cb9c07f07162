"""Validation utilities for Sudoku boards and solver results."""

from __future__ import annotations
import numpy as np
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import SudokuBoard, Position


def is_valid_placement(board: SudokuBoard, pos: Position, value: int) -> bool:
    """
    Check if placing a value at (col, row) is valid.

    Args:
        board: The Sudoku board.
        pos: (column, row) position.
        value: Value to check (1 to 9).

    Returns:
        True if the value does not already appear in the row, column or box.

    Raises:
        IndexError: If the position is off the grid.
    """
    col, row = board.check_position(pos)

    if value < 1 or value > board.size:
        return False

    if value in board.get_row(row):
        return False

    if value in board.get_col(col):
        return False

    if value in board.get_box(pos):
        return False

    return True


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is complete, valid and matches puzzle clues.
    """
    clues = puzzle.grid != 0
    if not np.array_equal(puzzle.grid[clues], solution.grid[clues]):
        return False

    return solution.is_solved() and solution.is_valid()


def merge(diff: SudokuBoard, original: SudokuBoard) -> SudokuBoard:
    """
    Overlay a difference board onto the original puzzle.

    Cells where `diff` is nonzero take its value; every other cell keeps
    the original's value.
    """
    merged = original.copy()
    filled = diff.grid != 0
    merged.grid[filled] = diff.grid[filled]
    return merged
