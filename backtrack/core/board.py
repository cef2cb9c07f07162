"""9x9 Sudoku board implementing the Puzzle interface."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Sequence, Union

from .puzzle import Puzzle


SIZE = 9
BOX_SIZE = 3
EMPTY = 0

# (column, row)
Position = Tuple[int, int]


class SudokuBoard(Puzzle):
    """
    Represents a standard 9x9 Sudoku board with 3x3 boxes.

    Cells are addressed by `(column, row)` tuples, zero-based. The value 0
    marks an empty cell.
    """

    size = SIZE
    box_size = BOX_SIZE

    def __init__(self, grid: Optional[Union[np.ndarray, Sequence[Sequence[int]]]] = None):
        """
        Initialize a Sudoku board.

        Args:
            grid: Optional initial 9x9 grid indexed as grid[row][col].
                  If None, creates an empty board.
        """
        if grid is not None:
            arr = np.asarray(grid)
            if arr.shape != (SIZE, SIZE):
                raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {arr.shape}")
            if not np.issubdtype(arr.dtype, np.integer):
                raise ValueError(f"Grid values must be integers, got {arr.dtype}")
            if arr.min() < 0 or arr.max() > SIZE:
                raise ValueError(f"Grid values must be 0-{SIZE}")
            self.grid = arr.astype(np.int32)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    @staticmethod
    def check_position(pos: Position) -> Tuple[int, int]:
        """Unpack a (col, row) position, raising IndexError if it is off the grid."""
        col, row = pos
        if not (0 <= col < SIZE and 0 <= row < SIZE):
            raise IndexError(f"Position {pos} is outside the {SIZE}x{SIZE} grid")
        return col, row

    def copy(self) -> SudokuBoard:
        """Create a deep copy of the board."""
        new_board = SudokuBoard()
        new_board.grid = self.grid.copy()
        return new_board

    def get(self, pos: Position) -> int:
        """Get value at position (col, row). 0 means empty."""
        col, row = self.check_position(pos)
        return int(self.grid[row, col])

    def set(self, pos: Position, value: int) -> None:
        """Set value at position (col, row). Use 0 to clear."""
        col, row = self.check_position(pos)
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValueError(f"Value must be an integer, got {value!r}")
        if value < 0 or value > SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value}")
        self.grid[row, col] = value

    def clear(self, pos: Position) -> None:
        """Clear the cell at position (col, row)."""
        col, row = self.check_position(pos)
        self.grid[row, col] = EMPTY

    def is_empty(self, pos: Position) -> bool:
        """Check if cell is empty (value is 0)."""
        col, row = self.check_position(pos)
        return self.grid[row, col] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, pos: Position) -> np.ndarray:
        """Get all values in the box containing (col, row)."""
        col, row = self.check_position(pos)
        box_col = BOX_SIZE * (col // BOX_SIZE)
        box_row = BOX_SIZE * (row // BOX_SIZE)
        return self.grid[box_row:box_row + BOX_SIZE,
                         box_col:box_col + BOX_SIZE].flatten()

    def possible(self, pos: Position) -> List[int]:
        """
        Get the legal values for a cell, in ascending order.

        A filled cell has exactly one candidate: its own value. An empty
        cell may take any value from 1-9 not already used in its row,
        column or box.
        """
        col, row = self.check_position(pos)
        current = int(self.grid[row, col])
        if current != EMPTY:
            return [current]

        used = set(self.get_row(row).tolist())
        used.update(self.get_col(col).tolist())
        used.update(self.get_box((col, row)).tolist())

        return [value for value in range(1, SIZE + 1) if value not in used]

    def get_empty_cells(self) -> List[Position]:
        """Get all empty positions in row-major order."""
        return [(col, row)
                for row in range(SIZE)
                for col in range(SIZE)
                if self.grid[row, col] == EMPTY]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != EMPTY))

    def is_solved(self) -> bool:
        """
        Check if every cell is filled.

        Rules are not re-checked: the solver only ever assigns values
        returned by `possible`, so a full board from a consistent start is
        a solved one.
        """
        return self.count_empty() == 0

    def solve_simple(self) -> int:
        """Fill naked singles until none remain. See `propagate_naked_singles`."""
        return propagate_naked_singles(self)

    def remove(self, other: SudokuBoard) -> None:
        """Clear every cell that holds a value in `other`."""
        self.grid[other.grid != EMPTY] = EMPTY

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        units = [self.get_row(i) for i in range(SIZE)]
        units += [self.get_col(j) for j in range(SIZE)]
        units += [self.get_box((box_col, box_row))
                  for box_row in range(0, SIZE, BOX_SIZE)
                  for box_col in range(0, SIZE, BOX_SIZE)]

        for unit in units:
            non_zero = unit[unit != EMPTY]
            if len(non_zero) != len(set(non_zero.tolist())):
                return False
        return True

    def is_consistent(self) -> bool:
        return self.is_valid()

    def to_string(self) -> str:
        """Convert board to an 81-character string, 0 for empty cells."""
        return ''.join(str(v) for v in self.grid.flatten().tolist())

    @classmethod
    def from_string(cls, s: str) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: 81 characters in row-major order, 0 or . for empty cells,
               1-9 for values. Whitespace is ignored.
        """
        chars = [c for c in s if not c.isspace()]
        if len(chars) != SIZE * SIZE:
            raise ValueError(f"String length must be {SIZE * SIZE}, got {len(chars)}")

        values = []
        for c in chars:
            if c == '.':
                values.append(EMPTY)
            elif c in '0123456789':
                values.append(int(c))
            else:
                raise ValueError(f"Unexpected character {c!r} in puzzle string")

        return cls(np.array(values, dtype=np.int32).reshape(SIZE, SIZE))

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuBoard:
        """Create a board from a 2D list indexed as data[row][col]."""
        return cls(np.array(data))

    def __str__(self) -> str:
        """Render the board with box separators."""
        lines = [" ___ ___ ___"]
        for row in range(SIZE):
            row_str = '|'
            for col in range(SIZE):
                val = self.grid[row, col]
                row_str += ' ' if val == EMPTY else str(val)
                if col % BOX_SIZE == BOX_SIZE - 1:
                    row_str += '|'
            lines.append(row_str)
            if row % BOX_SIZE == BOX_SIZE - 1:
                lines.append(" ---+---+---")
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())


def propagate_naked_singles(board: SudokuBoard) -> int:
    """
    Fill in naked singles until a full pass assigns nothing.

    A naked single is an empty cell with exactly one legal value. Filling
    one can create others, so passes repeat until a fixpoint is reached.

    Returns:
        Number of cells filled.
    """
    filled = 0
    changed = True
    while changed:
        changed = False
        for pos in board.get_empty_cells():
            candidates = board.possible(pos)
            if len(candidates) == 1:
                board.set(pos, candidates[0])
                filled += 1
                changed = True
    return filled
