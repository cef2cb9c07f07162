"""Generic backtracking search engine with a Sudoku instantiation."""

__version__ = "1.0.0"
