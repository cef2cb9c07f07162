"""Example puzzles bundled for demonstration and comparison runs."""

from typing import Dict, List

from .core.board import SudokuBoard


EXAMPLE_1: List[List[int]] = [
    [0, 4, 1, 0, 9, 0, 2, 0, 0],
    [9, 2, 6, 5, 0, 0, 1, 0, 0],
    [0, 0, 0, 1, 0, 0, 3, 0, 6],
    [6, 3, 0, 0, 4, 0, 0, 8, 9],
    [7, 0, 0, 0, 0, 0, 0, 0, 1],
    [1, 5, 0, 0, 8, 0, 0, 2, 7],
    [2, 0, 9, 0, 0, 7, 0, 0, 0],
    [0, 0, 5, 0, 0, 8, 9, 1, 2],
    [0, 0, 3, 0, 1, 0, 7, 5, 0],
]

# Top three rows cleared, so it has many solutions.
EXAMPLE_2: List[List[int]] = [
    [0, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 0, 0, 3, 4, 0, 0, 0],
    [0, 0, 0, 0, 0, 0, 0, 0, 0],

    [9, 6, 0, 0, 5, 0, 0, 8, 7],
    [2, 0, 0, 0, 0, 0, 0, 0, 6],
    [7, 1, 0, 0, 2, 0, 0, 4, 5],

    [0, 2, 0, 0, 0, 9, 0, 7, 8],
    [0, 4, 0, 6, 1, 0, 5, 0, 0],
    [0, 0, 8, 0, 0, 0, 0, 1, 3],
]

EXAMPLES: Dict[int, List[List[int]]] = {
    1: EXAMPLE_1,
    2: EXAMPLE_2,
}


def example(number: int) -> SudokuBoard:
    """Get a fresh board for a bundled example."""
    if number not in EXAMPLES:
        raise ValueError(f"No example {number}, choose from {sorted(EXAMPLES)}")
    return SudokuBoard.from_2d_list(EXAMPLES[number])


def all_examples() -> List[SudokuBoard]:
    """Fresh boards for every bundled example."""
    return [example(n) for n in sorted(EXAMPLES)]
