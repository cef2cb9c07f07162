"""Puzzle interface consumed by the generic backtracking solver."""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Hashable, List, TypeVar


P = TypeVar("P", bound="Puzzle")


class Puzzle(ABC):
    """
    Capability set a puzzle must expose to be searched by BackTrackSolver.

    Positions and values are opaque to the solver: it only passes positions
    returned by a selection strategy back into the puzzle, and values
    returned by `possible` back into `set`.
    """

    @abstractmethod
    def set(self, pos: Hashable, value: Any) -> None:
        """Assign a value at a position."""

    @abstractmethod
    def clear(self, pos: Hashable) -> None:
        """Undo an assignment, restoring the empty state at a position."""

    @abstractmethod
    def possible(self, pos: Hashable) -> List[Any]:
        """
        Legal values for a position, in the order they should be tried.

        A filled position returns a single-element list with its own value.
        """

    @abstractmethod
    def is_solved(self) -> bool:
        """True when nothing is left to assign."""

    @abstractmethod
    def solve_simple(self) -> int:
        """
        Apply deterministic propagation in place.

        Returns:
            Number of assignments made.
        """

    @abstractmethod
    def remove(self, other: Puzzle) -> None:
        """Clear every position that is filled in `other`."""

    @abstractmethod
    def copy(self: P) -> P:
        """Create an independent copy."""

    def is_consistent(self) -> bool:
        """Whether the current givens can possibly lead to a solution."""
        return True


def difference(solved: P, original: P) -> P:
    """
    Keep only the values the solver filled in.

    Args:
        solved: A solved puzzle.
        original: The puzzle as it was before solving.

    Returns:
        A new puzzle holding solved values where `original` was empty and
        empty cells where `original` already had a value.
    """
    result = solved.copy()
    result.remove(original)
    return result
