"""Unit tests for the backtracking solver."""

import logging
import pytest
from backtrack.core.board import SudokuBoard
from backtrack.core.puzzle import Puzzle
from backtrack.core.validator import validate_solution, merge
from backtrack.examples import example
from backtrack.solvers import (
    BackTrackSolver, SolveSettings, STRATEGIES, find_empty, find_min_empty
)

from test_board import TEST_PUZZLE, TEST_SOLUTION


NO_PROPAGATION = SolveSettings(pre_pass_propagation=False)


def dead_cell_board():
    """Consistent givens where (8, 0), the first empty cell, has no legal value."""
    board = SudokuBoard()
    for col in range(8):
        board.set((col, 0), col + 1)
    board.set((8, 7), 9)
    return board


class Queens(Puzzle):
    """N queens, one per column; positions are columns, values are rows."""

    def __init__(self, n):
        self.n = n
        self.rows = [None] * n

    def set(self, pos, value):
        self.rows[pos] = value

    def clear(self, pos):
        self.rows[pos] = None

    def possible(self, pos):
        if self.rows[pos] is not None:
            return [self.rows[pos]]
        return [
            row for row in range(self.n)
            if all(other is None or (other != row and abs(other - row) != abs(col - pos))
                   for col, other in enumerate(self.rows))
        ]

    def is_solved(self):
        return None not in self.rows

    def solve_simple(self):
        return 0

    def remove(self, other):
        for col, row in enumerate(other.rows):
            if row is not None:
                self.rows[col] = None

    def copy(self):
        other = Queens(self.n)
        other.rows = list(self.rows)
        return other


def next_column(queens):
    return next((col for col, row in enumerate(queens.rows) if row is None), None)


class TestSolve:
    """Tests for solving Sudoku boards."""

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_solve_puzzle(self, name):
        """Every strategy reaches the same, unique solution."""
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solver = BackTrackSolver(STRATEGIES[name])

        solution, stats = solver.solve(board)

        assert stats.solved
        assert solution.to_string() == TEST_SOLUTION
        assert validate_solution(board, solution)

    @pytest.mark.parametrize("strategy", [find_empty, find_min_empty])
    def test_solve_puzzle_without_propagation(self, strategy):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        solution, stats = BackTrackSolver(strategy, NO_PROPAGATION).solve(board)

        assert stats.solved
        assert solution.to_string() == TEST_SOLUTION

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_strategies_agree_without_propagation(self, name):
        board = SudokuBoard.from_string(TEST_SOLUTION)
        for pos in [(0, 0), (4, 1), (8, 2), (2, 4), (6, 5), (1, 7), (5, 8), (7, 8)]:
            board.clear(pos)

        solution, stats = BackTrackSolver(STRATEGIES[name], NO_PROPAGATION).solve(board)

        assert stats.solved
        assert solution.to_string() == TEST_SOLUTION

    # find_freq_empty never branches on a dead cell, so on the empty board it
    # only notices a wrong guess after exhausting huge subtrees.
    @pytest.mark.parametrize("strategy", [find_empty, find_min_empty])
    @pytest.mark.parametrize("propagate", [True, False])
    def test_solve_empty_board(self, strategy, propagate):
        """An empty board always has a completion."""
        board = SudokuBoard()
        solver = BackTrackSolver(strategy, SolveSettings(pre_pass_propagation=propagate))

        solution, stats = solver.solve(board)

        assert stats.solved
        assert solution.is_solved()
        assert solution.is_valid()

    def test_single_hole(self):
        board = SudokuBoard.from_string(TEST_SOLUTION)
        board.clear((4, 4))

        solution, stats = BackTrackSolver(find_empty, NO_PROPAGATION).solve(board)

        assert stats.solved
        assert solution.get((4, 4)) == 5
        assert solution.to_string() == TEST_SOLUTION

    def test_bundled_example(self):
        puzzle = example(2)
        solution, stats = BackTrackSolver().solve(puzzle)

        assert stats.solved
        assert validate_solution(puzzle, solution)

    def test_input_not_modified(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        BackTrackSolver(find_empty, NO_PROPAGATION).solve(board)
        assert board.to_string() == TEST_PUZZLE

    def test_stats_collected(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        _, stats = BackTrackSolver(find_empty, NO_PROPAGATION).solve(board)

        assert stats.time_seconds > 0
        assert stats.iterations > 0
        # Without propagation every filled cell is one level deeper.
        assert stats.max_depth == board.count_empty()


class TestDifference:
    """Tests for difference reporting."""

    def test_single_hole_difference(self):
        board = SudokuBoard.from_string(TEST_SOLUTION)
        board.clear((4, 4))
        settings = SolveSettings(report_difference=True)

        diff, stats = BackTrackSolver(find_min_empty, settings).solve(board)

        assert stats.solved
        assert diff.count_filled() == 1
        assert diff.get((4, 4)) == 5

    @pytest.mark.parametrize("propagate", [True, False])
    def test_merge_reconstructs_solution(self, propagate):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        settings = SolveSettings(pre_pass_propagation=propagate, report_difference=True)

        diff, stats = BackTrackSolver(find_min_empty, settings).solve(board)

        assert stats.solved
        assert diff.count_filled() == board.count_empty()
        assert merge(diff, board).to_string() == TEST_SOLUTION


class TestNoSolution:
    """Tests for unsolvable input."""

    @pytest.mark.parametrize("strategy", [find_empty, find_min_empty])
    def test_dead_cell(self, strategy):
        solution, stats = BackTrackSolver(strategy, NO_PROPAGATION).solve(dead_cell_board())

        assert solution is None
        assert not stats.solved
        assert stats.extra["reason"] == "exhausted"

    def test_dead_cell_with_propagation(self):
        solution, stats = BackTrackSolver(find_min_empty).solve(dead_cell_board())
        assert solution is None
        assert not stats.solved

    @pytest.mark.parametrize("name", sorted(STRATEGIES))
    def test_duplicate_givens(self, name):
        """Conflicting givens end the search without exploring it."""
        board = SudokuBoard.from_string("55" + TEST_PUZZLE[2:])

        solution, stats = BackTrackSolver(STRATEGIES[name]).solve(board)

        assert solution is None
        assert not stats.solved
        assert stats.extra["reason"] == "inconsistent givens"

    def test_contract_violation_propagates(self):
        """A strategy returning a bad position is an error, not NoSolution."""
        solver = BackTrackSolver(lambda board: (9, 9), NO_PROPAGATION)
        with pytest.raises(IndexError):
            solver.solve(SudokuBoard())


class TestGenericPuzzle:
    """The solver works with any Puzzle implementation."""

    def test_six_queens(self):
        solution, stats = BackTrackSolver(next_column, NO_PROPAGATION).solve(Queens(6))

        assert stats.solved
        assert solution.rows == [1, 3, 5, 0, 2, 4]
        assert stats.backtracks > 0

    def test_three_queens_unsolvable(self):
        solution, stats = BackTrackSolver(next_column, NO_PROPAGATION).solve(Queens(3))
        assert solution is None
        assert not stats.solved

    def test_difference_on_generic_puzzle(self):
        puzzle = Queens(4)
        puzzle.set(0, 1)
        settings = SolveSettings(pre_pass_propagation=False, report_difference=True)

        diff, stats = BackTrackSolver(next_column, settings).solve(puzzle)

        assert stats.solved
        assert diff.rows == [None, 3, 0, 2]


class TestObservers:
    """Tests for tracing and paced delay."""

    def test_observer_sees_assignments_and_undos(self):
        events = []
        settings = SolveSettings(pre_pass_propagation=False, trace=True)
        solver = BackTrackSolver(
            next_column, settings,
            observer=lambda event, puzzle, pos, value: events.append((event, pos, value)),
        )

        solution, stats = solver.solve(Queens(6))

        assigns = [e for e in events if e[0] == "assign"]
        undos = [e for e in events if e[0] == "undo"]
        assert events[0] == ("assign", 0, 0)
        assert len(assigns) == stats.iterations - 1
        assert len(undos) == stats.backtracks

    def test_observer_silent_without_trace(self):
        events = []
        solver = BackTrackSolver(
            next_column, NO_PROPAGATION,
            observer=lambda *args: events.append(args),
        )
        solver.solve(Queens(5))
        assert events == []

    def test_trace_does_not_change_result(self):
        board = SudokuBoard.from_string(TEST_PUZZLE)
        traced = SolveSettings(pre_pass_propagation=False, trace=True)
        solver = BackTrackSolver(find_empty, traced, observer=lambda *args: None)

        solution, _ = solver.solve(board)
        assert solution.to_string() == TEST_SOLUTION

    def test_default_observer_logs(self, caplog):
        board = SudokuBoard.from_string(TEST_SOLUTION)
        board.clear((4, 4))
        settings = SolveSettings(pre_pass_propagation=False, trace=True)

        with caplog.at_level(logging.DEBUG, logger="backtrack"):
            BackTrackSolver(find_empty, settings).solve(board)

        assert "assign 5 at (4, 4)" in caplog.text

    def test_step_delay(self):
        calls = []
        settings = SolveSettings(pre_pass_propagation=False, step_delay=0.25)
        solver = BackTrackSolver(next_column, settings, sleep=calls.append)

        _, stats = solver.solve(Queens(4))

        assert calls
        assert len(calls) == stats.iterations - 1
        assert set(calls) == {0.25}

    def test_no_delay_by_default(self):
        calls = []
        BackTrackSolver(next_column, NO_PROPAGATION, sleep=calls.append).solve(Queens(4))
        assert calls == []


class TestSettings:
    """Tests for SolveSettings."""

    def test_defaults(self):
        settings = SolveSettings()
        assert settings.pre_pass_propagation
        assert not settings.trace
        assert not settings.report_difference
        assert settings.step_delay == 0.0

    def test_from_dict(self):
        settings = SolveSettings.from_dict({"trace": True, "step_delay": 0.5})
        assert settings.trace
        assert settings.step_delay == 0.5
        assert SolveSettings.from_dict(settings.to_dict()) == settings

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            SolveSettings.from_dict({"sleep_ms": 500})

    def test_negative_delay(self):
        with pytest.raises(ValueError):
            SolveSettings(step_delay=-1)

    def test_frozen(self):
        settings = SolveSettings()
        with pytest.raises(AttributeError):
            settings.trace = True


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
