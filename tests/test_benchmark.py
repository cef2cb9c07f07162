"""Tests for the strategy comparison benchmark and charts."""

import json
import os
import pytest
from backtrack.benchmark import Benchmark
from backtrack.benchmark.visualizer import Visualizer
from backtrack.core.board import SudokuBoard
from backtrack.solvers import find_empty

from test_board import TEST_PUZZLE


@pytest.fixture
def benchmark():
    bench = Benchmark([SudokuBoard.from_string(TEST_PUZZLE)])
    bench.run(show_progress=False)
    return bench


class TestBenchmark:
    """Tests for Benchmark."""

    def test_runs_every_strategy(self, benchmark):
        assert len(benchmark.results) == 3
        assert {r.strategy for r in benchmark.results} == {"first", "min", "freq"}
        assert all(r.solved for r in benchmark.results)

    def test_custom_strategies(self):
        bench = Benchmark(
            [SudokuBoard.from_string(TEST_PUZZLE)] * 2,
            strategies={"mine": find_empty},
        )
        results = bench.run(show_progress=False)

        assert [r.puzzle_id for r in results] == [0, 1]
        assert all(r.strategy == "mine" for r in results)

    def test_summary(self, benchmark):
        summary = benchmark.get_summary()

        assert summary["total_puzzles"] == 1
        assert summary["settings"]["trace"] is False
        for stats in summary["results_by_strategy"].values():
            assert stats["total_solved"] == 1
            assert stats["total_tested"] == 1

    def test_save_results(self, benchmark, tmp_path):
        paths = benchmark.save_results(str(tmp_path))

        with open(paths[0]) as f:
            rows = json.load(f)
        assert len(rows) == 3
        assert os.path.exists(paths[1])


class TestVisualizer:
    """Tests for chart generation."""

    def test_generate_all(self, benchmark, tmp_path):
        charts = Visualizer(benchmark.results, str(tmp_path)).generate_all()

        assert len(charts) == 2
        for path in charts:
            assert os.path.exists(path)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
