"""Benchmarking framework for comparing selection strategies."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional
import json
import os

from tqdm import tqdm

from ..core.board import SudokuBoard
from ..solvers import BackTrackSolver, SolveSettings, STRATEGIES
from ..solvers.strategies import Strategy


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: int
    strategy: str
    solved: bool
    time_seconds: float
    iterations: int
    backtracks: int
    nodes_explored: int
    max_depth: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "strategy": self.strategy,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "max_depth": self.max_depth,
            **self.extra
        }


class Benchmark:
    """
    Runs every selection strategy on every puzzle and collects search
    metrics, so the cost of each cell-picking heuristic can be compared.
    """

    def __init__(
        self,
        puzzles: List[SudokuBoard],
        strategies: Optional[Dict[str, Strategy]] = None,
        settings: Optional[SolveSettings] = None,
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Puzzles to solve.
            strategies: Dict of name -> strategy (default: all built-ins).
            settings: Solve options shared by every run. Tracing and
                      delays are switched off regardless.
        """
        self.puzzles = puzzles
        self.strategies = strategies or dict(STRATEGIES)
        base = settings or SolveSettings()
        self.settings = SolveSettings(
            pre_pass_propagation=base.pre_pass_propagation,
            report_difference=base.report_difference,
        )
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []

        total_tests = len(self.puzzles) * len(self.strategies)
        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for puzzle_id, puzzle in enumerate(self.puzzles):
            for name, strategy in self.strategies.items():
                self.results.append(self._run_single(puzzle, puzzle_id, name, strategy))
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: SudokuBoard,
        puzzle_id: int,
        name: str,
        strategy: Strategy,
    ) -> BenchmarkResult:
        """Run a single strategy on a single puzzle."""
        solver = BackTrackSolver(strategy, self.settings, track_memory=False)
        _, stats = solver.solve(puzzle)

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            strategy=name,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            max_depth=stats.max_depth,
            extra=stats.extra,
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.puzzles),
            "strategies_tested": list(self.strategies.keys()),
            "settings": self.settings.to_dict(),
            "results_by_strategy": {},
        }

        for name in self.strategies:
            runs = [r for r in self.results if r.strategy == name]
            if not runs:
                continue
            solved = [r for r in runs if r.solved]
            times = [r.time_seconds for r in runs]

            summary["results_by_strategy"][name] = {
                "total_solved": len(solved),
                "total_tested": len(runs),
                "avg_time_seconds": sum(times) / len(times),
                "max_time_seconds": max(times),
                "avg_iterations": sum(r.iterations for r in runs) / len(runs),
                "avg_backtracks": sum(r.backtracks for r in runs) / len(runs),
            }

        return summary

    def save_results(self, output_dir: str) -> List[str]:
        """Save raw results and the summary as JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        return [results_file, summary_file]
