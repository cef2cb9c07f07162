"""Command-line interface for the backtracking Sudoku solver."""

import argparse
import json
import logging
import sys

from .benchmark import Benchmark
from .core.board import SudokuBoard
from .examples import example, all_examples, EXAMPLES
from .solvers import BackTrackSolver, SolveSettings, STRATEGIES

log = logging.getLogger(__name__)


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Backtracking Sudoku solver with pluggable cell selection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the second bundled example, picking the most constrained cell
  python -m backtrack.cli solve --example 2 --strategy min

  # Watch the search, half a second per step, printing only filled cells
  python -m backtrack.cli solve --example 2 --trace --step-delay 0.5 --difference

  # Compare the three strategies on the bundled examples
  python -m backtrack.cli compare --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging (includes search trace output)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group()
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--example", "-e", type=int, choices=sorted(EXAMPLES), default=None,
        help="Solve a bundled example puzzle (default: 2)"
    )
    solve_parser.add_argument(
        "--strategy", "-s", choices=sorted(STRATEGIES), default="min",
        help="Cell selection strategy (default: min)"
    )
    solve_parser.add_argument(
        "--settings", type=str, default=None,
        help="JSON file with solve settings; flags below override it"
    )
    solve_parser.add_argument(
        "--no-propagation", action="store_true",
        help="Do not fill naked singles before each branch"
    )
    solve_parser.add_argument(
        "--trace", action="store_true",
        help="Log every assignment and undo (implies debug logging)"
    )
    solve_parser.add_argument(
        "--difference", action="store_true",
        help="Print only the cells the solver filled in"
    )
    solve_parser.add_argument(
        "--step-delay", type=float, default=None,
        help="Seconds to pause after each assignment"
    )

    # Compare command
    compare_parser = subparsers.add_parser(
        "compare", help="Compare selection strategies on a set of puzzles"
    )
    compare_parser.add_argument(
        "--puzzle", "-p", type=str, action="append", default=None,
        help="Puzzle string; repeat for several (default: bundled examples)"
    )
    compare_parser.add_argument(
        "--no-propagation", action="store_true",
        help="Do not fill naked singles before each branch"
    )
    compare_parser.add_argument(
        "--output", "-o", type=str, default=None,
        help="Output directory for JSON results and charts"
    )
    compare_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "solve":
            return cmd_solve(args)
        return cmd_compare(args)
    except ValueError as e:
        print(f"Error: {e}")
        return 1


def load_settings(args) -> SolveSettings:
    """Build solve settings from an optional JSON file and CLI flags."""
    data = {}
    if args.settings:
        with open(args.settings, "r") as f:
            data = json.load(f)
        log.info(f"Loaded settings from {args.settings}")

    if args.no_propagation:
        data["pre_pass_propagation"] = False
    if args.trace:
        data["trace"] = True
    if args.difference:
        data["report_difference"] = True
    if args.step_delay is not None:
        data["step_delay"] = args.step_delay

    return SolveSettings.from_dict(data)


def cmd_solve(args) -> int:
    """Handle the solve command."""
    if args.puzzle:
        board = SudokuBoard.from_string(args.puzzle)
    else:
        board = example(args.example or 2)

    settings = load_settings(args)

    print("Input puzzle:")
    print(board)
    print()

    # Trace output is DEBUG; raise the package logger only for this solve.
    package_log = logging.getLogger("backtrack")
    previous_level = package_log.level
    if settings.trace:
        package_log.setLevel(logging.DEBUG)
    try:
        solver = BackTrackSolver(STRATEGIES[args.strategy], settings)
        solution, stats = solver.solve(board)
    finally:
        package_log.setLevel(previous_level)

    if not stats.solved:
        print(f"✗ No solution ({stats.extra.get('reason', 'unknown')})")
        print(f"  Iterations: {stats.iterations:,}")
        return 1

    print(f"✓ Solved in {stats.time_seconds:.4f}s")
    print(f"  Iterations: {stats.iterations:,}")
    print(f"  Backtracks: {stats.backtracks:,}")
    print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")
    print("Difference:" if settings.report_difference else "Solution:")
    print(solution)
    return 0


def cmd_compare(args) -> int:
    """Handle the compare command."""
    if args.puzzle:
        puzzles = [SudokuBoard.from_string(p) for p in args.puzzle]
    else:
        puzzles = all_examples()

    settings = SolveSettings(pre_pass_propagation=not args.no_propagation)

    print("=" * 60)
    print("SELECTION STRATEGY COMPARISON")
    print("=" * 60)
    print(f"Puzzles: {len(puzzles)}")
    print(f"Strategies: {', '.join(STRATEGIES)}")
    print(f"Propagation: {settings.pre_pass_propagation}")
    print("=" * 60)

    benchmark = Benchmark(puzzles, settings=settings)
    results = benchmark.run()
    summary = benchmark.get_summary()

    print("\nBy Strategy:")
    print("-" * 50)
    for name, stats in summary["results_by_strategy"].items():
        print(f"\n{name}:")
        print(f"  Solved: {stats['total_solved']}/{stats['total_tested']}")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Iterations: {stats['avg_iterations']:.1f}")
        print(f"  Avg Backtracks: {stats['avg_backtracks']:.1f}")

    if args.output:
        benchmark.save_results(args.output)
        print(f"\nResults saved to {args.output}")

        if not args.no_charts:
            from .benchmark.visualizer import Visualizer
            charts = Visualizer(results, args.output).generate_all()
            for chart in charts:
                print(f"  - {chart}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
