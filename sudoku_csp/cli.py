"""Command-line interface for the Sudoku solver."""

import argparse
import logging
import sys
from typing import List, Optional

from .benchmark import Benchmark, default_policies
from .benchmark.visualizer import Visualizer
from .core.board import Board
from .puzzles import BUILTIN_PUZZLES, get_puzzle, load_puzzles
from .solvers import BacktrackingSolver, ShuffledOrder, natural_order


def main(argv: Optional[List[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Sudoku solver using backtracking with forward checking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Solve the built-in classic puzzle
  sudoku-csp solve --builtin classic

  # Solve a puzzle string with a reproducible random candidate order
  sudoku-csp solve --puzzle "6001082030200400..." --order shuffle --seed 7

  # Compare ordering policies on the built-in puzzles
  sudoku-csp benchmark --runs 3 --output results/
        """
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Solve a Sudoku puzzle")
    source = solve_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--puzzle", "-p", type=str,
        help="Puzzle string (81 chars, 0 or . for empty cells)"
    )
    source.add_argument(
        "--builtin", "-b", choices=sorted(BUILTIN_PUZZLES),
        help="Solve one of the built-in puzzles"
    )
    source.add_argument(
        "--file", "-f", type=str,
        help="File with one puzzle per line"
    )
    solve_parser.add_argument(
        "--index", "-i", type=int, default=0,
        help="Which puzzle of --file to solve (default: 0)"
    )
    solve_parser.add_argument(
        "--order", choices=["natural", "shuffle"], default="natural",
        help="Candidate ordering policy (default: natural)"
    )
    solve_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for --order shuffle"
    )
    _add_budget_arguments(solve_parser, default_timeout=None)
    solve_parser.add_argument(
        "--stats", action="store_true",
        help="Show detailed solving statistics"
    )

    # Benchmark command
    bench_parser = subparsers.add_parser("benchmark", help="Compare candidate ordering policies")
    bench_parser.add_argument(
        "--file", "-f", type=str, default=None,
        help="File with one puzzle per line (default: built-in puzzles)"
    )
    bench_parser.add_argument(
        "--runs", "-n", type=int, default=3,
        help="Number of shuffled orderings per puzzle (default: 3)"
    )
    bench_parser.add_argument(
        "--seed", "-s", type=int, default=42,
        help="Seed of the first shuffled ordering (default: 42)"
    )
    bench_parser.add_argument(
        "--output", "-o", type=str, default="results",
        help="Output directory for results (default: results)"
    )
    bench_parser.add_argument(
        "--no-charts", action="store_true",
        help="Skip chart generation"
    )
    _add_budget_arguments(bench_parser, default_timeout=60.0)

    args = parser.parse_args(argv)

    logging.basicConfig(
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        level=logging.DEBUG if args.verbose else logging.WARNING
    )

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    if args.command == "solve":
        cmd_solve(args)
    elif args.command == "benchmark":
        cmd_benchmark(args)


def _non_negative(convert):
    """argparse type that rejects negative numbers."""
    def parse(text: str):
        try:
            value = convert(text)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid number: {text!r}") from None
        if value < 0:
            raise argparse.ArgumentTypeError(f"must be non-negative, got {text}")
        return value
    return parse


def _add_budget_arguments(parser: argparse.ArgumentParser, default_timeout: Optional[float]):
    parser.add_argument(
        "--max-steps", type=_non_negative(int), default=None,
        help="Give up after this many trial assignments"
    )
    parser.add_argument(
        "--timeout", "-t", type=_non_negative(float), default=default_timeout,
        help=f"Give up after this many seconds (default: {default_timeout})"
    )


def _read_board(args) -> Board:
    if args.builtin:
        return get_puzzle(args.builtin)
    if args.file:
        boards = load_puzzles(args.file)
        if not 0 <= args.index < len(boards):
            raise IndexError(f"{args.file} holds {len(boards)} puzzles, no index {args.index}")
        return boards[args.index]
    return Board.from_string(args.puzzle)


def cmd_solve(args):
    """Handle the solve command."""
    # Parse puzzle
    try:
        board = _read_board(args)
    except (ValueError, IndexError, OSError) as e:
        print(f"Error parsing puzzle: {e}")
        sys.exit(2)

    print("Input puzzle:")
    print(board)
    print()

    order = ShuffledOrder(args.seed) if args.order == "shuffle" else natural_order
    solver = BacktrackingSolver(
        order=order,
        max_steps=args.max_steps,
        timeout_seconds=args.timeout
    )

    solved, stats = solver.solve(board)

    if solved:
        print(f"✓ Solved in {stats.time_seconds:.4f}s")
        if args.stats:
            _print_stats(stats)
        print(board)
    else:
        if stats.extra.get("budget_exhausted"):
            print("No solution found within the search budget.")
        else:
            print("No solution found.")
        if args.stats:
            _print_stats(stats)
        sys.exit(1)


def _print_stats(stats):
    print(f"  Time: {stats.time_seconds:.4f}s")
    print(f"  Search calls: {stats.iterations:,}")
    print(f"  Assignments: {stats.nodes_explored:,}")
    print(f"  Backtracks: {stats.backtracks:,}")
    print(f"  Dead ends: {stats.dead_ends:,}")
    print(f"  Memory: {stats.memory_bytes / 1024:.2f} KB")


def cmd_benchmark(args):
    """Handle the benchmark command."""
    if args.file:
        try:
            boards = load_puzzles(args.file)
        except (ValueError, OSError) as e:
            print(f"Error parsing puzzle: {e}")
            sys.exit(2)
        puzzles = {f"puzzle-{i}": board for i, board in enumerate(boards)}
    else:
        puzzles = None

    benchmark = Benchmark(
        puzzles=puzzles,
        policies=default_policies(args.runs, args.seed),
        max_steps=args.max_steps,
        timeout_seconds=args.timeout
    )

    print("=" * 60)
    print("SUDOKU ORDERING BENCHMARK")
    print("=" * 60)
    print(f"Puzzles: {', '.join(benchmark.puzzles.keys())}")
    print(f"Policies: {', '.join(benchmark.policies.keys())}")
    print(f"Output directory: {args.output}")
    print("=" * 60)

    # Run benchmark
    results = benchmark.run()

    # Print summary
    summary = benchmark.get_summary()

    print("\n" + "=" * 60)
    print("RESULTS SUMMARY")
    print("=" * 60)

    for policy, stats in summary["results_by_policy"].items():
        print(f"\n{policy}:")
        print(f"  Solved: {stats['accuracy']:.1f}% ({stats['total_solved']}/{stats['total_tested']})")
        print(f"  Avg Time: {stats['avg_time_seconds']:.4f}s")
        print(f"  Avg Assignments: {stats['avg_nodes_explored']:,.0f}")

    if not summary["order_independent"]:
        print("\nWARNING: ordering policies disagreed on a solution")

    # Save results
    benchmark.save_results(args.output)

    # Generate charts
    if not args.no_charts:
        print("\nGenerating charts...")
        visualizer = Visualizer(results, args.output)
        charts = visualizer.generate_all()
        visualizer.generate_summary_table()
        print(f"Charts saved to {args.output}/")
        for chart in charts:
            print(f"  - {chart.split('/')[-1]}")

    print("\n" + "=" * 60)
    print("Benchmark complete!")


if __name__ == "__main__":
    main()
