"""Benchmarking framework for comparing candidate ordering policies."""

from __future__ import annotations
from dataclasses import dataclass, field
from functools import partial
from typing import Callable, List, Dict, Any, Optional
import json
import os

from tqdm import tqdm

from ..core.board import Board
from ..puzzles import BUILTIN_PUZZLES
from ..solvers import BacktrackingSolver, CandidateOrder, ShuffledOrder, natural_order

# Called once per (puzzle, policy) run; each call returns a fresh ordering.
OrderFactory = Callable[[], CandidateOrder]


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_id: str
    policy: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_id": self.puzzle_id,
            "policy": self.policy,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


def default_policies(runs: int = 3, seed: int = 42) -> Dict[str, OrderFactory]:
    """Natural order plus `runs` shuffled orders with consecutive seeds."""
    policies: Dict[str, OrderFactory] = {"natural": lambda: natural_order}
    for i in range(runs):
        policies[f"shuffle-{seed + i}"] = partial(ShuffledOrder, seed + i)
    return policies


class Benchmark:
    """
    Benchmark framework for candidate ordering policies.

    Solves every puzzle once per policy with a fresh copy of the board and
    collects performance metrics. Correctness does not depend on the order,
    so every solved run of a puzzle must end on the same grid.
    """

    def __init__(
        self,
        puzzles: Optional[Dict[str, Board]] = None,
        policies: Optional[Dict[str, OrderFactory]] = None,
        max_steps: Optional[int] = None,
        timeout_seconds: Optional[float] = 60.0
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Dict of puzzle_id -> board (default: the built-in puzzles).
            policies: Dict of policy_name -> ordering factory, called once
                per run (default: natural plus three seeded shuffles).
            max_steps: Step budget per run.
            timeout_seconds: Time budget per run.
        """
        if puzzles is None:
            puzzles = {name: Board.from_string(s) for name, s in BUILTIN_PUZZLES.items()}
        self.puzzles = puzzles
        self.policies = policies if policies is not None else default_policies()
        self.max_steps = max_steps
        self.timeout_seconds = timeout_seconds

        self.results: List[BenchmarkResult] = []
        self.solutions: Dict[str, Dict[str, str]] = {}

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        self.solutions = {}

        total_tests = len(self.puzzles) * len(self.policies)
        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for puzzle_id, puzzle in self.puzzles.items():
            for policy_name, make_order in self.policies.items():
                result = self._run_single(puzzle, puzzle_id, policy_name, make_order())
                self.results.append(result)
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: Board,
        puzzle_id: str,
        policy_name: str,
        order: CandidateOrder
    ) -> BenchmarkResult:
        """Run one ordering policy on one puzzle."""
        solver = BacktrackingSolver(
            order=order,
            max_steps=self.max_steps,
            timeout_seconds=self.timeout_seconds
        )
        board = puzzle.copy()
        solved, stats = solver.solve(board)

        if solved:
            self.solutions.setdefault(puzzle_id, {})[policy_name] = board.to_string()

        return BenchmarkResult(
            puzzle_id=puzzle_id,
            policy=policy_name,
            solved=solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra=dict(stats.extra)
        )

    def is_order_independent(self) -> bool:
        """True if, for every puzzle, all solved runs produced the same grid."""
        return all(
            len(set(grids.values())) <= 1 for grids in self.solutions.values()
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        summary = {
            "total_puzzles": len(self.puzzles),
            "policies_tested": list(self.policies.keys()),
            "order_independent": self.is_order_independent(),
            "results_by_policy": {},
            "results_by_puzzle": {}
        }

        # Group by policy
        for policy_name in self.policies:
            policy_results = [r for r in self.results if r.policy == policy_name]
            if policy_results:
                solved = [r for r in policy_results if r.solved]
                times = [r.time_seconds for r in policy_results]
                nodes = [r.nodes_explored for r in policy_results]

                summary["results_by_policy"][policy_name] = {
                    "accuracy": len(solved) / len(policy_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
                    "min_time_seconds": min(times),
                    "avg_nodes_explored": sum(nodes) / len(nodes),
                    "total_solved": len(solved),
                    "total_tested": len(policy_results)
                }

        # Group by puzzle
        for puzzle_id in self.puzzles:
            puzzle_results = [r for r in self.results if r.puzzle_id == puzzle_id]
            if puzzle_results:
                summary["results_by_puzzle"][puzzle_id] = {
                    r.policy: {
                        "solved": r.solved,
                        "time_seconds": r.time_seconds,
                        "nodes_explored": r.nodes_explored
                    }
                    for r in puzzle_results
                }

        return summary

    def save_results(self, output_dir: str) -> None:
        """Save benchmark results and summary to JSON files."""
        os.makedirs(output_dir, exist_ok=True)

        # Save raw results as JSON
        results_file = os.path.join(output_dir, "benchmark_results.json")
        with open(results_file, "w") as f:
            json.dump([r.to_dict() for r in self.results], f, indent=2)

        # Save summary
        summary_file = os.path.join(output_dir, "benchmark_summary.json")
        with open(summary_file, "w") as f:
            json.dump(self.get_summary(), f, indent=2)

        print(f"Results saved to {output_dir}")
