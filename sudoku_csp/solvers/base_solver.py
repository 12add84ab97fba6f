"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any, Tuple
import time
import tracemalloc

from ..core.board import Board


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0
    dead_ends: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "dead_ends": self.dead_ends,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for Sudoku solvers."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: Board) -> Tuple[bool, SolverStats]:
        """
        Solve a Sudoku puzzle in place, with timing and memory tracking.

        Args:
            board: The puzzle to solve. On success it is left solved; on
                failure it is left exactly as it was passed in.

        Returns:
            Tuple of (solved, stats).
        """
        self.stats = SolverStats(algorithm=self.name)

        # Start memory tracking
        tracemalloc.start()

        # Start timing
        start_time = time.perf_counter()

        try:
            solved = self._solve(board)
        finally:
            # End timing
            self.stats.time_seconds = time.perf_counter() - start_time

            # Get memory usage
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        self.stats.solved = solved and board.is_solved()
        return self.stats.solved, self.stats

    @abstractmethod
    def _solve(self, board: Board) -> bool:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            board: The puzzle to solve, modified in place.

        Returns:
            True if the board was solved.
        """
        pass
