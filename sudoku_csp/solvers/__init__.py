"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .backtracking import BacktrackingSolver, solve
from .budget import SearchBudget
from .ordering import CandidateOrder, ShuffledOrder, natural_order

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "SearchBudget",
    "CandidateOrder",
    "ShuffledOrder",
    "natural_order",
    "solve",
]
