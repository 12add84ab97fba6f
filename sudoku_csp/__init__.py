"""Sudoku solver: a constraint graph of positions and groups searched by backtracking."""

from .core import Board, Group, GroupKind, Position, InvalidCellValue, InvalidDimensions, SudokuError
from .solvers import BacktrackingSolver, SearchBudget, ShuffledOrder, natural_order, solve

__version__ = "1.0.0"

__all__ = [
    "Board",
    "Group",
    "GroupKind",
    "Position",
    "SudokuError",
    "InvalidDimensions",
    "InvalidCellValue",
    "BacktrackingSolver",
    "SearchBudget",
    "ShuffledOrder",
    "natural_order",
    "solve",
]
