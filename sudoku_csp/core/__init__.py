"""Core module for the Sudoku constraint graph and validation."""

from .board import Board
from .constants import BOARD_SIZE, BOX_SIZE, EMPTY, VALUES
from .exceptions import InvalidCellValue, InvalidDimensions, SudokuError
from .group import Group, GroupKind
from .position import Position
from .validator import is_valid_placement, has_unique_solution, validate_solution

__all__ = [
    "Board",
    "Group",
    "GroupKind",
    "Position",
    "SudokuError",
    "InvalidDimensions",
    "InvalidCellValue",
    "BOARD_SIZE",
    "BOX_SIZE",
    "EMPTY",
    "VALUES",
    "is_valid_placement",
    "has_unique_solution",
    "validate_solution",
]
