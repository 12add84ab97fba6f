"""Validation utilities for Sudoku puzzles."""

from __future__ import annotations
from typing import TYPE_CHECKING

from .constants import EMPTY, VALUES

if TYPE_CHECKING:
    from .board import Board


def is_valid_placement(board: Board, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at an empty (row, col) is valid.

    Args:
        board: The Sudoku board.
        row: Row index.
        col: Column index.
        value: Value to check (1-9).

    Returns:
        True if the position is empty and no peer already holds the value.
    """
    if value not in VALUES:
        return False

    position = board.position(row, col)
    if position.is_filled():
        return False

    return value in position.possible_values()


def count_solutions(board: Board, limit: int = 2) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Searches a copy of the board with the same forward-checked backtracking
    the solver uses, but keeps going after the first completion. Stops
    early once limit is reached.

    Args:
        board: The puzzle board. It is not modified.
        limit: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to limit).
    """
    work_board = board.copy()
    if not work_board.is_consistent():
        return 0

    count = [0]  # Use list to allow modification in nested function

    def backtrack() -> bool:
        """Returns True if limit reached."""
        target = work_board.first_unresolved()
        if target is None:
            count[0] += 1
            return count[0] >= limit

        for value in sorted(target.possible_values()):
            target.set_value(value)
            reached = backtrack()
            target.set_value(EMPTY)
            if reached:
                return True

        return False

    backtrack()
    return count[0]


def has_unique_solution(board: Board) -> bool:
    """Check if a puzzle has exactly one solution."""
    return count_solutions(board, limit=2) == 1


def validate_solution(puzzle: Board, solution: Board) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Args:
        puzzle: The original puzzle.
        solution: The proposed solution.

    Returns:
        True if solution is valid and matches puzzle clues.
    """
    # Check that solution respects original clues
    for clue, answer in zip(puzzle.positions, solution.positions):
        if clue.is_filled() and clue.value != answer.value:
            return False

    # Check that solution is complete and valid
    return solution.is_solved()
