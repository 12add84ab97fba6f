"""Errors raised while building or editing a board."""


class SudokuError(ValueError):
    """Base class for malformed puzzle input."""


class InvalidDimensions(SudokuError):
    """The input grid is not 9 rows of 9 values."""


class InvalidCellValue(SudokuError):
    """A cell value lies outside 0-9."""
