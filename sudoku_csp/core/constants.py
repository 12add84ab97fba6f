"""Fixed dimensions and value universe of a standard Sudoku."""

from typing import FrozenSet

# A Sudoku puzzle is a 9x9 grid split into 3x3 boxes.
BOARD_SIZE = 9
BOX_SIZE = 3

# Value held by a position that has not been filled in yet.
EMPTY = 0

# Every position can take one of these values.
VALUES: FrozenSet[int] = frozenset(range(1, BOARD_SIZE + 1))
