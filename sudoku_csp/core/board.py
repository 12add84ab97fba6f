"""Sudoku board: positions wired to their row, column and box groups."""

from __future__ import annotations
import logging
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from .constants import BOARD_SIZE, BOX_SIZE, EMPTY
from .exceptions import InvalidCellValue, InvalidDimensions
from .group import Group, GroupKind
from .position import Position, check_cell_value

log = logging.getLogger(__name__)


class Board:
    """
    A 9x9 Sudoku board built as a constraint graph.

    The board owns three arenas: a flat list of 81 values, the 81 Position
    objects and the 27 Group objects (9 rows, 9 columns, 9 boxes, in that
    order). Positions and groups refer to each other only by index, and
    both read values from the shared value list, so the whole mutable state
    of a board is that one list.
    """

    def __init__(self, grid: Sequence[Sequence[int]]):
        """
        Build a board from a 9x9 grid.

        Args:
            grid: 9 rows of 9 integers (list of lists, tuples or a numpy
                array). 0 marks an unknown cell.

        Raises:
            InvalidDimensions: if the grid is not 9 rows of 9 values.
            InvalidCellValue: if a cell is not an integer in 0-9.
        """
        self._values: List[int] = _read_grid(grid)
        self._groups: List[Group] = []
        self._positions: List[Position] = [
            Position(row, col, self._values, self._groups)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
        ]
        self._setup_groups()
        log.debug("Built board with %d clues", self.count_filled())

    def _setup_groups(self) -> None:
        """Create the 27 groups and tell each position which three own it."""
        owners: List[List[int]] = [[] for _ in self._positions]

        def add_group(kind: GroupKind, index: int, members: List[int]) -> None:
            group_id = len(self._groups)
            self._groups.append(Group(kind, index, members, self._values))
            for position_index in members:
                owners[position_index].append(group_id)

        # Row groups, members in column order
        for row in range(BOARD_SIZE):
            add_group(GroupKind.ROW, row,
                      [row * BOARD_SIZE + col for col in range(BOARD_SIZE)])

        # Column groups, members in row order
        for col in range(BOARD_SIZE):
            add_group(GroupKind.COLUMN, col,
                      [row * BOARD_SIZE + col for row in range(BOARD_SIZE)])

        # Box groups, one per non-overlapping 3x3 block
        for box_row in range(BOX_SIZE):
            for box_col in range(BOX_SIZE):
                members = []
                for row_in_box in range(BOX_SIZE):
                    for col_in_box in range(BOX_SIZE):
                        row = box_row * BOX_SIZE + row_in_box
                        col = box_col * BOX_SIZE + col_in_box
                        members.append(row * BOARD_SIZE + col)
                add_group(GroupKind.BOX, box_row * BOX_SIZE + box_col, members)

        for position, group_ids in zip(self._positions, owners):
            position.group_ids = tuple(group_ids)

    # -- accessors ---------------------------------------------------------

    @property
    def size(self) -> int:
        return BOARD_SIZE

    @property
    def box_size(self) -> int:
        return BOX_SIZE

    @property
    def positions(self) -> Tuple[Position, ...]:
        """All positions in row-major order."""
        return tuple(self._positions)

    @property
    def groups(self) -> Tuple[Group, ...]:
        """All 27 groups: rows, then columns, then boxes."""
        return tuple(self._groups)

    @property
    def rows(self) -> Tuple[Group, ...]:
        return tuple(self._groups[:BOARD_SIZE])

    @property
    def columns(self) -> Tuple[Group, ...]:
        return tuple(self._groups[BOARD_SIZE:2 * BOARD_SIZE])

    @property
    def boxes(self) -> Tuple[Group, ...]:
        return tuple(self._groups[2 * BOARD_SIZE:])

    def position(self, row: int, col: int) -> Position:
        """Get the position at (row, col)."""
        if not (0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE):
            raise IndexError(f"({row}, {col}) is outside the board")
        return self._positions[row * BOARD_SIZE + col]

    def groups_of(self, position: Position) -> Tuple[Group, ...]:
        """The row, column and box group of a position."""
        return position.groups

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return self.position(row, col).value

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        self.position(row, col).set_value(value)

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.position(row, col).set_value(EMPTY)

    def is_empty(self, row: int, col: int) -> bool:
        return not self.position(row, col).is_filled()

    # -- state queries -----------------------------------------------------

    def unresolved_positions(self) -> List[Position]:
        """Positions still holding 0, in row-major order."""
        return [p for p in self._positions if not p.is_filled()]

    def first_unresolved(self) -> Optional[Position]:
        """The first position still holding 0, or None on a full board."""
        for position in self._positions:
            if not position.is_filled():
                return position
        return None

    def count_empty(self) -> int:
        return self._values.count(EMPTY)

    def count_filled(self) -> int:
        return len(self._values) - self.count_empty()

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return EMPTY not in self._values

    def is_consistent(self) -> bool:
        """True if none of the 27 groups holds a duplicate value."""
        return all(group.is_consistent() for group in self._groups)

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly filled in."""
        return self.is_complete() and self.is_consistent()

    def conflicts(self) -> List[Group]:
        """Groups that currently hold a duplicate value."""
        return [group for group in self._groups if not group.is_consistent()]

    # -- state capture -----------------------------------------------------

    def snapshot(self) -> Tuple[int, ...]:
        """Capture every value in row-major order."""
        return tuple(self._values)

    def restore(self, snapshot: Sequence[int]) -> None:
        """Put back values captured by snapshot()."""
        if len(snapshot) != len(self._values):
            raise InvalidDimensions(
                f"Snapshot must hold {len(self._values)} values, got {len(snapshot)}"
            )
        values = [check_cell_value(v, f"Snapshot value {i}") for i, v in enumerate(snapshot)]
        self._values[:] = values

    def copy(self) -> Board:
        """Create an independent board with the same values."""
        return Board(self.to_2d_list())

    # -- conversions -------------------------------------------------------

    def to_2d_list(self) -> List[List[int]]:
        return [
            self._values[row * BOARD_SIZE:(row + 1) * BOARD_SIZE]
            for row in range(BOARD_SIZE)
        ]

    def to_array(self) -> np.ndarray:
        """The values as a 9x9 int32 array."""
        return np.array(self._values, dtype=np.int32).reshape(BOARD_SIZE, BOARD_SIZE)

    def to_string(self) -> str:
        """Compact 81-character form, 0 for empty cells."""
        return ''.join(str(v) for v in self._values)

    @classmethod
    def from_string(cls, s: str) -> Board:
        """
        Create a board from an 81-character string.

        '0' or '.' marks an empty cell, '1'-'9' a value. Surrounding
        whitespace is ignored.
        """
        s = s.strip()
        if len(s) != BOARD_SIZE * BOARD_SIZE:
            raise InvalidDimensions(
                f"String length must be {BOARD_SIZE * BOARD_SIZE}, got {len(s)}"
            )

        values = []
        for idx, c in enumerate(s):
            if c == '.':
                values.append(EMPTY)
            elif c in '0123456789':
                values.append(int(c))
            else:
                raise InvalidCellValue(f"Unexpected character {c!r} at offset {idx}")

        return cls([values[i:i + BOARD_SIZE] for i in range(0, len(values), BOARD_SIZE)])

    def __str__(self) -> str:
        """Bordered grid, 3x3 boxes separated by '+---+' and '|'."""
        horizontal_sep = '+' + ('-' * BOX_SIZE + '+') * BOX_SIZE
        lines = []

        for row in range(BOARD_SIZE):
            if row % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = ''
            for col in range(BOARD_SIZE):
                if col % BOX_SIZE == 0:
                    row_str += '|'
                val = self._values[row * BOARD_SIZE + col]
                row_str += str(val) if val != EMPTY else '.'
            lines.append(row_str + '|')

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Board(filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._values == other._values


def _read_grid(grid: Any) -> List[int]:
    """Check the grid shape and flatten it to 81 validated values."""
    try:
        rows = [list(row) for row in grid]
    except TypeError:
        raise InvalidDimensions(f"Grid must be {BOARD_SIZE} rows of {BOARD_SIZE} values")

    if len(rows) != BOARD_SIZE:
        raise InvalidDimensions(f"Invalid number of rows: expected {BOARD_SIZE}, got {len(rows)}")
    for r, row in enumerate(rows):
        if len(row) != BOARD_SIZE:
            raise InvalidDimensions(
                f"Invalid row length: row {r} has {len(row)} values, expected {BOARD_SIZE}"
            )

    values = []
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            values.append(check_cell_value(cell, f"Cell ({r}, {c})"))
    return values
