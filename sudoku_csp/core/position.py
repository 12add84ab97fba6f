"""A single location on the board."""

from __future__ import annotations
import numbers
from typing import Any, List, Set, Tuple, TYPE_CHECKING

from .constants import BOARD_SIZE, EMPTY, VALUES
from .exceptions import InvalidCellValue

if TYPE_CHECKING:
    from .group import Group


class Position:
    """
    One of the 81 cells of a board.

    The value itself lives in the board's value arena; a position knows its
    own index into it and the indices of its row, column and box groups in
    the board's group arena.
    """

    __slots__ = ("index", "row", "column", "group_ids", "_values", "_groups")

    def __init__(self, row: int, column: int, values: List[int], groups: List[Group]):
        self.row = row
        self.column = column
        self.index = row * BOARD_SIZE + column
        # (row group, column group, box group), filled in once by the board
        self.group_ids: Tuple[int, ...] = ()
        self._values = values
        self._groups = groups

    @property
    def value(self) -> int:
        return self._values[self.index]

    @value.setter
    def value(self, value: int) -> None:
        self.set_value(value)

    def get_value(self) -> int:
        """Current value, 0 if unknown."""
        return self._values[self.index]

    def set_value(self, value: int) -> None:
        """
        Overwrite the value. Use 0 to clear.

        No check against the rest of the board is made here; callers pick
        values from possible_values().
        """
        self._values[self.index] = check_cell_value(value)

    def is_filled(self) -> bool:
        return self._values[self.index] != EMPTY

    @property
    def groups(self) -> Tuple[Group, ...]:
        """The row, column and box group owning this position."""
        return tuple(self._groups[i] for i in self.group_ids)

    def possible_values(self) -> Set[int]:
        """
        Values this position could take without conflicting with a filled peer.

        A filled position returns just its own value. This is forward
        checking only: it is recomputed from the groups on every call.
        """
        if self.is_filled():
            return {self.value}

        possible = set(VALUES)
        for group_id in self.group_ids:
            possible &= self._groups[group_id].remaining_values()
        return possible

    def __repr__(self) -> str:
        return f"Position(row={self.row}, column={self.column}, value={self.value})"


def check_cell_value(value: Any, where: str = "Value") -> int:
    """
    Return value as a plain int if it is a legal cell value (0-9).

    Raises:
        InvalidCellValue: for bools, non-integers and integers outside 0-9.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidCellValue(f"{where} is not an integer: {value!r}")
    value = int(value)
    if value != EMPTY and value not in VALUES:
        raise InvalidCellValue(f"{where} must be 0-{BOARD_SIZE}, got {value}")
    return value
