"""Constraint groups: rows, columns and boxes."""

from __future__ import annotations
from enum import Enum
from typing import Iterator, List, Sequence, Set, Tuple

from .constants import BOARD_SIZE, EMPTY, VALUES


class GroupKind(Enum):
    """The three families of groups on a board."""
    ROW = "row"
    COLUMN = "column"
    BOX = "box"


class Group:
    """
    Nine positions in which every value 1-9 must occur exactly once.

    A group only stores the indices of its member positions. Values are read
    from the board's shared value arena, so a group never holds a reference
    to a Position object and never changes a value itself.
    """

    __slots__ = ("kind", "index", "members", "_values")

    def __init__(self, kind: GroupKind, index: int, members: Sequence[int], values: List[int]):
        """
        Create a group.

        Args:
            kind: Row, column or box.
            index: Which row, column or box (0-8).
            members: Indices of the member positions in the board's arena.
            values: The board's value arena, indexed by position index.
        """
        if len(members) != BOARD_SIZE:
            raise ValueError(f"A group needs {BOARD_SIZE} members, got {len(members)}")
        self.kind = kind
        self.index = index
        self.members: Tuple[int, ...] = tuple(members)
        self._values = values

    def values(self) -> List[int]:
        """Current values of the members, 0 for unknown."""
        return [self._values[i] for i in self.members]

    def is_consistent(self) -> bool:
        """True if no nonzero value occurs twice among the members."""
        known = [v for v in self.values() if v != EMPTY]
        return len(known) == len(set(known))

    def remaining_values(self) -> Set[int]:
        """
        Values not yet taken by a filled member.

        Only meaningful for a consistent group: duplicates collapse in the
        set difference and hide the conflict.
        """
        return set(VALUES).difference(self.values())

    def __len__(self) -> int:
        return len(self.members)

    def __iter__(self) -> Iterator[int]:
        return iter(self.members)

    def __contains__(self, position_index: object) -> bool:
        return position_index in self.members

    def __repr__(self) -> str:
        return f"Group({self.kind.value}={self.index}, values={self.values()})"
