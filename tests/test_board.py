"""Unit tests for the Sudoku board, its groups and positions."""

import pytest
import numpy as np
from sudoku_csp.core.board import Board
from sudoku_csp.core.exceptions import InvalidCellValue, InvalidDimensions, SudokuError
from sudoku_csp.core.group import GroupKind
from sudoku_csp.core.validator import (
    count_solutions,
    has_unique_solution,
    is_valid_placement,
    validate_solution,
)


TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def solved_grid():
    """A valid complete grid whose first row is 1-9."""
    return [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


def empty_grid():
    return [[0] * 9 for _ in range(9)]


class TestBoardConstruction:
    """Tests for building a board from a grid."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = Board(empty_grid())
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_values_in_row_major_order(self):
        """Positions take the grid values row by row."""
        grid = solved_grid()
        board = Board(grid)
        assert [p.value for p in board.positions] == [v for row in grid for v in row]
        assert board.to_2d_list() == grid

    def test_accepts_numpy_array(self):
        """A numpy grid is accepted like a nested list."""
        arr = np.array(solved_grid(), dtype=np.int64)
        board = Board(arr)
        assert board.get(8, 8) == arr[8, 8]
        assert isinstance(board.get(8, 8), int)

    def test_eight_rows_rejected(self):
        """Too few rows fails with InvalidDimensions."""
        with pytest.raises(InvalidDimensions):
            Board(empty_grid()[:8])

    def test_ten_columns_rejected(self):
        """A row of ten values fails with InvalidDimensions."""
        grid = empty_grid()
        grid[4] = [0] * 10
        with pytest.raises(InvalidDimensions):
            Board(grid)

    def test_ten_columns_everywhere_rejected(self):
        with pytest.raises(InvalidDimensions):
            Board([[0] * 10 for _ in range(9)])

    def test_out_of_range_value_rejected(self):
        """Cell values must lie in 0-9."""
        grid = empty_grid()
        grid[2][3] = 10
        with pytest.raises(InvalidCellValue):
            Board(grid)

        grid[2][3] = -1
        with pytest.raises(InvalidCellValue):
            Board(grid)

    def test_non_integer_value_rejected(self):
        grid = empty_grid()
        grid[0][0] = "5"
        with pytest.raises(InvalidCellValue):
            Board(grid)

    def test_errors_are_value_errors(self):
        """Construction errors can be caught as ValueError."""
        assert issubclass(InvalidDimensions, SudokuError)
        assert issubclass(InvalidCellValue, ValueError)
        with pytest.raises(ValueError):
            Board([])


class TestGroups:
    """Tests for the row, column and box groups."""

    def test_group_counts(self):
        """A board has 9 groups of each kind, 9 members each."""
        board = Board(empty_grid())
        assert len(board.groups) == 27
        assert len(board.rows) == len(board.columns) == len(board.boxes) == 9
        for group in board.groups:
            assert len(group) == 9

        assert all(g.kind is GroupKind.ROW for g in board.rows)
        assert all(g.kind is GroupKind.COLUMN for g in board.columns)
        assert all(g.kind is GroupKind.BOX for g in board.boxes)

    def test_each_family_covers_board_once(self):
        """Rows, columns and boxes each partition the 81 positions."""
        board = Board(empty_grid())
        for family in (board.rows, board.columns, board.boxes):
            members = [i for group in family for i in group]
            assert sorted(members) == list(range(81))

    def test_each_position_in_three_groups(self):
        """Every position belongs to one row, one column and one box."""
        board = Board(solved_grid())
        for position in board.positions:
            groups = board.groups_of(position)
            assert len(groups) == 3
            assert {g.kind for g in groups} == {GroupKind.ROW, GroupKind.COLUMN, GroupKind.BOX}
            for group in groups:
                assert position.index in group

            row, col, box = groups
            assert row.index == position.row
            assert col.index == position.column
            assert box.index == (position.row // 3) * 3 + position.column // 3

    def test_member_order(self):
        """Rows list columns in order, columns list rows in order."""
        board = Board(solved_grid())
        assert board.rows[2].values() == solved_grid()[2]
        assert board.columns[4].values() == [row[4] for row in solved_grid()]
        assert board.boxes[4].values() == [
            solved_grid()[r][c] for r in range(3, 6) for c in range(3, 6)
        ]

    def test_consistency(self):
        """A group is inconsistent exactly when a nonzero value repeats."""
        board = Board(empty_grid())
        row = board.rows[0]
        assert row.is_consistent()

        board.set(0, 0, 5)
        board.set(0, 4, 3)
        assert row.is_consistent()

        board.set(0, 8, 5)
        assert not row.is_consistent()
        assert board.columns[8].is_consistent()
        assert board.conflicts() == [row]

    def test_zeros_do_not_conflict(self):
        board = Board(empty_grid())
        assert all(g.is_consistent() for g in board.groups)
        assert board.conflicts() == []

    def test_remaining_values(self):
        """Remaining values are 1-9 minus the filled members."""
        board = Board(empty_grid())
        board.set(3, 0, 5)
        board.set(3, 7, 3)
        assert board.rows[3].remaining_values() == {1, 2, 4, 6, 7, 8, 9}
        assert board.rows[0].remaining_values() == set(range(1, 10))

        full = Board(solved_grid())
        assert full.rows[0].remaining_values() == set()


class TestPosition:
    """Tests for single positions."""

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = Board(empty_grid())
        position = board.position(0, 0)
        position.set_value(5)
        assert position.get_value() == 5
        assert position.is_filled()
        assert board.get(0, 0) == 5

        board.clear(0, 0)
        assert not position.is_filled()
        assert board.is_empty(0, 0)

    def test_set_value_range(self):
        """Values outside 0-9 are rejected."""
        position = Board(empty_grid()).position(4, 4)
        with pytest.raises(InvalidCellValue):
            position.set_value(10)
        assert position.value == 0

    def test_set_value_rejects_non_integers(self):
        """Floats and bools are not cell values, even when they compare equal to one."""
        board = Board(empty_grid())
        position = board.position(4, 4)
        for bad in (1.0, True, "3"):
            with pytest.raises(InvalidCellValue):
                position.set_value(bad)
        assert position.value == 0

        with pytest.raises(InvalidCellValue):
            board.set(0, 0, 1.0)
        assert board.get(0, 0) == 0
        assert len(board.to_string()) == 81

    def test_set_value_accepts_numpy_integers(self):
        position = Board(empty_grid()).position(0, 0)
        position.set_value(np.int64(7))
        assert position.value == 7
        assert type(position.value) is int

    def test_possible_values(self):
        """Candidates exclude values of filled row, column and box peers."""
        board = Board(empty_grid())
        board.set(0, 0, 5)
        board.set(0, 1, 3)
        board.set(8, 2, 7)
        board.set(1, 1, 9)

        candidates = board.position(0, 2).possible_values()
        assert candidates == {1, 2, 4, 6, 8}

    def test_possible_values_of_filled_position(self):
        """A filled position only allows its own value."""
        board = Board(solved_grid())
        assert board.position(3, 3).possible_values() == {board.get(3, 3)}

    def test_single_candidate(self):
        """Row 0 of 1-8 plus a full board leaves only 9 for (0, 8)."""
        grid = solved_grid()
        assert grid[0] == [1, 2, 3, 4, 5, 6, 7, 8, 9]
        grid[0][8] = 0
        board = Board(grid)
        assert board.position(0, 8).possible_values() == {9}

    def test_position_identity(self):
        board = Board(empty_grid())
        position = board.position(7, 2)
        assert (position.row, position.column, position.index) == (7, 2, 65)
        with pytest.raises(IndexError):
            board.position(9, 0)


class TestBoardState:
    """Tests for whole-board queries."""

    def test_is_consistent(self):
        """Test board validation."""
        board = Board(empty_grid())
        assert board.is_consistent()  # Empty board is consistent

        board.set(0, 0, 5)
        board.set(0, 1, 5)  # Duplicate in row
        assert not board.is_consistent()

    def test_is_solved(self):
        board = Board(solved_grid())
        assert board.is_complete()
        assert board.is_consistent()
        assert board.is_solved()

        board.clear(4, 4)
        assert not board.is_solved()

    def test_full_but_conflicting_board_not_solved(self):
        """Solved implies consistent."""
        grid = solved_grid()
        grid[0][0], grid[0][1] = grid[0][1], grid[0][0]
        board = Board(grid)
        assert board.is_complete()
        assert not board.is_consistent()
        assert not board.is_solved()

    def test_unresolved_positions_row_major(self):
        """Unresolved positions come back in row-major order."""
        grid = solved_grid()
        for r, c in [(5, 1), (0, 7), (5, 0), (8, 8)]:
            grid[r][c] = 0
        board = Board(grid)

        unresolved = board.unresolved_positions()
        assert [(p.row, p.column) for p in unresolved] == [(0, 7), (5, 0), (5, 1), (8, 8)]
        assert board.first_unresolved() is unresolved[0]
        assert Board(solved_grid()).first_unresolved() is None

    def test_snapshot_and_restore(self):
        board = Board.from_string(TEST_PUZZLE)
        before = board.snapshot()
        board.set(0, 2, 4)
        assert board.snapshot() != before

        board.restore(before)
        assert board.to_string() == TEST_PUZZLE

    def test_restore_rejects_bad_values(self):
        """A bad snapshot is refused whole; the board keeps its values."""
        board = Board.from_string(TEST_PUZZLE)
        snapshot = board.snapshot()
        for bad in [(10,) + snapshot[1:], snapshot[:80] + (2.0,), (-1,) + snapshot[1:]]:
            with pytest.raises(InvalidCellValue):
                board.restore(bad)
            assert board.to_string() == TEST_PUZZLE

    def test_restore_rejects_wrong_length(self):
        board = Board.from_string(TEST_PUZZLE)
        with pytest.raises(InvalidDimensions):
            board.restore(board.snapshot()[:80])
        assert board.to_string() == TEST_PUZZLE


class TestConversions:
    """Tests for string, list and array conversions."""

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "0" * 80 + "9"  # 80 zeros and a 9 at the end
        board = Board.from_string(puzzle_str)
        assert board.get(8, 8) == 9

    def test_from_string_with_dots(self):
        board = Board.from_string(TEST_PUZZLE.replace("0", "."))
        assert board.to_string() == TEST_PUZZLE

    def test_from_string_wrong_length(self):
        with pytest.raises(InvalidDimensions):
            Board.from_string("123")

    def test_from_string_bad_character(self):
        with pytest.raises(InvalidCellValue):
            Board.from_string("x" + TEST_PUZZLE[1:])

    def test_to_string(self):
        """Test converting board to string."""
        board = Board(empty_grid())
        board.set(0, 0, 5)
        s = board.to_string()
        assert len(s) == 81
        assert s[0] == '5'

    def test_to_array(self):
        board = Board(solved_grid())
        arr = board.to_array()
        assert arr.shape == (9, 9)
        assert arr.dtype == np.int32
        assert np.array_equal(arr, np.array(solved_grid()))

    def test_copy(self):
        """Test board copy."""
        board = Board(empty_grid())
        board.set(4, 4, 7)
        copy = board.copy()

        assert copy.get(4, 4) == 7
        assert copy == board

        # Modify copy, original should be unchanged
        copy.set(4, 4, 8)
        assert board.get(4, 4) == 7
        assert copy != board

    def test_render(self):
        """The grid is drawn with 3x3 box borders."""
        board = Board.from_string(TEST_SOLUTION)
        lines = str(board).splitlines()
        assert len(lines) == 13
        assert lines[0] == "+---+---+---+"
        assert lines[1] == "|534|678|912|"
        assert lines[4] == "+---+---+---+"
        assert lines[-1] == "+---+---+---+"

    def test_render_unknown_cells(self):
        board = Board.from_string(TEST_PUZZLE)
        assert str(board).splitlines()[1] == "|53.|.7.|...|"


class TestValidator:
    """Tests for validation utilities."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = Board(empty_grid())
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)

        # Can't place on a filled position or outside 1-9
        assert not is_valid_placement(board, 0, 0, 7)
        assert not is_valid_placement(board, 0, 5, 0)

    def test_unique_solution(self):
        board = Board.from_string(TEST_PUZZLE)
        assert count_solutions(board) == 1
        assert has_unique_solution(board)
        # the input is left alone
        assert board.to_string() == TEST_PUZZLE

    def test_multiple_solutions(self):
        board = Board(empty_grid())
        assert count_solutions(board, limit=2) == 2
        assert not has_unique_solution(board)

    def test_conflicting_board_has_no_solution(self):
        board = Board.from_string("55" + TEST_PUZZLE[2:])
        assert count_solutions(board) == 0

    def test_validate_solution(self):
        puzzle = Board.from_string(TEST_PUZZLE)
        assert validate_solution(puzzle, Board.from_string(TEST_SOLUTION))

        # A valid grid that ignores the clues is rejected
        assert not validate_solution(puzzle, Board(solved_grid()))

        incomplete = Board.from_string(TEST_SOLUTION)
        incomplete.clear(8, 8)
        assert not validate_solution(puzzle, incomplete)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
