"""Built-in puzzles and a loader for puzzle files."""

from __future__ import annotations
from typing import Dict, List

from .core.board import Board

# Super easy; solves almost instantly.
CLASSIC = (
    "600108203"
    "020040090"
    "803005400"
    "504607009"
    "030000050"
    "700803102"
    "001700906"
    "080030020"
    "302904005"
)

# http://www.sudokuwiki.org/Weekly_Sudoku.asp?puz=28
WEEKLY_28 = (
    "600008940"
    "900006100"
    "070040000"
    "200610000"
    "000000200"
    "089002000"
    "000060005"
    "000000030"
    "800001600"
)

# http://www.sudokuwiki.org/Arto_Inkala_Sudoku
ARTO_INKALA = (
    "800000000"
    "003600000"
    "070090200"
    "050007000"
    "000045700"
    "000100030"
    "001000068"
    "008500010"
    "090000400"
)

BUILTIN_PUZZLES: Dict[str, str] = {
    "classic": CLASSIC,
    "weekly-28": WEEKLY_28,
    "arto-inkala": ARTO_INKALA,
}


def get_puzzle(name: str) -> Board:
    """Build a fresh board for one of the built-in puzzles."""
    try:
        return Board.from_string(BUILTIN_PUZZLES[name])
    except KeyError:
        raise KeyError(
            f"Unknown puzzle {name!r}, choose from {', '.join(sorted(BUILTIN_PUZZLES))}"
        ) from None


def load_puzzles(path: str) -> List[Board]:
    """
    Read puzzles from a text file, one 81-character puzzle per line.

    Blank lines and lines starting with '#' are skipped.

    Raises:
        SudokuError: if a line is not a valid puzzle; the message names the line.
    """
    boards = []
    with open(path, "r", encoding="utf8") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            try:
                boards.append(Board.from_string(line))
            except ValueError as e:
                raise type(e)(f"{path}:{line_no}: {e}") from e
    return boards
