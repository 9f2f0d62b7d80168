"""Square type and the coordinate codec.

Board layout (row 0 is the top rank, Black's back rank)::

    row 0  a9 b9 c9 d9 e9 f9 g9 h9 i9
    ...
    row 9  a0 b0 c0 d0 e0 f0 g0 h0 i0

Coordinate text is a column letter plus ``9 - row``, so ``Square(9, 0)`` is
``a0`` regardless of which side is shown at the bottom.
"""

from __future__ import annotations

from typing import NamedTuple

ROWS = 10
COLS = 9

# Rows 0–4 belong to Black, rows 5–9 to Red.
BLACK_HALF = range(0, 5)
RED_HALF = range(5, 10)

_FILES = "abcdefghi"


class Square(NamedTuple):
    """A board intersection addressed by (row, col)."""

    row: int
    col: int

    def offset(self, dr: int, dc: int) -> Square:
        return Square(self.row + dr, self.col + dc)


def make_square(row: int, col: int) -> Square:
    return Square(row, col)


def is_on_board(sq: Square) -> bool:
    return 0 <= sq.row < ROWS and 0 <= sq.col < COLS


def all_squares() -> list[Square]:
    """Every square, top-left to bottom-right."""
    return [Square(r, c) for r in range(ROWS) for c in range(COLS)]


def square_name(sq: Square) -> str:
    """Coordinate text, e.g. ``Square(7, 7)`` → ``'h2'``."""
    if not is_on_board(sq):
        raise ValueError(f"Square off the board: {sq!r}")
    return f"{_FILES[sq.col]}{ROWS - 1 - sq.row}"


def parse_square(name: str) -> Square:
    """Parse coordinate text, e.g. ``'e0'`` → ``Square(9, 4)``."""
    if len(name) != 2 or name[0] not in _FILES or not name[1].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(ROWS - 1 - int(name[1]), _FILES.index(name[0]))


def move_name(origin: Square, dest: Square) -> str:
    """Coordinate pair for a move, e.g. ``'h2e2'``."""
    return square_name(origin) + square_name(dest)


def parse_move(text: str) -> tuple[Square, Square]:
    """Split a coordinate pair into (origin, destination)."""
    if len(text) != 4:
        raise ValueError(f"Invalid move text: {text!r}")
    return parse_square(text[:2]), parse_square(text[2:])
