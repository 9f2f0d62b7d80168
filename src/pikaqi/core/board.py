"""Board - piece placement on the 10x9 grid."""

from __future__ import annotations

from collections.abc import Iterator

from pikaqi.core.enums import PieceKind, Side
from pikaqi.core.piece import Piece
from pikaqi.core.types import COLS, ROWS, Square, is_on_board

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.ADVISOR,
    PieceKind.KING,
    PieceKind.ADVISOR,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Mutable 90-intersection board. At most one piece per square."""

    __slots__ = ("_grid",)

    def __init__(self) -> None:
        self._grid: list[list[Piece | None]] = [[None] * COLS for _ in range(ROWS)]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        if not is_on_board(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        return self._grid[sq.row][sq.col]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        if not is_on_board(sq):
            raise IndexError(f"Square off the board: {sq!r}")
        self._grid[sq.row][sq.col] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is None

    def get(self, sq: Square) -> Piece | None:
        """Like ``board[sq]`` but returns None for off-board squares."""
        if not is_on_board(sq):
            return None
        return self._grid[sq.row][sq.col]

    # -- Query helpers ------------------------------------------------------

    def occupied(self) -> Iterator[tuple[Square, Piece]]:
        """Yield (square, piece) for every occupied square, top rank first."""
        for row in range(ROWS):
            for col in range(COLS):
                piece = self._grid[row][col]
                if piece is not None:
                    yield Square(row, col), piece

    def pieces(self, side: Side) -> list[Square]:
        """Squares occupied by *side*."""
        return [sq for sq, piece in self.occupied() if piece.side == side]

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._grid = [row.copy() for row in self._grid]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for col, kind in enumerate(_BACK_RANK):
            b[Square(0, col)] = Piece(Side.BLACK, kind)
            b[Square(9, col)] = Piece(Side.RED, kind)
        for col in (1, 7):
            b[Square(2, col)] = Piece(Side.BLACK, PieceKind.CANNON)
            b[Square(7, col)] = Piece(Side.RED, PieceKind.CANNON)
        for col in range(0, COLS, 2):
            b[Square(3, col)] = Piece(Side.BLACK, PieceKind.PAWN)
            b[Square(6, col)] = Piece(Side.RED, PieceKind.PAWN)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._grid == other._grid

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(ROWS):
            cells = [str(p) if p else "." for p in self._grid[row]]
            rows.append(f"{ROWS - 1 - row} {' '.join(cells)}")
        rows.append("  a b c d e f g h i")
        return "\n".join(rows)
