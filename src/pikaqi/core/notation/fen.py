"""Position-string (xiangqi FEN) parsing and serialization."""

from __future__ import annotations

from pikaqi.core.board import Board
from pikaqi.core.enums import Side
from pikaqi.core.piece import Piece
from pikaqi.core.position import Position
from pikaqi.core.types import COLS, ROWS, Square

STARTING_FEN = "rnbakabnr/9/1c5c1/p1p1p1p1p/9/9/P1P1P1P1P/1C5C1/9/RNBAKABNR w - - 0 1"

# Castling / en-passant / clocks have no meaning here; always written as-is.
_PLACEHOLDERS = "- - 0 1"


def position_from_fen(fen: str) -> Position:
    """Parse a position string into a :class:`Position`."""
    parts = fen.split()
    if not parts:
        raise ValueError(f"Invalid FEN (empty): {fen!r}")

    # 1. Piece placement
    ranks = parts[0].split("/")
    if len(ranks) != ROWS:
        raise ValueError(f"Invalid FEN board (must contain {ROWS} ranks): {fen!r}")
    board = Board()
    for row, rank_text in enumerate(ranks):
        col = 0
        for ch in rank_text:
            if ch.isdigit():
                step = int(ch)
                if not (1 <= step <= COLS):
                    raise ValueError(f"Invalid FEN digit {ch!r}: {fen!r}")
                col += step
            else:
                if col >= COLS:
                    raise ValueError(f"Invalid FEN rank width: {fen!r}")
                board[Square(row, col)] = Piece.from_char(ch)
                col += 1
            if col > COLS:
                raise ValueError(f"Invalid FEN rank width: {fen!r}")
        if col != COLS:
            raise ValueError(f"Invalid FEN rank width: {fen!r}")

    # 2. Side to move (optional, remaining fields ignored)
    side = Side.from_fen_char(parts[1]) if len(parts) > 1 else Side.RED

    return Position(board, side)


def position_to_fen(pos: Position) -> str:
    """Serialise a :class:`Position` to a position string."""
    rows: list[str] = []
    for row in range(ROWS):
        empty = 0
        text = ""
        for col in range(COLS):
            piece = pos.board[Square(row, col)]
            if piece is None:
                empty += 1
                continue
            if empty:
                text += str(empty)
                empty = 0
            text += str(piece)
        if empty:
            text += str(empty)
        rows.append(text)

    return f"{'/'.join(rows)} {pos.side_to_move.fen_char} {_PLACEHOLDERS}"
