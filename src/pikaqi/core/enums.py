"""Core enumerations for the xiangqi domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Side to move. Red plays from the bottom (rows 5–9)."""

    RED = 0
    BLACK = 1

    @property
    def opposite(self) -> Side:
        return Side(1 - self.value)

    @property
    def fen_char(self) -> str:
        """Side field of the position string (``w`` = Red, ``b`` = Black)."""
        return "w" if self is Side.RED else "b"

    @classmethod
    def from_fen_char(cls, char: str) -> Side:
        if char == "w":
            return cls.RED
        if char == "b":
            return cls.BLACK
        raise ValueError(f"Invalid side-to-move field: {char!r}")

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Xiangqi piece kinds."""

    KING = 1
    ADVISOR = 2
    BISHOP = 3
    KNIGHT = 4
    ROOK = 5
    CANNON = 6
    PAWN = 7
