"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from pikaqi.core.enums import PieceKind, Side

_KIND_LETTERS: dict[str, PieceKind] = {
    "K": PieceKind.KING,
    "A": PieceKind.ADVISOR,
    "B": PieceKind.BISHOP,
    "N": PieceKind.KNIGHT,
    "R": PieceKind.ROOK,
    "C": PieceKind.CANNON,
    "P": PieceKind.PAWN,
}

_LETTERS: dict[PieceKind, str] = {v: k for k, v in _KIND_LETTERS.items()}

_GLYPHS: dict[tuple[Side, PieceKind], str] = {
    (Side.RED, PieceKind.KING): "帅",
    (Side.RED, PieceKind.ADVISOR): "仕",
    (Side.RED, PieceKind.BISHOP): "相",
    (Side.RED, PieceKind.KNIGHT): "马",
    (Side.RED, PieceKind.ROOK): "车",
    (Side.RED, PieceKind.CANNON): "炮",
    (Side.RED, PieceKind.PAWN): "兵",
    (Side.BLACK, PieceKind.KING): "将",
    (Side.BLACK, PieceKind.ADVISOR): "士",
    (Side.BLACK, PieceKind.BISHOP): "象",
    (Side.BLACK, PieceKind.KNIGHT): "馬",
    (Side.BLACK, PieceKind.ROOK): "車",
    (Side.BLACK, PieceKind.CANNON): "砲",
    (Side.BLACK, PieceKind.PAWN): "卒",
}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a xiangqi piece."""

    side: Side
    kind: PieceKind

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Position-string letter (uppercase = red, lowercase = black)."""
        letter = _LETTERS[self.kind]
        return letter if self.side == Side.RED else letter.lower()

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a position-string letter, e.g. 'c' → black cannon."""
        kind = _KIND_LETTERS.get(char.upper()) if len(char) == 1 else None
        if kind is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Side.RED if char.isupper() else Side.BLACK, kind)

    @property
    def glyph(self) -> str:
        """Traditional character drawn on the piece, e.g. 炮."""
        return _GLYPHS[(self.side, self.kind)]
