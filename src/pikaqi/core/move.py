"""Move record."""

from __future__ import annotations

from dataclasses import dataclass

from pikaqi.core.enums import Side
from pikaqi.core.piece import Piece
from pikaqi.core.types import Square, move_name


@dataclass(frozen=True, slots=True)
class Move:
    """An applied move. Created by the ledger, never mutated."""

    origin: Square
    dest: Square
    piece: Piece
    captured: Piece | None
    side: Side

    def __str__(self) -> str:
        return self.uci

    @property
    def uci(self) -> str:
        """Coordinate-pair notation sent to the engine, e.g. ``h2e2``."""
        return move_name(self.origin, self.dest)

    @property
    def is_capture(self) -> bool:
        return self.captured is not None
