"""Pseudo-legal move generation driven by a declarative rule table.

Every piece kind maps to a :class:`MovementRule`: how it travels (a single
jump, an orthogonal slide, or the cannon's screen jump), which vectors it
may use, which intermediate "leg" square blocks each vector, and where it is
allowed to stand. Only occupancy is inspected; leaving one's own king in
check is not detected.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple

from pikaqi.core.board import Board
from pikaqi.core.enums import PieceKind, Side
from pikaqi.core.types import BLACK_HALF, RED_HALF, Square, is_on_board


class Motion(Enum):
    """How a piece travels along its vectors."""

    STEP = auto()  # one jump per vector
    SLIDE = auto()  # repeat the vector until blocked
    SCREEN = auto()  # slide; capture only over exactly one intervening piece


class Vector(NamedTuple):
    """Row/column delta plus the optional leg square that must be empty."""

    dr: int
    dc: int
    leg: tuple[int, int] | None = None


VectorSource = Callable[[Side, Square], tuple[Vector, ...]]
Confinement = Callable[[Side, Square], bool]


@dataclass(frozen=True, slots=True)
class MovementRule:
    """Movement descriptor for one piece kind."""

    motion: Motion
    vectors: VectorSource
    confine: Confinement | None = None


# -- Vector sets ------------------------------------------------------------

ORTHOGONAL: tuple[Vector, ...] = (
    Vector(0, 1),
    Vector(0, -1),
    Vector(1, 0),
    Vector(-1, 0),
)

DIAGONAL: tuple[Vector, ...] = (
    Vector(1, 1),
    Vector(1, -1),
    Vector(-1, 1),
    Vector(-1, -1),
)

BISHOP_VECTORS: tuple[Vector, ...] = (
    Vector(2, 2, (1, 1)),
    Vector(2, -2, (1, -1)),
    Vector(-2, 2, (-1, 1)),
    Vector(-2, -2, (-1, -1)),
)

KNIGHT_VECTORS: tuple[Vector, ...] = (
    Vector(-2, -1, (-1, 0)),
    Vector(-2, 1, (-1, 0)),
    Vector(2, -1, (1, 0)),
    Vector(2, 1, (1, 0)),
    Vector(-1, -2, (0, -1)),
    Vector(-1, 2, (0, 1)),
    Vector(1, -2, (0, -1)),
    Vector(1, 2, (0, 1)),
)

_PAWN_FORWARD: dict[Side, int] = {Side.RED: -1, Side.BLACK: 1}
_PAWN_HOME: dict[Side, tuple[Vector, ...]] = {
    side: (Vector(dr, 0),) for side, dr in _PAWN_FORWARD.items()
}
_PAWN_CROSSED: dict[Side, tuple[Vector, ...]] = {
    side: (Vector(dr, 0), Vector(0, -1), Vector(0, 1))
    for side, dr in _PAWN_FORWARD.items()
}


def _fixed(vectors: tuple[Vector, ...]) -> VectorSource:
    return lambda _side, _origin: vectors


def _pawn_vectors(side: Side, origin: Square) -> tuple[Vector, ...]:
    if has_crossed_river(side, origin):
        return _PAWN_CROSSED[side]
    return _PAWN_HOME[side]


# -- Confinement predicates -------------------------------------------------


def in_palace(side: Side, sq: Square) -> bool:
    """Whether *sq* lies in *side*'s 3x3 palace."""
    rows = range(7, 10) if side == Side.RED else range(0, 3)
    return sq.row in rows and 3 <= sq.col <= 5


def in_own_half(side: Side, sq: Square) -> bool:
    """Whether *sq* is on *side*'s own bank of the river."""
    return sq.row in (RED_HALF if side == Side.RED else BLACK_HALF)


def has_crossed_river(side: Side, sq: Square) -> bool:
    return not in_own_half(side, sq)


# -- Rule table -------------------------------------------------------------

RULES: dict[PieceKind, MovementRule] = {
    PieceKind.KING: MovementRule(Motion.STEP, _fixed(ORTHOGONAL), in_palace),
    PieceKind.ADVISOR: MovementRule(Motion.STEP, _fixed(DIAGONAL), in_palace),
    PieceKind.BISHOP: MovementRule(Motion.STEP, _fixed(BISHOP_VECTORS), in_own_half),
    PieceKind.KNIGHT: MovementRule(Motion.STEP, _fixed(KNIGHT_VECTORS)),
    PieceKind.ROOK: MovementRule(Motion.SLIDE, _fixed(ORTHOGONAL)),
    PieceKind.CANNON: MovementRule(Motion.SCREEN, _fixed(ORTHOGONAL)),
    PieceKind.PAWN: MovementRule(Motion.STEP, _pawn_vectors),
}


class MoveGenerator:
    """Computes pseudo-legal destinations on a :class:`Board`."""

    __slots__ = ("_board",)

    def __init__(self, board: Board) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def destinations(self, origin: Square) -> list[Square]:
        """Squares the piece on *origin* may move to.

        An empty or off-board origin yields an empty list.
        """
        piece = self._board.get(origin)
        if piece is None:
            return []

        rule = RULES[piece.kind]
        vectors = rule.vectors(piece.side, origin)
        if rule.motion is Motion.STEP:
            return self._gen_step(origin, piece.side, vectors, rule.confine)
        if rule.motion is Motion.SLIDE:
            return self._gen_slide(origin, piece.side, vectors)
        return self._gen_screen(origin, piece.side, vectors)

    def moves_for(self, side: Side) -> list[tuple[Square, Square]]:
        """All (origin, destination) pairs available to *side*."""
        return [
            (origin, dest)
            for origin in self._board.pieces(side)
            for dest in self.destinations(origin)
        ]

    # -- Motion kinds -------------------------------------------------------

    def _gen_step(
        self,
        origin: Square,
        side: Side,
        vectors: tuple[Vector, ...],
        confine: Confinement | None,
    ) -> list[Square]:
        board = self._board
        out: list[Square] = []
        for vec in vectors:
            dest = origin.offset(vec.dr, vec.dc)
            if not is_on_board(dest):
                continue
            if vec.leg is not None and board.get(origin.offset(*vec.leg)) is not None:
                continue
            if confine is not None and not confine(side, dest):
                continue
            if self._can_land(side, dest):
                out.append(dest)
        return out

    def _gen_slide(
        self,
        origin: Square,
        side: Side,
        vectors: tuple[Vector, ...],
    ) -> list[Square]:
        board = self._board
        out: list[Square] = []
        for vec in vectors:
            sq = origin.offset(vec.dr, vec.dc)
            while is_on_board(sq):
                occupant = board[sq]
                if occupant is not None:
                    if occupant.side != side:
                        out.append(sq)
                    break
                out.append(sq)
                sq = sq.offset(vec.dr, vec.dc)
        return out

    def _gen_screen(
        self,
        origin: Square,
        side: Side,
        vectors: tuple[Vector, ...],
    ) -> list[Square]:
        board = self._board
        out: list[Square] = []
        for vec in vectors:
            sq = origin.offset(vec.dr, vec.dc)
            screened = False
            while is_on_board(sq):
                occupant = board[sq]
                if occupant is not None:
                    if screened:
                        if occupant.side != side:
                            out.append(sq)
                        break
                    screened = True
                elif not screened:
                    out.append(sq)
                sq = sq.offset(vec.dr, vec.dc)
        return out

    def _can_land(self, side: Side, sq: Square) -> bool:
        occupant = self._board[sq]
        return occupant is None or occupant.side != side


def destinations(board: Board, origin: Square) -> list[Square]:
    """Shortcut for ``MoveGenerator(board).destinations(origin)``."""
    return MoveGenerator(board).destinations(origin)
