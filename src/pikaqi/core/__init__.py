"""Core domain layer — pure xiangqi logic with zero external dependencies.

Quick start::

    from pikaqi.core import MoveGenerator, position_from_fen, STARTING_FEN, parse_square

    pos = position_from_fen(STARTING_FEN)
    gen = MoveGenerator(pos.board)
    print(gen.destinations(parse_square("h2")))
"""

from pikaqi.core.board import Board
from pikaqi.core.enums import PieceKind, Side
from pikaqi.core.move import Move
from pikaqi.core.move_rules import RULES, MoveGenerator, MovementRule, destinations
from pikaqi.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from pikaqi.core.piece import Piece
from pikaqi.core.position import Position
from pikaqi.core.types import (
    COLS,
    ROWS,
    Square,
    is_on_board,
    make_square,
    move_name,
    parse_move,
    parse_square,
    square_name,
)

__all__ = [
    # Enums
    "PieceKind",
    "Side",
    # Types / helpers
    "COLS",
    "ROWS",
    "Square",
    "is_on_board",
    "make_square",
    "move_name",
    "parse_move",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "Move",
    "MoveGenerator",
    "MovementRule",
    "Piece",
    "Position",
    "RULES",
    "destinations",
    # Notation
    "STARTING_FEN",
    "position_from_fen",
    "position_to_fen",
]
