"""Position — a board plus the side to move."""

from __future__ import annotations

from pikaqi.core.board import Board
from pikaqi.core.enums import Side


class Position:
    """Grid and turn flag. No invariants on piece counts or king presence."""

    __slots__ = ("board", "side_to_move")

    def __init__(self, board: Board | None = None, side_to_move: Side = Side.RED) -> None:
        self.board = board if board is not None else Board()
        self.side_to_move = side_to_move

    @classmethod
    def initial(cls) -> Position:
        return cls(Board.initial(), Side.RED)

    def copy(self) -> Position:
        return Position(self.board.copy(), self.side_to_move)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.board == other.board and self.side_to_move == other.side_to_move

    def __repr__(self) -> str:
        return f"{self.board!r}\n{self.side_to_move} to move"
