"""Move ledger — applied moves plus a stack of undo checkpoints."""

from __future__ import annotations

import logging

from pikaqi.core.move import Move
from pikaqi.core.notation import STARTING_FEN, position_from_fen, position_to_fen
from pikaqi.core.position import Position
from pikaqi.core.types import Square, parse_move

_LOGGER = logging.getLogger(__name__)

PositionRecord = str  # serialized, turn-tagged position string


class MoveLedger:
    """Tracks the current position, the moves that led to it and undo points.

    Pure data/logic class with no engine or UI. Moves are trusted: the
    caller is responsible for any legality check.
    """

    __slots__ = ("_start_fen", "_position", "_moves", "_history")

    def __init__(self, start_fen: str = STARTING_FEN) -> None:
        self._start_fen = start_fen
        self._position = position_from_fen(start_fen)
        self._moves: list[Move] = []
        self._history: list[PositionRecord] = []

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def position(self) -> Position:
        return self._position

    @property
    def start_fen(self) -> str:
        return self._start_fen

    @property
    def moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    @property
    def history(self) -> tuple[PositionRecord, ...]:
        """Undo checkpoints, oldest first (one per applied move)."""
        return tuple(self._history)

    @property
    def uci_moves(self) -> list[str]:
        return [move.uci for move in self._moves]

    @property
    def last_move(self) -> Move | None:
        return self._moves[-1] if self._moves else None

    def __len__(self) -> int:
        return len(self._moves)

    def fen(self) -> str:
        return position_to_fen(self._position)

    def position_after(self, index: int) -> Position:
        """Position right after move *index* (``-1`` for the start), by replay."""
        if not -1 <= index < len(self._moves):
            raise IndexError(f"Move index out of range: {index}")
        replay = MoveLedger(self._start_fen)
        for move in self._moves[: index + 1]:
            replay.apply(move.origin, move.dest)
        return replay.position

    # ── Mutation ─────────────────────────────────────────────────────────

    def apply(self, origin: Square, dest: Square) -> Move:
        """Move the piece on *origin* to *dest* and return the move record."""
        board = self._position.board
        piece = board[origin]
        if piece is None:
            raise ValueError(f"No piece on origin square: {origin!r}")

        move = Move(
            origin=origin,
            dest=dest,
            piece=piece,
            captured=board[dest],
            side=self._position.side_to_move,
        )
        # Checkpoint only once nothing below can raise.
        self._history.append(position_to_fen(self._position))
        board[dest] = piece
        board[origin] = None
        self._position.side_to_move = self._position.side_to_move.opposite
        self._moves.append(move)
        return move

    def apply_uci(self, text: str) -> Move:
        origin, dest = parse_move(text)
        return self.apply(origin, dest)

    def undo(self) -> bool:
        """Restore the position before the last move. False when empty."""
        if not self._history:
            _LOGGER.debug("Undo requested with empty history")
            return False

        self._position = position_from_fen(self._history.pop())
        self._moves.pop()
        return True

    def reset(self, fen: str | None = None) -> None:
        """Clear all moves and checkpoints and load *fen* (or the start)."""
        if fen is not None:
            self._start_fen = fen
        self._position = position_from_fen(self._start_fen)
        self._moves.clear()
        self._history.clear()

    def goto_move(self, index: int) -> None:
        """Rebuild the ledger so that move *index* (0-based) is the last one.

        Full replay from the start position; ``-1`` means no moves.
        """
        if not -1 <= index < len(self._moves):
            raise IndexError(f"Move index out of range: {index}")

        replay = [(move.origin, move.dest) for move in self._moves[: index + 1]]
        self.reset()
        for origin, dest in replay:
            self.apply(origin, dest)
