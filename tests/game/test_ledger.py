"""Tests for MoveLedger."""

from __future__ import annotations

import pytest

from pikaqi.core.enums import PieceKind, Side
from pikaqi.core.notation import STARTING_FEN, position_from_fen
from pikaqi.core.types import Square, parse_square
from pikaqi.game.ledger import MoveLedger


def _play(ledger: MoveLedger, *moves: str) -> None:
    for text in moves:
        ledger.apply_uci(text)


class TestApply:
    def test_moves_piece_and_flips_turn(self) -> None:
        ledger = MoveLedger()
        move = ledger.apply_uci("h2e2")

        board = ledger.position.board
        assert board[parse_square("h2")] is None
        assert board[parse_square("e2")].kind == PieceKind.CANNON
        assert ledger.position.side_to_move is Side.BLACK
        assert move.side is Side.RED
        assert move.uci == "h2e2"

    def test_records_capture(self) -> None:
        ledger = MoveLedger()
        move = ledger.apply_uci("h2h9")
        assert move.is_capture
        assert move.captured.kind == PieceKind.KNIGHT
        assert move.captured.side is Side.BLACK

    def test_no_legality_check(self) -> None:
        ledger = MoveLedger()
        before = ledger.position.copy()
        ledger.apply_uci("a0a9")
        assert ledger.position.board[parse_square("a9")].side is Side.RED

        assert ledger.undo()
        assert ledger.position == before
        assert ledger.position.side_to_move is Side.RED
        assert len(ledger) == 0
        assert ledger.history == ()

    def test_empty_origin_raises(self) -> None:
        ledger = MoveLedger()
        with pytest.raises(ValueError):
            ledger.apply_uci("e4e5")
        assert len(ledger) == 0
        assert ledger.history == ()

    def test_off_board_destination_leaves_ledger_intact(self) -> None:
        ledger = MoveLedger()
        ledger.apply_uci("h2e2")
        before = ledger.fen()

        with pytest.raises(IndexError):
            ledger.apply(parse_square("h9"), Square(-1, 7))

        assert len(ledger.history) == len(ledger) == 1
        assert ledger.fen() == before
        assert ledger.undo()
        assert ledger.fen() == STARTING_FEN

    def test_history_grows_per_move(self) -> None:
        ledger = MoveLedger()
        _play(ledger, "h2e2", "h9g7", "h0g2")
        assert len(ledger.history) == 3
        assert ledger.history[0] == STARTING_FEN
        assert ledger.uci_moves == ["h2e2", "h9g7", "h0g2"]
        assert ledger.last_move.uci == "h0g2"


class TestUndo:
    def test_undo_restores_previous_position(self) -> None:
        ledger = MoveLedger()
        _play(ledger, "h2e2")
        before = ledger.fen()
        _play(ledger, "h9g7")

        assert ledger.undo()
        assert ledger.fen() == before
        assert ledger.uci_moves == ["h2e2"]

    def test_undo_back_to_start(self) -> None:
        ledger = MoveLedger()
        _play(ledger, "h2e2", "h9g7")
        ledger.undo()
        ledger.undo()
        assert ledger.fen() == STARTING_FEN
        assert ledger.last_move is None

    def test_undo_on_empty_history(self) -> None:
        ledger = MoveLedger()
        assert ledger.undo() is False
        assert ledger.fen() == STARTING_FEN

    def test_undo_restores_captured_piece(self) -> None:
        ledger = MoveLedger()
        _play(ledger, "h2h9")
        ledger.undo()
        assert ledger.position.board[parse_square("h9")].kind == PieceKind.KNIGHT


class TestReplay:
    def test_position_matches_replay_from_start(self) -> None:
        moves = ["h2e2", "h9g7", "h0g2", "i9h9", "i0h0"]
        ledger = MoveLedger()
        _play(ledger, *moves)

        replayed = MoveLedger()
        for text in moves:
            replayed.apply_uci(text)
        assert ledger.position == replayed.position
        assert ledger.position == position_from_fen(ledger.fen())

    def test_jump_reproduces_every_intermediate_position(self) -> None:
        moves = ["h2e2", "h9g7", "h0g2", "i9h9", "i0h0"]
        ledger = MoveLedger()
        snapshots = []
        for text in moves:
            ledger.apply_uci(text)
            snapshots.append(ledger.position.copy())

        for k, expected in enumerate(snapshots):
            assert ledger.position_after(k) == expected

        for k in reversed(range(len(moves))):
            ledger.goto_move(k)
            assert ledger.position == snapshots[k]

    def test_position_after_start(self) -> None:
        ledger = MoveLedger()
        _play(ledger, "h2e2")
        assert ledger.position_after(-1) == position_from_fen(STARTING_FEN)
        assert len(ledger) == 1

    def test_goto_move_truncates(self) -> None:
        ledger = MoveLedger()
        _play(ledger, "h2e2", "h9g7", "h0g2")
        ledger.goto_move(0)
        assert ledger.uci_moves == ["h2e2"]
        assert ledger.position.side_to_move is Side.BLACK
        assert len(ledger.history) == 1

    def test_goto_before_first_move(self) -> None:
        ledger = MoveLedger()
        _play(ledger, "h2e2", "h9g7")
        ledger.goto_move(-1)
        assert len(ledger) == 0
        assert ledger.fen() == STARTING_FEN

    def test_goto_out_of_range(self) -> None:
        ledger = MoveLedger()
        _play(ledger, "h2e2")
        with pytest.raises(IndexError):
            ledger.goto_move(1)

    def test_reset_with_custom_start(self) -> None:
        fen = "4k4/9/9/9/9/9/9/9/9/4K4 b - - 0 1"
        ledger = MoveLedger()
        _play(ledger, "h2e2")
        ledger.reset(fen)
        assert ledger.fen() == fen
        assert ledger.start_fen == fen
        assert len(ledger) == 0
