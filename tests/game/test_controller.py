"""Tests for GameController."""

from __future__ import annotations

import logging

import pytest

from pikaqi.core.enums import Side
from pikaqi.core.types import parse_square
from pikaqi.game.controller import (
    Activity,
    AppSettings,
    AppState,
    EngineStatus,
    GameController,
)

_SEARCH = ["stop", "position startpos", "go movetime 1000"]


def _controller(**overrides: object) -> tuple[GameController, list[str]]:
    sent: list[str] = []
    settings = AppSettings(**overrides)  # type: ignore[arg-type]
    return GameController(send=sent.append, settings=settings), sent


def _ready(ctrl: GameController, sent: list[str]) -> None:
    ctrl.handle_line("uciok")
    ctrl.handle_line("readyok")
    sent.clear()


def _click(ctrl: GameController, *names: str) -> bool:
    result = False
    for name in names:
        result = ctrl.click(parse_square(name))
    return result


class TestSelection:
    def test_select_own_piece_lists_targets(self) -> None:
        ctrl, _ = _controller()
        assert _click(ctrl, "h2") is False
        selection = ctrl.state.selection
        assert selection.square == parse_square("h2")
        assert len(selection.targets) == 12

    def test_select_opponent_piece_clears(self) -> None:
        ctrl, _ = _controller()
        _click(ctrl, "h2", "h7")
        assert ctrl.state.selection.square is None
        assert ctrl.state.selection.targets == ()

    def test_click_target_plays_move(self) -> None:
        ctrl, _ = _controller()
        assert _click(ctrl, "h2", "e2") is True
        assert ctrl.ledger.uci_moves == ["h2e2"]
        assert ctrl.state.side_to_move is Side.BLACK
        assert ctrl.state.selection.square is None

    def test_click_non_target_deselects(self) -> None:
        ctrl, _ = _controller()
        _click(ctrl, "h2", "a5")
        assert ctrl.state.selection.square is None
        assert len(ctrl.ledger) == 0

    def test_switch_selection_to_other_own_piece(self) -> None:
        ctrl, _ = _controller()
        _click(ctrl, "h2", "b0")
        assert ctrl.state.selection.square == parse_square("b0")

    def test_board_changed_fires_on_click(self) -> None:
        ctrl, _ = _controller()
        seen: list[AppState] = []
        ctrl.events.on_board_changed.append(seen.append)
        _click(ctrl, "h2")
        assert seen == [ctrl.state]


class TestEngineHandshake:
    def test_uciok_marks_ready_and_configures(self) -> None:
        ctrl, sent = _controller()
        statuses: list[EngineStatus] = []
        ctrl.events.on_engine_status_changed.append(lambda s, _d: statuses.append(s))

        ctrl.handle_line("uciok")

        assert ctrl.state.engine_ready
        assert statuses == [EngineStatus.READY]
        assert sent == ["setoption name MultiPV value 3", "isready"]

    def test_readyok_starts_analysis(self) -> None:
        ctrl, sent = _controller()
        ctrl.handle_line("uciok")
        sent.clear()
        ctrl.handle_line("readyok")
        assert sent == _SEARCH

    def test_readyok_without_auto_analyze_is_quiet(self) -> None:
        ctrl, sent = _controller(auto_analyze=False)
        ctrl.handle_line("uciok")
        sent.clear()
        ctrl.handle_line("readyok")
        assert sent == []

    def test_requests_refused_before_ready(self) -> None:
        ctrl, sent = _controller()
        assert ctrl.analyze() is False
        assert ctrl.hint() is False
        assert ctrl.request_engine_move() is False
        assert sent == []
        assert ctrl.state.activity == Activity.IDLE

    def test_unknown_lines_are_ignored(self) -> None:
        ctrl, sent = _controller()
        ctrl.handle_line("id name Pikafish")
        ctrl.handle_line("")
        assert sent == []
        assert not ctrl.state.engine_ready


class TestAnalysis:
    def test_move_triggers_analysis_with_history(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        _click(ctrl, "h2", "e2")
        assert sent == ["stop", "position startpos moves h2e2", "go movetime 1000"]

    def test_info_line_fills_table(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        tables = []
        ctrl.events.on_analysis_changed.append(tables.append)

        ctrl.handle_line("info depth 12 multipv 2 score cp -35 pv h2e2 h9g7")

        line = ctrl.analysis.line(2)
        assert line is not None
        assert line.eval_text == "-0.35"
        assert line.best_move == "h2e2"
        assert tables == [ctrl.analysis]

    def test_black_to_move_score_is_flipped(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        _click(ctrl, "h2", "e2")
        ctrl.handle_line("info depth 10 score cp 50 pv h9g7")
        assert ctrl.analysis.line(1).eval_text == "-0.50"

    def test_new_game_clears_analysis(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        _click(ctrl, "h2", "e2")
        ctrl.handle_line("info depth 10 score cp 50 pv h9g7")
        sent.clear()

        ctrl.new_game()

        assert ctrl.analysis.lines == (None, None, None)
        assert len(ctrl.ledger) == 0
        assert sent == _SEARCH

    def test_multipv_change_rebuilds_table(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        new_settings = AppSettings(multipv=5)
        ctrl.update_settings(new_settings)
        assert ctrl.analysis.slots == 5
        assert sent == ["setoption name MultiPV value 5"]
        assert ctrl.settings is new_settings

    def test_multipv_unchanged_sends_nothing(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        ctrl.update_settings(AppSettings(think_time_ms=2000))
        assert sent == []


class TestHighlight:
    def test_highlight_pv_points_at_best_move(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        ctrl.handle_line("info depth 8 multipv 1 score cp 20 pv b2e2 h9g7")

        ctrl.highlight_pv(1)
        assert ctrl.state.highlighted_move == (parse_square("b2"), parse_square("e2"))

        ctrl.clear_highlight()
        assert ctrl.state.highlighted_move is None

    def test_highlight_empty_slot_is_noop(self) -> None:
        ctrl, _ = _controller()
        ctrl.highlight_pv(3)
        assert ctrl.state.highlighted_move is None

    def test_highlight_follows_updated_line(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        ctrl.handle_line("info depth 8 multipv 1 score cp 20 pv b2e2 h9g7")
        ctrl.highlight_pv(1)
        boards: list[AppState] = []
        ctrl.events.on_board_changed.append(boards.append)

        ctrl.handle_line("info depth 9 multipv 1 score cp 25 pv h2e2 h9g7")

        assert ctrl.state.highlighted_move == (parse_square("h2"), parse_square("e2"))
        assert len(boards) == 1

    def test_highlight_ignores_other_ranks(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        ctrl.handle_line("info depth 8 multipv 1 score cp 20 pv b2e2")
        ctrl.highlight_pv(1)

        ctrl.handle_line("info depth 8 multipv 2 score cp 10 pv h2e2")

        assert ctrl.state.highlighted_move == (parse_square("b2"), parse_square("e2"))

    def test_highlight_on_empty_slot_waits_for_line(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        ctrl.highlight_pv(2)

        ctrl.handle_line("info depth 5 multipv 2 score cp 0 pv c3c4")

        assert ctrl.state.highlighted_move == (parse_square("c3"), parse_square("c4"))

    def test_cleared_highlight_stops_following(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        ctrl.handle_line("info depth 8 multipv 1 score cp 20 pv b2e2")
        ctrl.highlight_pv(1)
        ctrl.clear_highlight()

        ctrl.handle_line("info depth 9 multipv 1 score cp 25 pv h2e2")

        assert ctrl.state.highlighted_move is None


class TestPlayVsEngine:
    def test_engine_replies_after_human_move(self) -> None:
        ctrl, sent = _controller(play_vs_engine=True)
        _ready(ctrl, sent)
        due: list[str] = []
        ctrl.events.on_engine_move_due.append(due.append)

        _click(ctrl, "h2", "e2")
        assert ctrl.state.activity == Activity.ENGINE_MOVE
        assert ctrl.state.thinking

        ctrl.handle_line("bestmove h9g7 ponder h0g2")
        assert ctrl.state.activity == Activity.IDLE
        assert due == ["h9g7"]

        assert ctrl.apply_engine_move("h9g7")
        assert ctrl.ledger.uci_moves == ["h2e2", "h9g7"]
        assert ctrl.state.side_to_move is Side.RED

    def test_clicks_ignored_while_thinking(self) -> None:
        ctrl, sent = _controller(play_vs_engine=True)
        _ready(ctrl, sent)
        _click(ctrl, "h2", "e2")
        assert _click(ctrl, "h9") is False
        assert ctrl.state.selection.square is None

    def test_bestmove_none_plays_nothing(self) -> None:
        ctrl, sent = _controller(play_vs_engine=True)
        _ready(ctrl, sent)
        due: list[str] = []
        ctrl.events.on_engine_move_due.append(due.append)
        _click(ctrl, "h2", "e2")

        ctrl.handle_line("bestmove (none)")

        assert due == []
        assert ctrl.state.activity == Activity.IDLE

    def test_apply_engine_move_from_empty_square(self) -> None:
        ctrl, _ = _controller()
        assert ctrl.apply_engine_move("e4e5") is False
        assert ctrl.apply_engine_move("garbage") is False
        assert len(ctrl.ledger) == 0

    def test_engine_opens_as_red_once_ready(self) -> None:
        ctrl, sent = _controller(
            play_vs_engine=True, engine_side=Side.RED, auto_analyze=False
        )
        ctrl.handle_line("uciok")
        sent.clear()

        ctrl.handle_line("readyok")

        assert ctrl.state.activity == Activity.ENGINE_MOVE
        assert sent == _SEARCH

    def test_new_game_starts_engine_as_red(self) -> None:
        ctrl, sent = _controller(
            play_vs_engine=True, engine_side=Side.RED, auto_analyze=False
        )
        ctrl.handle_line("uciok")
        sent.clear()

        ctrl.new_game()

        assert ctrl.state.activity == Activity.ENGINE_MOVE
        assert sent == _SEARCH
        assert _click(ctrl, "h2") is False
        assert ctrl.state.selection.square is None

    def test_undo_into_engine_turn_requests_move(self) -> None:
        ctrl, sent = _controller(play_vs_engine=True, auto_analyze=False)
        _ready(ctrl, sent)
        _click(ctrl, "h2", "e2")
        ctrl.handle_line("bestmove h9g7")
        ctrl.apply_engine_move("h9g7")
        sent.clear()

        assert ctrl.undo()

        assert ctrl.state.side_to_move is Side.BLACK
        assert ctrl.state.activity == Activity.ENGINE_MOVE
        assert sent == ["stop", "position startpos moves h2e2", "go movetime 1000"]


class TestHint:
    def test_hint_does_not_play(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        due: list[str] = []
        ctrl.events.on_engine_move_due.append(due.append)

        assert ctrl.hint()
        assert ctrl.state.activity == Activity.HINT
        assert sent == _SEARCH

        ctrl.handle_line("bestmove h2e2")
        assert ctrl.state.activity == Activity.IDLE
        assert due == []

    def test_bestmove_logs_ponder(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        ctrl.hint()

        with caplog.at_level(logging.DEBUG, logger="pikaqi.game.controller"):
            ctrl.handle_line("bestmove h2e2 ponder h9g7")

        assert "ponder h9g7" in caplog.text


class TestHistory:
    def test_undo(self) -> None:
        ctrl, _ = _controller()
        _click(ctrl, "h2", "e2")
        assert ctrl.undo()
        assert len(ctrl.ledger) == 0
        assert ctrl.undo() is False

    def test_goto_move(self) -> None:
        ctrl, sent = _controller()
        _click(ctrl, "h2", "e2", "h9", "g7")
        _ready(ctrl, sent)

        ctrl.goto_move(0)

        assert ctrl.ledger.uci_moves == ["h2e2"]
        assert sent == ["stop", "position startpos moves h2e2", "go movetime 1000"]

    def test_flip(self) -> None:
        ctrl, _ = _controller()
        ctrl.flip()
        assert ctrl.state.flipped
        ctrl.flip()
        assert not ctrl.state.flipped


class TestEngineLoss:
    def test_failed(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        details: list[str] = []
        ctrl.events.on_engine_status_changed.append(lambda _s, d: details.append(d))

        ctrl.engine_failed("No such file")

        assert ctrl.state.engine_status == EngineStatus.FAILED
        assert not ctrl.state.engine_ready
        assert details == ["No such file"]
        assert ctrl.analyze() is False

    def test_exit_releases_thinking_lock(self) -> None:
        ctrl, sent = _controller()
        _ready(ctrl, sent)
        ctrl.hint()
        ctrl.engine_exited(1)
        assert ctrl.state.engine_status == EngineStatus.EXITED
        assert ctrl.state.activity == Activity.IDLE

    def test_connecting(self) -> None:
        ctrl, _ = _controller()
        ctrl.engine_failed("x")
        ctrl.engine_connecting()
        assert ctrl.state.engine_status == EngineStatus.CONNECTING
