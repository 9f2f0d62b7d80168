"""MainWindow signal wiring and controller-event synchronisation."""

from __future__ import annotations

from typing import Any

from pikaqi.analysis import AnalysisTable
from pikaqi.core.enums import Side
from pikaqi.game.controller import Activity, AppState, EngineStatus
from pikaqi.ui.i18n import t
from pikaqi.ui.styles.theme import BLACK_TEXT, RED_TEXT

_ENGINE_STATUS_COLOR: dict[EngineStatus, str] = {
    EngineStatus.CONNECTING: "#f7c631",
    EngineStatus.READY: "#7fc97f",
    EngineStatus.FAILED: "#e05a5a",
    EngineStatus.EXITED: "#e05a5a",
}


def connect_signals(host: Any) -> None:
    """Connect Qt widget signals."""
    host._board_view.square_clicked.connect(host._controller.click)
    host._move_panel.move_clicked.connect(host._on_move_history_selected)
    host._analysis_panel.line_hovered.connect(host._controller.highlight_pv)
    host._analysis_panel.hover_cleared.connect(host._controller.clear_highlight)

    panel = host._control_panel
    panel.new_game_clicked.connect(host._on_new_game)
    panel.flip_clicked.connect(host._on_flip)
    panel.undo_clicked.connect(host._on_undo)
    panel.hint_clicked.connect(host._controller.hint)
    panel.play_vs_engine_toggled.connect(host._on_play_vs_engine_toggled)
    panel.auto_analyze_toggled.connect(host._on_auto_analyze_toggled)
    panel.think_time_changed.connect(host._on_think_time_changed)


def connect_controller_events(host: Any) -> None:
    """Subscribe to GameController callbacks (idempotent)."""
    events = host._controller.events
    host._replace_callback(events.on_board_changed, host._on_board_changed)
    host._replace_callback(events.on_status_changed, host._on_status_changed)
    host._replace_callback(events.on_analysis_changed, host._on_analysis_changed)
    host._replace_callback(
        events.on_engine_status_changed, host._on_engine_status_changed
    )


def disconnect_controller_events(host: Any) -> None:
    """Detach this window from GameController callbacks."""
    events = host._controller.events
    host._remove_callback(events.on_board_changed, host._on_board_changed)
    host._remove_callback(events.on_status_changed, host._on_status_changed)
    host._remove_callback(events.on_analysis_changed, host._on_analysis_changed)
    host._remove_callback(
        events.on_engine_status_changed, host._on_engine_status_changed
    )


def sync_board(host: Any, state: AppState) -> None:
    """Push the controller's board, selection and PV arrow into the scene."""
    scene = host._board_view.board_scene
    scene.set_flipped(state.flipped)
    scene.set_position(state.ledger.position)
    scene.set_selection(state.selection.square, state.selection.targets)
    scene.set_highlighted_move(state.highlighted_move)

    moves = state.ledger.moves
    if moves != host._shown_moves:
        host._shown_moves = moves
        host._move_panel.set_moves(moves)


def sync_analysis(host: Any, table: AnalysisTable) -> None:
    host._analysis_panel.show_table(table)


def update_status(host: Any) -> None:
    """Refresh the turn indicator, activity text and busy buttons."""
    s = t()
    state = host._controller.state
    red_to_move = state.side_to_move == Side.RED
    host._turn_label.setText(s.turn_red if red_to_move else s.turn_black)
    host._turn_label.setStyleSheet(
        f"color: {RED_TEXT}; font-weight: bold;"
        if red_to_move
        else f"color: {BLACK_TEXT}; font-weight: bold;"
    )

    if state.activity == Activity.ENGINE_MOVE:
        host._status_label.setText(s.status_engine_thinking)
    elif state.activity == Activity.HINT:
        host._status_label.setText(s.status_hint)
    else:
        host._status_label.setText(s.status_ready)

    host._control_panel.set_state(busy=state.thinking, engine_ready=state.engine_ready)
    host._act_undo.setEnabled(not state.thinking)


def update_engine_status(host: Any) -> None:
    s = t()
    state = host._controller.state
    status = state.engine_status
    detail = host._engine_status_detail
    if status == EngineStatus.CONNECTING:
        text = s.engine_connecting
    elif status == EngineStatus.READY:
        text = s.engine_ready
    elif status == EngineStatus.FAILED:
        text = s.engine_error.format(msg=detail)
    else:
        text = s.engine_exited.format(code=detail)
    host._engine_status_label.setText(text)
    host._engine_status_label.setStyleSheet(f"color: {_ENGINE_STATUS_COLOR[status]};")
    host._control_panel.set_state(busy=state.thinking, engine_ready=state.engine_ready)
