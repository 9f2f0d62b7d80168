"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import QMainWindow

from pikaqi.analysis import AnalysisTable
from pikaqi.core.move import Move
from pikaqi.engine.process import EngineProcess
from pikaqi.game.controller import AppSettings, AppState, EngineStatus, GameController
from pikaqi.runtime_assets import resolve_engine_path
from pikaqi.ui.dialogs.settings_dialog import SettingsDialog
from pikaqi.ui.engine_session import EngineSession
from pikaqi.ui.i18n import t
from pikaqi.ui.main_window_parts import lifecycle as lifecycle_part
from pikaqi.ui.main_window_parts import settings as settings_part
from pikaqi.ui.main_window_parts import ui as ui_part

_LOGGER = logging.getLogger(__name__)

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window for Pikaqi.

    Owns the :class:`GameController` and the engine process. With
    ``start_engine=False`` the window runs without an engine, which is
    how the tests drive it.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        start_engine: bool = True,
    ) -> None:
        super().__init__()
        self.setWindowTitle(t().window_title)
        self.setMinimumSize(900, 640)
        self.resize(1120, 760)

        self._settings = settings or AppSettings()
        self._engine_enabled = start_engine
        self._engine_status_detail = ""
        self._shown_moves: tuple[Move, ...] = ()

        self._engine_process = EngineProcess(self)
        self._controller = GameController(
            send=self._engine_process.send, settings=self._settings
        )

        self._setup_ui()
        self._setup_menu()
        self._engine_session = EngineSession(
            controller=self._controller,
            process=self._engine_process,
            on_line=self._engine_log.append_line,
            parent=self,
        )
        self._connect_signals()
        self._connect_controller_events()
        self._control_panel.set_options(
            self._settings.play_vs_engine,
            self._settings.auto_analyze,
            self._settings.think_time_ms,
        )

        self._on_board_changed(self._controller.state)
        self._update_status()
        self._update_engine_status()

        self._engine_session.setup()
        if start_engine:
            self._start_engine()

    # ── Properties (used by tests) ───────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def settings(self) -> AppSettings:
        return self._settings

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        ui_part.setup_ui(self)

    def _setup_menu(self) -> None:
        ui_part.setup_menu(self)

    def retranslate_ui(self) -> None:
        """Update all translatable strings when the locale changes."""
        ui_part.retranslate_ui(self)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        lifecycle_part.connect_signals(self)

    def _connect_controller_events(self) -> None:
        lifecycle_part.connect_controller_events(self)

    def _disconnect_controller_events(self) -> None:
        lifecycle_part.disconnect_controller_events(self)

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Engine lifecycle ─────────────────────────────────────────────────

    def _start_engine(self) -> None:
        path = resolve_engine_path(self._settings.engine_path or None)
        if not Path(path).is_file():
            _LOGGER.warning("Engine binary not found at %s", path)
        self._engine_session.start(path)

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._disconnect_controller_events()
        self._engine_session.shutdown()
        super().closeEvent(event)

    # ── User actions ─────────────────────────────────────────────────────

    def _on_new_game(self) -> None:
        self._engine_session.cancel_pending_move()
        self._controller.new_game()

    def _on_undo(self) -> None:
        self._engine_session.cancel_pending_move()
        self._controller.undo()

    def _on_flip(self) -> None:
        self._controller.flip()

    def _on_move_history_selected(self, index: int) -> None:
        self._engine_session.cancel_pending_move()
        self._controller.goto_move(index)

    def _on_play_vs_engine_toggled(self, checked: bool) -> None:
        self._settings.play_vs_engine = checked

    def _on_auto_analyze_toggled(self, checked: bool) -> None:
        self._settings.auto_analyze = checked

    def _on_think_time_changed(self, value: int) -> None:
        self._settings.think_time_ms = value

    def _on_settings(self) -> None:
        settings_part.on_settings(self, settings_dialog_cls=SettingsDialog)

    def _apply_settings(self, settings: AppSettings) -> None:
        settings_part.apply_settings(self, settings)

    # ── Controller event callbacks ───────────────────────────────────────

    def _on_board_changed(self, state: AppState) -> None:
        lifecycle_part.sync_board(self, state)

    def _on_status_changed(self, _state: AppState) -> None:
        self._update_status()

    def _on_analysis_changed(self, table: AnalysisTable) -> None:
        lifecycle_part.sync_analysis(self, table)

    def _on_engine_status_changed(self, _status: EngineStatus, detail: str) -> None:
        self._engine_status_detail = detail
        self._update_engine_status()

    def _update_status(self) -> None:
        lifecycle_part.update_status(self)

    def _update_engine_status(self) -> None:
        lifecycle_part.update_engine_status(self)
