"""MainWindow UI construction and retranslation helpers."""

from __future__ import annotations

from typing import Any

from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from pikaqi.ui.board.board_view import BoardView
from pikaqi.ui.i18n import t
from pikaqi.ui.panels.analysis_panel import AnalysisPanel
from pikaqi.ui.panels.control_panel import ControlPanel
from pikaqi.ui.panels.engine_log import EngineLogPanel
from pikaqi.ui.panels.move_panel import MovePanel


def setup_ui(host: Any) -> None:
    """Build the central layout and status bar widgets."""
    central = QWidget()
    host.setCentralWidget(central)
    root = QHBoxLayout(central)
    root.setContentsMargins(6, 6, 6, 6)
    root.setSpacing(6)

    # Board (left)
    host._board_view = BoardView()
    root.addWidget(host._board_view, stretch=3)

    # Right panel
    right = QVBoxLayout()
    right.setSpacing(6)

    host._turn_label = QLabel()
    right.addWidget(host._turn_label)

    host._control_panel = ControlPanel()
    right.addWidget(host._control_panel)

    host._analysis_panel = AnalysisPanel(slots=host._settings.multipv)
    right.addWidget(host._analysis_panel)

    host._move_panel = MovePanel()
    right.addWidget(host._move_panel, stretch=1)

    host._engine_log = EngineLogPanel()
    right.addWidget(host._engine_log, stretch=1)

    right_widget = QWidget()
    right_widget.setLayout(right)
    right_widget.setFixedWidth(340)
    root.addWidget(right_widget)

    # Status bar
    host._status = QStatusBar()
    host.setStatusBar(host._status)
    host._status_label = QLabel(t().status_ready)
    host._status.addWidget(host._status_label, 1)
    host._engine_status_label = QLabel()
    host._status.addPermanentWidget(host._engine_status_label)


def setup_menu(host: Any) -> None:
    """Build menu actions and bind action handlers."""
    menu_bar = host.menuBar()
    assert menu_bar is not None
    s = t()

    host._menu_game = menu_bar.addMenu(s.menu_game)
    assert host._menu_game is not None

    host._act_new_game = QAction(s.menu_new_game, host)
    host._act_new_game.setShortcut("Ctrl+N")
    host._act_new_game.triggered.connect(host._on_new_game)
    host._menu_game.addAction(host._act_new_game)

    host._act_undo = QAction(s.menu_undo, host)
    host._act_undo.setShortcut("Ctrl+Z")
    host._act_undo.triggered.connect(host._on_undo)
    host._menu_game.addAction(host._act_undo)

    host._act_flip = QAction(s.menu_flip_board, host)
    host._act_flip.setShortcut("F")
    host._act_flip.triggered.connect(host._on_flip)
    host._menu_game.addAction(host._act_flip)

    host._menu_game.addSeparator()

    host._act_settings = QAction(s.menu_settings_action, host)
    host._act_settings.setShortcut("Ctrl+,")
    host._act_settings.setMenuRole(QAction.MenuRole.PreferencesRole)
    host._act_settings.triggered.connect(host._on_settings)
    host._menu_game.addAction(host._act_settings)

    host._menu_game.addSeparator()

    host._act_quit = QAction(s.menu_quit, host)
    host._act_quit.setShortcut("Ctrl+Q")
    host._act_quit.setMenuRole(QAction.MenuRole.QuitRole)
    host._act_quit.triggered.connect(host.close)
    host._menu_game.addAction(host._act_quit)


def retranslate_ui(host: Any) -> None:
    """Update all translatable strings when the locale changes."""
    s = t()
    assert host._menu_game is not None

    host.setWindowTitle(s.window_title)

    # Menu bar
    host._menu_game.setTitle(s.menu_game)
    host._act_new_game.setText(s.menu_new_game)
    host._act_undo.setText(s.menu_undo)
    host._act_flip.setText(s.menu_flip_board)
    host._act_settings.setText(s.menu_settings_action)
    host._act_quit.setText(s.menu_quit)

    # Child widgets
    host._control_panel.retranslate_ui()
    host._analysis_panel.retranslate_ui()
    host._move_panel.retranslate_ui()
    host._engine_log.retranslate_ui()
    host._update_status()
    host._update_engine_status()
