"""ControlPanel — game action buttons and play options."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from pikaqi.ui.i18n import t

THINK_TIME_RANGE_MS = (100, 60_000)


class ControlPanel(QWidget):
    """Buttons for game actions plus the engine play options."""

    new_game_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()
    hint_clicked = pyqtSignal()
    play_vs_engine_toggled = pyqtSignal(bool)
    auto_analyze_toggled = pyqtSignal(bool)
    think_time_changed = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Noto Sans CJK SC", 10)

        row1 = QHBoxLayout()
        self._btn_new = self._make_button(btn_font, self.new_game_clicked)
        row1.addWidget(self._btn_new)
        self._btn_flip = self._make_button(btn_font, self.flip_clicked)
        row1.addWidget(self._btn_flip)
        layout.addLayout(row1)

        row2 = QHBoxLayout()
        self._btn_undo = self._make_button(btn_font, self.undo_clicked)
        row2.addWidget(self._btn_undo)
        self._btn_hint = self._make_button(btn_font, self.hint_clicked)
        self._btn_hint.setStyleSheet(
            "QPushButton { background-color: #7a2c22; }"
            "QPushButton:hover { background-color: #953a2d; }"
        )
        row2.addWidget(self._btn_hint)
        layout.addLayout(row2)

        self._chk_play = QCheckBox()
        self._chk_play.toggled.connect(self.play_vs_engine_toggled)
        layout.addWidget(self._chk_play)

        self._chk_auto = QCheckBox()
        self._chk_auto.setChecked(True)
        self._chk_auto.toggled.connect(self.auto_analyze_toggled)
        layout.addWidget(self._chk_auto)

        row3 = QHBoxLayout()
        self._think_label = QLabel()
        row3.addWidget(self._think_label)
        self._think_spin = QSpinBox()
        self._think_spin.setRange(*THINK_TIME_RANGE_MS)
        self._think_spin.setSingleStep(100)
        self._think_spin.setValue(1000)
        self._think_spin.valueChanged.connect(self.think_time_changed)
        row3.addWidget(self._think_spin, stretch=1)
        layout.addLayout(row3)

    @staticmethod
    def _make_button(font: QFont, signal) -> QPushButton:
        btn = QPushButton()
        btn.setFont(font)
        btn.setMinimumHeight(36)
        btn.clicked.connect(signal)
        return btn

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_new.setText(s.btn_new_game)
        self._btn_flip.setText(s.btn_flip)
        self._btn_undo.setText(s.btn_undo)
        self._btn_hint.setText(s.btn_hint)
        self._chk_play.setText(s.chk_play_vs_engine)
        self._chk_auto.setText(s.chk_auto_analyze)
        self._think_label.setText(s.think_time_label)
        self._think_spin.setSuffix(s.ms_suffix)

    # ── State sync ───────────────────────────────────────────────────────

    def set_options(self, play_vs_engine: bool, auto_analyze: bool, think_ms: int) -> None:
        """Mirror settings into the widgets without re-emitting signals."""
        for widget, value in (
            (self._chk_play, play_vs_engine),
            (self._chk_auto, auto_analyze),
        ):
            widget.blockSignals(True)
            widget.setChecked(value)
            widget.blockSignals(False)
        self._think_spin.blockSignals(True)
        self._think_spin.setValue(think_ms)
        self._think_spin.blockSignals(False)

    def set_state(self, *, busy: bool, engine_ready: bool) -> None:
        """Disable actions that would race an in-flight engine search."""
        self._btn_undo.setEnabled(not busy)
        self._btn_hint.setEnabled(engine_ready and not busy)

    def is_hint_enabled(self) -> bool:
        return self._btn_hint.isEnabled()

    def is_undo_enabled(self) -> bool:
        return self._btn_undo.isEnabled()
