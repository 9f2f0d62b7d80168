"""MovePanel — scrollable list of played moves in coordinate notation."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QSizePolicy,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from pikaqi.core.enums import Side
from pikaqi.core.move import Move
from pikaqi.ui.i18n import t
from pikaqi.ui.styles.theme import BLACK_TEXT, RED_TEXT

_SIDE_COLOR: dict[Side, str] = {Side.RED: RED_TEXT, Side.BLACK: BLACK_TEXT}


class MovePanel(QWidget):
    """Displays the move history, one numbered row per Red/Black pair.

    Signals:
        move_clicked(int): 0-based index of the clicked move.
    """

    move_clicked = pyqtSignal(int)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._moves: list[Move] = []
        self._move_buttons: dict[int, QToolButton] = {}
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Noto Sans CJK SC", 12, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._header)

        self._list = QListWidget()
        self._list.setSelectionMode(QListWidget.SelectionMode.NoSelection)
        layout.addWidget(self._list)

    def retranslate_ui(self) -> None:
        self._header.setText(t().moves_header)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def move_count(self) -> int:
        return len(self._moves)

    def move_text(self, index: int) -> str:
        return self._move_buttons[index].text()

    def set_moves(self, moves: Sequence[Move]) -> None:
        """Rebuild the entire move list."""
        self._moves = list(moves)
        self._rebuild_list()

    def clear(self) -> None:
        self.set_moves(())

    # ── Internal ─────────────────────────────────────────────────────────

    def _rebuild_list(self) -> None:
        self._list.clear()
        self._move_buttons.clear()
        for first in range(0, len(self._moves), 2):
            row_widget = QWidget()
            row_layout = QHBoxLayout(row_widget)
            row_layout.setContentsMargins(6, 2, 6, 2)
            row_layout.setSpacing(8)

            num_label = QLabel(f"{first // 2 + 1}.")
            num_label.setFixedWidth(28)
            num_label.setAlignment(
                Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter
            )
            row_layout.addWidget(num_label)

            for index in (first, first + 1):
                if index < len(self._moves):
                    btn = self._create_move_button(self._moves[index], index)
                    row_layout.addWidget(btn, 1)
                    self._move_buttons[index] = btn
                else:
                    spacer = QWidget()
                    spacer.setSizePolicy(
                        QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed
                    )
                    row_layout.addWidget(spacer, 1)

            item = QListWidgetItem()
            item.setSizeHint(row_widget.sizeHint())
            self._list.addItem(item)
            self._list.setItemWidget(item, row_widget)

        self._list.scrollToBottom()

    def _create_move_button(self, move: Move, index: int) -> QToolButton:
        btn = QToolButton()
        btn.setText(move.uci)
        btn.setCursor(Qt.CursorShape.PointingHandCursor)
        btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        btn.setStyleSheet(
            f"""
            QToolButton {{
                background: transparent;
                color: {_SIDE_COLOR[move.side]};
                border: 1px solid transparent;
                border-radius: 4px;
                padding: 2px 8px;
                text-align: left;
                font-family: "DejaVu Sans Mono", monospace;
                font-size: 13px;
            }}
            QToolButton:hover {{
                background: #3a312b;
                border-color: #5a4c41;
            }}
            """
        )
        btn.clicked.connect(
            lambda _checked=False, move_index=index: self.move_clicked.emit(move_index)
        )
        return btn
