"""EngineLogPanel — raw engine output, newest lines at the bottom."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QPlainTextEdit, QVBoxLayout, QWidget

from pikaqi.ui.i18n import t


class EngineLogPanel(QWidget):
    """Read-only log of every line the engine printed, capped at *max_lines*."""

    def __init__(self, max_lines: int = 500, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)

        self._header = QLabel()
        self._header.setFont(QFont("Noto Sans CJK SC", 10, QFont.Weight.Bold))
        self._header.setAlignment(Qt.AlignmentFlag.AlignLeft)
        layout.addWidget(self._header)

        self._text = QPlainTextEdit()
        self._text.setReadOnly(True)
        self._text.setMaximumBlockCount(max_lines)
        self._text.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        layout.addWidget(self._text)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        self._header.setText(t().engine_log_header)

    def append_line(self, line: str) -> None:
        self._text.appendPlainText(line)
        bar = self._text.verticalScrollBar()
        if bar is not None:
            bar.setValue(bar.maximum())

    def lines(self) -> list[str]:
        text = self._text.toPlainText()
        return text.split("\n") if text else []

    def clear(self) -> None:
        self._text.clear()
