"""AnalysisPanel — live multi-variation engine analysis.

Shows the search depth of the best line and one row per variation rank:
best move, evaluation from Red's side and the next few moves.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QEnterEvent, QFont
from PyQt6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget

from pikaqi.analysis import AnalysisLine, AnalysisTable
from pikaqi.ui.i18n import t
from pikaqi.ui.styles.theme import NEGATIVE_EVAL, POSITIVE_EVAL

# ── Small reusable sub-widgets ──────────────────────────────────────────


class _PvRow(QFrame):
    """One variation: rank, best move, evaluation and continuation."""

    hovered = pyqtSignal(int)
    unhovered = pyqtSignal()

    def __init__(self, rank: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.rank = rank
        self.setStyleSheet(
            """
            QFrame { background: #29231f; border-radius: 4px; }
            QFrame:hover { background: #4a2a24; }
            """
        )
        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.setSpacing(8)

        mono = QFont("DejaVu Sans Mono", 11)

        self._rank = QLabel(f"{rank}.")
        self._rank.setFixedWidth(22)
        layout.addWidget(self._rank)

        self._move = QLabel()
        self._move.setFont(QFont("DejaVu Sans Mono", 11, QFont.Weight.Bold))
        self._move.setFixedWidth(52)
        layout.addWidget(self._move)

        self._eval = QLabel()
        self._eval.setFont(mono)
        self._eval.setFixedWidth(60)
        self._eval.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        layout.addWidget(self._eval)

        self._continuation = QLabel()
        self._continuation.setFont(mono)
        self._continuation.setStyleSheet("color: #9c9083;")
        layout.addWidget(self._continuation, stretch=1)

        self.show_line(None)

    def show_line(self, line: AnalysisLine | None) -> None:
        empty = t().analysis_empty
        if line is None:
            self._move.setText(empty)
            self._eval.setText(empty)
            self._eval.setStyleSheet("")
            self._continuation.setText(empty)
            return
        self._move.setText(line.best_move or empty)
        self._eval.setText(line.eval_text or empty)
        color = NEGATIVE_EVAL if line.is_negative else POSITIVE_EVAL
        self._eval.setStyleSheet(f"color: {color};")
        self._continuation.setText(" ".join(line.continuation))

    def texts(self) -> tuple[str, str, str]:
        return self._move.text(), self._eval.text(), self._continuation.text()

    def enterEvent(self, event: QEnterEvent | None) -> None:
        self.hovered.emit(self.rank)
        super().enterEvent(event)

    def leaveEvent(self, event) -> None:
        self.unhovered.emit()
        super().leaveEvent(event)


# ── Main panel ──────────────────────────────────────────────────────────


class AnalysisPanel(QWidget):
    """Depth label plus one row per analysis line.

    Signals:
        line_hovered(int): Rank of the row under the mouse.
        hover_cleared(): The mouse left a row.
    """

    line_hovered = pyqtSignal(int)
    hover_cleared = pyqtSignal()

    def __init__(self, slots: int = 3, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._rows: list[_PvRow] = []
        self._depth: str | None = None
        self._setup_ui()
        self.set_slot_count(slots)
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        header = QHBoxLayout()
        self._title = QLabel()
        self._title.setFont(QFont("Noto Sans CJK SC", 12, QFont.Weight.Bold))
        header.addWidget(self._title)
        header.addStretch(1)
        self._depth_label = QLabel()
        self._depth_label.setStyleSheet("color: #b5a898;")
        header.addWidget(self._depth_label)
        root.addLayout(header)

        self._rows_layout = QVBoxLayout()
        self._rows_layout.setSpacing(4)
        root.addLayout(self._rows_layout)

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.analysis_header)
        self._depth_label.setText(
            s.analysis_depth.format(depth=self._depth or s.analysis_empty)
        )

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def slot_count(self) -> int:
        return len(self._rows)

    def row_texts(self, rank: int) -> tuple[str, str, str]:
        """(move, eval, continuation) as displayed for *rank*."""
        return self._rows[rank - 1].texts()

    def depth_text(self) -> str:
        return self._depth_label.text()

    def set_slot_count(self, slots: int) -> None:
        """Rebuild the rows for a new MultiPV count."""
        for row in self._rows:
            self._rows_layout.removeWidget(row)
            row.deleteLater()
        self._rows.clear()
        for rank in range(1, slots + 1):
            row = _PvRow(rank)
            row.hovered.connect(self.line_hovered)
            row.unhovered.connect(self.hover_cleared)
            self._rows_layout.addWidget(row)
            self._rows.append(row)

    def show_table(self, table: AnalysisTable) -> None:
        if table.slots != len(self._rows):
            self.set_slot_count(table.slots)
        for row, line in zip(self._rows, table.lines):
            row.show_line(line)
        self._depth = table.depth
        self.retranslate_ui()

    def clear(self) -> None:
        for row in self._rows:
            row.show_line(None)
        self._depth = None
        self.retranslate_ui()
