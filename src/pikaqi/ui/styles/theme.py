"""Visual theme constants and QSS styles for Pikaqi."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the xiangqi board and its pieces."""

    background: QColor
    line: QColor  # grid, palace and border strokes
    text: QColor  # river text and coordinates
    piece_face_light: QColor  # gradient centre
    piece_face_dark: QColor  # gradient rim
    piece_border: QColor
    red_glyph: QColor
    black_glyph: QColor
    selected: QColor  # ring around the selected piece
    legal_dot: QColor
    pv_from: QColor  # hovered PV origin ring
    pv_to: QColor  # hovered PV destination ring
    pv_arrow: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            background=QColor(212, 165, 89),  # maple
            line=QColor(90, 58, 26),
            text=QColor(90, 58, 26),
            piece_face_light=QColor(245, 230, 200),
            piece_face_dark=QColor(212, 184, 150),
            piece_border=QColor(90, 58, 26),
            red_glyph=QColor(196, 30, 58),
            black_glyph=QColor(26, 26, 26),
            selected=QColor(0, 170, 0),
            legal_dot=QColor(0, 128, 0, 128),
            pv_from=QColor(0, 150, 255, 204),
            pv_to=QColor(0, 255, 100, 204),
            pv_arrow=QColor(0, 200, 255, 178),
        )

    @classmethod
    def walnut(cls) -> BoardTheme:
        return cls(
            background=QColor(150, 104, 64),
            line=QColor(48, 28, 12),
            text=QColor(48, 28, 12),
            piece_face_light=QColor(240, 224, 196),
            piece_face_dark=QColor(200, 170, 130),
            piece_border=QColor(48, 28, 12),
            red_glyph=QColor(176, 24, 40),
            black_glyph=QColor(20, 20, 20),
            selected=QColor(255, 210, 0),
            legal_dot=QColor(255, 230, 120, 150),
            pv_from=QColor(0, 150, 255, 204),
            pv_to=QColor(0, 255, 100, 204),
            pv_arrow=QColor(0, 200, 255, 178),
        )

    @classmethod
    def jade(cls) -> BoardTheme:
        return cls(
            background=QColor(176, 200, 170),
            line=QColor(40, 72, 48),
            text=QColor(40, 72, 48),
            piece_face_light=QColor(250, 246, 232),
            piece_face_dark=QColor(214, 206, 180),
            piece_border=QColor(40, 72, 48),
            red_glyph=QColor(190, 32, 44),
            black_glyph=QColor(24, 40, 28),
            selected=QColor(230, 120, 0),
            legal_dot=QColor(40, 72, 48, 120),
            pv_from=QColor(0, 110, 230, 204),
            pv_to=QColor(200, 60, 160, 204),
            pv_arrow=QColor(0, 110, 230, 178),
        )

    @classmethod
    def slate(cls) -> BoardTheme:
        return cls(
            background=QColor(196, 200, 208),
            line=QColor(52, 58, 68),
            text=QColor(52, 58, 68),
            piece_face_light=QColor(244, 244, 246),
            piece_face_dark=QColor(196, 198, 204),
            piece_border=QColor(52, 58, 68),
            red_glyph=QColor(200, 30, 50),
            black_glyph=QColor(20, 24, 30),
            selected=QColor(0, 150, 90),
            legal_dot=QColor(0, 120, 80, 128),
            pv_from=QColor(0, 150, 255, 204),
            pv_to=QColor(0, 200, 100, 204),
            pv_arrow=QColor(0, 150, 255, 178),
        )


THEMES: dict[str, BoardTheme] = {
    "Classic": BoardTheme.default(),
    "Walnut": BoardTheme.walnut(),
    "Jade": BoardTheme.jade(),
    "Slate": BoardTheme.slate(),
}

RED_TEXT = "#e4604f"
BLACK_TEXT = "#d6ccbf"
NEGATIVE_EVAL = "#e05a5a"
POSITIVE_EVAL = "#7fc97f"


# ── Application-wide QSS ────────────────────────────────────────────────────

# Ink-on-lacquer palette; board colours come from BoardTheme, not from here.
APP_STYLE = """
QMainWindow, QDialog {
    background: #1f1b18;
}

QLabel, QCheckBox {
    color: #ece3d6;
    font-family: "Noto Sans CJK SC", "Helvetica Neue", sans-serif;
}

QPlainTextEdit, QListWidget {
    background: #171412;
    color: #d9cfc1;
    border: 1px solid #3a332d;
    border-radius: 3px;
    font-family: "DejaVu Sans Mono", "Consolas", monospace;
    font-size: 12px;
}
QListWidget::item:selected {
    background: #6b2a22;
}

QPushButton {
    background: #332c27;
    color: #ece3d6;
    border: 1px solid #4d4239;
    border-radius: 5px;
    padding: 5px 12px;
    font-size: 13px;
}
QPushButton:hover {
    background: #443a33;
}
QPushButton:pressed {
    background: #8a2f25;
}
QPushButton:disabled {
    color: #6f655c;
    background: #25201c;
    border-color: #332c27;
}

QSpinBox, QComboBox, QLineEdit {
    background: #171412;
    color: #ece3d6;
    border: 1px solid #4d4239;
    border-radius: 3px;
    padding: 2px 4px;
}

QStatusBar {
    background: #171412;
    color: #c9bdae;
}

QMenuBar {
    background: #1f1b18;
    color: #ece3d6;
}
QMenuBar::item:selected, QMenu::item:selected {
    background: #6b2a22;
}
QMenu {
    background: #25201c;
    color: #ece3d6;
    border: 1px solid #3a332d;
}
"""
