"""SettingsDialog — application-wide settings with a category sidebar."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QFont, QPainter, QPaintEvent, QPen
from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QDialogButtonBox,
    QFileDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QSpinBox,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from pikaqi.core.enums import PieceKind, Side
from pikaqi.core.piece import Piece
from pikaqi.game.controller import AppSettings
from pikaqi.ui.i18n import LANGUAGES, t
from pikaqi.ui.panels.control_panel import THINK_TIME_RANGE_MS
from pikaqi.ui.styles.theme import THEMES, BoardTheme

MULTIPV_RANGE = (1, 5)
_ENGINE_SIDES = (Side.RED, Side.BLACK)

_TITLE_STYLE = "font-size: 16px; font-weight: bold; color: #ece3d6;"


# ── Individual settings pages ────────────────────────────────────────────────


class _GeneralPage(QWidget):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        self._title = QLabel()
        self._title.setStyleSheet(_TITLE_STYLE)
        self._form.addRow(self._title)

        self._lang_label = QLabel()
        self._lang_combo = QComboBox()
        self._lang_combo.addItems(LANGUAGES)
        idx = self._lang_combo.findText(settings.language)
        self._lang_combo.setCurrentIndex(max(0, idx))
        self._form.addRow(self._lang_label, self._lang_combo)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_language)
        self._lang_label.setText(s.settings_language)

    def apply(self, settings: AppSettings) -> None:
        settings.language = self._lang_combo.currentText()


class _BoardPage(QWidget):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        self._title = QLabel()
        self._title.setStyleSheet(_TITLE_STYLE)
        self._form.addRow(self._title)

        self._theme_label = QLabel()
        self._theme_combo = QComboBox()
        self._theme_combo.addItems(list(THEMES))
        self._theme_combo.setCurrentText(settings.board_theme)
        self._preview = _BoardThemePreviewWidget(settings.board_theme)
        self._theme_combo.currentTextChanged.connect(self._preview.set_theme_name)

        theme_row = QWidget()
        theme_layout = QHBoxLayout(theme_row)
        theme_layout.setContentsMargins(0, 0, 0, 0)
        theme_layout.setSpacing(12)
        self._theme_combo.setMinimumWidth(180)
        theme_layout.addWidget(self._theme_combo)
        theme_layout.addWidget(self._preview)
        theme_layout.addStretch()
        self._form.addRow(self._theme_label, theme_row)

        self._coords_label = QLabel()
        self._coords_check = QCheckBox()
        self._coords_check.setChecked(settings.show_coordinates)
        self._form.addRow(self._coords_label, self._coords_check)

        self._legal_label = QLabel()
        self._legal_check = QCheckBox()
        self._legal_check.setChecked(settings.show_legal_moves)
        self._form.addRow(self._legal_label, self._legal_check)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_board)
        self._theme_label.setText(s.settings_board_theme)
        self._coords_label.setText(s.settings_show_coords)
        self._legal_label.setText(s.settings_show_legal)

    def apply(self, settings: AppSettings) -> None:
        settings.board_theme = self._theme_combo.currentText()
        settings.show_coordinates = self._coords_check.isChecked()
        settings.show_legal_moves = self._legal_check.isChecked()


class _BoardThemePreviewWidget(QWidget):
    """Compact board appearance preview for theme selection."""

    def __init__(self, theme_name: str) -> None:
        super().__init__()
        self._theme_name = theme_name
        self.setFixedSize(136, 72)

    def set_theme_name(self, theme_name: str) -> None:
        if self._theme_name == theme_name:
            return
        self._theme_name = theme_name
        self.update()

    def paintEvent(self, event: QPaintEvent | None) -> None:
        del event
        theme = THEMES.get(self._theme_name, BoardTheme.default())
        cell = 32
        left, top = 20, 20

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(0, 0, self.width(), self.height(), theme.background)

        painter.setPen(QPen(theme.line, 1))
        for i in range(4):
            x = left + i * cell
            painter.drawLine(x, 0, x, self.height())
        for y in (top, top + cell):
            painter.drawLine(0, y, self.width(), y)

        for col, piece in (
            (0, Piece(Side.RED, PieceKind.KING)),
            (2, Piece(Side.BLACK, PieceKind.CANNON)),
        ):
            center = QPointF(left + col * cell, top + cell / 2 + 4)
            radius = 15.0
            painter.setPen(QPen(theme.piece_border, 2))
            painter.setBrush(QBrush(theme.piece_face_light))
            painter.drawEllipse(center, radius, radius)
            painter.setFont(QFont("Noto Serif CJK SC", 12, QFont.Weight.Bold))
            glyph_color = theme.red_glyph if piece.side == Side.RED else theme.black_glyph
            painter.setPen(glyph_color)
            painter.drawText(
                QRectF(center.x() - radius, center.y() - radius, 2 * radius, 2 * radius),
                Qt.AlignmentFlag.AlignCenter,
                piece.glyph,
            )
        painter.end()


class _EnginePage(QWidget):
    def __init__(self, settings: AppSettings) -> None:
        super().__init__()
        self._form = QFormLayout(self)
        self._form.setSpacing(12)
        self._form.setContentsMargins(16, 16, 16, 16)

        self._title = QLabel()
        self._title.setStyleSheet(_TITLE_STYLE)
        self._form.addRow(self._title)

        self._side_label = QLabel()
        self._side_combo = QComboBox()
        self._side_combo.addItems([""] * len(_ENGINE_SIDES))
        self._side_combo.setCurrentIndex(_ENGINE_SIDES.index(settings.engine_side))
        self._form.addRow(self._side_label, self._side_combo)

        self._path_label = QLabel()
        path_row = QWidget()
        path_layout = QHBoxLayout(path_row)
        path_layout.setContentsMargins(0, 0, 0, 0)
        path_layout.setSpacing(6)
        self._path_edit = QLineEdit(settings.engine_path)
        path_layout.addWidget(self._path_edit, stretch=1)
        self._browse_btn = QPushButton()
        self._browse_btn.clicked.connect(self._on_browse)
        path_layout.addWidget(self._browse_btn)
        self._form.addRow(self._path_label, path_row)

        self._multipv_label = QLabel()
        self._multipv_spin = QSpinBox()
        self._multipv_spin.setRange(*MULTIPV_RANGE)
        self._multipv_spin.setValue(settings.multipv)
        self._form.addRow(self._multipv_label, self._multipv_spin)

        self._time_label = QLabel()
        self._time_spin = QSpinBox()
        self._time_spin.setRange(*THINK_TIME_RANGE_MS)
        self._time_spin.setSingleStep(100)
        self._time_spin.setValue(settings.think_time_ms)
        self._form.addRow(self._time_label, self._time_spin)

        self._note = QLabel()
        self._note.setWordWrap(True)
        self._note.setStyleSheet("color: #8f8377; font-size: 11px;")
        self._form.addRow(self._note)

        self.retranslate_ui()

    def retranslate_ui(self) -> None:
        s = t()
        self._title.setText(s.settings_engine)
        self._side_label.setText(s.settings_engine_side)
        self._side_combo.setItemText(0, s.side_red)
        self._side_combo.setItemText(1, s.side_black)
        self._path_label.setText(s.settings_engine_path)
        self._path_edit.setPlaceholderText(s.settings_engine_path_placeholder)
        self._browse_btn.setText(s.settings_engine_browse)
        self._multipv_label.setText(s.settings_multipv)
        self._time_label.setText(s.settings_think_time)
        self._time_spin.setSuffix(s.ms_suffix)
        self._note.setText(s.settings_engine_note)

    def _on_browse(self) -> None:
        path, _ = QFileDialog.getOpenFileName(
            self, t().settings_engine_browse_title, self._path_edit.text()
        )
        if path:
            self._path_edit.setText(path)

    def apply(self, settings: AppSettings) -> None:
        settings.engine_side = _ENGINE_SIDES[self._side_combo.currentIndex()]
        settings.engine_path = self._path_edit.text().strip()
        settings.multipv = self._multipv_spin.value()
        settings.think_time_ms = self._time_spin.value()


# ── Dialog ───────────────────────────────────────────────────────────────────

_PAGE_FACTORIES: list[tuple[str, type[_GeneralPage | _BoardPage | _EnginePage]]] = [
    ("settings_language", _GeneralPage),
    ("settings_board", _BoardPage),
    ("settings_engine", _EnginePage),
]


class SettingsDialog(QDialog):
    """Modal settings dialog with a left category list and stacked pages.

    Edits the given :class:`AppSettings` in place when accepted.
    """

    def __init__(
        self,
        settings: AppSettings,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setModal(True)
        self.setMinimumSize(640, 400)
        self.setWindowFlags(
            self.windowFlags() & ~Qt.WindowType.WindowContextHelpButtonHint
        )

        self._settings = settings
        self._pages: list[_GeneralPage | _BoardPage | _EnginePage] = []
        self._page_attr_names: list[str] = []

        self._build_ui()
        self.retranslate_ui()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._sidebar = QListWidget()
        self._sidebar.setFixedWidth(150)
        self._sidebar.setStyleSheet(
            "QListWidget { background: #171412; border: none;"
            "  border-right: 1px solid #3a332d; }"
            "QListWidget::item { padding: 10px 14px; color: #cfc4b6; font-size: 13px; }"
            "QListWidget::item:selected { background: #6b2a22; color: #fff8ee; }"
        )

        self._stack = QStackedWidget()
        self._stack.setStyleSheet("background: #1f1b18;")

        for attr, PageClass in _PAGE_FACTORIES:
            self._page_attr_names.append(attr)
            item = QListWidgetItem()
            item.setTextAlignment(
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
            )
            self._sidebar.addItem(item)

            page = PageClass(self._settings)
            self._pages.append(page)
            self._stack.addWidget(page)

        self._sidebar.setCurrentRow(0)
        self._sidebar.currentRowChanged.connect(self._stack.setCurrentIndex)

        root.addWidget(self._sidebar)

        right = QVBoxLayout()
        right.setContentsMargins(0, 0, 0, 0)
        right.setSpacing(0)
        right.addWidget(self._stack)

        self._btn_box = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok | QDialogButtonBox.StandardButton.Cancel
        )
        self._btn_box.setContentsMargins(12, 8, 12, 8)
        self._btn_box.accepted.connect(self._on_accept)
        self._btn_box.rejected.connect(self.reject)
        right.addWidget(self._btn_box)

        right_widget = QWidget()
        right_widget.setLayout(right)
        root.addWidget(right_widget)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.settings_title)
        for i, attr in enumerate(self._page_attr_names):
            item = self._sidebar.item(i)
            if item is not None:
                item.setText(getattr(s, attr))
        for page in self._pages:
            page.retranslate_ui()

    def _on_accept(self) -> None:
        for page in self._pages:
            page.apply(self._settings)
        self.accept()
