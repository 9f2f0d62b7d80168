"""PieceItem — a round xiangqi piece with its glyph on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtGui import QBrush, QCursor, QFont, QPen, QRadialGradient
from PyQt6.QtWidgets import QGraphicsEllipseItem, QGraphicsSimpleTextItem

from pikaqi.core.enums import Side
from pikaqi.core.piece import Piece
from pikaqi.core.types import Square
from pikaqi.ui.styles.theme import BoardTheme


class PieceItem(QGraphicsEllipseItem):
    """A single piece centred on a board intersection.

    Stores its logical *square*; clicks are handled by the scene.
    """

    _RADIUS_RATIO = 0.42

    def __init__(
        self, piece: Piece, square: Square, cell_size: int, theme: BoardTheme
    ) -> None:
        radius = cell_size * self._RADIUS_RATIO
        super().__init__(-radius, -radius, 2 * radius, 2 * radius)
        self.piece = piece
        self.square = square
        self._theme = theme
        self._radius = radius
        self._selected = False

        gradient = QRadialGradient(QPointF(-5, -5), radius)
        gradient.setColorAt(0.0, theme.piece_face_light)
        gradient.setColorAt(1.0, theme.piece_face_dark)
        self.setBrush(QBrush(gradient))
        self._apply_pen()

        self._glyph = QGraphicsSimpleTextItem(piece.glyph, self)
        font = QFont("Noto Serif CJK SC", max(10, int(cell_size * 0.48)))
        font.setBold(True)
        self._glyph.setFont(font)
        color = theme.red_glyph if piece.side == Side.RED else theme.black_glyph
        self._glyph.setBrush(QBrush(color))
        bounds = self._glyph.boundingRect()
        self._glyph.setPos(-bounds.width() / 2, -bounds.height() / 2 + 1)

        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def is_selected_piece(self) -> bool:
        return self._selected

    def set_selected_piece(self, selected: bool) -> None:
        """Draw (or drop) the selection ring."""
        self._selected = selected
        self._apply_pen()

    def _apply_pen(self) -> None:
        if self._selected:
            self.setPen(QPen(self._theme.selected, 3))
        else:
            self.setPen(QPen(self._theme.piece_border, 2))
