"""BoardScene — QGraphicsScene that draws the xiangqi board and pieces."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from PyQt6.QtCore import QLineF, QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QFont, QPen, QPolygonF
from PyQt6.QtWidgets import (
    QGraphicsEllipseItem,
    QGraphicsItem,
    QGraphicsLineItem,
    QGraphicsPolygonItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from pikaqi.core.types import COLS, ROWS, Square, make_square
from pikaqi.ui.board.piece_item import PieceItem
from pikaqi.ui.styles.theme import BoardTheme

if TYPE_CHECKING:
    from pikaqi.core.position import Position

RIVER_TEXT = ("楚 河", "漢 界")


class BoardScene(QGraphicsScene):
    """Renders the grid, river, palaces, coordinates, pieces and overlays.

    The scene holds no game logic: it shows what it is told and reports
    the intersection under each click.

    Signals:
        square_clicked(Square): Emitted for a press on a board intersection.
    """

    square_clicked = pyqtSignal(object)

    CELL = 60  # px between intersections
    PADDING = 40  # px from scene edge to the outer grid line

    _DOT_RADIUS = 8
    _ARROW_HEAD = 15

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._position: Position | None = None
        self._flipped = False
        self._show_coordinates = True
        self._show_legal_moves = True

        # Interaction state (mirrors the controller)
        self._selected_sq: Square | None = None
        self._targets: tuple[Square, ...] = ()
        self._highlighted_move: tuple[Square, Square] | None = None

        # Visual layers
        self._board_items: list[QGraphicsItem] = []
        self._coord_items: list[QGraphicsSimpleTextItem] = []
        self._piece_items: dict[Square, PieceItem] = {}
        self._legal_dot_items: list[QGraphicsItem] = []
        self._pv_items: list[QGraphicsItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, position: Position) -> None:
        """Update the displayed position (full redraw of pieces)."""
        self._position = position
        self._sync_pieces()

    def set_selection(self, square: Square | None, targets: Iterable[Square]) -> None:
        self._selected_sq = square
        self._targets = tuple(targets)
        self._sync_selection()

    def set_highlighted_move(self, move: tuple[Square, Square] | None) -> None:
        """Show (or hide) the hovered principal-variation arrow."""
        self._highlighted_move = move
        self._sync_pv_arrow()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        if flipped == self._flipped:
            return
        self._flipped = flipped
        self._redraw_all()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw_all()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide file/rank coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_legal_moves(self, visible: bool) -> None:
        """Show or hide legal-target dots."""
        self._show_legal_moves = visible
        self._sync_selection()

    # -- Query helpers (used by the view and tests) ---------------------------

    def piece_item_at(self, square: Square) -> PieceItem | None:
        return self._piece_items.get(square)

    def legal_dot_count(self) -> int:
        return len(self._legal_dot_items)

    def has_pv_arrow(self) -> bool:
        return bool(self._pv_items)

    def square_center(self, square: Square) -> QPointF:
        """Scene position of a board intersection."""
        vc, vr = self._visual_coords(square.row, square.col)
        return QPointF(self.PADDING + vc * self.CELL, self.PADDING + vr * self.CELL)

    def square_at(self, pos: QPointF) -> Square | None:
        """Nearest intersection to a scene position, or None off the grid."""
        c = self.CELL
        vc = round((pos.x() - self.PADDING) / c)
        vr = round((pos.y() - self.PADDING) / c)
        if not (0 <= vc < COLS and 0 <= vr < ROWS):
            return None
        if self._flipped:
            return make_square(ROWS - 1 - vr, COLS - 1 - vc)
        return make_square(vr, vc)

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None or event.button() != Qt.MouseButton.LeftButton:
            return super().mousePressEvent(event)
        sq = self.square_at(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq)
        event.accept()

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw_all(self) -> None:
        self._draw_board()
        self._sync_pieces()
        self._sync_pv_arrow()

    def _draw_board(self) -> None:
        """Draw or redraw the grid, palaces, river and coordinates."""
        self._clear_items(self._board_items)
        self._clear_items(self._coord_items)

        c, p = self.CELL, self.PADDING
        theme = self._theme
        width = 2 * p + (COLS - 1) * c
        height = 2 * p + (ROWS - 1) * c

        background = QGraphicsRectItem(0, 0, width, height)
        background.setBrush(QBrush(theme.background))
        background.setPen(QPen(Qt.PenStyle.NoPen))
        background.setZValue(-1)
        self._add_board_item(background)

        pen = QPen(theme.line, 1)
        # Files break at the river; the outer files are closed by the border.
        for col in range(COLS):
            x = p + col * c
            self._add_line(x, p, x, p + 4 * c, pen)
            self._add_line(x, p + 5 * c, x, p + 9 * c, pen)
        for row in range(ROWS):
            y = p + row * c
            self._add_line(p, y, p + 8 * c, y, pen)

        border = QGraphicsRectItem(p, p, 8 * c, 9 * c)
        border.setPen(QPen(theme.line, 2))
        border.setBrush(QBrush(Qt.BrushStyle.NoBrush))
        self._add_board_item(border)

        # Palace diagonals
        for top in (0, 7):
            y0, y1 = p + top * c, p + (top + 2) * c
            self._add_line(p + 3 * c, y0, p + 5 * c, y1, pen)
            self._add_line(p + 5 * c, y0, p + 3 * c, y1, pen)

        river_font = QFont("Noto Serif CJK SC", max(12, c // 3))
        river_y = p + 4.5 * c
        for text, col in zip(RIVER_TEXT, (2, 6)):
            item = QGraphicsSimpleTextItem(text)
            item.setFont(river_font)
            item.setBrush(QBrush(theme.text))
            bounds = item.boundingRect()
            item.setPos(p + col * c - bounds.width() / 2, river_y - bounds.height() / 2)
            self._add_board_item(item)

        self._draw_coordinates()
        self.setSceneRect(0, 0, width, height)

    def _draw_coordinates(self) -> None:
        c, p = self.CELL, self.PADDING
        font = QFont("DejaVu Sans Mono", max(9, c // 5))
        for vc in range(COLS):
            col = COLS - 1 - vc if self._flipped else vc
            self._add_coord(chr(ord("a") + col), p + vc * c, p + 9 * c + p / 2, font)
        for vr in range(ROWS):
            rank = vr if self._flipped else ROWS - 1 - vr
            self._add_coord(str(rank), p + 8 * c + p / 2, p + vr * c, font)

    def _add_coord(self, text: str, cx: float, cy: float, font: QFont) -> None:
        item = QGraphicsSimpleTextItem(text)
        item.setFont(font)
        item.setBrush(QBrush(self._theme.text))
        bounds = item.boundingRect()
        item.setPos(cx - bounds.width() / 2, cy - bounds.height() / 2)
        item.setZValue(0.3)
        item.setVisible(self._show_coordinates)
        self.addItem(item)
        self._coord_items.append(item)

    def _add_line(self, x0: float, y0: float, x1: float, y1: float, pen: QPen) -> None:
        line = QGraphicsLineItem(x0, y0, x1, y1)
        line.setPen(pen)
        self._add_board_item(line)

    def _add_board_item(self, item: QGraphicsItem) -> None:
        self.addItem(item)
        self._board_items.append(item)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current position."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._position is not None:
            for sq, piece in self._position.board.occupied():
                item = PieceItem(piece, sq, self.CELL, self._theme)
                item.setPos(self.square_center(sq))
                self.addItem(item)
                self._piece_items[sq] = item
        self._sync_selection()

    # ── Selection / highlights ───────────────────────────────────────────

    def _sync_selection(self) -> None:
        for sq, item in self._piece_items.items():
            item.set_selected_piece(sq == self._selected_sq)

        self._clear_items(self._legal_dot_items)
        if not self._show_legal_moves:
            return
        r = self._DOT_RADIUS
        for sq in self._targets:
            center = self.square_center(sq)
            dot = QGraphicsEllipseItem(center.x() - r, center.y() - r, 2 * r, 2 * r)
            dot.setBrush(QBrush(self._theme.legal_dot))
            dot.setPen(QPen(Qt.PenStyle.NoPen))
            dot.setZValue(2)
            self.addItem(dot)
            self._legal_dot_items.append(dot)

    def _sync_pv_arrow(self) -> None:
        self._clear_items(self._pv_items)
        if self._highlighted_move is None:
            return
        origin, dest = self._highlighted_move
        start, end = self.square_center(origin), self.square_center(dest)
        ring = self.CELL * 0.45

        for center, color in ((start, self._theme.pv_from), (end, self._theme.pv_to)):
            circle = QGraphicsEllipseItem(
                center.x() - ring, center.y() - ring, 2 * ring, 2 * ring
            )
            circle.setPen(QPen(color, 3))
            circle.setBrush(QBrush(Qt.BrushStyle.NoBrush))
            self._add_pv_item(circle)

        line = QLineF(start, end)
        length = line.length()
        if length == 0:
            return
        # Trim the shaft so it does not run into the rings.
        ratio = (length - self.CELL * 0.35) / length
        tip = line.pointAt(ratio)
        tail = line.pointAt((1 - ratio) * 0.5)

        shaft = QGraphicsLineItem(QLineF(tail, tip))
        shaft.setPen(QPen(self._theme.pv_arrow, 4))
        self._add_pv_item(shaft)

        angle = math.atan2(end.y() - start.y(), end.x() - start.x())
        h = self._ARROW_HEAD
        head = QPolygonF(
            [
                tip,
                QPointF(
                    tip.x() - h * math.cos(angle - math.pi / 6),
                    tip.y() - h * math.sin(angle - math.pi / 6),
                ),
                QPointF(
                    tip.x() - h * math.cos(angle + math.pi / 6),
                    tip.y() - h * math.sin(angle + math.pi / 6),
                ),
            ]
        )
        arrow_head = QGraphicsPolygonItem(head)
        arrow_head.setBrush(QBrush(self._theme.pv_arrow))
        arrow_head.setPen(QPen(Qt.PenStyle.NoPen))
        self._add_pv_item(arrow_head)

    def _add_pv_item(self, item: QGraphicsItem) -> None:
        item.setZValue(3)
        self.addItem(item)
        self._pv_items.append(item)

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, row: int, col: int) -> tuple[int, int]:
        """Convert board row/col to visual (column, row)."""
        if self._flipped:
            return COLS - 1 - col, ROWS - 1 - row
        return col, row
