"""BoardView — scales the board scene into the window."""

from __future__ import annotations

from PyQt6.QtCore import QSize, Qt, pyqtSignal
from PyQt6.QtGui import QPainter, QResizeEvent, QShowEvent
from PyQt6.QtWidgets import QFrame, QGraphicsView, QSizePolicy, QWidget

from pikaqi.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Frameless view that keeps the whole 9x10 board visible at any size.

    Signals:
        square_clicked(Square): Forwarded from the scene.
    """

    square_clicked = pyqtSignal(object)

    _BASE_WIDTH = 2 * BoardScene.PADDING + 8 * BoardScene.CELL
    _BASE_HEIGHT = 2 * BoardScene.PADDING + 9 * BoardScene.CELL

    def __init__(self, parent: QWidget | None = None) -> None:
        self._scene = BoardScene()
        super().__init__(self._scene, parent)

        self.setFrameShape(QFrame.Shape.NoFrame)
        off = Qt.ScrollBarPolicy.ScrollBarAlwaysOff
        self.setHorizontalScrollBarPolicy(off)
        self.setVerticalScrollBarPolicy(off)
        self.setRenderHints(
            QPainter.RenderHint.Antialiasing | QPainter.RenderHint.TextAntialiasing
        )
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumSize(self._BASE_WIDTH * 3 // 4, self._BASE_HEIGHT * 3 // 4)

        self._scene.square_clicked.connect(self.square_clicked)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

    def sizeHint(self) -> QSize:
        return QSize(self._BASE_WIDTH, self._BASE_HEIGHT)

    def showEvent(self, event: QShowEvent | None) -> None:
        super().showEvent(event)
        self._fit()

    def resizeEvent(self, event: QResizeEvent | None) -> None:
        super().resizeEvent(event)
        self._fit()

    def _fit(self) -> None:
        self.fitInView(self._scene.sceneRect(), Qt.AspectRatioMode.KeepAspectRatio)
