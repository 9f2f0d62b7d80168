"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

LOG_LEVEL_ENV_VAR = "PIKAQI_LOG_LEVEL"

_LOGGER = logging.getLogger(__name__)


def setup_logging(level_name: str | None = None) -> None:
    """Configure root logging once; the level comes from the environment."""
    name = (level_name or os.environ.get(LOG_LEVEL_ENV_VAR) or "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from pikaqi.ui.styles.theme import APP_STYLE

    app.setApplicationName("Pikaqi")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from pikaqi.ui.main_window import MainWindow

    setup_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.info("Main window shown")

    return app.exec()
