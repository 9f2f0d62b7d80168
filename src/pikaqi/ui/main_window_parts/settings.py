"""MainWindow settings dialog and application helpers."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from pikaqi.runtime_assets import resolve_engine_path
from pikaqi.ui.i18n import set_language
from pikaqi.ui.styles.theme import THEMES, BoardTheme

_LOGGER = logging.getLogger(__name__)


def on_settings(host: Any, *, settings_dialog_cls: type[Any]) -> None:
    edited = replace(host._settings)
    dlg = settings_dialog_cls(edited, host)
    if dlg.exec():
        apply_settings(host, edited)


def apply_settings(host: Any, settings: Any) -> None:
    previous = host._settings
    host._settings = settings

    # Language must come first so all retranslate calls use the new locale
    set_language(settings.language)
    host.retranslate_ui()

    # Board
    scene = host._board_view.board_scene
    scene.set_theme(THEMES.get(settings.board_theme, BoardTheme.default()))
    scene.set_show_coordinates(settings.show_coordinates)
    scene.set_show_legal_moves(settings.show_legal_moves)

    # Play options mirrored on the control panel
    host._control_panel.set_options(
        settings.play_vs_engine, settings.auto_analyze, settings.think_time_ms
    )

    # Engine (applied to subsequent searches; doesn't interrupt current)
    host._controller.update_settings(settings)
    if settings.engine_path != previous.engine_path and host._engine_enabled:
        path = resolve_engine_path(settings.engine_path or None)
        _LOGGER.info("Engine path changed; restarting with %s", path)
        host._engine_session.restart(path)
