"""Engine process session orchestration for the main UI thread."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from PyQt6.QtCore import QObject, QTimer

from pikaqi.engine.process import EngineProcess
from pikaqi.game.controller import GameController

_LOGGER = logging.getLogger(__name__)


class EngineSession:
    """Owns the engine process lifecycle and hands engine moves to the controller.

    Output lines go to the controller (and an optional log sink); engine
    moves are applied after a short delay so the user sees the reply land.
    """

    _MOVE_APPLY_DELAY_MS = 300

    __slots__ = (
        "__weakref__",
        "_controller",
        "_process",
        "_on_line",
        "_move_apply_timer",
        "_pending_move",
        "_is_shutting_down",
        "_is_started",
    )

    def __init__(
        self,
        *,
        controller: GameController,
        process: EngineProcess,
        on_line: Callable[[str], None] | None = None,
        parent: QObject | None = None,
    ) -> None:
        self._controller = controller
        self._process = process
        self._on_line = on_line

        self._move_apply_timer = QTimer(parent)
        self._move_apply_timer.setSingleShot(True)
        self._move_apply_timer.timeout.connect(self._apply_delayed_move)
        self._pending_move: str | None = None

        self._is_shutting_down = False
        self._is_started = False

    @property
    def process(self) -> EngineProcess:
        return self._process

    @property
    def pending_move(self) -> str | None:
        return self._pending_move

    def setup(self) -> None:
        """Connect process signals and controller callbacks."""
        if self._is_started:
            return
        self._is_shutting_down = False
        self._process.line_received.connect(self._on_engine_line)
        self._process.failed.connect(self._on_engine_failed)
        self._process.exited.connect(self._on_engine_exited)
        self._controller.events.on_engine_move_due.append(self.schedule_move)
        self._is_started = True

    def start(self, path: Path | str) -> None:
        """Launch the engine binary at *path*."""
        if not self._is_started or self._is_shutting_down:
            return
        self._controller.engine_connecting()
        self._process.start(path)

    def restart(self, path: Path | str) -> None:
        """Stop the running engine (if any) and launch *path*."""
        self.cancel_pending_move()
        self._process.stop()
        self.start(path)

    def shutdown(self) -> None:
        """Drop any queued move and stop the engine process."""
        if not self._is_started:
            return
        self._is_shutting_down = True
        self.cancel_pending_move()
        callbacks = self._controller.events.on_engine_move_due
        callbacks[:] = [cb for cb in callbacks if cb != self.schedule_move]
        self._process.stop()
        self._is_started = False

    def schedule_move(self, uci: str) -> None:
        """Queue *uci* to be played after the apply delay."""
        if self._is_shutting_down:
            return
        self._pending_move = uci
        self._move_apply_timer.start(self._MOVE_APPLY_DELAY_MS)

    def cancel_pending_move(self) -> None:
        self._move_apply_timer.stop()
        self._pending_move = None

    # ── Process callbacks ────────────────────────────────────────────────

    def _on_engine_line(self, line: str) -> None:
        if self._on_line is not None:
            self._on_line(line)
        self._controller.handle_line(line)

    def _on_engine_failed(self, message: str) -> None:
        if self._is_shutting_down:
            return
        self.cancel_pending_move()
        self._controller.engine_failed(message)

    def _on_engine_exited(self, code: int) -> None:
        if self._is_shutting_down:
            return
        self.cancel_pending_move()
        self._controller.engine_exited(code)

    def _apply_delayed_move(self) -> None:
        """Apply the pending engine move once the delay has elapsed."""
        if self._is_shutting_down or self._pending_move is None:
            return
        uci, self._pending_move = self._pending_move, None
        if not self._controller.apply_engine_move(uci):
            _LOGGER.info("Engine move %s was not applied", uci)
