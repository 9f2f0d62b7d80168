"""Tests for EngineSession wiring between the process and the controller."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QObject, pyqtSignal

from pikaqi.core.types import parse_square
from pikaqi.game.controller import AppSettings, EngineStatus, GameController
from pikaqi.ui.engine_session import EngineSession


class _FakeProcess(QObject):
    line_received = pyqtSignal(str)
    started = pyqtSignal()
    failed = pyqtSignal(str)
    exited = pyqtSignal(int)

    def __init__(self) -> None:
        super().__init__()
        self.sent: list[str] = []
        self.started_paths: list[Path | str] = []
        self.stop_calls = 0

    def start(self, path: Path | str) -> None:
        self.started_paths.append(path)

    def stop(self) -> None:
        self.stop_calls += 1

    def send(self, command: str) -> bool:
        self.sent.append(command)
        return True


def _session(
    settings: AppSettings | None = None,
) -> tuple[EngineSession, GameController, _FakeProcess, list[str]]:
    process = _FakeProcess()
    controller = GameController(send=process.send, settings=settings)
    log: list[str] = []
    session = EngineSession(controller=controller, process=process, on_line=log.append)  # type: ignore[arg-type]
    session.setup()
    return session, controller, process, log


def test_start_marks_connecting_and_launches() -> None:
    session, controller, process, _ = _session()
    controller.engine_failed("boom")

    session.start("/opt/pikafish")

    assert controller.state.engine_status == EngineStatus.CONNECTING
    assert process.started_paths == ["/opt/pikafish"]


def test_lines_reach_log_and_controller() -> None:
    session, controller, process, log = _session()
    process.line_received.emit("uciok")

    assert log == ["uciok"]
    assert controller.state.engine_ready
    assert process.sent == ["setoption name MultiPV value 3", "isready"]


def test_engine_move_is_applied_after_delay() -> None:
    session, controller, process, _ = _session(AppSettings(play_vs_engine=True))
    process.line_received.emit("uciok")
    controller.click(parse_square("h2"))
    controller.click(parse_square("e2"))

    process.line_received.emit("bestmove h9g7")
    assert session.pending_move == "h9g7"
    assert controller.ledger.uci_moves == ["h2e2"]

    session._apply_delayed_move()

    assert session.pending_move is None
    assert controller.ledger.uci_moves == ["h2e2", "h9g7"]


def test_cancel_pending_move() -> None:
    session, controller, _, _ = _session()
    session.schedule_move("h9g7")
    session.cancel_pending_move()
    session._apply_delayed_move()
    assert session.pending_move is None
    assert len(controller.ledger) == 0


def test_failure_cancels_pending_move() -> None:
    session, controller, process, _ = _session()
    session.schedule_move("h9g7")

    process.failed.emit("not found")

    assert session.pending_move is None
    assert controller.state.engine_status == EngineStatus.FAILED


def test_exit_reported_to_controller() -> None:
    session, controller, process, _ = _session()
    process.exited.emit(3)
    assert controller.state.engine_status == EngineStatus.EXITED


def test_shutdown_ignores_late_exit_and_detaches() -> None:
    session, controller, process, _ = _session()
    process.line_received.emit("uciok")

    session.shutdown()
    process.exited.emit(0)

    assert process.stop_calls == 1
    assert controller.state.engine_status == EngineStatus.READY
    assert session.schedule_move not in controller.events.on_engine_move_due


def test_restart_stops_then_starts() -> None:
    session, _, process, _ = _session()
    session.schedule_move("h9g7")

    session.restart("/new/pikafish")

    assert process.stop_calls == 1
    assert process.started_paths == ["/new/pikafish"]
    assert session.pending_move is None


def test_setup_is_idempotent() -> None:
    session, controller, _, _ = _session()
    session.setup()
    assert controller.events.on_engine_move_due.count(session.schedule_move) == 1
