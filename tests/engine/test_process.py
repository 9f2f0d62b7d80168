"""Tests for EngineProcess that do not need a real engine binary."""

from __future__ import annotations

from pathlib import Path

import pytest
from PyQt6.QtCore import QProcess

from pikaqi.engine.process import EngineProcess


@pytest.fixture
def process(qapp: object) -> EngineProcess:
    del qapp
    return EngineProcess()


def test_send_dropped_when_not_running(process: EngineProcess) -> None:
    assert not process.is_running()
    assert process.send("uci") is False


def test_stop_without_start_is_noop(process: EngineProcess) -> None:
    process.stop()
    assert not process.is_running()


def test_exit_flushes_partial_line(process: EngineProcess) -> None:
    received: list[str] = []
    codes: list[int] = []
    process.line_received.connect(received.append)
    process.exited.connect(codes.append)

    process._stdout_buffer = b"bestmove a0a1\r"
    process._on_finished(0, QProcess.ExitStatus.NormalExit)

    assert received == ["bestmove a0a1"]
    assert codes == [0]
    assert process._stdout_buffer == b""


def test_lines_split_across_chunks(process: EngineProcess) -> None:
    received: list[str] = []
    process.line_received.connect(received.append)

    process._feed_stdout(b"readyok\r\nbest")
    assert received == ["readyok"]
    process._feed_stdout(b"move h2e2\n")
    assert received == ["readyok", "bestmove h2e2"]


def test_multibyte_character_split_across_chunks(process: EngineProcess) -> None:
    received: list[str] = []
    process.line_received.connect(received.append)
    data = "info string 引擎\n".encode("utf-8")

    process._feed_stdout(data[:14])
    process._feed_stdout(data[14:])

    assert received == ["info string 引擎"]
    assert process._stdout_buffer == b""


def test_exit_decodes_multibyte_tail(process: EngineProcess) -> None:
    received: list[str] = []
    process.line_received.connect(received.append)
    data = "info string 象棋".encode("utf-8")

    process._feed_stdout(data[:13])
    process._feed_stdout(data[13:])
    assert received == []
    process._on_finished(0, QProcess.ExitStatus.NormalExit)

    assert received == ["info string 象棋"]


def test_blank_lines_are_not_emitted(process: EngineProcess) -> None:
    received: list[str] = []
    process.line_received.connect(received.append)
    process._emit_line("   ")
    process._emit_line("\r")
    assert received == []


@pytest.mark.slow
def test_missing_binary_reports_failure(
    process: EngineProcess, qapp: object, tmp_path: Path
) -> None:
    failures: list[str] = []
    process.failed.connect(failures.append)

    process.start(tmp_path / "no-such-engine")
    process._process.waitForStarted(2000)
    qapp.processEvents()  # type: ignore[attr-defined]

    assert failures
    assert process.program == tmp_path / "no-such-engine"
