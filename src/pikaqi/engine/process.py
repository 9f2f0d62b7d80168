"""Process host: runs the engine binary and exchanges text lines with it."""

from __future__ import annotations

import logging
from pathlib import Path

from PyQt6.QtCore import QObject, QProcess, pyqtSignal

from pikaqi.engine.protocol import format_quit, format_uci

_LOGGER = logging.getLogger(__name__)


class EngineProcess(QObject):
    """Wraps a :class:`QProcess` speaking the UCI line protocol.

    Signals:
        line_received(str): One complete stdout line (without newline).
        started(): The process is running and ``uci`` has been sent.
        failed(str): The process could not be started.
        exited(int): The process ended, with its exit code.
    """

    line_received = pyqtSignal(str)
    started = pyqtSignal()
    failed = pyqtSignal(str)
    exited = pyqtSignal(int)

    _QUIT_GRACE_MS = 500

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._process = QProcess(self)
        self._stdout_buffer = b""
        self._program: Path | None = None

        self._process.readyReadStandardOutput.connect(self._on_stdout)
        self._process.readyReadStandardError.connect(self._on_stderr)
        self._process.started.connect(self._on_started)
        self._process.errorOccurred.connect(self._on_error)
        self._process.finished.connect(self._on_finished)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def program(self) -> Path | None:
        return self._program

    def is_running(self) -> bool:
        return self._process.state() == QProcess.ProcessState.Running

    def start(self, path: Path | str) -> None:
        """Spawn the engine; if it already runs, re-send ``uci``."""
        if self.is_running():
            _LOGGER.info("Engine already running; re-initialising UCI")
            self.send(format_uci())
            return

        program = Path(path)
        self._program = program
        self._stdout_buffer = b""
        _LOGGER.info("Starting engine: %s", program)
        self._process.setWorkingDirectory(str(program.parent))
        self._process.start(str(program), [])

    def send(self, command: str) -> bool:
        """Write one command line. Dropped unless the process is running."""
        if not self.is_running():
            _LOGGER.debug("Dropping engine command %r: process not running", command)
            return False
        _LOGGER.debug(">> %s", command)
        self._process.write((command + "\n").encode("utf-8"))
        return True

    def stop(self) -> None:
        """Ask the engine to quit, killing it if it does not comply."""
        if self._process.state() == QProcess.ProcessState.NotRunning:
            return
        self.send(format_quit())
        if not self._process.waitForFinished(self._QUIT_GRACE_MS):
            _LOGGER.warning("Engine did not quit in time; killing it")
            self._process.kill()
            self._process.waitForFinished(self._QUIT_GRACE_MS)

    # ── QProcess callbacks ───────────────────────────────────────────────

    def _on_started(self) -> None:
        self.send(format_uci())
        self.started.emit()

    def _on_stdout(self) -> None:
        self._feed_stdout(bytes(self._process.readAllStandardOutput().data()))

    def _feed_stdout(self, chunk: bytes) -> None:
        # Split raw bytes first: a multi-byte character may straddle chunks.
        self._stdout_buffer += chunk
        *lines, self._stdout_buffer = self._stdout_buffer.split(b"\n")
        for line in lines:
            self._emit_line(line.decode("utf-8", errors="replace"))

    def _on_stderr(self) -> None:
        chunk = bytes(self._process.readAllStandardError().data())
        for line in chunk.decode("utf-8", errors="replace").splitlines():
            if line.strip():
                _LOGGER.warning("Engine stderr: %s", line)

    def _on_error(self, error: QProcess.ProcessError) -> None:
        message = self._process.errorString()
        _LOGGER.error("Engine process error (%s): %s", error.name, message)
        if error == QProcess.ProcessError.FailedToStart:
            self.failed.emit(message)

    def _on_finished(self, exit_code: int, _status: QProcess.ExitStatus) -> None:
        if self._stdout_buffer:
            self._emit_line(self._stdout_buffer.decode("utf-8", errors="replace"))
            self._stdout_buffer = b""
        _LOGGER.info("Engine process exited with code %s", exit_code)
        self.exited.emit(exit_code)

    def _emit_line(self, line: str) -> None:
        text = line.rstrip("\r")
        if not text.strip():
            return
        _LOGGER.debug("<< %s", text)
        self.line_received.emit(text)
