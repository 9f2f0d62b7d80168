"""GameController — the single owner of application state.

Coordinates: MoveLedger, MoveGenerator, AnalysisTable and the engine's
command stream. Emits events via simple callbacks so the UI / tests can
subscribe; outbound engine commands go through an injected ``send``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from pikaqi.analysis import AnalysisTable
from pikaqi.core.enums import Side
from pikaqi.core.move_rules import MoveGenerator
from pikaqi.core.types import Square, parse_move
from pikaqi.engine.protocol import (
    BestMove,
    EngineReady,
    SearchInfo,
    SyncAck,
    format_go_movetime,
    format_isready,
    format_multipv,
    format_position,
    format_stop,
    parse_line,
)
from pikaqi.game.ledger import MoveLedger

_LOGGER = logging.getLogger(__name__)


# ── State ────────────────────────────────────────────────────────────────────


class EngineStatus(IntEnum):
    """Lifecycle of the engine connection as shown to the user."""

    CONNECTING = auto()
    READY = auto()
    FAILED = auto()
    EXITED = auto()


class Activity(IntEnum):
    """What the engine is currently busy with on the user's behalf."""

    IDLE = auto()
    ENGINE_MOVE = auto()
    HINT = auto()


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_legal_moves: bool = True

    # Play
    play_vs_engine: bool = False
    engine_side: Side = Side.BLACK
    auto_analyze: bool = True

    # Engine
    engine_path: str = ""
    think_time_ms: int = 1000
    multipv: int = 3


@dataclass
class SelectionState:
    """Selected square and its pseudo-legal destinations."""

    square: Square | None = None
    targets: tuple[Square, ...] = ()

    def clear(self) -> None:
        self.square = None
        self.targets = ()


@dataclass
class AppState:
    ledger: MoveLedger = field(default_factory=MoveLedger)
    selection: SelectionState = field(default_factory=SelectionState)
    settings: AppSettings = field(default_factory=AppSettings)
    engine_ready: bool = False
    engine_status: EngineStatus = EngineStatus.CONNECTING
    activity: Activity = Activity.IDLE
    flipped: bool = False
    highlighted_move: tuple[Square, Square] | None = None
    highlighted_rank: int | None = None

    @property
    def thinking(self) -> bool:
        """Cooperative lock: board clicks are ignored while set."""
        return self.activity != Activity.IDLE

    @property
    def side_to_move(self) -> Side:
        return self.ledger.position.side_to_move


# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[AppState], None]
AnalysisCallback = Callable[[AnalysisTable], None]
EngineStatusCallback = Callable[[EngineStatus, str], None]
EngineMoveCallback = Callable[[str], None]


@dataclass
class ControllerEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_board_changed: list[StateCallback] = field(default_factory=list)
    on_analysis_changed: list[AnalysisCallback] = field(default_factory=list)
    on_status_changed: list[StateCallback] = field(default_factory=list)
    on_engine_status_changed: list[EngineStatusCallback] = field(default_factory=list)
    on_engine_move_due: list[EngineMoveCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Turns UI actions and engine output into state changes and commands.

    Everything runs on the UI thread. The engine is fire-and-forget: a
    ``stop`` precedes every search but no acknowledgement is awaited.
    """

    __slots__ = ("_state", "_analysis", "_send", "events", "__weakref__")

    def __init__(
        self,
        send: Callable[[str], object],
        settings: AppSettings | None = None,
    ) -> None:
        self._state = AppState(settings=settings or AppSettings())
        self._analysis = AnalysisTable(slots=self._state.settings.multipv)
        self._send = send
        self.events = ControllerEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def ledger(self) -> MoveLedger:
        return self._state.ledger

    @property
    def analysis(self) -> AnalysisTable:
        return self._analysis

    @property
    def settings(self) -> AppSettings:
        return self._state.settings

    # ── Board interaction ────────────────────────────────────────────────

    def click(self, square: Square) -> bool:
        """Select, move or deselect. Returns True when a move was played."""
        state = self._state
        if state.thinking:
            return False

        selection = state.selection
        if selection.square is not None and square in selection.targets:
            origin = selection.square
            selection.clear()
            self._play(origin, square)
            return True

        piece = state.ledger.position.board.get(square)
        if piece is not None and piece.side == state.side_to_move:
            selection.square = square
            selection.targets = tuple(
                MoveGenerator(state.ledger.position.board).destinations(square)
            )
        else:
            selection.clear()
        self._emit_board()
        return False

    def new_game(self) -> None:
        self._state.ledger.reset()
        self._state.selection.clear()
        self._state.highlighted_move = None
        self._state.highlighted_rank = None
        self._analysis.clear()
        self._emit_board()
        self._emit_analysis()
        self._emit_status()
        self._after_move()

    def undo(self) -> bool:
        if not self._state.ledger.undo():
            return False
        self._state.selection.clear()
        self._emit_board()
        self._emit_status()
        self._after_move()
        return True

    def goto_move(self, index: int) -> None:
        """Replay the game up to and including move *index* (0-based)."""
        self._state.ledger.goto_move(index)
        self._state.selection.clear()
        self._emit_board()
        self._emit_status()
        self._after_move()

    def flip(self) -> None:
        self._state.flipped = not self._state.flipped
        self._emit_board()

    def highlight_pv(self, rank: int) -> None:
        """Point the board arrow at the best move of analysis line *rank*.

        The arrow follows later updates of that line until
        :meth:`clear_highlight` is called.
        """
        self._state.highlighted_rank = rank
        line = self._analysis.line(rank)
        if line is not None:
            self._point_highlight(line.best_move)

    def clear_highlight(self) -> None:
        self._state.highlighted_rank = None
        if self._state.highlighted_move is None:
            return
        self._state.highlighted_move = None
        self._emit_board()

    def update_settings(self, settings: AppSettings) -> None:
        previous = self._state.settings
        self._state.settings = settings
        if settings.multipv != previous.multipv:
            self._analysis = AnalysisTable(slots=settings.multipv)
            self._emit_analysis()
            if self._state.engine_ready:
                self._send(format_multipv(settings.multipv))

    # ── Engine requests ──────────────────────────────────────────────────

    def analyze(self) -> bool:
        """Start a background search on the current position."""
        if not self._state.engine_ready:
            return False
        self._start_search()
        return True

    def hint(self) -> bool:
        if not self._state.engine_ready:
            return False
        self._set_activity(Activity.HINT)
        self._start_search()
        return True

    def request_engine_move(self) -> bool:
        if not self._state.engine_ready:
            return False
        self._set_activity(Activity.ENGINE_MOVE)
        self._start_search()
        return True

    def apply_engine_move(self, uci: str) -> bool:
        """Play *uci* for the engine. Ignored when the origin is empty."""
        try:
            origin, dest = parse_move(uci)
        except ValueError:
            _LOGGER.warning("Engine suggested an unreadable move: %r", uci)
            return False
        if self._state.ledger.position.board.get(origin) is None:
            _LOGGER.warning("Engine move %s starts on an empty square", uci)
            return False
        self._state.selection.clear()
        self._play(origin, dest)
        return True

    # ── Engine output ────────────────────────────────────────────────────

    def engine_connecting(self) -> None:
        self._set_engine_status(EngineStatus.CONNECTING)

    def handle_line(self, line: str) -> None:
        """Dispatch one line of engine output."""
        message = parse_line(line)
        if isinstance(message, EngineReady):
            self._state.engine_ready = True
            self._set_engine_status(EngineStatus.READY)
            self._send(format_multipv(self.settings.multipv))
            self._send(format_isready())
        elif isinstance(message, SyncAck):
            self._after_move()
        elif isinstance(message, SearchInfo):
            line = self._analysis.update(message, self._state.side_to_move)
            if line is not None:
                self._emit_analysis()
                if line.rank == self._state.highlighted_rank:
                    self._point_highlight(line.best_move)
        elif isinstance(message, BestMove):
            self._on_bestmove(message)

    def engine_failed(self, message: str) -> None:
        self._engine_gone()
        self._set_engine_status(EngineStatus.FAILED, message)

    def engine_exited(self, code: int) -> None:
        self._engine_gone()
        self._set_engine_status(EngineStatus.EXITED, str(code))

    # ── Internal helpers ─────────────────────────────────────────────────

    def _play(self, origin: Square, dest: Square) -> None:
        self._state.ledger.apply(origin, dest)
        self._emit_board()
        self._emit_status()
        self._after_move()

    def _after_move(self) -> None:
        if self._engine_to_move():
            self.request_engine_move()
        elif self.settings.auto_analyze:
            self.analyze()

    def _engine_to_move(self) -> bool:
        settings = self.settings
        return (
            settings.play_vs_engine
            and self._state.side_to_move == settings.engine_side
        )

    def _on_bestmove(self, message: BestMove) -> None:
        # TODO: tag searches with a generation counter so a bestmove from a
        # search superseded by stop/go is not played.
        _LOGGER.debug("Best move %s (ponder %s)", message.move, message.ponder)
        self._set_activity(Activity.IDLE)
        if message.move is not None and self._engine_to_move():
            self._emit_engine_move(message.move)

    def _point_highlight(self, uci: str | None) -> None:
        if uci is None:
            return
        try:
            move = parse_move(uci)
        except ValueError:
            _LOGGER.debug("Cannot highlight PV move %r", uci)
            return
        if move == self._state.highlighted_move:
            return
        self._state.highlighted_move = move
        self._emit_board()

    def _start_search(self) -> None:
        self._send(format_stop())
        self._send(format_position(self._state.ledger.uci_moves))
        self._send(format_go_movetime(self.settings.think_time_ms))

    def _engine_gone(self) -> None:
        self._state.engine_ready = False
        self._set_activity(Activity.IDLE)

    def _set_activity(self, activity: Activity) -> None:
        if self._state.activity == activity:
            return
        self._state.activity = activity
        self._emit_status()

    def _set_engine_status(self, status: EngineStatus, detail: str = "") -> None:
        self._state.engine_status = status
        for cb in self.events.on_engine_status_changed:
            cb(status, detail)

    def _emit_board(self) -> None:
        for cb in self.events.on_board_changed:
            cb(self._state)

    def _emit_status(self) -> None:
        for cb in self.events.on_status_changed:
            cb(self._state)

    def _emit_analysis(self) -> None:
        for cb in self.events.on_analysis_changed:
            cb(self._analysis)

    def _emit_engine_move(self, uci: str) -> None:
        for cb in self.events.on_engine_move_due:
            cb(uci)
