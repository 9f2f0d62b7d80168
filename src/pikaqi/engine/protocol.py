"""UCI line protocol: parse engine output, format engine commands.

Parsing is stateless and total: every input line maps to exactly one
message shape and malformed input degrades to :class:`Unrecognized` or to a
:class:`SearchInfo` with fewer fields. Scores are left relative to the side
to move; renormalising them is the consumer's job.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

# ── Inbound message shapes ───────────────────────────────────────────────────


@dataclass(slots=True, frozen=True)
class Score:
    """Engine score: centipawns, or a mate distance when *is_mate*."""

    value: int
    is_mate: bool = False

    def negated(self) -> Score:
        return Score(-self.value, self.is_mate)


@dataclass(slots=True, frozen=True)
class EngineReady:
    """``uciok``"""


@dataclass(slots=True, frozen=True)
class SyncAck:
    """``readyok``"""


@dataclass(slots=True, frozen=True)
class SearchInfo:
    """An ``info ... pv ...`` line."""

    rank: int = 1
    depth: str | None = None
    score: Score | None = None
    pv: tuple[str, ...] = field(default_factory=tuple)


@dataclass(slots=True, frozen=True)
class BestMove:
    """``bestmove <move> [ponder <move>]``; *move* is None for ``(none)``."""

    move: str | None
    ponder: str | None = None


@dataclass(slots=True, frozen=True)
class Unrecognized:
    raw: str


EngineMessage = EngineReady | SyncAck | SearchInfo | BestMove | Unrecognized

_NO_MOVE = "(none)"


def parse_line(line: str) -> EngineMessage:
    """Classify one line of engine output."""
    text = line.strip()
    if text == "uciok":
        return EngineReady()
    if text == "readyok":
        return SyncAck()

    tokens = text.split()
    if not tokens:
        return Unrecognized(line)
    if tokens[0] == "info" and "pv" in tokens:
        return _parse_info(tokens)
    if tokens[0] == "bestmove":
        return _parse_bestmove(tokens, line)
    return Unrecognized(line)


def _parse_info(tokens: list[str]) -> SearchInfo:
    rank = 1
    depth: str | None = None
    score: Score | None = None
    pv: tuple[str, ...] = ()

    i = 1
    while i < len(tokens):
        token = tokens[i]
        if token == "pv":
            pv = tuple(tokens[i + 1 :])
            break
        if token == "multipv":
            rank = _int_or(_token_at(tokens, i + 1), rank)
            i += 2
            continue
        if token == "depth":
            depth = _token_at(tokens, i + 1)
            i += 2
            continue
        if token == "score":
            kind = _token_at(tokens, i + 1)
            value = _int_or(_token_at(tokens, i + 2), None)
            if kind in ("cp", "mate") and value is not None:
                score = Score(value, is_mate=kind == "mate")
            i += 3
            continue
        i += 1

    return SearchInfo(rank=rank, depth=depth, score=score, pv=pv)


def _parse_bestmove(tokens: list[str], line: str) -> EngineMessage:
    if len(tokens) < 2:
        return Unrecognized(line)
    move = None if tokens[1] == _NO_MOVE else tokens[1]
    ponder = None
    if len(tokens) >= 4 and tokens[2] == "ponder":
        ponder = tokens[3]
    return BestMove(move=move, ponder=ponder)


def _token_at(tokens: list[str], index: int) -> str | None:
    return tokens[index] if index < len(tokens) else None


def _int_or(token: str | None, default: int | None) -> int | None:
    if token is None:
        return default
    try:
        return int(token)
    except ValueError:
        return default


# ── Outbound commands ────────────────────────────────────────────────────────


def format_uci() -> str:
    return "uci"


def format_isready() -> str:
    return "isready"


def format_setoption(name: str, value: object) -> str:
    text = f"setoption name {name} value {value}"
    _check_single_line(text)
    return text


def format_multipv(count: int) -> str:
    if count < 1:
        raise ValueError(f"MultiPV count must be >= 1: {count}")
    return format_setoption("MultiPV", count)


def format_stop() -> str:
    return "stop"


def format_position(moves: Iterable[str] = ()) -> str:
    """``position startpos`` optionally followed by the played moves."""
    move_list = list(moves)
    if not move_list:
        return "position startpos"
    text = f"position startpos moves {' '.join(move_list)}"
    _check_single_line(text)
    return text


def format_go_movetime(milliseconds: int) -> str:
    if milliseconds <= 0:
        raise ValueError(f"Move time must be positive: {milliseconds}")
    return f"go movetime {milliseconds}"


def format_quit() -> str:
    return "quit"


def _check_single_line(text: str) -> None:
    if "\n" in text or "\r" in text:
        raise ValueError(f"Command must be a single line: {text!r}")
