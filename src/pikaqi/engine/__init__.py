"""Engine package: UCI line protocol and the engine process host."""

from pikaqi.engine.process import EngineProcess
from pikaqi.engine.protocol import (
    BestMove,
    EngineMessage,
    EngineReady,
    Score,
    SearchInfo,
    SyncAck,
    Unrecognized,
    format_go_movetime,
    format_isready,
    format_multipv,
    format_position,
    format_quit,
    format_setoption,
    format_stop,
    format_uci,
    parse_line,
)

__all__ = [
    "BestMove",
    "EngineMessage",
    "EngineProcess",
    "EngineReady",
    "Score",
    "SearchInfo",
    "SyncAck",
    "Unrecognized",
    "format_go_movetime",
    "format_isready",
    "format_multipv",
    "format_position",
    "format_quit",
    "format_setoption",
    "format_stop",
    "format_uci",
    "parse_line",
]
