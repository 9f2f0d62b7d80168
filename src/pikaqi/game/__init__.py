"""Game layer — move ledger and the application controller.

Quick start::

    from pikaqi.game import GameController

    ctrl = GameController(send=engine.send)
    ctrl.click(parse_square("h2"))
    ctrl.click(parse_square("e2"))
"""

from pikaqi.game.controller import (
    Activity,
    AppSettings,
    AppState,
    ControllerEvents,
    EngineStatus,
    GameController,
    SelectionState,
)
from pikaqi.game.ledger import MoveLedger, PositionRecord

__all__ = [
    "Activity",
    "AppSettings",
    "AppState",
    "ControllerEvents",
    "EngineStatus",
    "GameController",
    "MoveLedger",
    "PositionRecord",
    "SelectionState",
]
