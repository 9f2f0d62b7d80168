"""Fixed-size table of the latest analysis line per variation rank."""

from __future__ import annotations

import logging

from pikaqi.analysis.models import AnalysisLine
from pikaqi.core.enums import Side
from pikaqi.engine.protocol import SearchInfo

_LOGGER = logging.getLogger(__name__)


class AnalysisTable:
    """Keeps up to *slots* analysis lines, replaced wholesale per rank.

    Engine scores arrive relative to the side to move; the table stores
    them from Red's perspective so the display never flips sign between
    plies.
    """

    __slots__ = ("_slots", "_lines", "_depth")

    def __init__(self, slots: int = 3) -> None:
        if slots < 1:
            raise ValueError(f"Analysis table needs at least one slot, got {slots}")
        self._slots = slots
        self._lines: dict[int, AnalysisLine] = {}
        self._depth: str | None = None

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def slots(self) -> int:
        return self._slots

    @property
    def depth(self) -> str | None:
        """Depth reported for the best (rank 1) line."""
        return self._depth

    @property
    def lines(self) -> tuple[AnalysisLine | None, ...]:
        """Lines indexed by ``rank - 1``; empty slots are ``None``."""
        return tuple(self._lines.get(rank) for rank in range(1, self._slots + 1))

    def line(self, rank: int) -> AnalysisLine | None:
        return self._lines.get(rank)

    # ── Mutation ─────────────────────────────────────────────────────────

    def update(self, info: SearchInfo, side_to_move: Side) -> AnalysisLine | None:
        """Store *info* in its rank slot and return the new line.

        Returns ``None`` when the info is ignored (rank out of range or
        no principal variation).
        """
        if not 1 <= info.rank <= self._slots:
            _LOGGER.debug("Ignoring analysis for rank %s", info.rank)
            return None
        if not info.pv:
            return None

        score = info.score
        if score is not None and side_to_move == Side.BLACK:
            score = score.negated()

        line = AnalysisLine(rank=info.rank, depth=info.depth, score=score, pv=info.pv)
        self._lines[info.rank] = line
        if info.rank == 1 and info.depth is not None:
            self._depth = info.depth
        return line

    def clear(self) -> None:
        self._lines.clear()
        self._depth = None
