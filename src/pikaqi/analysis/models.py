"""Data models for multi-variation engine analysis."""

from __future__ import annotations

from dataclasses import dataclass

from pikaqi.engine.protocol import Score

CONTINUATION_LENGTH = 5


@dataclass(slots=True, frozen=True)
class AnalysisLine:
    """One ranked principal variation, scored from Red's point of view."""

    rank: int
    depth: str | None
    score: Score | None
    pv: tuple[str, ...]

    @property
    def best_move(self) -> str | None:
        return self.pv[0] if self.pv else None

    @property
    def continuation(self) -> tuple[str, ...]:
        """The moves following the best move, at most five."""
        return self.pv[1 : 1 + CONTINUATION_LENGTH]

    @property
    def eval_text(self) -> str:
        """Score as shown to the user: ``+0.35``, ``-1.20`` or ``M3``."""
        if self.score is None:
            return ""
        if self.score.is_mate:
            return f"M{abs(self.score.value)}"
        pawns = self.score.value / 100
        return f"{pawns:+.2f}"

    @property
    def is_negative(self) -> bool:
        return self.score is not None and self.score.value < 0
