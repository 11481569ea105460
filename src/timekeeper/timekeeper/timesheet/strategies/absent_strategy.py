from __future__ import annotations

from typing import Sequence

from ...core.enums import DayStatus
from .base import DayDecision, DayStrategy


class AbsentStrategy(DayStrategy):
    """Empty cell: no punches, not an error."""

    def decide(self, punches: Sequence[int]) -> DayDecision:
        return DayDecision(status=DayStatus.ABSENT)
