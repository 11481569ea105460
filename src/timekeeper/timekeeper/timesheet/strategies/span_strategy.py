from __future__ import annotations

from typing import Sequence

from ...core.constants import NOON_MINUTES, NOTE_ALL_AM, NOTE_ALL_PM
from ...core.enums import DayStatus
from .base import DayDecision, DayStrategy


class SpanStrategy(DayStrategy):
    """Two or more punches: earliest is check-in, latest is check-out.

    The day is only valid when the punches straddle noon.
    """

    def decide(self, punches: Sequence[int]) -> DayDecision:
        first, last = punches[0], punches[-1]
        if last < NOON_MINUTES:
            return DayDecision(status=DayStatus.INVALID, check_in=first, check_out=last, note=NOTE_ALL_AM)
        if first >= NOON_MINUTES:
            return DayDecision(status=DayStatus.INVALID, check_in=first, check_out=last, note=NOTE_ALL_PM)
        return DayDecision(status=DayStatus.VALID, check_in=first, check_out=last)
