from __future__ import annotations

from typing import Sequence

from ...core.constants import NOON_MINUTES, NOTE_MISSING_CHECKIN, NOTE_MISSING_CHECKOUT
from ...core.enums import DayStatus
from .base import DayDecision, DayStrategy


class SinglePunchStrategy(DayStrategy):
    """One punch: a morning punch is the check-in, an afternoon punch the check-out."""

    def decide(self, punches: Sequence[int]) -> DayDecision:
        punch = punches[0]
        if punch < NOON_MINUTES:
            return DayDecision(status=DayStatus.MISSING_OUT, check_in=punch, note=NOTE_MISSING_CHECKOUT)
        return DayDecision(status=DayStatus.MISSING_IN, check_out=punch, note=NOTE_MISSING_CHECKIN)
