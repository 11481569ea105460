from __future__ import annotations

from typing import Sequence

from ...core.constants import NOTE_FORMAT_ERROR
from ...core.enums import DayStatus
from .base import DayDecision, DayStrategy


class UnparsableStrategy(DayStrategy):
    """Cell has content but no time token."""

    def decide(self, punches: Sequence[int]) -> DayDecision:
        return DayDecision(status=DayStatus.INVALID, note=NOTE_FORMAT_ERROR)
