from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from ...core.enums import DayStatus


@dataclass(frozen=True)
class DayDecision:
    status: DayStatus
    check_in: Optional[int] = None
    check_out: Optional[int] = None
    note: Optional[str] = None


class DayStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a day's status from its punches."""

    @abstractmethod
    def decide(self, punches: Sequence[int]) -> DayDecision:
        """``punches`` are minutes since midnight, sorted ascending."""
        raise NotImplementedError
