from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .strategies.absent_strategy import AbsentStrategy
from .strategies.base import DayStrategy
from .strategies.single_punch_strategy import SinglePunchStrategy
from .strategies.span_strategy import SpanStrategy
from .strategies.unparsable_strategy import UnparsableStrategy


@dataclass
class DayStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on the cell content."""

    def for_cell(self, *, raw_input: str, punches: Sequence[int]) -> DayStrategy:
        if not raw_input:
            return AbsentStrategy()
        if not punches:
            return UnparsableStrategy()
        if len(punches) == 1:
            return SinglePunchStrategy()
        return SpanStrategy()
