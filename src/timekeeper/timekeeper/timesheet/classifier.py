from __future__ import annotations

from typing import Optional

from ..common.time_utils import minutes_to_time
from ..core.constants import NOTE_LATE_TEMPLATE
from .cell_parser import extract_punches
from .factory import DayStrategyFactory
from .model import ProcessedDay

_default_factory = DayStrategyFactory()


def classify_day(
    day: int,
    raw_input: str,
    shift_start_minutes: int,
    *,
    factory: Optional[DayStrategyFactory] = None,
) -> ProcessedDay:
    """Turn one day cell into a ProcessedDay.

    Lateness is computed whenever there is a check-in, independently of the
    status, so a ``missing_out`` or ``invalid`` day may still be late.
    """
    factory = factory or _default_factory
    raw_input = raw_input.strip()
    punches = extract_punches(raw_input) if raw_input else []

    strategy = factory.for_cell(raw_input=raw_input, punches=punches)
    decision = strategy.decide(punches)

    notes: list[str] = [decision.note] if decision.note else []
    late_minutes = 0
    if decision.check_in is not None:
        late_minutes = max(0, decision.check_in - shift_start_minutes)
        if late_minutes:
            notes.append(NOTE_LATE_TEMPLATE.format(minutes=late_minutes))

    return ProcessedDay(
        day=day,
        raw_input=raw_input,
        check_in=minutes_to_time(decision.check_in) if decision.check_in is not None else None,
        check_out=minutes_to_time(decision.check_out) if decision.check_out is not None else None,
        late_minutes=late_minutes,
        note=tuple(notes),
        status=decision.status,
    )
