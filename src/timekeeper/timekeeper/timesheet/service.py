from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from typing import BinaryIO, Optional, Sequence

from ..core.enums import DayStatus
from .model import EmployeeRecord, ShiftConfig
from .reader import read_matrix
from .scanner import scan_rows

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TimesheetSummary:
    employees: int
    total_late_minutes: int
    total_errors: int
    days_by_status: dict[str, int]

    def to_dict(self) -> dict:
        return {
            "employees": self.employees,
            "total_late_minutes": self.total_late_minutes,
            "total_errors": self.total_errors,
            "days_by_status": dict(self.days_by_status),
        }


class TimesheetService:
    def __init__(self, default_config: Optional[ShiftConfig] = None):
        self._default_config = default_config or ShiftConfig()

    @property
    def default_config(self) -> ShiftConfig:
        return self._default_config

    def parse_rows(self, rows: Sequence[Sequence[str]], config: Optional[ShiftConfig] = None) -> list[EmployeeRecord]:
        """Parse a string matrix into employee records, in block order.

        An empty result means no ``ID:`` block was recognised; callers treat it
        as a layout mismatch rather than "no employees".
        """
        records = scan_rows(rows, config or self._default_config)
        if not records:
            logger.warning("No employee block recognised in %d rows", len(rows))
        else:
            logger.info(
                "Parsed %d employee blocks (late=%d min, errors=%d)",
                len(records),
                sum(r.total_late_minutes for r in records),
                sum(r.total_errors for r in records),
            )
        return records

    def parse_upload(self, stream: BinaryIO, filename: str, config: Optional[ShiftConfig] = None) -> list[EmployeeRecord]:
        rows = read_matrix(stream, filename)
        logger.info("Decoded %s: %d rows", filename, len(rows))
        return self.parse_rows(rows, config)

    @staticmethod
    def summarize(records: Sequence[EmployeeRecord]) -> TimesheetSummary:
        counts = Counter(day.status.value for r in records for day in r.attendance)
        return TimesheetSummary(
            employees=len(records),
            total_late_minutes=sum(r.total_late_minutes for r in records),
            total_errors=sum(r.total_errors for r in records),
            days_by_status={s.value: counts.get(s.value, 0) for s in DayStatus},
        )
