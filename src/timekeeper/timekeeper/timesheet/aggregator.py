from __future__ import annotations

from .model import EmployeeHeader, EmployeeRecord, ProcessedDay


class EmployeeAccumulator:
    """Collects the days of one open block and keeps running totals."""

    def __init__(self, header: EmployeeHeader):
        self.header = header
        self._days: list[ProcessedDay] = []
        self.total_late_minutes = 0
        self.total_errors = 0

    def add_day(self, day: ProcessedDay) -> None:
        self._days.append(day)
        self.total_late_minutes += day.late_minutes
        if day.is_error:
            self.total_errors += 1

    def finalize(self) -> EmployeeRecord:
        return EmployeeRecord(
            id=self.header.id,
            name=self.header.name,
            department=self.header.department,
            shift=self.header.shift,
            attendance=tuple(self._days),
            total_late_minutes=self.total_late_minutes,
            total_errors=self.total_errors,
        )


class TimesheetAggregator:
    """Ordered output of finished employee records (input block order)."""

    def __init__(self):
        self._records: list[EmployeeRecord] = []

    def append(self, acc: EmployeeAccumulator) -> EmployeeRecord:
        record = acc.finalize()
        self._records.append(record)
        return record

    @property
    def records(self) -> list[EmployeeRecord]:
        return list(self._records)
