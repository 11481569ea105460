from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence

from ..common.time_utils import time_to_minutes
from ..core.constants import DAYS_IN_MONTH
from .aggregator import EmployeeAccumulator, TimesheetAggregator
from .classifier import classify_day
from .factory import DayStrategyFactory
from .header import find_day_one_column, first_non_empty, is_header_candidate, parse_employee_header
from .model import EmployeeRecord, ShiftConfig
from .shift_resolver import resolve_shift_start

logger = logging.getLogger(__name__)


class ScanState(str, Enum):
    SEARCHING = "SEARCHING"
    IN_BLOCK = "IN_BLOCK"


class BlockScanner:
    """State machine over the sheet rows.

    Each employee block is one ``ID:`` header row, optionally a day-index row
    (``1, 2, 3, ...``) telling where day 1 sits, then exactly one data row.
    Rows outside a block are ignored.
    """

    def __init__(self, config: ShiftConfig, *, factory: Optional[DayStrategyFactory] = None):
        self._config = config
        self._factory = factory or DayStrategyFactory()
        self._output = TimesheetAggregator()
        self._state = ScanState.SEARCHING
        self._current: Optional[EmployeeAccumulator] = None
        self._day_offset: Optional[int] = None

    @property
    def state(self) -> ScanState:
        return self._state

    def feed(self, row: Sequence[str]) -> Optional[EmployeeRecord]:
        """Consume one row; returns the record when the row closes a block."""
        if self._state == ScanState.SEARCHING:
            self._try_open_block(row)
            return None

        day_one = find_day_one_column(row)
        if day_one is not None:
            # A later day-index row in the same block overwrites the earlier one.
            self._day_offset = day_one
            return None
        return self._consume_data_row(row)

    def scan(self, rows: Sequence[Sequence[str]]) -> list[EmployeeRecord]:
        for row in rows:
            self.feed(row)
        return self._output.records

    def _try_open_block(self, row: Sequence[str]) -> None:
        first = first_non_empty(row)
        if not is_header_candidate(first):
            return
        header = parse_employee_header(first)
        if header is None:
            logger.debug("Skipping malformed employee header: %r", first)
            return
        self._current = EmployeeAccumulator(header)
        self._day_offset = None
        self._state = ScanState.IN_BLOCK

    def _consume_data_row(self, row: Sequence[str]) -> EmployeeRecord:
        acc = self._current
        start = resolve_shift_start(self._config, acc.header.name, acc.header.shift)
        start_minutes = time_to_minutes(start)
        offset = self._day_offset if self._day_offset is not None else 0

        for d in range(DAYS_IN_MONTH):
            col = offset + d
            cell = row[col] if col < len(row) else ""
            acc.add_day(classify_day(d + 1, cell, start_minutes, factory=self._factory))

        record = self._output.append(acc)
        self._current = None
        self._day_offset = None
        self._state = ScanState.SEARCHING
        return record


def scan_rows(rows: Sequence[Sequence[str]], config: ShiftConfig) -> list[EmployeeRecord]:
    """Parse a whole sheet. Each call starts from a fresh scanner."""
    return BlockScanner(config).scan(rows)
