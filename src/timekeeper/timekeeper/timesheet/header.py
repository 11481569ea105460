from __future__ import annotations

import re
from typing import Optional, Sequence

from .model import EmployeeHeader

HEADER_TRIGGER = "ID:"

# "ID:37 Tên:Xuanpx Phòng ban:Hành chính Ca:Ca1"
HEADER_PATTERN = re.compile(r"ID:(.*?)\s+Tên:(.*?)\s+Phòng ban:(.*?)\s+Ca:(.*)", re.IGNORECASE)

DAY_ONE = "1"
DAY_TWO = "2"


def first_non_empty(row: Sequence[str]) -> str:
    for cell in row:
        value = cell.strip()
        if value:
            return value
    return ""


def is_header_candidate(cell: str) -> bool:
    return cell.strip().upper().startswith(HEADER_TRIGGER)


def parse_employee_header(cell: str) -> Optional[EmployeeHeader]:
    """Extract id/name/department/shift, or None when the pattern does not match."""
    match = HEADER_PATTERN.search(cell.strip())
    if not match:
        return None
    emp_id, name, department, shift = (g.strip() for g in match.groups())
    return EmployeeHeader(id=emp_id, name=name, department=department, shift=shift)


def find_day_one_column(row: Sequence[str]) -> Optional[int]:
    """Column of day 1 when ``row`` is a day-index row (``1`` followed by ``2``)."""
    for idx in range(len(row) - 1):
        if row[idx].strip() == DAY_ONE and row[idx + 1].strip() == DAY_TWO:
            return idx
    return None
