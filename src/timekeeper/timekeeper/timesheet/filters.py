from __future__ import annotations

from typing import Optional, Sequence

from .model import EmployeeRecord


def filter_by_name(records: Sequence[EmployeeRecord], term: Optional[str]) -> list[EmployeeRecord]:
    """Case-insensitive search on employee name; blank term keeps everything."""
    needle = (term or "").strip().lower()
    if not needle:
        return list(records)
    return [r for r in records if needle in r.name.lower()]
