from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Chất lượng dữ liệu chấm công của một ngày."""

    VALID = "valid"
    MISSING_IN = "missing_in"
    MISSING_OUT = "missing_out"
    INVALID = "invalid"
    ABSENT = "absent"

    @property
    def is_error(self) -> bool:
        return self in (DayStatus.INVALID, DayStatus.MISSING_IN, DayStatus.MISSING_OUT)
