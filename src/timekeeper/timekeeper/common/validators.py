from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_HHMM = re.compile(r"^(\d{1,2}):(\d{2})$")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return value.strip()


def require_hhmm(value: str, field_name: str) -> str:
    """Validate a wall-clock time and return it zero-padded as ``HH:MM``."""
    match = _HHMM.match(str(value or "").strip())
    if not match:
        raise ValidationError(f"{field_name} phải có dạng HH:MM")
    hour, minute = int(match.group(1)), int(match.group(2))
    if hour > 23 or minute > 59:
        raise ValidationError(f"{field_name} phải có dạng HH:MM")
    return f"{hour:02d}:{minute:02d}"
