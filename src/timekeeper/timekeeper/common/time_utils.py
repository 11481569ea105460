from __future__ import annotations


def time_to_minutes(value: str) -> int:
    """Parse ``H:MM``/``HH:MM`` into minutes since midnight.

    Values without a colon count as midnight.
    """
    parts = value.split(":")
    if len(parts) < 2:
        return 0
    return int(parts[0]) * 60 + int(parts[1])


def minutes_to_time(total_minutes: int) -> str:
    """Format minutes since midnight as zero-padded ``HH:MM``."""
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"
