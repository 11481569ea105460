from __future__ import annotations

from .model import ShiftConfig


def resolve_shift_start(config: ShiftConfig, employee_name: str, shift_name: str) -> str:
    """Expected check-in time for an employee as ``HH:MM``.

    Priority: employee override, then shift override, then the default start.
    Both lookups are exact matches.
    """
    if employee_name in config.employees:
        return config.employees[employee_name]
    if shift_name in config.shifts:
        return config.shifts[shift_name]
    return config.default_start
