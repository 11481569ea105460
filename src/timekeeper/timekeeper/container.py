from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from .core.constants import DEFAULT_START
from .timesheet.model import ShiftConfig
from .timesheet.service import TimesheetService


@dataclass(frozen=True)
class Container:
    default_config: ShiftConfig
    timesheet_service: TimesheetService


def build_container(
    *,
    default_start: str = DEFAULT_START,
    shift_starts: Optional[Mapping[str, str]] = None,
    employee_starts: Optional[Mapping[str, str]] = None,
) -> Container:
    default_config = ShiftConfig.from_dict(
        {
            "default_start": default_start,
            "shifts": dict(shift_starts or {}),
            "employees": dict(employee_starts or {}),
        }
    )
    timesheet_service = TimesheetService(default_config)

    return Container(
        default_config=default_config,
        timesheet_service=timesheet_service,
    )
