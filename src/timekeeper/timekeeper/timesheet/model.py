from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..common.validators import require_hhmm, require_non_empty
from ..core.constants import DEFAULT_START
from ..core.enums import DayStatus
from ..core.exceptions import ValidationError


def _frozen(mapping: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ShiftConfig:
    """Cấu hình giờ bắt đầu ca: mặc định, theo tên ca, theo tên nhân viên.

    Immutable value passed to every parse call.
    """

    default_start: str = DEFAULT_START
    shifts: Mapping[str, str] = field(default_factory=dict)
    employees: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "shifts", _frozen(self.shifts))
        object.__setattr__(self, "employees", _frozen(self.employees))

    def __hash__(self):
        return hash((self.default_start, frozenset(self.shifts.items()), frozenset(self.employees.items())))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], fallback: Optional["ShiftConfig"] = None) -> "ShiftConfig":
        """Build a validated config from JSON-like input (UI boundary).

        Keys missing from ``data`` are taken from ``fallback``.
        """
        if not isinstance(data, Mapping):
            raise ValidationError("Cấu hình không hợp lệ")
        base = fallback or cls()

        default_start = data.get("defaultStart", data.get("default_start", base.default_start))
        shifts = data.get("shifts", base.shifts)
        employees = data.get("employees", base.employees)
        if not isinstance(shifts, Mapping) or not isinstance(employees, Mapping):
            raise ValidationError("Cấu hình không hợp lệ")

        return cls(
            default_start=require_hhmm(default_start, "Giờ làm mặc định"),
            shifts={
                require_non_empty(str(name), "Tên ca"): require_hhmm(start, f"Giờ bắt đầu ca {name}")
                for name, start in shifts.items()
            },
            employees={
                require_non_empty(str(name), "Tên nhân viên"): require_hhmm(start, f"Giờ bắt đầu của {name}")
                for name, start in employees.items()
            },
        )

    def to_dict(self) -> dict:
        return {
            "default_start": self.default_start,
            "shifts": dict(self.shifts),
            "employees": dict(self.employees),
        }


@dataclass(frozen=True)
class EmployeeHeader:
    """Thông tin nhân viên đọc từ dòng tiêu đề ``ID:... Tên:... Phòng ban:... Ca:...``."""

    id: str
    name: str
    department: str
    shift: str


@dataclass(frozen=True)
class ProcessedDay:
    """Kết quả xử lý một ô chấm công (một ngày)."""

    day: int
    raw_input: str
    check_in: Optional[str]
    check_out: Optional[str]
    late_minutes: int
    note: tuple[str, ...]
    status: DayStatus

    @property
    def is_error(self) -> bool:
        return self.status.is_error

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "raw_input": self.raw_input,
            "check_in": self.check_in,
            "check_out": self.check_out,
            "late_minutes": self.late_minutes,
            "note": list(self.note),
            "status": self.status.value,
        }


@dataclass(frozen=True)
class EmployeeRecord:
    """Bảng công một tháng của một nhân viên (31 ngày, theo thứ tự)."""

    id: str
    name: str
    department: str
    shift: str
    attendance: tuple[ProcessedDay, ...]
    total_late_minutes: int
    total_errors: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "department": self.department,
            "shift": self.shift,
            "attendance": [d.to_dict() for d in self.attendance],
            "total_late_minutes": self.total_late_minutes,
            "total_errors": self.total_errors,
        }
