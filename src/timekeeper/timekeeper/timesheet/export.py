from __future__ import annotations

import io
from typing import Sequence

import pandas as pd

from ..core.enums import DayStatus
from .model import EmployeeRecord

DETAIL_COLUMNS = [
    "Mã NV",
    "Họ Tên",
    "Phòng Ban",
    "Ca",
    "Ngày",
    "Giờ Vào",
    "Giờ Ra",
    "Đi Trễ (phút)",
    "Trạng thái",
    "Ghi chú",
    "Dữ liệu gốc",
]

SUMMARY_COLUMNS = ["Mã NV", "Họ Tên", "Phòng Ban", "Ca", "Tổng đi trễ (phút)", "Lỗi log"]

EXCEL_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
EXPORT_FILENAME = "KetQuaChamCong.xlsx"


def build_export_rows(records: Sequence[EmployeeRecord]) -> list[dict]:
    """Flatten records to one row per day; absent days with no raw data are skipped."""
    rows: list[dict] = []
    for emp in records:
        for day in emp.attendance:
            if day.status == DayStatus.ABSENT and not day.raw_input:
                continue
            rows.append(
                {
                    "Mã NV": emp.id,
                    "Họ Tên": emp.name,
                    "Phòng Ban": emp.department,
                    "Ca": emp.shift,
                    "Ngày": day.day,
                    "Giờ Vào": day.check_in or "",
                    "Giờ Ra": day.check_out or "",
                    "Đi Trễ (phút)": day.late_minutes,
                    "Trạng thái": day.status.value,
                    "Ghi chú": ", ".join(day.note),
                    "Dữ liệu gốc": day.raw_input.replace("\n", " "),
                }
            )
    return rows


def build_summary_rows(records: Sequence[EmployeeRecord]) -> list[dict]:
    return [
        {
            "Mã NV": emp.id,
            "Họ Tên": emp.name,
            "Phòng Ban": emp.department,
            "Ca": emp.shift,
            "Tổng đi trễ (phút)": emp.total_late_minutes,
            "Lỗi log": emp.total_errors,
        }
        for emp in records
    ]


def write_excel(records: Sequence[EmployeeRecord]) -> io.BytesIO:
    """Write the export workbook in memory (không lưu ra ổ cứng)."""
    detail = pd.DataFrame(build_export_rows(records), columns=DETAIL_COLUMNS)
    summary = pd.DataFrame(build_summary_rows(records), columns=SUMMARY_COLUMNS)

    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        detail.to_excel(writer, index=False, sheet_name="ChamCong")
        summary.to_excel(writer, index=False, sheet_name="TongHop")
    output.seek(0)
    return output
