"""Ví dụ: dùng service layer (không qua Flask).

Đọc một file chấm công và in tổng hợp đi trễ / lỗi log của từng nhân viên.
Chạy: python -m examples.example_usage path/to/ChamCong.xlsx
"""

import importlib
import sys

from config import get_settings_module

from src.timekeeper.timekeeper.container import build_container


def main():
    if len(sys.argv) < 2:
        raise SystemExit("Usage: python -m examples.example_usage <file.xlsx>")
    path = sys.argv[1]

    settings = importlib.import_module(get_settings_module())
    container = build_container(
        default_start=settings.DEFAULT_START,
        shift_starts=settings.SHIFT_STARTS,
        employee_starts=settings.EMPLOYEE_STARTS,
    )

    with open(path, "rb") as f:
        records = container.timesheet_service.parse_upload(f, path)

    if not records:
        raise SystemExit("Không tìm thấy dữ liệu hợp lệ. Vui lòng kiểm tra cấu trúc file (ID: -> Dữ liệu).")

    for r in records:
        print(f"{r.id:>5}  {r.name:<25} {r.department:<20} trễ={r.total_late_minutes:>4}p  lỗi={r.total_errors}")
    print(container.timesheet_service.summarize(records).to_dict())


if __name__ == "__main__":
    main()
