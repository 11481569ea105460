from src.timekeeper.timekeeper.core.enums import DayStatus
from src.timekeeper.timekeeper.timesheet.header import find_day_one_column, is_header_candidate, parse_employee_header
from src.timekeeper.timekeeper.timesheet.model import EmployeeHeader, ShiftConfig
from src.timekeeper.timekeeper.timesheet.scanner import BlockScanner, ScanState, scan_rows

CONFIG = ShiftConfig(default_start="08:00", shifts={"Ca1": "07:00"})
WIDTH = 34


def _pad(cells):
    return list(cells) + [""] * (WIDTH - len(cells))


def header_row(text, col=0):
    return _pad([""] * col + [text])


def day_index_row(offset):
    return _pad([""] * offset + [str(d) for d in range(1, 32)])


def data_row(offset, days):
    return _pad([""] * offset + [days.get(d, "") for d in range(1, 32)])


def test_parse_employee_header():
    header = parse_employee_header("ID:37 Tên:Xuanpx Phòng ban:Hành chính Ca:Ca1")
    assert header == EmployeeHeader(id="37", name="Xuanpx", department="Hành chính", shift="Ca1")


def test_parse_employee_header_is_case_insensitive_and_trims():
    header = parse_employee_header("id: 12   TÊN:Nguyễn Văn A  phòng ban:Kế toán   ca: Ca2 ")
    assert header == EmployeeHeader(id="12", name="Nguyễn Văn A", department="Kế toán", shift="Ca2")


def test_header_trigger_without_full_pattern():
    assert is_header_candidate("  id:40 Tên:NoDept")
    assert parse_employee_header("ID:40 Tên:NoDept") is None


def test_find_day_one_column_needs_two_next_to_one():
    assert find_day_one_column(["", "", "1", "2", "3"]) == 2
    assert find_day_one_column(["1", "", "2"]) is None
    assert find_day_one_column(["07:49", "1", "2"]) == 1
    assert find_day_one_column([]) is None


def test_single_block_with_day_index_row():
    rows = [
        _pad(["BẢNG CHẤM CÔNG THÁNG 10"]),
        header_row("ID:37 Tên:Xuanpx Phòng ban:Hành chính Ca:Ca1"),
        day_index_row(1),
        data_row(1, {1: "07:49\n17:05", 2: "07:10", 3: "abc", 5: "06:55 16:00"}),
    ]

    records = scan_rows(rows, CONFIG)

    assert len(records) == 1
    emp = records[0]
    assert (emp.id, emp.name, emp.department, emp.shift) == ("37", "Xuanpx", "Hành chính", "Ca1")
    assert len(emp.attendance) == 31
    assert [d.day for d in emp.attendance] == list(range(1, 32))

    # Ca1 starts at 07:00
    assert emp.attendance[0].status == DayStatus.VALID
    assert emp.attendance[0].late_minutes == 49
    assert emp.attendance[1].status == DayStatus.MISSING_OUT
    assert emp.attendance[1].late_minutes == 10
    assert emp.attendance[2].status == DayStatus.INVALID
    assert emp.attendance[3].status == DayStatus.ABSENT
    assert emp.attendance[4].late_minutes == 0

    assert emp.total_late_minutes == 59
    assert emp.total_errors == 2


def test_two_blocks_keep_order_and_independent_offsets():
    rows = [
        header_row("ID:37 Tên:Xuanpx Phòng ban:Hành chính Ca:Ca1"),
        day_index_row(2),
        data_row(2, {1: "07:30 17:00"}),
        header_row("ID:38 Tên:Lan Phòng ban:Kế toán Ca:Ca2"),
        data_row(0, {1: "08:30 17:00", 31: "09:00"}),
    ]

    records = scan_rows(rows, CONFIG)

    assert [r.id for r in records] == ["37", "38"]
    first, second = records
    assert first.attendance[0].check_in == "07:30"
    assert first.total_late_minutes == 30
    assert first.total_errors == 0

    # No day-index row in the second block: day 1 is column 0.
    assert second.attendance[0].check_in == "08:30"
    assert second.attendance[30].status == DayStatus.MISSING_OUT
    assert second.total_late_minutes == 30 + 60
    assert second.total_errors == 1


def test_header_found_in_first_non_empty_cell():
    rows = [
        header_row("ID:39 Tên:Minh Phòng ban:Kho Ca:Ca1", col=3),
        data_row(0, {1: "07:00 19:00"}),
    ]

    records = scan_rows(rows, CONFIG)

    assert len(records) == 1
    assert records[0].name == "Minh"


def test_malformed_header_is_skipped_with_its_data():
    rows = [
        header_row("ID:40 Tên:NoDept"),
        day_index_row(0),
        data_row(0, {1: "07:00 19:00"}),
    ]

    assert scan_rows(rows, CONFIG) == []


def test_last_day_index_row_wins():
    rows = [
        header_row("ID:41 Tên:Hoa Phòng ban:Kho Ca:Ca1"),
        day_index_row(0),
        day_index_row(2),
        data_row(2, {1: "07:00 19:00"}),
    ]

    records = scan_rows(rows, CONFIG)

    assert records[0].attendance[0].status == DayStatus.VALID
    assert records[0].attendance[0].raw_input == "07:00 19:00"


def test_short_data_row_pads_with_absent_days():
    rows = [
        ["ID:42 Tên:Tuan Phòng ban:IT Ca:Ca1"],
        ["07:00 17:00", "07:05 17:00"],
    ]

    records = scan_rows(rows, CONFIG)

    emp = records[0]
    assert len(emp.attendance) == 31
    assert emp.attendance[1].late_minutes == 5
    assert all(d.status == DayStatus.ABSENT for d in emp.attendance[2:])


def test_rows_outside_blocks_are_ignored():
    rows = [
        _pad(["Công ty ABC"]),
        day_index_row(0),
        data_row(0, {1: "07:00"}),
        _pad([""]),
    ]

    assert scan_rows(rows, CONFIG) == []


def test_scanner_state_transitions():
    scanner = BlockScanner(CONFIG)
    assert scanner.state == ScanState.SEARCHING

    assert scanner.feed(header_row("ID:43 Tên:An Phòng ban:IT Ca:Ca1")) is None
    assert scanner.state == ScanState.IN_BLOCK

    assert scanner.feed(day_index_row(0)) is None
    assert scanner.state == ScanState.IN_BLOCK

    record = scanner.feed(data_row(0, {}))
    assert record is not None
    assert record.total_errors == 0
    assert scanner.state == ScanState.SEARCHING


def test_empty_input_gives_no_records():
    assert scan_rows([], CONFIG) == []


def test_header_row_inside_open_block_is_read_as_data_row():
    rows = [
        header_row("ID:1 Tên:A Phòng ban:X Ca:Ca1"),
        header_row("ID:2 Tên:B Phòng ban:X Ca:Ca1"),
        data_row(0, {1: "07:00 17:00"}),
    ]

    records = scan_rows(rows, CONFIG)

    # A's block takes B's header row as its data row; B's data row falls outside any block.
    assert [r.name for r in records] == ["A"]
    assert records[0].attendance[0].status == DayStatus.INVALID
    assert records[0].attendance[0].raw_input == "ID:2 Tên:B Phòng ban:X Ca:Ca1"
    assert records[0].total_errors == 1
