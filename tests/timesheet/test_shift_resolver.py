from src.timekeeper.timekeeper.timesheet.model import ShiftConfig
from src.timekeeper.timekeeper.timesheet.shift_resolver import resolve_shift_start


def _config() -> ShiftConfig:
    return ShiftConfig(default_start="08:00", shifts={"S1": "07:00"}, employees={"A": "09:00"})


def test_employee_override_wins_over_shift():
    assert resolve_shift_start(_config(), "A", "S1") == "09:00"


def test_shift_override_when_no_employee_override():
    assert resolve_shift_start(_config(), "B", "S1") == "07:00"


def test_falls_back_to_default_start():
    assert resolve_shift_start(_config(), "B", "S2") == "08:00"


def test_lookup_is_exact_match():
    # "a" is not "A", "s1" is not "S1"
    assert resolve_shift_start(_config(), "a", "s1") == "08:00"
