"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# 12:00 is the fixed AM/PM boundary for every classification decision.
NOON_MINUTES = 12 * 60

# Every sheet is read as 31 day slots, whatever the calendar month.
DAYS_IN_MONTH = 31

DEFAULT_START = "08:00"

NOTE_FORMAT_ERROR = "format error"
NOTE_MISSING_CHECKOUT = "missing checkout"
NOTE_MISSING_CHECKIN = "missing checkin"
NOTE_ALL_AM = "all logs AM"
NOTE_ALL_PM = "all logs PM"
NOTE_LATE_TEMPLATE = "late {minutes} minutes"

NO_DATA_MESSAGE = "Không tìm thấy dữ liệu hợp lệ. Vui lòng kiểm tra cấu trúc file (ID: -> Dữ liệu)."
