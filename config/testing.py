SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

DEFAULT_START = "08:00"
SHIFT_STARTS = {"Ca1": "07:00"}
EMPLOYEE_STARTS = {}

MAX_CONTENT_LENGTH = 2 * 1024 * 1024
