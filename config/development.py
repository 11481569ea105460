import os

from . import parse_start_map

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()

DEFAULT_START = os.getenv("DEFAULT_START", "08:00")
SHIFT_STARTS = parse_start_map(os.getenv("SHIFT_STARTS", "Ca1=07:00"))
EMPLOYEE_STARTS = parse_start_map(os.getenv("EMPLOYEE_STARTS", ""))

MAX_CONTENT_LENGTH = int(os.getenv("MAX_UPLOAD_MB", "16")) * 1024 * 1024
