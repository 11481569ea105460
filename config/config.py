import os

from . import parse_start_map


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "khoa_bi_mat_cua_nhom"

    # Giờ bắt đầu ca mặc định khi không có cấu hình riêng
    DEFAULT_START = os.environ.get("DEFAULT_START", "08:00")
    SHIFT_STARTS = parse_start_map(os.environ.get("SHIFT_STARTS", "Ca1=07:00"))
    EMPLOYEE_STARTS = parse_start_map(os.environ.get("EMPLOYEE_STARTS", ""))

    # Giới hạn dung lượng file tải lên (MB)
    MAX_UPLOAD_MB = int(os.environ.get("MAX_UPLOAD_MB", "16"))
    MAX_CONTENT_LENGTH = MAX_UPLOAD_MB * 1024 * 1024

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
