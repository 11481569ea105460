import os


def get_settings_module() -> str:
    # Lấy giá trị môi trường từ biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Kiểm tra môi trường Production
    if env in {"prod", "production"}:
        return "config.production"

    # 2. Kiểm tra môi trường Testing
    if env in {"test", "testing"}:
        return "config.testing"

    # 3. Mặc định trả về Development cho tất cả các trường hợp còn lại
    return "config.development"


def parse_start_map(value: str) -> dict:
    """Parse ``"Ca1=07:00,Ca2=13:30"`` into ``{"Ca1": "07:00", "Ca2": "13:30"}``."""
    result = {}
    for item in (value or "").split(","):
        if "=" not in item:
            continue
        name, start = item.split("=", 1)
        if name.strip():
            result[name.strip()] = start.strip()
    return result
