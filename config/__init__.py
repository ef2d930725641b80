import importlib
import os
from types import ModuleType


def get_settings_module() -> str:
    # Lấy giá trị môi trường từ biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "config.production"

    if env in {"test", "testing"}:
        return "config.testing"

    return "config.development"


def load_settings() -> ModuleType:
    return importlib.import_module(get_settings_module())


def env_list(name: str, default: str) -> tuple[str, ...]:
    """Đọc danh sách phân tách bằng dấu phẩy, ví dụ WEEKEND_LABELS=CN,T.7"""
    raw = os.getenv(name, default)
    return tuple(item.strip() for item in raw.split(",") if item.strip())
