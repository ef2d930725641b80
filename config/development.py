import os

from config import env_list

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

# File CSV xuất từ máy chấm công thường có BOM
IMPORT_ENCODING = os.getenv("IMPORT_ENCODING", "utf-8-sig")
WEEKEND_LABELS = env_list("WEEKEND_LABELS", "CN,T.7")
STANDARD_WORK_HOURS = int(os.getenv("STANDARD_WORK_HOURS", "8"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, the CLI applies database/schema.sql before importing (idempotent)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
