import os

from config import env_list

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_db"),
}

IMPORT_ENCODING = os.getenv("IMPORT_ENCODING", "utf-8-sig")
WEEKEND_LABELS = env_list("WEEKEND_LABELS", "CN,T.7")
STANDARD_WORK_HOURS = int(os.getenv("STANDARD_WORK_HOURS", "8"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
