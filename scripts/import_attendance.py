"""Chạy import từ bản checkout (không cần pip install).

    python scripts/import_attendance.py bang_cong_06_2024.xlsx --format monthly --user admin
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.attendance_import.attendance_import.main import main

if __name__ == "__main__":
    raise SystemExit(main())
