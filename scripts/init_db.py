from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import load_settings

from src.attendance_import.attendance_import.database.bootstrap import apply_schema
from src.attendance_import.attendance_import.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    config = DBConfig.from_mapping(settings.DB_CONFIG)

    executed = apply_schema(config, schema_path=REPO_ROOT / "database" / "schema.sql")
    print(f"OK: Applied schema.sql -> {config.user}@{config.host}:{config.port}/{config.database} ({executed} statements)")


if __name__ == "__main__":
    main()
