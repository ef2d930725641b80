from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from config import get_settings_module, load_settings

from .container import build_container
from .core.exceptions import PersistenceFailure, StructuralDetectionFailure
from .database.bootstrap import apply_schema
from .database.connection import DBConfig
from .imports.model import Period

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_STRUCTURE = 2

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="attendance-import",
        description="Import file chấm công (CSV/Excel) vào bảng attendance_days.",
    )
    parser.add_argument("file", type=Path, help="File xuất từ máy chấm công (.csv, .xlsx, .xls)")
    parser.add_argument(
        "--format",
        dest="format_hint",
        choices=("monthly", "daily"),
        default=None,
        help="Gợi ý bố cục: 'monthly' cho bảng công tháng",
    )
    parser.add_argument("--month", type=int, default=None, help="Tháng của kỳ chấm công (1-12)")
    parser.add_argument("--year", type=int, default=None, help="Năm của kỳ chấm công")
    parser.add_argument("--user", dest="acting_user", default=None, help="Người thực hiện import")
    return parser


def _period_from_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> Optional[Period]:
    if args.month is None and args.year is None:
        return None
    if args.month is None or args.year is None:
        parser.error("--month và --year phải đi cùng nhau")
    if not 1 <= args.month <= 12:
        parser.error("--month phải nằm trong khoảng 1-12")
    return Period(month=args.month, year=args.year)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv(override=False)
    settings = load_settings()
    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    parser = build_parser()
    args = parser.parse_args(argv)
    period = _period_from_args(parser, args)

    db_config = dict(getattr(settings, "DB_CONFIG"))
    log.debug(
        "settings=%s db=%s@%s:%s/%s",
        get_settings_module(),
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    try:
        content = args.file.read_bytes()
    except OSError as e:
        print(f"Không đọc được file: {e}", file=sys.stderr)
        return EXIT_USAGE

    if getattr(settings, "AUTO_INIT_DB", False):
        if SCHEMA_PATH.exists():
            apply_schema(DBConfig.from_mapping(db_config), schema_path=SCHEMA_PATH)
        else:
            log.warning("AUTO_INIT_DB is set but %s is missing, skipping schema", SCHEMA_PATH)

    container = build_container(db_config=db_config, settings=settings)
    try:
        report = container.import_service.import_file(
            content,
            filename=args.file.name,
            format_hint=args.format_hint,
            acting_user=args.acting_user,
            period=period,
        )
    except StructuralDetectionFailure as e:
        print(json.dumps({"error": str(e)}, ensure_ascii=False), file=sys.stderr)
        return EXIT_STRUCTURE
    except PersistenceFailure as e:
        # Registry unreachable: nothing was imported.
        print(json.dumps({"error": str(e)}, ensure_ascii=False), file=sys.stderr)
        return EXIT_USAGE

    print(json.dumps(report.to_dict(), ensure_ascii=False, indent=2))
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
