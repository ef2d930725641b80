from __future__ import annotations

from dataclasses import dataclass
from types import ModuleType
from typing import Optional

from .attendance.factory import ClassifierFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .core.constants import DEFAULT_IMPORT_ENCODING, DEFAULT_WEEKEND_LABELS, STANDARD_WORK_HOURS
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .imports.service import ImportService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    attendance_repo: MySQLAttendanceRepository

    import_service: ImportService


def build_container(*, db_config: dict, settings: Optional[ModuleType] = None) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)

    import_service = ImportService(
        attendance_repo,
        employees_repo,
        classifiers=ClassifierFactory(
            standard_hours=int(getattr(settings, "STANDARD_WORK_HOURS", STANDARD_WORK_HOURS)),
        ),
        weekend_labels=getattr(settings, "WEEKEND_LABELS", DEFAULT_WEEKEND_LABELS),
        encoding=getattr(settings, "IMPORT_ENCODING", DEFAULT_IMPORT_ENCODING),
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        import_service=import_service,
    )
