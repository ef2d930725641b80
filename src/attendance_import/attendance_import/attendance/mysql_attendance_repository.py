from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

import mysql.connector

from ..core.enums import AttendanceStatus
from ..core.exceptions import PersistenceFailure
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import PersistedAttendanceDay
from .repository import AttendanceRepository

log = logging.getLogger(__name__)


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert_attendance_day(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        overtime_hours: Decimal,
        shift_label: Optional[str] = None,
        check_in: Optional[datetime] = None,
        check_out: Optional[datetime] = None,
        work_value: Optional[Decimal] = None,
        day_of_week: Optional[str] = None,
    ) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO attendance_days(
                        employee_id, work_date, status, overtime_hours, shift_label,
                        check_in_time, check_out_time, work_value, day_of_week
                    )
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    ON DUPLICATE KEY UPDATE
                        status=VALUES(status),
                        overtime_hours=VALUES(overtime_hours),
                        shift_label=VALUES(shift_label),
                        check_in_time=VALUES(check_in_time),
                        check_out_time=VALUES(check_out_time),
                        work_value=VALUES(work_value),
                        day_of_week=VALUES(day_of_week)
                    """,
                    (
                        int(employee_id),
                        work_date,
                        status.value,
                        overtime_hours,
                        shift_label,
                        check_in,
                        check_out,
                        work_value,
                        day_of_week,
                    ),
                )
        except mysql.connector.Error as e:
            log.warning("upsert failed employee_id=%s date=%s: %s", employee_id, work_date, e)
            raise PersistenceFailure(f"Lỗi ghi dữ liệu chấm công: {e}") from e

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[PersistedAttendanceDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, work_date, status, overtime_hours, shift_label,
                       check_in_time, check_out_time, work_value, day_of_week
                FROM attendance_days
                WHERE employee_id=%s AND work_date=%s
                """,
                (int(employee_id), work_date),
            )
            r = fetchone(cur)
            if not r:
                return None
            return PersistedAttendanceDay(
                employee_id=int(r["employee_id"]),
                work_date=r["work_date"],
                status=AttendanceStatus(r["status"]),
                overtime_hours=Decimal(str(r.get("overtime_hours") or 0)),
                shift_label=r.get("shift_label"),
                check_in=r.get("check_in_time"),
                check_out=r.get("check_out_time"),
                work_value=Decimal(str(r["work_value"])) if r.get("work_value") is not None else None,
                day_of_week=r.get("day_of_week"),
            )
