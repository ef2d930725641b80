from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Protocol

from ..core.enums import AttendanceStatus
from .model import PersistedAttendanceDay


class AttendanceRepository(Protocol):
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
        """Insert or update the day keyed by (employee_id, work_date).

        Re-applying the same inputs must leave the stored row unchanged.
        Raises PersistenceFailure when the write fails.
        """

        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[PersistedAttendanceDay]:
        raise NotImplementedError
