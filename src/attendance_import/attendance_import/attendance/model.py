from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceStatus, ImportFormat


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Một ngày chấm công đã chuẩn hoá từ file."""

    employee_code: str
    date: date
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    shift_code: Optional[str] = None
    work_factor: Optional[Decimal] = None
    total_hours: Optional[Decimal] = None
    day_of_week_label: Optional[str] = None
    employee_name: Optional[str] = None
    source: ImportFormat = ImportFormat.GENERIC
    row_ref: int = 0


@dataclass(frozen=True)
class ClassifiedDay:
    status: AttendanceStatus
    overtime_hours: Decimal = Decimal("0")
    warnings: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class PersistedAttendanceDay:
    """Read-model của bảng attendance_days (khoá duy nhất employee_id + work_date)."""

    employee_id: int
    work_date: date
    status: AttendanceStatus
    overtime_hours: Decimal
    shift_label: Optional[str] = None
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    work_value: Optional[Decimal] = None
    day_of_week: Optional[str] = None
