from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import parse_date, parse_time
from ..common.text_utils import parse_decimal
from ..core.enums import ImportFormat
from ..core.exceptions import InvalidDate, InvalidRecord
from .model import ParsedRow, Period


class RecordNormalizer:
    """ParsedRow -> AttendanceRecord. Raises InvalidRecord subclasses per row."""

    def normalize(self, row: ParsedRow, *, period: Optional[Period] = None) -> AttendanceRecord:
        code = row.get("employee_code")
        if not code:
            raise InvalidRecord("Thiếu mã nhân viên")

        if row.source == ImportFormat.MONTHLY_GRID:
            return self._grid_record(row, code, period)

        work_date = parse_date(row.get("date"))
        if period and (work_date.year, work_date.month) != (period.year, period.month):
            raise InvalidDate(
                f"Ngày {work_date:%d/%m/%Y} nằm ngoài kỳ chấm công {period.month:02d}/{period.year}"
            )

        # Detail blocks only emit rows that carry both punches, so a bad token there is an error.
        times_required = row.source == ImportFormat.DETAIL_BLOCK
        return AttendanceRecord(
            employee_code=code,
            date=work_date,
            check_in=parse_time(row.get("check_in"), work_date, required=times_required),
            check_out=parse_time(row.get("check_out"), work_date, required=times_required),
            shift_code=row.get("shift") or None,
            work_factor=parse_decimal(row.get("work_factor")),
            total_hours=parse_decimal(row.get("total_hours")),
            day_of_week_label=row.get("day_of_week") or None,
            employee_name=row.get("employee_name") or None,
            source=row.source,
            row_ref=row.row_ref,
        )

    @staticmethod
    def _grid_record(row: ParsedRow, code: str, period: Optional[Period]) -> AttendanceRecord:
        if period is None:
            raise InvalidDate("Không xác định được tháng/năm của bảng công")
        day = row.get("day")
        try:
            work_date = date(period.year, period.month, int(day))
        except ValueError:
            raise InvalidDate(f"Ngày {day} không hợp lệ trong tháng {period.month:02d}/{period.year}")

        return AttendanceRecord(
            employee_code=code,
            date=work_date,
            work_factor=parse_decimal(row.get("work_value")),
            day_of_week_label=row.get("day_of_week") or None,
            employee_name=row.get("employee_name") or None,
            source=row.source,
            row_ref=row.row_ref,
        )
