from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Trạng thái ngày công chuẩn hoá lưu trong CSDL."""

    ABSENT = "absent"
    PRESENT_FULL = "present_full"
    PRESENT_HALF = "present_half"
    PAID_LEAVE = "paid_leave"
    SICK_LEAVE = "sick_leave"
    MEETING_FULL = "meeting_full"
    WEEKEND_OVERTIME = "weekend_overtime"


class ImportFormat(str, Enum):
    """Bố cục file xuất từ máy chấm công."""

    MONTHLY_GRID = "monthly_grid"
    DETAIL_BLOCK = "detail_block"
    GENERIC = "generic"


class EmployeeOutcome(str, Enum):
    """Kết quả tổng hợp theo nhân viên trong một lần import."""

    SUCCEEDED = "succeeded"
    PARTIALLY_FAILED = "partially_failed"
    FULLY_FAILED = "fully_failed"
