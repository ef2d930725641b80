from __future__ import annotations

from decimal import Decimal
from typing import Optional

from ...core.enums import AttendanceStatus
from .base import ClassificationRule, DayFacts, StatusDecision, format_hours

_FULL_DAY_HOURS = Decimal(6)
_HALF_DAY_HOURS = Decimal(3)


class TimeSpanStrategy(ClassificationRule):
    """Last resort: derive the status from check-in/check-out."""

    def decide(self, facts: DayFacts) -> Optional[StatusDecision]:
        if facts.check_in is None and facts.check_out is None:
            return StatusDecision(
                AttendanceStatus.ABSENT,
                ("Không có thời gian check-in và check-out, đánh dấu vắng mặt",),
            )
        if not facts.has_both_times:
            return StatusDecision(AttendanceStatus.PRESENT_HALF, ("Thiếu thời gian check-in hoặc check-out",))

        hours = facts.worked_hours
        if hours >= _FULL_DAY_HOURS:
            return StatusDecision(AttendanceStatus.PRESENT_FULL)
        if hours >= _HALF_DAY_HOURS:
            return StatusDecision(AttendanceStatus.PRESENT_HALF)
        return StatusDecision(
            AttendanceStatus.PRESENT_HALF,
            (f"Giờ làm việc quá ít ({format_hours(hours)}h), đánh dấu làm nửa ngày",),
        )
