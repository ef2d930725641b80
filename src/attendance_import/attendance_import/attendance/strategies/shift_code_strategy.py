from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional, Union

from ...core.enums import AttendanceStatus
from .base import ClassificationRule, DayFacts, StatusDecision, format_hours

_FULL_DAY_HOURS = Decimal(7)
_HALF_DAY_HOURS = Decimal(2)


def _administrative_day(facts: DayFacts) -> StatusDecision:
    """HC (hành chính): judge by the real check-in/check-out when present."""
    hours = facts.worked_hours
    if hours is None:
        return StatusDecision(AttendanceStatus.PRESENT_FULL)
    if hours >= _FULL_DAY_HOURS:
        return StatusDecision(AttendanceStatus.PRESENT_FULL)
    if hours >= _HALF_DAY_HOURS:
        return StatusDecision(AttendanceStatus.PRESENT_HALF)
    return StatusDecision(
        AttendanceStatus.ABSENT,
        (f"HC nhưng giờ làm việc quá ít ({format_hours(hours)}h), đánh dấu nghỉ cả ngày",),
    )


@dataclass(frozen=True)
class ShiftMarker:
    codes: tuple[str, ...]
    fragments: tuple[str, ...]
    result: Union[AttendanceStatus, Callable[[DayFacts], StatusDecision]]

    def matches(self, shift: str) -> bool:
        return shift in self.codes or any(f in shift for f in self.fragments)

    def decide(self, facts: DayFacts) -> StatusDecision:
        if isinstance(self.result, AttendanceStatus):
            return StatusDecision(self.result)
        return self.result(facts)


# Evaluated top to bottom; first match wins.
SHIFT_MARKERS: tuple[ShiftMarker, ...] = (
    ShiftMarker(codes=("v",), fragments=("nghỉ", "vắng"), result=AttendanceStatus.ABSENT),
    ShiftMarker(codes=("p",), fragments=("phép",), result=AttendanceStatus.PAID_LEAVE),
    ShiftMarker(codes=("s",), fragments=("ốm", "sick"), result=AttendanceStatus.SICK_LEAVE),
    ShiftMarker(codes=("hc",), fragments=("việc", "hành chính"), result=_administrative_day),
    ShiftMarker(codes=("m",), fragments=("meeting", "họp"), result=AttendanceStatus.MEETING_FULL),
)


class ShiftCodeStrategy(ClassificationRule):
    """Vendor shift annotations override every numeric signal."""

    def __init__(self, markers: tuple[ShiftMarker, ...] = SHIFT_MARKERS):
        self._markers = markers

    def decide(self, facts: DayFacts) -> Optional[StatusDecision]:
        shift = (facts.shift_code or "").strip().lower()
        if not shift:
            return None
        for marker in self._markers:
            if marker.matches(shift):
                return marker.decide(facts)
        return None
