from __future__ import annotations

from decimal import Decimal
from typing import Callable, Optional

from ...core.enums import AttendanceStatus
from .base import ClassificationRule, DayFacts, StatusDecision

Threshold = tuple[Callable[[Decimal], bool], AttendanceStatus]


class ThresholdStrategy(ClassificationRule):
    """Classify from one numeric field through an ordered threshold table."""

    def __init__(self, field: str, thresholds: tuple[Threshold, ...]):
        self._field = field
        self._thresholds = thresholds

    def decide(self, facts: DayFacts) -> Optional[StatusDecision]:
        value = getattr(facts, self._field)
        if value is None:
            return None
        for predicate, status in self._thresholds:
            if predicate(value):
                return StatusDecision(status)
        return None


WORK_FACTOR_THRESHOLDS: tuple[Threshold, ...] = (
    (lambda v: v == 0, AttendanceStatus.ABSENT),
    (lambda v: v < Decimal("0.5"), AttendanceStatus.PRESENT_HALF),
    (lambda v: v >= Decimal("0.5"), AttendanceStatus.PRESENT_FULL),
)

TOTAL_HOURS_THRESHOLDS: tuple[Threshold, ...] = (
    (lambda v: v == 0, AttendanceStatus.ABSENT),
    (lambda v: v < 4, AttendanceStatus.PRESENT_HALF),
    (lambda v: v >= 4, AttendanceStatus.PRESENT_FULL),
)


def work_factor_strategy() -> ThresholdStrategy:
    return ThresholdStrategy("work_factor", WORK_FACTOR_THRESHOLDS)


def total_hours_strategy() -> ThresholdStrategy:
    return ThresholdStrategy("total_hours", TOTAL_HOURS_THRESHOLDS)
