from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from .base import ClassificationRule, DayFacts, StatusDecision


class GridWorkValueStrategy(ClassificationRule):
    """Monthly grid cells: one work value per day, weekend work is overtime."""

    def decide(self, facts: DayFacts) -> Optional[StatusDecision]:
        value = facts.work_factor
        if value is None:
            return None
        if value > 0 and facts.is_weekend:
            return StatusDecision(AttendanceStatus.WEEKEND_OVERTIME)
        if value >= 1:
            return StatusDecision(AttendanceStatus.PRESENT_FULL)
        if value > 0:
            return StatusDecision(AttendanceStatus.PRESENT_HALF)
        return StatusDecision(AttendanceStatus.ABSENT)
