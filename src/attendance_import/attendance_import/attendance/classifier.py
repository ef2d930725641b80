from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from .model import ClassifiedDay
from .overtime import OvertimeCalculator
from .strategies.base import ClassificationRule, DayFacts, StatusDecision


class StatusClassifier:
    """Runs an ordered rule chain; the first rule with a decision wins."""

    def __init__(self, rules: Sequence[ClassificationRule], overtime: OvertimeCalculator):
        self._rules = tuple(rules)
        self._overtime = overtime

    def classify(
        self,
        *,
        shift_code: Optional[str] = None,
        work_factor: Optional[Decimal] = None,
        total_hours: Optional[Decimal] = None,
        check_in: Optional[datetime] = None,
        check_out: Optional[datetime] = None,
        is_weekend: bool = False,
    ) -> ClassifiedDay:
        facts = DayFacts(
            shift_code=shift_code,
            work_factor=work_factor,
            total_hours=total_hours,
            check_in=check_in,
            check_out=check_out,
            is_weekend=is_weekend,
        )
        decision = self._decide(facts)
        return ClassifiedDay(
            status=decision.status,
            overtime_hours=self._overtime.overtime_hours(facts, decision.status),
            warnings=decision.warnings,
        )

    def _decide(self, facts: DayFacts) -> StatusDecision:
        for rule in self._rules:
            decision = rule.decide(facts)
            if decision is not None:
                return decision
        return StatusDecision(AttendanceStatus.ABSENT, ("Không xác định được trạng thái, đánh dấu vắng mặt",))
