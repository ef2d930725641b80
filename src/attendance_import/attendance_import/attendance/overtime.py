from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import ROUND_HALF_UP, Decimal

from ..core.constants import GRID_HOURS_PER_WORK_VALUE, STANDARD_WORK_HOURS
from ..core.enums import AttendanceStatus
from .strategies.base import DayFacts

_ZERO = Decimal("0")
_CENTS = Decimal("0.01")


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for overtime hours)."""

    def overtime_hours(self, facts: DayFacts, status: AttendanceStatus) -> Decimal:
        if status == AttendanceStatus.ABSENT:
            return _ZERO
        return max(self._hours(facts), _ZERO).quantize(_CENTS, rounding=ROUND_HALF_UP)

    @abstractmethod
    def _hours(self, facts: DayFacts) -> Decimal:
        raise NotImplementedError


class TimeSpanOvertime(OvertimeCalculator):
    """Standard rule: (out - in) - standard day, only when both times exist."""

    def __init__(self, standard_hours: int = STANDARD_WORK_HOURS):
        self._standard_hours = Decimal(standard_hours)

    def _hours(self, facts: DayFacts) -> Decimal:
        worked = facts.worked_hours
        if worked is None:
            return _ZERO
        return worked - self._standard_hours


class WeekendGridOvertime(OvertimeCalculator):
    """Grid rule: weekend work value times a fixed day-equivalent."""

    def __init__(self, hours_per_value: int = GRID_HOURS_PER_WORK_VALUE):
        self._hours_per_value = Decimal(hours_per_value)

    def _hours(self, facts: DayFacts) -> Decimal:
        if not facts.is_weekend or facts.work_factor is None:
            return _ZERO
        return facts.work_factor * self._hours_per_value
