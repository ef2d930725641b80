from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ...core.enums import AttendanceStatus

_SECONDS_PER_HOUR = Decimal(3600)


@dataclass(frozen=True)
class DayFacts:
    """Everything the classification rules may look at for one day."""

    shift_code: Optional[str] = None
    work_factor: Optional[Decimal] = None
    total_hours: Optional[Decimal] = None
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    is_weekend: bool = False

    @property
    def has_both_times(self) -> bool:
        return self.check_in is not None and self.check_out is not None

    @property
    def worked_hours(self) -> Optional[Decimal]:
        if not self.has_both_times:
            return None
        seconds = Decimal(int((self.check_out - self.check_in).total_seconds()))
        return seconds / _SECONDS_PER_HOUR


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    warnings: tuple[str, ...] = field(default_factory=tuple)


class ClassificationRule(ABC):
    """Strategy Pattern: one step of the status cascade.

    decide() returns None when the rule has nothing to say about the day, so
    the next rule in the chain gets a turn.
    """

    @abstractmethod
    def decide(self, facts: DayFacts) -> Optional[StatusDecision]:
        raise NotImplementedError


def format_hours(hours: Decimal) -> str:
    return f"{hours:.1f}"
