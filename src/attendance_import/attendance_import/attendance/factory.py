from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import GRID_HOURS_PER_WORK_VALUE, STANDARD_WORK_HOURS
from ..core.enums import ImportFormat
from .classifier import StatusClassifier
from .overtime import TimeSpanOvertime, WeekendGridOvertime
from .strategies.grid_value_strategy import GridWorkValueStrategy
from .strategies.shift_code_strategy import ShiftCodeStrategy
from .strategies.threshold_strategy import total_hours_strategy, work_factor_strategy
from .strategies.time_span_strategy import TimeSpanStrategy


@dataclass
class ClassifierFactory:
    """Factory Pattern: choose the rule chain and overtime rule per file layout.

    Grid files carry a work value and a weekday label but never clock times,
    so they get their own chain instead of the generic cascade.
    """

    standard_hours: int = STANDARD_WORK_HOURS
    grid_hours_per_value: int = GRID_HOURS_PER_WORK_VALUE

    def for_format(self, fmt: ImportFormat) -> StatusClassifier:
        if fmt == ImportFormat.MONTHLY_GRID:
            return self.grid()
        return self.generic()

    def generic(self) -> StatusClassifier:
        return StatusClassifier(
            rules=(
                ShiftCodeStrategy(),
                work_factor_strategy(),
                total_hours_strategy(),
                TimeSpanStrategy(),
            ),
            overtime=TimeSpanOvertime(self.standard_hours),
        )

    def grid(self) -> StatusClassifier:
        return StatusClassifier(
            rules=(GridWorkValueStrategy(), TimeSpanStrategy()),
            overtime=WeekendGridOvertime(self.grid_hours_per_value),
        )
