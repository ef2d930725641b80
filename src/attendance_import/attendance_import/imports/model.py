from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.enums import EmployeeOutcome, ImportFormat


@dataclass(frozen=True)
class SourceRow:
    """One physical row of the uploaded file (1-based number, raw cells)."""

    number: int
    cells: tuple[str, ...]

    def cell(self, index: int) -> str:
        if 0 <= index < len(self.cells):
            return self.cells[index]
        return ""

    @property
    def line(self) -> str:
        return ",".join(self.cells)


@dataclass(frozen=True)
class Period:
    month: int
    year: int

    def to_dict(self) -> dict:
        return {"month": self.month, "year": self.year}


@dataclass(frozen=True)
class ParsedRow:
    """Raw record emitted by a parser, keyed by canonical field names."""

    row_ref: int
    source: ImportFormat
    fields: dict[str, str]

    def get(self, key: str) -> str:
        return (self.fields.get(key) or "").strip()


@dataclass(frozen=True)
class ParseResult:
    source: ImportFormat
    rows: tuple[ParsedRow, ...]
    period: Optional[Period] = None
    warnings: tuple["RowIssue", ...] = ()


@dataclass(frozen=True)
class RowIssue:
    row_ref: int
    employee_code: str
    message: str

    def to_dict(self) -> dict:
        return {"row": self.row_ref, "employee_code": self.employee_code, "message": self.message}


@dataclass(frozen=True)
class BatchReport:
    success_count: int
    failed_count: int
    errors: tuple[RowIssue, ...]
    warnings: tuple[RowIssue, ...]
    period: Optional[Period]
    source_format: ImportFormat
    employee_outcomes: dict[str, EmployeeOutcome] = field(default_factory=dict)
    imported_by: Optional[str] = None

    def employees_with(self, outcome: EmployeeOutcome) -> int:
        return sum(1 for o in self.employee_outcomes.values() if o == outcome)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success_count,
            "failed": self.failed_count,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "period": self.period.to_dict() if self.period else None,
            "format": self.source_format.value,
            "employees": {
                "succeeded": self.employees_with(EmployeeOutcome.SUCCEEDED),
                "partially_failed": self.employees_with(EmployeeOutcome.PARTIALLY_FAILED),
                "fully_failed": self.employees_with(EmployeeOutcome.FULLY_FAILED),
            },
            "imported_by": self.imported_by,
        }


@dataclass
class _EmployeeTally:
    successes: int = 0
    failures: int = 0

    @property
    def outcome(self) -> EmployeeOutcome:
        if self.failures:
            return EmployeeOutcome.PARTIALLY_FAILED
        if self.successes:
            return EmployeeOutcome.SUCCEEDED
        return EmployeeOutcome.FULLY_FAILED


class BatchAccumulator:
    """Folds per-day outcomes into one BatchReport.

    Every record ends up here as exactly one success or one failure; the
    employee rollup is derived from the same tallies.
    """

    def __init__(self, *, source_format: ImportFormat, period: Optional[Period], imported_by: Optional[str] = None):
        self._source_format = source_format
        self._period = period
        self._imported_by = imported_by
        self._success = 0
        self._failed = 0
        self._errors: list[RowIssue] = []
        self._warnings: list[RowIssue] = []
        self._tallies: dict[str, _EmployeeTally] = {}

    def _tally(self, employee_code: str) -> _EmployeeTally:
        if not employee_code:
            # Rows without a code belong to nobody; counted, not rolled up.
            return _EmployeeTally()
        return self._tallies.setdefault(employee_code, _EmployeeTally())

    def succeeded(self, employee_code: str) -> None:
        self._success += 1
        self._tally(employee_code).successes += 1

    def failed(self, issue: RowIssue) -> None:
        self._failed += 1
        self._errors.append(issue)
        self._tally(issue.employee_code).failures += 1

    def unresolved(self, issue: RowIssue) -> None:
        """Employee not in registry: one error, no day attempted."""
        self._failed += 1
        self._errors.append(issue)
        self._tally(issue.employee_code)

    def warn(self, issue: RowIssue) -> None:
        self._warnings.append(issue)

    def build(self) -> BatchReport:
        return BatchReport(
            success_count=self._success,
            failed_count=self._failed,
            errors=tuple(self._errors),
            warnings=tuple(self._warnings),
            period=self._period,
            source_format=self._source_format,
            employee_outcomes={code: t.outcome for code, t in self._tallies.items()},
            imported_by=self._imported_by,
        )
