from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Union

from ..attendance.classifier import StatusClassifier
from ..attendance.factory import ClassifierFactory
from ..attendance.model import AttendanceRecord
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import is_weekend_label
from ..core.constants import DEFAULT_IMPORT_ENCODING, DEFAULT_WEEKEND_LABELS
from ..core.exceptions import EmployeeNotFound, InvalidRecord, PersistenceFailure
from ..employees.model import ResolvedEmployee
from ..employees.repository import EmployeeRepository
from ..employees.resolver import EmployeeResolver, RegistryIndex
from .detector import FormatDetector
from .model import BatchAccumulator, BatchReport, ParseResult, Period, RowIssue
from .normalizer import RecordNormalizer
from .readers import read_rows

log = logging.getLogger(__name__)


class ImportService:
    """Reconciles one uploaded time-clock file into attendance days.

    Only StructuralDetectionFailure escapes; every other problem is reported
    per row/day in the BatchReport and the batch keeps going.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        detector: Optional[FormatDetector] = None,
        normalizer: Optional[RecordNormalizer] = None,
        classifiers: Optional[ClassifierFactory] = None,
        weekend_labels: Iterable[str] = DEFAULT_WEEKEND_LABELS,
        encoding: str = DEFAULT_IMPORT_ENCODING,
    ):
        self._attendance = attendance
        self._employees = employees
        self._detector = detector or FormatDetector()
        self._normalizer = normalizer or RecordNormalizer()
        self._classifiers = classifiers or ClassifierFactory()
        self._weekend_labels = tuple(weekend_labels)
        self._encoding = encoding

    def import_file(
        self,
        content: Union[bytes, str],
        *,
        filename: Optional[str] = None,
        format_hint: Optional[str] = None,
        acting_user: Optional[str] = None,
        period: Optional[Period] = None,
        registry: Optional[RegistryIndex] = None,
    ) -> BatchReport:
        rows = read_rows(content, filename=filename, encoding=self._encoding)
        parsed = self._detector.detect(rows, hint=format_hint, period=period)
        if registry is None:
            registry = self.load_registry()
        return self.reconcile(parsed, registry=registry, acting_user=acting_user, period=period)

    def load_registry(self) -> RegistryIndex:
        index = RegistryIndex.from_employees(self._employees.fetch_all_employees())
        log.info("registry loaded: %d employees", len(index))
        return index

    def reconcile(
        self,
        parsed: ParseResult,
        *,
        registry: RegistryIndex,
        acting_user: Optional[str] = None,
        period: Optional[Period] = None,
    ) -> BatchReport:
        period = parsed.period or period
        records, failures = self._normalize_all(parsed, period)

        acc = BatchAccumulator(
            source_format=parsed.source,
            period=period or self._period_of(records),
            imported_by=acting_user,
        )
        for issue in parsed.warnings:
            acc.warn(issue)

        resolver = EmployeeResolver(registry)
        for issue in failures:
            # A bad row of an unknown employee is not an attempted day.
            if resolver.find(issue.employee_code) is None:
                acc.unresolved(issue)
            else:
                acc.failed(issue)

        classifier = self._classifiers.for_format(parsed.source)

        for code, days in self._group_by_employee(records):
            employee = resolver.find(code)
            if employee is None:
                log.warning("employee not found: %s (row %d)", code, days[0].row_ref)
                acc.unresolved(RowIssue(days[0].row_ref, code, str(EmployeeNotFound(code))))
                continue
            for record in days:
                self._reconcile_day(record, employee, classifier, acc)

        report = acc.build()
        log.info(
            "import by %s finished: format=%s success=%d failed=%d warnings=%d",
            acting_user or "-",
            parsed.source.value,
            report.success_count,
            report.failed_count,
            len(report.warnings),
        )
        return report

    def _normalize_all(
        self, parsed: ParseResult, period: Optional[Period]
    ) -> tuple[list[AttendanceRecord], list[RowIssue]]:
        records: list[AttendanceRecord] = []
        failures: list[RowIssue] = []
        for row in parsed.rows:
            try:
                records.append(self._normalizer.normalize(row, period=period))
            except InvalidRecord as e:
                failures.append(RowIssue(row.row_ref, row.get("employee_code"), str(e)))
        return records, failures

    @staticmethod
    def _group_by_employee(records: Sequence[AttendanceRecord]) -> list[tuple[str, list[AttendanceRecord]]]:
        groups: dict[str, list[AttendanceRecord]] = {}
        for r in records:
            groups.setdefault(r.employee_code, []).append(r)
        return [(code, sorted(days, key=lambda r: (r.date, r.row_ref))) for code, days in groups.items()]

    @staticmethod
    def _period_of(records: Sequence[AttendanceRecord]) -> Optional[Period]:
        if not records:
            return None
        first = min(r.date for r in records)
        return Period(month=first.month, year=first.year)

    def _reconcile_day(
        self,
        record: AttendanceRecord,
        employee: ResolvedEmployee,
        classifier: StatusClassifier,
        acc: BatchAccumulator,
    ) -> None:
        # Nothing below the batch is fatal: any error ends this day only.
        try:
            day = classifier.classify(
                shift_code=record.shift_code,
                work_factor=record.work_factor,
                total_hours=record.total_hours,
                check_in=record.check_in,
                check_out=record.check_out,
                is_weekend=is_weekend_label(record.day_of_week_label, self._weekend_labels),
            )
            self._attendance.upsert_attendance_day(
                employee_id=employee.internal_id,
                work_date=record.date,
                status=day.status,
                overtime_hours=day.overtime_hours,
                shift_label=record.shift_code,
                check_in=record.check_in,
                check_out=record.check_out,
                work_value=record.work_factor,
                day_of_week=record.day_of_week_label,
            )
        except (PersistenceFailure, ArithmeticError) as e:
            log.warning("day failed employee=%s date=%s: %s", record.employee_code, record.date, e)
            acc.failed(RowIssue(record.row_ref, record.employee_code, f"Lỗi ngày {record.date:%d/%m/%Y}: {e}"))
            return
        except Exception as e:
            log.exception("unexpected error employee=%s date=%s", record.employee_code, record.date)
            acc.failed(RowIssue(record.row_ref, record.employee_code, f"Lỗi ngày {record.date:%d/%m/%Y}: {e}"))
            return

        for message in day.warnings:
            acc.warn(RowIssue(record.row_ref, record.employee_code, message))
        acc.succeeded(record.employee_code)
