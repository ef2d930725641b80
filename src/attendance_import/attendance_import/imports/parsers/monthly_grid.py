from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Callable, Optional, Sequence

from ...common.datetime_utils import days_in_month, now_local
from ...common.text_utils import fold_text, parse_decimal
from ...core.enums import ImportFormat
from ..model import ParsedRow, ParseResult, Period, RowIssue, SourceRow
from .base import ImportParser

log = logging.getLogger(__name__)

_DMY_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")
_FROM_DATE_MARKER = "tu ngay"

STT_COL = 0
EMPLOYEE_CODE_COL = 1
EMPLOYEE_NAME_COL = 2


class MonthlyGridParser(ImportParser):
    """Bảng công tháng: one row per employee, one column per day of month.

    Layout::

        ..., Từ ngày: 01/06/2024 đến ngày: 30/06/2024
        STT, Mã NV, Tên, ..., 1,   2,   3,   ...
                            , T.7, CN,  T.2, ...
        1,   00042, An,  ..., 1,   0,   1.5, ...
    """

    source = ImportFormat.MONTHLY_GRID

    def __init__(self, *, clock: Callable[[], datetime] = now_local):
        self._clock = clock

    def parse(self, rows: Sequence[SourceRow], *, period: Optional[Period] = None) -> ParseResult:
        header = self._find_day_header(rows)
        if header is None:
            return self.empty()
        header_idx, first_day_col = header

        period = self._find_period(rows) or period or self._current_period()
        labels_row = rows[header_idx + 1] if header_idx + 1 < len(rows) else None
        month_days = days_in_month(period.year, period.month)

        day_labels: dict[int, str] = {}
        if labels_row is not None:
            for day in range(1, month_days + 1):
                label = labels_row.cell(first_day_col + day - 1)
                if label:
                    day_labels[day] = label

        parsed: list[ParsedRow] = []
        warnings: list[RowIssue] = []
        for row in rows[header_idx + 2:]:
            stt = row.cell(STT_COL)
            code = row.cell(EMPLOYEE_CODE_COL)
            if not code or not stt.isdigit():
                continue

            name = row.cell(EMPLOYEE_NAME_COL) if first_day_col > EMPLOYEE_NAME_COL else ""
            for day in range(1, month_days + 1):
                value = row.cell(first_day_col + day - 1)
                if not value:
                    continue
                if parse_decimal(value) is None:
                    warnings.append(RowIssue(row.number, code, f"Bỏ qua ngày {day}: giá trị công không hợp lệ '{value}'"))
                    continue
                parsed.append(
                    ParsedRow(
                        row_ref=row.number,
                        source=self.source,
                        fields={
                            "employee_code": code,
                            "employee_name": name,
                            "day": str(day),
                            "work_value": value,
                            "day_of_week": day_labels.get(day, ""),
                        },
                    )
                )

        log.debug("monthly grid: header at row %d, %d day cells", rows[header_idx].number, len(parsed))
        return ParseResult(source=self.source, rows=tuple(parsed), period=period, warnings=tuple(warnings))

    @staticmethod
    def _find_day_header(rows: Sequence[SourceRow]) -> Optional[tuple[int, int]]:
        for idx, row in enumerate(rows):
            cells = row.cells
            for col in range(len(cells) - 2):
                if (cells[col], cells[col + 1], cells[col + 2]) == ("1", "2", "3"):
                    return idx, col
        return None

    @staticmethod
    def _find_period(rows: Sequence[SourceRow]) -> Optional[Period]:
        for row in rows:
            if _FROM_DATE_MARKER not in fold_text(row.line):
                continue
            m = _DMY_RE.search(row.line)
            if m:
                month, year = int(m.group(2)), int(m.group(3))
                if 1 <= month <= 12:
                    return Period(month=month, year=year)
        return None

    def _current_period(self) -> Period:
        now = self._clock()
        return Period(month=now.month, year=now.year)
