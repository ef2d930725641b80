from __future__ import annotations

import re
from typing import Optional, Sequence

from ...core.enums import ImportFormat
from ..model import ParsedRow, ParseResult, Period, SourceRow
from .base import ImportParser

# "Mã nhân viên: 00002         Tên nhân viên: Dung         Phòng ban: --------,,,,,"
_EMPLOYEE_HEADER_RES = (
    re.compile(r"nh[aâ]n\s*vi[eê]n\s*:\s*\d{5}", re.IGNORECASE),
    re.compile(r":\s*\d{5}.*t[eê]n\s*nh[aâ]n\s*vi[eê]n", re.IGNORECASE),
)
_CODE_RE = re.compile(r"(\d{5})")
_NAME_RE = re.compile(
    r"t[eê]n\s*nh[aâ]n\s*vi[eê]n\s*:\s*(.+?)(?:\s{2,}|\s*ph[oò]ng\s*ban|,|$)",
    re.IGNORECASE,
)
_TABLE_HEADER_RE = re.compile(r"^ng[aà]y\s*,\s*th", re.IGNORECASE)
_SUB_HEADER_RE = re.compile(r"v[àa]o\s*,\s*ra", re.IGNORECASE)
_SECTION_RE = re.compile(r"^b[aảă]?ng\s*chi\s*ti[eếê]?t", re.IGNORECASE)
_DATE_RE = re.compile(r"^\d{1,2}/\d{1,2}/\d{4}$")

# Ngày, Thứ, Vào 1, Ra 1, Vào 2, Ra 2, ...
DATE_COL = 0
WEEKDAY_COL = 1
CHECK_IN_COL = 2
CHECK_OUT_COL = 3

_MISSING_TIME = {"", "-"}


class DetailBlockParser(ImportParser):
    """Bảng chi tiết chấm công: one block per employee, one row per day."""

    source = ImportFormat.DETAIL_BLOCK

    def parse(self, rows: Sequence[SourceRow], *, period: Optional[Period] = None) -> ParseResult:
        parsed: list[ParsedRow] = []
        code: Optional[str] = None
        name = ""
        in_table = False

        skip_next = False
        for idx, row in enumerate(rows):
            if skip_next:
                skip_next = False
                continue

            line = row.line.strip()
            if self.is_employee_header(line):
                code, name = self._employee_from_header(line)
                in_table = False
                continue

            if _TABLE_HEADER_RE.search(line):
                in_table = True
                nxt = rows[idx + 1] if idx + 1 < len(rows) else None
                skip_next = bool(nxt and _SUB_HEADER_RE.search(nxt.line))
                continue

            if not in_table or not code:
                continue

            work_date = row.cell(DATE_COL)
            if not _DATE_RE.match(work_date):
                if _SECTION_RE.search(line):
                    in_table = False
                continue
            if len(row.cells) <= CHECK_OUT_COL:
                continue

            check_in = row.cell(CHECK_IN_COL)
            check_out = row.cell(CHECK_OUT_COL)
            if check_in in _MISSING_TIME or check_out in _MISSING_TIME:
                continue

            parsed.append(
                ParsedRow(
                    row_ref=row.number,
                    source=self.source,
                    fields={
                        "employee_code": code,
                        "employee_name": name,
                        "date": work_date,
                        "day_of_week": row.cell(WEEKDAY_COL),
                        "check_in": check_in,
                        "check_out": check_out,
                    },
                )
            )

        return ParseResult(source=self.source, rows=tuple(parsed), period=period)

    @staticmethod
    def is_employee_header(line: str) -> bool:
        return any(r.search(line) for r in _EMPLOYEE_HEADER_RES)

    @staticmethod
    def _employee_from_header(line: str) -> tuple[Optional[str], str]:
        code_match = _CODE_RE.search(line)
        name_match = _NAME_RE.search(line.rstrip(","))
        return (
            code_match.group(1) if code_match else None,
            name_match.group(1).strip() if name_match else "",
        )
