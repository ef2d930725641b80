from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from ...common.text_utils import fold_text
from ...core.enums import ImportFormat
from ..model import ParsedRow, ParseResult, Period, SourceRow
from .base import ImportParser

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeaderRule:
    field: str
    fragments: tuple[str, ...] = ()
    exact: tuple[str, ...] = ()

    def matches(self, folded: str) -> bool:
        return folded in self.exact or any(f in folded for f in self.fragments)


# Matched against folded headers ("Giờ vào" -> "gio vao"), top to bottom.
# overtime / total_overall sit before total_hours and shift because their
# labels contain "total" and "ca".
HEADER_RULES: tuple[HeaderRule, ...] = (
    HeaderRule("stt", exact=("stt", "no", "so tt")),
    HeaderRule("employee_code", ("ma nhan vien", "ma nv", "employee code", "code", "ma so"), ("ma", "mnv")),
    HeaderRule("employee_name", ("ten nhan vien", "ho va ten", "ho ten", "employee name", "name"), ("ten",)),
    HeaderRule("department", ("phong ban", "bo phan", "department")),
    HeaderRule("date", ("ngay", "date")),
    HeaderRule("day_of_week", ("weekday", "day of week"), ("thu", "day")),
    HeaderRule("check_in", ("gio vao", "check in", "time in", "vao"), ("in",)),
    HeaderRule("check_out", ("gio ra", "check out", "time out", "out"), ("ra", "ra 1")),
    HeaderRule("late", ("di tre", "di muon", "late"), ("tre",)),
    HeaderRule("early", ("ve som", "early"), ("som",)),
    HeaderRule("overtime", ("tang ca", "overtime")),
    HeaderRule("total_overall", ("g toan", "total overall")),
    HeaderRule("work_factor", ("cong", "work factor")),
    HeaderRule("total_hours", ("tong gio", "total hours", "total"), ("gio",)),
    HeaderRule("shift", ("shift", "ca lam", "ky hieu"), ("ca",)),
)

# Vendor column order (0-based), used when no header is recognized.
POSITIONAL_COLUMNS: tuple[tuple[int, str], ...] = (
    (1, "employee_code"),
    (2, "employee_name"),
    (3, "department"),
    (4, "date"),
    (5, "day_of_week"),
    (6, "check_in"),
    (7, "check_out"),
    (8, "late"),
    (9, "early"),
    (10, "work_factor"),
    (11, "total_hours"),
    (12, "overtime"),
    (13, "total_overall"),
    (14, "shift"),
)


def map_header(header: str, rules: Sequence[HeaderRule] = HEADER_RULES) -> str:
    """Canonical field name for a header cell; unknown headers pass through."""
    folded = fold_text(header)
    if folded:
        for rule in rules:
            if rule.matches(folded):
                return rule.field
    return header.strip()


class GenericColumnParser(ImportParser):
    """Rectangular table with a single header row."""

    source = ImportFormat.GENERIC

    def parse(self, rows: Sequence[SourceRow], *, period: Optional[Period] = None) -> ParseResult:
        if len(rows) < 2:
            return self.empty()

        headers = [map_header(h) for h in rows[0].cells]
        parsed = [r for r in (self._by_header(headers, row) for row in rows[1:]) if r.get("employee_code")]

        if not parsed:
            log.info("no header matched an employee code column, using vendor column positions")
            parsed = [self._by_position(row) for row in rows[1:] if row.cell(1)]

        return ParseResult(source=self.source, rows=tuple(parsed), period=period)

    def _by_header(self, headers: list[str], row: SourceRow) -> ParsedRow:
        fields: dict[str, str] = {}
        for idx, name in enumerate(headers):
            # First column wins when two headers map to the same field.
            if name and name not in fields:
                fields[name] = row.cell(idx)
        return ParsedRow(row_ref=row.number, source=self.source, fields=fields)

    def _by_position(self, row: SourceRow) -> ParsedRow:
        fields = {name: row.cell(idx) for idx, name in POSITIONAL_COLUMNS}
        return ParsedRow(row_ref=row.number, source=self.source, fields=fields)
