from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.constants import MONTHLY_HINT
from ..core.exceptions import StructuralDetectionFailure
from .model import ParseResult, Period, SourceRow
from .parsers.base import ImportParser
from .parsers.detail_block import DetailBlockParser
from .parsers.generic_columns import GenericColumnParser
from .parsers.monthly_grid import MonthlyGridParser

log = logging.getLogger(__name__)


class FormatDetector:
    """Tries the specialized layouts first, the generic table mapper last.

    Specialized files can look like a weak generic table, so they must win.
    """

    def __init__(
        self,
        *,
        monthly: Optional[MonthlyGridParser] = None,
        detail: Optional[DetailBlockParser] = None,
        generic: Optional[GenericColumnParser] = None,
    ):
        self._monthly = monthly or MonthlyGridParser()
        self._detail = detail or DetailBlockParser()
        self._generic = generic or GenericColumnParser()

    def order_for(self, hint: Optional[str]) -> list[ImportParser]:
        if (hint or "").strip().lower() == MONTHLY_HINT:
            specialized: list[ImportParser] = [self._monthly, self._detail]
        else:
            specialized = [self._detail, self._monthly]
        return specialized + [self._generic]

    def detect(self, rows: Sequence[SourceRow], *, hint: Optional[str] = None, period: Optional[Period] = None) -> ParseResult:
        if not rows:
            raise StructuralDetectionFailure("File rỗng, không có dữ liệu chấm công")

        for parser in self.order_for(hint):
            result = parser.parse(rows, period=period)
            if result.rows:
                log.info("detected %s layout (%d raw records)", result.source.value, len(result.rows))
                return result
            log.debug("%s parser found no records", parser.source.value)

        raise StructuralDetectionFailure(
            "Không thể xác định được cấu trúc file. Không tìm thấy bản ghi chấm công hợp lệ nào."
        )
