from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ...core.enums import ImportFormat
from ..model import ParseResult, Period, SourceRow


class ImportParser(ABC):
    """One vendor layout.

    parse() returns an empty ParseResult when the layout's structural
    signature is absent, so the detector can move on to the next parser.
    """

    source: ImportFormat

    @abstractmethod
    def parse(self, rows: Sequence[SourceRow], *, period: Optional[Period] = None) -> ParseResult:
        raise NotImplementedError

    def empty(self) -> ParseResult:
        return ParseResult(source=self.source, rows=())
