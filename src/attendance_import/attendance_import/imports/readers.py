from __future__ import annotations

import csv
import io
import logging
from datetime import date, datetime, time
from typing import Any, Optional, Union

import pandas as pd

from ..core.constants import DEFAULT_IMPORT_ENCODING
from ..core.exceptions import StructuralDetectionFailure
from .model import SourceRow

log = logging.getLogger(__name__)

_EXCEL_SUFFIXES = (".xlsx", ".xlsm", ".xls")
_ZIP_MAGIC = b"PK\x03\x04"
_OLE_MAGIC = b"\xd0\xcf\x11\xe0"


def is_excel(content: Union[bytes, str], filename: Optional[str] = None) -> bool:
    if filename and filename.lower().endswith(_EXCEL_SUFFIXES):
        return True
    if isinstance(content, bytes):
        return content.startswith(_ZIP_MAGIC) or content.startswith(_OLE_MAGIC)
    return False


def read_rows(
    content: Union[bytes, str],
    *,
    filename: Optional[str] = None,
    encoding: str = DEFAULT_IMPORT_ENCODING,
) -> list[SourceRow]:
    """Split an uploaded CSV or Excel file into SourceRows.

    Fully blank rows are dropped; row numbers stay physical (1-based).
    """
    if is_excel(content, filename):
        return _read_excel(content if isinstance(content, bytes) else content.encode(encoding))
    text = content.decode(encoding, errors="replace") if isinstance(content, bytes) else content
    return _read_csv(text)


def _read_csv(text: str) -> list[SourceRow]:
    rows: list[SourceRow] = []
    reader = csv.reader(io.StringIO(text.lstrip("\ufeff")))
    for number, cells in enumerate(reader, start=1):
        cleaned = tuple(c.strip() for c in cells)
        if any(cleaned):
            rows.append(SourceRow(number=number, cells=cleaned))
    return rows


def _read_excel(content: bytes) -> list[SourceRow]:
    try:
        df = pd.read_excel(io.BytesIO(content), sheet_name=0, header=None, dtype=object)
    except Exception as e:
        raise StructuralDetectionFailure(f"Lỗi đọc file Excel: {e}") from e

    log.debug("excel sheet read: %d rows x %d cols", df.shape[0], df.shape[1])
    rows: list[SourceRow] = []
    for number, values in enumerate(df.itertuples(index=False, name=None), start=1):
        cleaned = tuple(_cell_text(v) for v in values)
        if any(cleaned):
            rows.append(SourceRow(number=number, cells=cleaned))
    return rows


def _cell_text(value: Any) -> str:
    """Render a spreadsheet cell the way the vendor's CSV export would."""
    if value is None:
        return ""
    if not isinstance(value, str) and pd.isna(value):
        return ""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        if value.time() == time(0, 0):
            return value.strftime("%d/%m/%Y")
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, date):
        return value.strftime("%d/%m/%Y")
    if isinstance(value, time):
        return value.strftime("%H:%M:%S")
    return str(value).strip()
