from __future__ import annotations

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from ..core.constants import SERIAL_DATE_EPOCH, SERIAL_DATE_OFFSET_DAYS
from ..core.exceptions import InvalidDate, InvalidTime

_SERIAL_RE = re.compile(r"^\d+$")
_DMY_SLASH_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_YMD_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})(?:[ T]\d{1,2}:\d{2}(?::\d{2})?)?$")
_DMY_DASH_RE = re.compile(r"^(\d{1,2})-(\d{1,2})-(\d{4})$")
# Spreadsheet timestamps ("2024-06-03 08:15:00", "03/06/2024 08:15") keep only the clock part.
_TIME_RE = re.compile(
    r"^(?:(?:\d{4}-\d{1,2}-\d{1,2}|\d{1,2}/\d{1,2}/\d{4})[ T])?(\d{1,2}):(\d{2})(?::(\d{2}))?$"
)

_EMPTY_TIME_TOKENS = {"", "-"}


def now_local() -> datetime:
    """Current local time; default month for grid files without a period line."""
    return datetime.now()


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def parse_serial_date(serial: int) -> date:
    """Convert a spreadsheet serial day number into a date."""
    try:
        return SERIAL_DATE_EPOCH + timedelta(days=serial - SERIAL_DATE_OFFSET_DAYS)
    except OverflowError:
        raise InvalidDate(f"Định dạng ngày không hợp lệ: {serial}")


def parse_date(token: str) -> date:
    """Parse a vendor date token.

    Supported: D/M/YYYY, YYYY-M-D (optionally followed by a time), D-M-YYYY
    and pure-integer spreadsheet serials.
    """
    raw = (token or "").strip()
    if _SERIAL_RE.match(raw):
        return parse_serial_date(int(raw))

    m = _DMY_SLASH_RE.match(raw) or _DMY_DASH_RE.match(raw)
    if m:
        day, month, year = (int(g) for g in m.groups())
    else:
        m = _YMD_RE.match(raw)
        if not m:
            raise InvalidDate(f"Định dạng ngày không hợp lệ: {token}")
        year, month, day = (int(g) for g in m.groups())

    try:
        return date(year, month, day)
    except ValueError:
        raise InvalidDate(f"Định dạng ngày không hợp lệ: {token}")


def parse_time(token: Optional[str], base_date: date, *, required: bool = False) -> Optional[datetime]:
    """Combine an HH:MM[:SS] token (optionally after a date) with base_date.

    Empty, '-' or unparsable tokens give None unless the field is required.
    """
    raw = (token or "").strip()
    m = _TIME_RE.match(raw) if raw not in _EMPTY_TIME_TOKENS else None
    if m:
        hours, minutes = int(m.group(1)), int(m.group(2))
        seconds = int(m.group(3) or 0)
        if hours < 24 and minutes < 60 and seconds < 60:
            return datetime(base_date.year, base_date.month, base_date.day, hours, minutes, seconds)

    if required:
        raise InvalidTime(f"Định dạng giờ không hợp lệ: {token}")
    return None


def is_weekend_label(label: Optional[str], weekend_labels: Iterable[str]) -> bool:
    if not label:
        return False
    wanted = {w.strip().upper() for w in weekend_labels}
    return label.strip().upper() in wanted
