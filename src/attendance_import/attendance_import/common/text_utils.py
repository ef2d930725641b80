from __future__ import annotations

import re
import unicodedata
from decimal import Decimal, InvalidOperation
from typing import Optional

_NON_ALNUM_RE = re.compile(r"[^0-9a-z]+")
_NON_DIGIT_RE = re.compile(r"\D")


def fold_text(value: Optional[str]) -> str:
    """Lower-case, strip Vietnamese diacritics and punctuation.

    'Mã nhân viên' -> 'ma nhan vien', 'Check-in' -> 'check in'.
    """
    raw = str(value or "").strip().lower()
    raw = raw.replace("đ", "d").replace("\ufffd", "")
    raw = unicodedata.normalize("NFKD", raw)
    raw = "".join(ch for ch in raw if not unicodedata.combining(ch))
    return _NON_ALNUM_RE.sub(" ", raw).strip()


def digits_only(value: Optional[str]) -> str:
    return _NON_DIGIT_RE.sub("", value or "")


def parse_decimal(value: Optional[str]) -> Optional[Decimal]:
    """Parse '1', '0.5' or '0,5' into Decimal; blank or garbage gives None."""
    raw = (value or "").strip().replace(",", ".")
    if not raw:
        return None
    try:
        number = Decimal(raw)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None
