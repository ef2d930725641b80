from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RegistryEmployee:
    """Thực thể miền (domain): Nhân viên trong danh bạ (chỉ đọc khi import)."""

    id: int
    code: str
    full_name: Optional[str] = None


@dataclass(frozen=True)
class ResolvedEmployee:
    internal_id: int
    display_name: str
    code: str
