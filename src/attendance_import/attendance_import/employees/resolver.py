from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..common.text_utils import digits_only
from ..core.constants import EMPLOYEE_CODE_DIGITS, EMPLOYEE_CODE_PREFIX
from ..core.exceptions import EmployeeNotFound
from .model import RegistryEmployee, ResolvedEmployee


@dataclass(frozen=True)
class RegistryIndex:
    """Read-only lookup table built once per batch.

    Every employee is reachable by its stored code, by the digit-only form of
    that code and by the digit-only form without leading zeros.
    """

    by_key: dict[str, RegistryEmployee] = field(default_factory=dict)

    @classmethod
    def from_employees(cls, employees: Iterable[RegistryEmployee]) -> "RegistryIndex":
        employees = list(employees)
        index: dict[str, RegistryEmployee] = {}

        # Stored codes first so a derived variant never shadows a real code.
        for emp in employees:
            code = (emp.code or "").strip()
            if code:
                index.setdefault(code, emp)

        for emp in employees:
            numeric = digits_only(emp.code)
            if not numeric:
                continue
            index.setdefault(numeric, emp)
            index.setdefault(numeric.lstrip("0") or "0", emp)

        return cls(by_key=index)

    def get(self, key: str) -> Optional[RegistryEmployee]:
        return self.by_key.get(key)

    def __len__(self) -> int:
        return len({id(e) for e in self.by_key.values()})


class EmployeeResolver:
    def __init__(self, index: RegistryIndex):
        self._index = index

    @staticmethod
    def candidates(raw_code: str) -> list[str]:
        raw = (raw_code or "").strip()
        numeric = digits_only(raw)

        keys = [raw]
        if numeric:
            if len(numeric) == EMPLOYEE_CODE_DIGITS:
                keys.append(f"{EMPLOYEE_CODE_PREFIX}{numeric}")
            keys.append(f"{EMPLOYEE_CODE_PREFIX}{numeric.zfill(EMPLOYEE_CODE_DIGITS)}")
            keys.append(numeric)

        out: list[str] = []
        for k in keys:
            if k and k not in out:
                out.append(k)
        return out

    def find(self, raw_code: str) -> Optional[ResolvedEmployee]:
        for key in self.candidates(raw_code):
            emp = self._index.get(key)
            if emp:
                return ResolvedEmployee(
                    internal_id=emp.id,
                    display_name=emp.full_name or emp.code,
                    code=emp.code,
                )
        return None

    def resolve(self, raw_code: str) -> ResolvedEmployee:
        found = self.find(raw_code)
        if not found:
            raise EmployeeNotFound((raw_code or "").strip())
        return found
