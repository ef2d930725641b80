from __future__ import annotations

from typing import Protocol, Sequence

from .model import RegistryEmployee


class EmployeeRepository(Protocol):
    """Giao diện repository cho danh bạ nhân viên.

    Lưu ý (DIP): service import chỉ phụ thuộc vào interface này; danh bạ được
    đọc một lần cho mỗi lô import.
    """

    def fetch_all_employees(self) -> Sequence[RegistryEmployee]:
        raise NotImplementedError
