from __future__ import annotations

import logging
from typing import Sequence

import mysql.connector

from ..core.exceptions import PersistenceFailure
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import RegistryEmployee
from .repository import EmployeeRepository

log = logging.getLogger(__name__)


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, active_only: bool = True):
        self._conn_factory = conn_factory
        self._active_only = active_only

    def fetch_all_employees(self) -> Sequence[RegistryEmployee]:
        where = "WHERE status='active'" if self._active_only else ""
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    SELECT id, employee_code, full_name
                    FROM employees
                    {where}
                    ORDER BY id ASC
                    """
                )
                rows = fetchall(cur)
        except mysql.connector.Error as e:
            log.error("cannot load employee registry: %s", e)
            raise PersistenceFailure(f"Lỗi đọc danh sách nhân viên: {e}") from e

        employees = [
            RegistryEmployee(
                id=int(r["id"]),
                code=str(r["employee_code"]),
                full_name=r.get("full_name"),
            )
            for r in rows
            if r.get("employee_code")
        ]
        log.debug("loaded %d employees from registry", len(employees))
        return employees
