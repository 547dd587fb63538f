from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.ids import new_record_id
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, placeholders
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "id, name, department, phone, created_at, updated_at"
_UPDATABLE = ("name", "department", "phone")


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(row["id"]),
        name=row["name"],
        department=row["department"],
        phone=row["phone"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(self, *, name: str, department: str, phone: str) -> Employee:
        now = now_utc()
        employee = Employee(
            employee_id=new_record_id(),
            name=name,
            department=department,
            phone=phone,
            created_at=now,
            updated_at=now,
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(id, name, department, phone, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (employee.employee_id, name, department, phone, now, now),
            )
        return employee

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def get_many(self, employee_ids: Iterable[str]) -> Dict[str, Employee]:
        ids = sorted({str(i) for i in employee_ids})
        if not ids:
            return {}
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id IN ({placeholders(len(ids))})", tuple(ids))
            return {e.employee_id: e for e in map(_row_to_employee, fetchall(cur))}

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY created_at ASC, id ASC")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def update_by_id(self, employee_id: str, changes: Mapping[str, str]) -> Optional[Employee]:
        fields = [f for f in _UPDATABLE if f in changes]
        assignments = ", ".join([f"{f}=%s" for f in fields] + ["updated_at=%s"])
        params = [changes[f] for f in fields] + [now_utc(), employee_id]

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE employees SET {assignments} WHERE id=%s", tuple(params))
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def delete_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s FOR UPDATE", (employee_id,))
            row = fetchone(cur)
            if not row:
                return None
            cur.execute("DELETE FROM employees WHERE id=%s", (employee_id,))
            return _row_to_employee(row)
