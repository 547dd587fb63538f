from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Sequence

from ..common.datetime_utils import now_utc, round_to_millis
from ..common.ids import new_record_id
from ..common.validators import quantize_amount
from ..core.constants import EMPLOYEE_REFERENCE_NOT_FOUND
from ..core.exceptions import InvalidReferenceError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Contribution
from .repository import ContributionRepository

_COLUMNS = "id, employee_id, amount, month, date_paid, created_at, updated_at"
_COLUMN_FOR_FIELD = {
    "employee_id": "employee_id",
    "amount": "amount",
    "month": "month",
    "date_paid": "date_paid",
}


def _normalize(changes: Mapping[str, Any]) -> Dict[str, Any]:
    """Values as the DECIMAL(14,2) and DATETIME(3) columns will hold them."""
    out = dict(changes)
    if out.get("amount") is not None:
        out["amount"] = quantize_amount(Decimal(out["amount"]))
    if out.get("date_paid") is not None:
        out["date_paid"] = round_to_millis(out["date_paid"])
    return out


def _row_to_contribution(row: Dict[str, Any]) -> Contribution:
    return Contribution(
        contribution_id=str(row["id"]),
        employee_id=str(row["employee_id"]),
        amount=Decimal(row["amount"]),
        month=row["month"],
        date_paid=row["date_paid"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class MySQLContributionRepository(ContributionRepository):
    """Contribution storage.

    Writes that set an employee reference are conditional on the employee row
    existing inside the same transaction, so a concurrent employee delete cannot
    slip in between the check and the write.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        month: str,
        date_paid: Optional[datetime] = None,
    ) -> Contribution:
        now = now_utc()
        values = _normalize({"amount": amount, "date_paid": date_paid or now})
        contribution = Contribution(
            contribution_id=new_record_id(),
            employee_id=employee_id,
            amount=values["amount"],
            month=month,
            date_paid=values["date_paid"],
            created_at=now,
            updated_at=now,
        )
        with db_cursor(self._conn_factory) as (_, cur):
            # INSERT ... SELECT inserts nothing when the employee row is missing.
            cur.execute(
                """
                INSERT INTO contributions(id, employee_id, amount, month, date_paid, created_at, updated_at)
                SELECT %s, e.id, %s, %s, %s, %s, %s
                FROM employees e
                WHERE e.id=%s
                """,
                (
                    contribution.contribution_id,
                    contribution.amount,
                    month,
                    contribution.date_paid,
                    now,
                    now,
                    employee_id,
                ),
            )
            if cur.rowcount == 0:
                raise InvalidReferenceError(EMPLOYEE_REFERENCE_NOT_FOUND)
        return contribution

    def get_by_id(self, contribution_id: str) -> Optional[Contribution]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM contributions WHERE id=%s", (contribution_id,))
            row = fetchone(cur)
            return _row_to_contribution(row) if row else None

    def list_all(self) -> Sequence[Contribution]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM contributions ORDER BY created_at ASC, id ASC")
            return [_row_to_contribution(r) for r in fetchall(cur)]

    def list_by_employee(self, employee_id: str) -> Sequence[Contribution]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM contributions WHERE employee_id=%s ORDER BY created_at ASC, id ASC",
                (employee_id,),
            )
            return [_row_to_contribution(r) for r in fetchall(cur)]

    def update_by_id(self, contribution_id: str, changes: Mapping[str, Any]) -> Optional[Contribution]:
        changes = _normalize(changes)
        fields = [f for f in _COLUMN_FOR_FIELD if f in changes]
        assignments = ", ".join([f"{_COLUMN_FOR_FIELD[f]}=%s" for f in fields] + ["updated_at=%s"])
        params = [changes[f] for f in fields] + [now_utc(), contribution_id]

        with db_cursor(self._conn_factory) as (_, cur):
            if "employee_id" in changes:
                # Shared lock: blocks a concurrent employee delete until commit.
                cur.execute(
                    "SELECT id FROM employees WHERE id=%s LOCK IN SHARE MODE",
                    (changes["employee_id"],),
                )
                if not fetchone(cur):
                    raise InvalidReferenceError(EMPLOYEE_REFERENCE_NOT_FOUND)

            cur.execute("SELECT id FROM contributions WHERE id=%s FOR UPDATE", (contribution_id,))
            if not fetchone(cur):
                return None

            cur.execute(f"UPDATE contributions SET {assignments} WHERE id=%s", tuple(params))
            cur.execute(f"SELECT {_COLUMNS} FROM contributions WHERE id=%s", (contribution_id,))
            row = fetchone(cur)
            return _row_to_contribution(row) if row else None

    def delete_by_id(self, contribution_id: str) -> Optional[Contribution]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM contributions WHERE id=%s FOR UPDATE", (contribution_id,))
            row = fetchone(cur)
            if not row:
                return None
            cur.execute("DELETE FROM contributions WHERE id=%s", (contribution_id,))
            return _row_to_contribution(row)
