from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from src.employee_contributions.employee_contributions.contributions.mysql_contribution_repository import (
    MySQLContributionRepository,
)
from src.employee_contributions.employee_contributions.core.exceptions import InvalidReferenceError
from src.employee_contributions.employee_contributions.employees.mysql_employee_repository import (
    MySQLEmployeeRepository,
)

from fakes_mysql import FakeConnectionFactory, FakeCursor

T0 = datetime(2024, 1, 1, 9, 0, 0)

EMPLOYEE_ROW = {
    "id": "e1",
    "name": "Ada",
    "department": "Eng",
    "phone": "555",
    "created_at": T0,
    "updated_at": T0,
}

CONTRIBUTION_ROW = {
    "id": "c1",
    "employee_id": "e1",
    "amount": Decimal("100.00"),
    "month": "Jan",
    "date_paid": T0,
    "created_at": T0,
    "updated_at": T0,
}


def test_contribution_insert_is_conditional_on_employee_row():
    cursor = FakeCursor(lambda sql, params: (None, 0))
    repo = MySQLContributionRepository(FakeConnectionFactory(cursor))

    with pytest.raises(InvalidReferenceError):
        repo.insert(employee_id="ghost", amount=Decimal("1"), month="Jan")

    sql, params = cursor.executed[0]
    assert "INSERT INTO contributions" in sql and "FROM employees e WHERE e.id=%s" in sql
    assert params[-1] == "ghost"


def test_contribution_insert_defaults_date_paid():
    cursor = FakeCursor(lambda sql, params: (None, 1))
    repo = MySQLContributionRepository(FakeConnectionFactory(cursor))

    contribution = repo.insert(employee_id="e1", amount=Decimal("1"), month="Jan")
    assert contribution.date_paid == contribution.created_at
    assert len(contribution.contribution_id) == 32


def test_contribution_update_locks_new_employee_first():
    def responder(sql, params):
        if "FROM employees" in sql:
            return None, 0
        return CONTRIBUTION_ROW, 1

    cursor = FakeCursor(responder)
    factory = FakeConnectionFactory(cursor)
    repo = MySQLContributionRepository(factory)

    with pytest.raises(InvalidReferenceError):
        repo.update_by_id("c1", {"employee_id": "ghost"})

    assert len(cursor.executed) == 1
    assert "LOCK IN SHARE MODE" in cursor.executed[0][0]
    assert factory.connections[0].rolled_back


def test_contribution_update_missing_record_returns_none():
    cursor = FakeCursor(lambda sql, params: (None, 0))
    repo = MySQLContributionRepository(FakeConnectionFactory(cursor))

    assert repo.update_by_id("nope", {"month": "Feb"}) is None
    assert not any(sql.startswith("UPDATE") for sql, _ in cursor.executed)


def test_contribution_update_only_touches_supplied_columns():
    cursor = FakeCursor(lambda sql, params: (CONTRIBUTION_ROW, 1))
    repo = MySQLContributionRepository(FakeConnectionFactory(cursor))

    updated = repo.update_by_id("c1", {"month": "Feb"})

    update_sql, update_params = next((s, p) for s, p in cursor.executed if s.startswith("UPDATE"))
    assert update_sql == "UPDATE contributions SET month=%s, updated_at=%s WHERE id=%s"
    assert update_params[0] == "Feb" and update_params[-1] == "c1"
    assert updated.contribution_id == "c1"


def test_list_by_employee_filters_on_reference_column():
    cursor = FakeCursor(lambda sql, params: ([CONTRIBUTION_ROW], 1))
    repo = MySQLContributionRepository(FakeConnectionFactory(cursor))

    rows = repo.list_by_employee("e1")
    assert [c.contribution_id for c in rows] == ["c1"]
    assert "WHERE employee_id=%s" in cursor.executed[0][0]
    assert cursor.executed[0][1] == ("e1",)


def test_contribution_delete_returns_deleted_record():
    cursor = FakeCursor(lambda sql, params: (CONTRIBUTION_ROW, 1))
    repo = MySQLContributionRepository(FakeConnectionFactory(cursor))

    assert repo.delete_by_id("c1").amount == Decimal("100.00")
    assert cursor.executed[-1][0] == "DELETE FROM contributions WHERE id=%s"


def test_employee_get_many_uses_one_query():
    cursor = FakeCursor(lambda sql, params: ([EMPLOYEE_ROW], 1))
    repo = MySQLEmployeeRepository(FakeConnectionFactory(cursor))

    found = repo.get_many(["e1", "e2", "e1"])
    assert list(found) == ["e1"]
    assert len(cursor.executed) == 1
    assert cursor.executed[0][1] == ("e1", "e2")


def test_employee_get_many_empty_skips_query():
    cursor = FakeCursor()
    repo = MySQLEmployeeRepository(FakeConnectionFactory(cursor))

    assert repo.get_many([]) == {}
    assert cursor.executed == []


def test_employee_delete_missing_returns_none():
    cursor = FakeCursor(lambda sql, params: (None, 0))
    repo = MySQLEmployeeRepository(FakeConnectionFactory(cursor))

    assert repo.delete_by_id("nope") is None
    assert not any(sql.startswith("DELETE") for sql, _ in cursor.executed)


def test_employee_update_builds_partial_assignment():
    cursor = FakeCursor(lambda sql, params: (EMPLOYEE_ROW, 1))
    repo = MySQLEmployeeRepository(FakeConnectionFactory(cursor))

    repo.update_by_id("e1", {"phone": "999"})
    assert cursor.executed[0][0] == "UPDATE employees SET phone=%s, updated_at=%s WHERE id=%s"


def test_contribution_insert_returns_values_at_column_precision():
    cursor = FakeCursor(lambda sql, params: (None, 1))
    repo = MySQLContributionRepository(FakeConnectionFactory(cursor))

    contribution = repo.insert(
        employee_id="e1",
        amount=Decimal("1.234"),
        month="Jan",
        date_paid=datetime(2024, 1, 31, 10, 0, 0, 999600),
    )

    assert contribution.amount == Decimal("1.23")
    assert contribution.date_paid == datetime(2024, 1, 31, 10, 0, 1)
    _, params = cursor.executed[0]
    assert params[1] == contribution.amount
    assert params[3] == contribution.date_paid


def test_contribution_update_writes_values_at_column_precision():
    cursor = FakeCursor(lambda sql, params: (CONTRIBUTION_ROW, 1))
    repo = MySQLContributionRepository(FakeConnectionFactory(cursor))

    repo.update_by_id("c1", {"amount": Decimal("2.005")})

    _, params = next((s, p) for s, p in cursor.executed if s.startswith("UPDATE"))
    assert params[0] == Decimal("2.01")
