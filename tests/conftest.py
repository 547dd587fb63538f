from __future__ import annotations

import itertools
from dataclasses import replace
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Dict, Iterable, Mapping, Optional

import pytest

from src.employee_contributions.employee_contributions.container import build_services
from src.employee_contributions.employee_contributions.contributions.model import Contribution
from src.employee_contributions.employee_contributions.employees.model import Employee
from src.employee_contributions.employee_contributions.main import create_app


class Clock:
    """Deterministic, strictly increasing timestamps."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 9, 0, 0)):
        self._now = start

    def __call__(self) -> datetime:
        self._now += timedelta(seconds=1)
        return self._now


class InMemoryEmployees:
    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or Clock()
        self._ids = itertools.count(1)
        self.rows: Dict[str, Employee] = {}

    def insert(self, *, name, department, phone):
        now = self._clock()
        employee = Employee(
            employee_id=f"emp{next(self._ids)}",
            name=name,
            department=department,
            phone=phone,
            created_at=now,
            updated_at=now,
        )
        self.rows[employee.employee_id] = employee
        return employee

    def get_by_id(self, employee_id):
        return self.rows.get(employee_id)

    def get_many(self, employee_ids: Iterable[str]):
        return {i: self.rows[i] for i in set(employee_ids) if i in self.rows}

    def list_all(self):
        return list(self.rows.values())

    def update_by_id(self, employee_id, changes: Mapping[str, str]):
        current = self.rows.get(employee_id)
        if current is None:
            return None
        updated = replace(current, updated_at=self._clock(), **dict(changes))
        self.rows[employee_id] = updated
        return updated

    def delete_by_id(self, employee_id):
        return self.rows.pop(employee_id, None)


class InMemoryContributions:
    """Plain store: keeps whatever employee reference it is given."""

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or Clock()
        self._ids = itertools.count(1)
        self.rows: Dict[str, Contribution] = {}

    def insert(self, *, employee_id, amount, month, date_paid=None):
        now = self._clock()
        contribution = Contribution(
            contribution_id=f"con{next(self._ids)}",
            employee_id=employee_id,
            amount=Decimal(amount),
            month=month,
            date_paid=date_paid or now,
            created_at=now,
            updated_at=now,
        )
        self.rows[contribution.contribution_id] = contribution
        return contribution

    def get_by_id(self, contribution_id):
        return self.rows.get(contribution_id)

    def list_all(self):
        return list(self.rows.values())

    def list_by_employee(self, employee_id):
        return [c for c in self.rows.values() if c.employee_id == employee_id]

    def update_by_id(self, contribution_id, changes):
        current = self.rows.get(contribution_id)
        if current is None:
            return None
        updated = replace(current, updated_at=self._clock(), **dict(changes))
        self.rows[contribution_id] = updated
        return updated

    def delete_by_id(self, contribution_id):
        return self.rows.pop(contribution_id, None)


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def contributions_repo():
    return InMemoryContributions()


@pytest.fixture
def container(employees_repo, contributions_repo):
    return build_services(employees_repo=employees_repo, contributions_repo=contributions_repo)


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_INIT_DB", "0")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
