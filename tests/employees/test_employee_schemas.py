from __future__ import annotations

import pytest

from src.employee_contributions.employee_contributions.core.exceptions import ValidationError
from src.employee_contributions.employee_contributions.employees.schemas import EmployeeCreate, EmployeeUpdate


def test_create_strips_and_keeps_fields():
    data = EmployeeCreate.from_payload({"name": " Ada ", "department": "Eng", "phone": "555"})
    assert data == EmployeeCreate(name="Ada", department="Eng", phone="555")


@pytest.mark.parametrize("missing", ["name", "department", "phone"])
def test_create_requires_every_field(missing):
    payload = {"name": "Ada", "department": "Eng", "phone": "555"}
    payload.pop(missing)
    with pytest.raises(ValidationError, match=missing):
        EmployeeCreate.from_payload(payload)


def test_create_rejects_blank_and_non_text_values():
    with pytest.raises(ValidationError):
        EmployeeCreate.from_payload({"name": "  ", "department": "Eng", "phone": "555"})
    with pytest.raises(ValidationError):
        EmployeeCreate.from_payload({"name": "Ada", "department": "Eng", "phone": 555})


def test_create_treats_non_object_body_as_empty():
    with pytest.raises(ValidationError):
        EmployeeCreate.from_payload(["Ada", "Eng", "555"])


def test_update_keeps_only_supplied_fields():
    data = EmployeeUpdate.from_payload({"phone": "777", "name": None, "unknown": "x"})
    assert data.changes() == {"phone": "777"}


def test_update_rejects_blank_value():
    with pytest.raises(ValidationError):
        EmployeeUpdate.from_payload({"department": ""})


@pytest.mark.parametrize("field,limit", [("name", 255), ("department", 255), ("phone", 64)])
def test_create_rejects_values_longer_than_column(field, limit):
    payload = {"name": "Ada", "department": "Eng", "phone": "555"}
    payload[field] = "x" * (limit + 1)
    with pytest.raises(ValidationError, match=f"{field} must be at most {limit} characters"):
        EmployeeCreate.from_payload(payload)


def test_create_accepts_value_at_column_limit():
    data = EmployeeCreate.from_payload({"name": "x" * 255, "department": "Eng", "phone": "5" * 64})
    assert len(data.name) == 255


def test_update_rejects_overlong_phone():
    with pytest.raises(ValidationError):
        EmployeeUpdate.from_payload({"phone": "5" * 65})
