"""Request records for the employee endpoints.

Bodies are validated here, before they reach the service.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from ..common.validators import require_non_empty
from ..core.constants import DEPARTMENT_MAX_LENGTH, NAME_MAX_LENGTH, PHONE_MAX_LENGTH

EMPLOYEE_FIELDS = ("name", "department", "phone")
MAX_LENGTHS = {"name": NAME_MAX_LENGTH, "department": DEPARTMENT_MAX_LENGTH, "phone": PHONE_MAX_LENGTH}


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    return payload if isinstance(payload, Mapping) else {}


@dataclass(frozen=True)
class EmployeeCreate:
    name: str
    department: str
    phone: str

    @classmethod
    def from_payload(cls, payload: Any) -> "EmployeeCreate":
        data = _as_mapping(payload)
        return cls(
            name=require_non_empty(data.get("name"), "name", MAX_LENGTHS["name"]),
            department=require_non_empty(data.get("department"), "department", MAX_LENGTHS["department"]),
            phone=require_non_empty(data.get("phone"), "phone", MAX_LENGTHS["phone"]),
        )


@dataclass(frozen=True)
class EmployeeUpdate:
    """Partial update: only supplied fields are replaced."""

    name: Optional[str] = None
    department: Optional[str] = None
    phone: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "EmployeeUpdate":
        data = _as_mapping(payload)
        values = {
            field: require_non_empty(data[field], field, MAX_LENGTHS[field])
            for field in EMPLOYEE_FIELDS
            if data.get(field) is not None
        }
        return cls(**values)

    def changes(self) -> Dict[str, str]:
        return {field: getattr(self, field) for field in EMPLOYEE_FIELDS if getattr(self, field) is not None}
