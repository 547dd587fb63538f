from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object; persistence lives in the repository.
    """

    employee_id: str
    name: str
    department: str
    phone: str
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_id": self.employee_id,
            "name": self.name,
            "department": self.department,
            "phone": self.phone,
            "createdAt": to_iso(self.created_at),
            "updatedAt": to_iso(self.updated_at),
        }
