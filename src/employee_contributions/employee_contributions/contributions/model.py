from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from ..common.datetime_utils import to_iso
from ..employees.model import Employee


@dataclass(frozen=True)
class Contribution:
    """Domain entity: Contribution.

    `employee_id` is a non-owning reference; the employee may have been deleted.
    """

    contribution_id: str
    employee_id: str
    amount: Decimal
    month: str
    date_paid: datetime
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PopulatedContribution:
    """A contribution with its employee resolved (None when dangling)."""

    contribution: Contribution
    employee: Optional[Employee]

    def to_dict(self) -> Dict[str, Any]:
        c = self.contribution
        return {
            "_id": c.contribution_id,
            "amount": float(c.amount),
            "month": c.month,
            "datePaid": to_iso(c.date_paid),
            "employee": self.employee.to_dict() if self.employee else None,
            "createdAt": to_iso(c.created_at),
            "updatedAt": to_iso(c.updated_at),
        }
