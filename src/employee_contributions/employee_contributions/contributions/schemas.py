"""Request records for the contribution endpoints."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional

from ..common.validators import require_amount, require_datetime, require_identifier, require_non_empty
from ..core.constants import EMPLOYEE_REF_MAX_LENGTH, MONTH_MAX_LENGTH


def _as_mapping(payload: Any) -> Mapping[str, Any]:
    return payload if isinstance(payload, Mapping) else {}


@dataclass(frozen=True)
class ContributionCreate:
    amount: Decimal
    month: str
    employee_id: str
    date_paid: Optional[datetime] = None  # defaults to creation time

    @classmethod
    def from_payload(cls, payload: Any) -> "ContributionCreate":
        data = _as_mapping(payload)
        date_paid = data.get("datePaid")
        return cls(
            employee_id=require_identifier(data.get("employee"), "employee", EMPLOYEE_REF_MAX_LENGTH),
            amount=require_amount(data.get("amount"), "amount"),
            month=require_non_empty(data.get("month"), "month", MONTH_MAX_LENGTH),
            date_paid=require_datetime(date_paid, "datePaid") if date_paid not in (None, "") else None,
        )


@dataclass(frozen=True)
class ContributionUpdate:
    """Fields left as None (absent or null in the body) are not touched."""

    amount: Optional[Decimal] = None
    month: Optional[str] = None
    date_paid: Optional[datetime] = None
    employee_id: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "ContributionUpdate":
        data = _as_mapping(payload)
        values: Dict[str, Any] = {}
        if data.get("amount") is not None:
            values["amount"] = require_amount(data["amount"], "amount")
        if data.get("month") is not None:
            values["month"] = require_non_empty(data["month"], "month", MONTH_MAX_LENGTH)
        if data.get("datePaid") is not None:
            values["date_paid"] = require_datetime(data["datePaid"], "datePaid")
        # null means "leave the reference alone"; an empty string is rejected.
        if data.get("employee") is not None:
            values["employee_id"] = require_identifier(data["employee"], "employee", EMPLOYEE_REF_MAX_LENGTH)
        return cls(**values)

    def changes(self) -> Dict[str, Any]:
        fields = ("amount", "month", "date_paid", "employee_id")
        return {f: getattr(self, f) for f in fields if getattr(self, f) is not None}
