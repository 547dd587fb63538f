from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Contribution


class ContributionRepository(Protocol):
    def insert(
        self,
        *,
        employee_id: str,
        amount: Decimal,
        month: str,
        date_paid: Optional[datetime] = None,
    ) -> Contribution:
        """Create a contribution; `date_paid` defaults to the creation time.

        Implementations backed by a transactional store raise
        InvalidReferenceError if the employee row is gone at write time.
        """

        raise NotImplementedError

    def get_by_id(self, contribution_id: str) -> Optional[Contribution]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Contribution]:
        raise NotImplementedError

    def list_by_employee(self, employee_id: str) -> Sequence[Contribution]:
        raise NotImplementedError

    def update_by_id(self, contribution_id: str, changes: Mapping[str, Any]) -> Optional[Contribution]:
        raise NotImplementedError

    def delete_by_id(self, contribution_id: str) -> Optional[Contribution]:
        raise NotImplementedError
