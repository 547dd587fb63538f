from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this protocol, never on a concrete database.
    """

    def insert(self, *, name: str, department: str, phone: str) -> Employee:
        raise NotImplementedError

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_many(self, employee_ids: Iterable[str]) -> Dict[str, Employee]:
        """Resolve several ids at once; unknown ids are simply absent."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def update_by_id(self, employee_id: str, changes: Mapping[str, str]) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError
