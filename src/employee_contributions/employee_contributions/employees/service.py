from __future__ import annotations

from typing import Sequence

import structlog

from ..core.constants import EMPLOYEE_NOT_FOUND
from ..core.exceptions import NotFoundError
from .model import Employee
from .repository import EmployeeRepository
from .schemas import EmployeeCreate, EmployeeUpdate

logger = structlog.get_logger(__name__)


class EmployeeService:
    """Use cases: manage employee records."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError(EMPLOYEE_NOT_FOUND)
        return employee

    def create_employee(self, data: EmployeeCreate) -> Employee:
        employee = self._employees.insert(name=data.name, department=data.department, phone=data.phone)
        logger.info("employee_created", employee_id=employee.employee_id)
        return employee

    def update_employee(self, employee_id: str, data: EmployeeUpdate) -> None:
        """Apply a partial update.

        Succeeds whether or not the id exists; callers get no not-found signal.
        """
        updated = self._employees.update_by_id(employee_id, data.changes())
        if updated is None:
            logger.info("employee_update_missed", employee_id=employee_id)
        else:
            logger.info("employee_updated", employee_id=employee_id)

    def delete_employee(self, employee_id: str) -> Employee:
        # Contributions referencing this employee are left in place.
        deleted = self._employees.delete_by_id(employee_id)
        if not deleted:
            raise NotFoundError(EMPLOYEE_NOT_FOUND)
        logger.info("employee_deleted", employee_id=employee_id)
        return deleted
