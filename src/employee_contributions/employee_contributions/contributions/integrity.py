from __future__ import annotations

import structlog

from ..core.constants import EMPLOYEE_REFERENCE_NOT_FOUND
from ..core.exceptions import InvalidReferenceError
from ..employees.repository import EmployeeRepository

logger = structlog.get_logger(__name__)


class EmployeeReferenceChecker:
    """Confirms a contribution's employee reference resolves before a write."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def check_employee_exists(self, employee_id: str) -> None:
        if self._employees.get_by_id(employee_id) is None:
            logger.info("contribution_rejected", employee_id=employee_id, reason="unknown_employee")
            raise InvalidReferenceError(EMPLOYEE_REFERENCE_NOT_FOUND)
