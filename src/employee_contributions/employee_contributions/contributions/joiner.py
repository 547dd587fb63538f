from __future__ import annotations

from typing import Iterable, List

from ..employees.repository import EmployeeRepository
from .model import Contribution, PopulatedContribution


class ContributionJoiner:
    """Replaces the employee reference with the full Employee record.

    A reference to a deleted employee resolves to None.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def attach_employee(self, contribution: Contribution) -> PopulatedContribution:
        employee = self._employees.get_by_id(contribution.employee_id)
        return PopulatedContribution(contribution=contribution, employee=employee)

    def attach_employees(self, contributions: Iterable[Contribution]) -> List[PopulatedContribution]:
        contributions = list(contributions)
        if not contributions:
            return []
        by_id = self._employees.get_many(c.employee_id for c in contributions)
        return [PopulatedContribution(contribution=c, employee=by_id.get(c.employee_id)) for c in contributions]
