from __future__ import annotations

from typing import List

import structlog

from ..core.constants import CONTRIBUTION_NOT_FOUND
from ..core.exceptions import NotFoundError
from .integrity import EmployeeReferenceChecker
from .joiner import ContributionJoiner
from .model import Contribution, PopulatedContribution
from .repository import ContributionRepository
from .schemas import ContributionCreate, ContributionUpdate

logger = structlog.get_logger(__name__)


class ContributionService:
    """Use cases: manage contributions.

    Every contribution handed back to a caller has its employee populated.
    """

    def __init__(
        self,
        contributions: ContributionRepository,
        checker: EmployeeReferenceChecker,
        joiner: ContributionJoiner,
    ):
        self._contributions = contributions
        self._checker = checker
        self._joiner = joiner

    def list_contributions(self) -> List[PopulatedContribution]:
        return self._joiner.attach_employees(self._contributions.list_all())

    def list_for_employee(self, employee_id: str) -> List[PopulatedContribution]:
        return self._joiner.attach_employees(self._contributions.list_by_employee(employee_id))

    def get_contribution(self, contribution_id: str) -> PopulatedContribution:
        return self._joiner.attach_employee(self._get_or_raise(contribution_id))

    def create_contribution(self, data: ContributionCreate) -> PopulatedContribution:
        self._checker.check_employee_exists(data.employee_id)
        contribution = self._contributions.insert(
            employee_id=data.employee_id,
            amount=data.amount,
            month=data.month,
            date_paid=data.date_paid,
        )
        logger.info(
            "contribution_created",
            contribution_id=contribution.contribution_id,
            employee_id=contribution.employee_id,
        )
        return self._joiner.attach_employee(contribution)

    def update_contribution(self, contribution_id: str, data: ContributionUpdate) -> PopulatedContribution:
        # No employee in the payload: the reference is left as is and not re-checked.
        if data.employee_id is not None:
            self._checker.check_employee_exists(data.employee_id)

        updated = self._contributions.update_by_id(contribution_id, data.changes())
        if updated is None:
            raise NotFoundError(CONTRIBUTION_NOT_FOUND)
        logger.info("contribution_updated", contribution_id=contribution_id)
        return self._joiner.attach_employee(updated)

    def delete_contribution(self, contribution_id: str) -> Contribution:
        deleted = self._contributions.delete_by_id(contribution_id)
        if not deleted:
            raise NotFoundError(CONTRIBUTION_NOT_FOUND)
        logger.info("contribution_deleted", contribution_id=contribution_id)
        return deleted

    def _get_or_raise(self, contribution_id: str) -> Contribution:
        contribution = self._contributions.get_by_id(contribution_id)
        if not contribution:
            raise NotFoundError(CONTRIBUTION_NOT_FOUND)
        return contribution
