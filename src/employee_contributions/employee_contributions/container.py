from __future__ import annotations

from dataclasses import dataclass

from .contributions.integrity import EmployeeReferenceChecker
from .contributions.joiner import ContributionJoiner
from .contributions.mysql_contribution_repository import MySQLContributionRepository
from .contributions.repository import ContributionRepository
from .contributions.service import ContributionService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    contributions_repo: ContributionRepository

    employee_service: EmployeeService
    contribution_service: ContributionService


def build_services(*, employees_repo: EmployeeRepository, contributions_repo: ContributionRepository) -> Container:
    checker = EmployeeReferenceChecker(employees_repo)
    joiner = ContributionJoiner(employees_repo)

    return Container(
        employees_repo=employees_repo,
        contributions_repo=contributions_repo,
        employee_service=EmployeeService(employees_repo),
        contribution_service=ContributionService(contributions_repo, checker, joiner),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        contributions_repo=MySQLContributionRepository(conn),
    )
