from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from ..core.enums import DeductionType, Role
from ..core.exceptions import DomainError
from ..users.model import Credentials
from .engine import PayrollEngine, salary_summary, search_employees
from .model import Employee, EmployeePatch, RosterUpdate, SalarySummary
from .repository import EmployeeRepository

logger = logging.getLogger("bizdesk.payroll")


class PayrollService:
    """Aggregate root for employees.

    Loads the roster, runs one engine operation and saves the new roster.
    Nothing is saved when the engine raises.
    """

    def __init__(self, employees: EmployeeRepository, engine: PayrollEngine):
        self._employees = employees
        self._engine = engine

    def _run(self, action: str, op: Callable[[tuple[Employee, ...]], RosterUpdate]) -> Optional[Employee]:
        roster = tuple(self._employees.load_all())
        try:
            result = op(roster)
        except DomainError as e:
            logger.warning("Payroll %s rejected: %s", action, e)
            raise
        self._employees.save_all(result.employees)
        logger.info("Payroll %s applied to employee %s", action, result.employee.id if result.employee else "-")
        return result.employee

    def list_employees(self, search: str = "") -> tuple[Employee, ...]:
        return search_employees(self._employees.load_all(), search)

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self._employees.load_all() if e.id == employee_id), None)

    def statement(self, employee_id: str) -> Optional[SalarySummary]:
        employee = self.get_employee(employee_id)
        return salary_summary(employee) if employee else None

    def add_employee(
        self,
        *,
        name: str,
        base_salary: float,
        actor_role: Role,
        position: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Employee:
        return self._run(
            "add",
            lambda roster: self._engine.add_employee(
                roster, name=name, position=position, base_salary=base_salary, actor_role=actor_role, today=today
            ),
        )

    def apply_deduction(
        self, employee_id: str, deduction_type: DeductionType, reason: str = "", *, today: Optional[date] = None
    ) -> Employee:
        return self._run(
            "deduction",
            lambda roster: self._engine.apply_deduction(roster, employee_id, deduction_type, reason, today=today),
        )

    def apply_advance(
        self, employee_id: str, amount: float, reason: str = "", *, today: Optional[date] = None
    ) -> Employee:
        return self._run(
            "advance",
            lambda roster: self._engine.apply_advance(roster, employee_id, amount, reason, today=today),
        )

    def update_employee(self, employee_id: str, patch: EmployeePatch, *, actor_role: Role) -> Employee:
        return self._run(
            "update",
            lambda roster: self._engine.update_employee(roster, employee_id, patch, actor_role=actor_role),
        )

    def delete_employee(self, employee_id: str, *, actor_role: Role) -> None:
        self._run(
            "delete",
            lambda roster: self._engine.delete_employee(roster, employee_id, actor_role=actor_role),
        )

    def link_user_account(self, employee_id: str, credentials: Credentials, *, actor_role: Role) -> Employee:
        return self._run(
            "link-account",
            lambda roster: self._engine.link_user_account(roster, employee_id, credentials, actor_role=actor_role),
        )

    def unlink_user_account(self, employee_id: str, *, actor_role: Role) -> Employee:
        return self._run(
            "unlink-account",
            lambda roster: self._engine.unlink_user_account(roster, employee_id, actor_role=actor_role),
        )
