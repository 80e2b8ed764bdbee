"""Payroll engine.

Every operation takes the current roster (a tuple of frozen ``Employee``)
and returns a new one; nothing is edited in place, so a caller holding an
older snapshot never sees a change. Authorization and protected-record
checks always run before any computation.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import today_iso
from ..common.ids import new_id
from ..common.validators import require_non_empty, require_non_negative, require_positive
from ..core.constants import (
    DEFAULT_ADVANCE_REASON,
    DEFAULT_EMPLOYEE_POSITION,
    PRIMARY_OWNER_EMPLOYEE_ID,
)
from ..core.enums import DeductionType, EmployeeStatus, FixedAction, Role
from ..core.exceptions import InsufficientBalance, NotFound, ProtectedRecord, ValidationError
from ..permissions.gate import PermissionGate
from ..permissions.policies import coerce_role
from ..users.model import Credentials, User
from ..users.repository import UserDirectory
from .calculator.base import DeductionCalculator
from .calculator.standard_calculator import StandardDeductionCalculator
from .model import Deduction, Employee, EmployeePatch, PayrollPolicy, RosterUpdate, SalarySummary

logger = logging.getLogger("bizdesk.payroll")

Roster = Sequence[Employee]


def linked_user_id_for(employee_id: str) -> str:
    return f"user-{employee_id}"


def _find(employees: Roster, employee_id: str) -> Employee:
    for emp in employees:
        if emp.id == employee_id:
            return emp
    raise NotFound(f"Employee {employee_id} does not exist")


def _replace_in(employees: Roster, updated: Employee) -> tuple[Employee, ...]:
    return tuple(updated if emp.id == updated.id else emp for emp in employees)


class PayrollEngine:
    def __init__(
        self,
        gate: PermissionGate,
        users: UserDirectory,
        *,
        calculator: Optional[DeductionCalculator] = None,
        policy: Optional[PayrollPolicy] = None,
    ):
        self._gate = gate
        self._users = users
        self._calculator = calculator or StandardDeductionCalculator()
        self._policy = policy or PayrollPolicy()

    @property
    def policy(self) -> PayrollPolicy:
        return self._policy

    def add_employee(
        self,
        employees: Roster,
        *,
        name: str,
        position: Optional[str],
        base_salary: float,
        actor_role: Role,
        today: Optional[date] = None,
    ) -> RosterUpdate:
        self._gate.require_staff_manager(actor_role)
        name = require_non_empty(name, "Employee name")
        base_salary = require_positive(base_salary, "Base salary")

        employee = Employee(
            id=new_id(),
            name=name,
            position=(position or "").strip() or DEFAULT_EMPLOYEE_POSITION,
            base_salary=base_salary,
            net_salary=base_salary,
            status=EmployeeStatus.ACTIVE,
            join_date=today_iso(today),
        )
        return RosterUpdate(employees=(*employees, employee), employee=employee)

    def apply_deduction(
        self,
        employees: Roster,
        employee_id: str,
        deduction_type: DeductionType,
        reason: str = "",
        *,
        today: Optional[date] = None,
    ) -> RosterUpdate:
        """Deduct a fraction of one day's pay (base salary / 30).

        Unlike advances, no balance check is made: net salary may go negative
        unless the policy floors it at zero, in which case only what was
        actually taken is recorded.
        """
        if deduction_type == DeductionType.ADVANCE:
            raise ValidationError("Advances must go through apply_advance")
        employee = _find(employees, employee_id)

        amount = self._calculator.amount_for(employee, deduction_type)
        if self._policy.floor_net_salary_at_zero:
            amount = min(amount, max(employee.net_salary, 0))

        updated = self._append(employee, amount, deduction_type, reason or "", today)
        return RosterUpdate(employees=_replace_in(employees, updated), employee=updated)

    def apply_advance(
        self,
        employees: Roster,
        employee_id: str,
        amount: float,
        reason: str = "",
        *,
        today: Optional[date] = None,
    ) -> RosterUpdate:
        amount = require_positive(amount, "Advance amount")
        employee = _find(employees, employee_id)
        if amount > employee.net_salary:
            raise InsufficientBalance(
                f"Advance {amount} exceeds current net salary {employee.net_salary}"
            )

        updated = self._append(
            employee, amount, DeductionType.ADVANCE, (reason or "").strip() or DEFAULT_ADVANCE_REASON, today
        )
        return RosterUpdate(employees=_replace_in(employees, updated), employee=updated)

    def update_employee(
        self,
        employees: Roster,
        employee_id: str,
        patch: EmployeePatch,
        *,
        actor_role: Role,
    ) -> RosterUpdate:
        """Apply an edit. Net salary is not recomputed when base salary changes.

        Only a base salary that differs from the current one counts as a
        salary edit, so a non-OWNER patch repeating the same value passes.
        """
        self._gate.require_staff_manager(actor_role)
        employee = _find(employees, employee_id)
        changes: dict = {}

        if patch.base_salary is not None and patch.base_salary != employee.base_salary:
            self._gate.require_fixed(FixedAction.EDIT_BASE_SALARY, actor_role)
            changes["base_salary"] = require_non_negative(patch.base_salary, "Base salary")
        if patch.name is not None:
            changes["name"] = require_non_empty(patch.name, "Employee name")
        if patch.position is not None:
            changes["position"] = patch.position.strip() or DEFAULT_EMPLOYEE_POSITION
        if patch.status is not None:
            try:
                changes["status"] = EmployeeStatus(patch.status)
            except ValueError:
                raise ValidationError(f"Unknown employee status: {patch.status}")

        updated = replace(employee, **changes)
        return RosterUpdate(employees=_replace_in(employees, updated), employee=updated)

    def delete_employee(self, employees: Roster, employee_id: str, *, actor_role: Role) -> RosterUpdate:
        """Remove an employee. A linked login account is left alone."""
        self._gate.require_fixed(FixedAction.DELETE_EMPLOYEE, actor_role)
        if employee_id == PRIMARY_OWNER_EMPLOYEE_ID:
            raise ProtectedRecord("The primary owner record cannot be deleted")
        employee = _find(employees, employee_id)
        return RosterUpdate(
            employees=tuple(emp for emp in employees if emp.id != employee_id),
            employee=employee,
        )

    def link_user_account(
        self,
        employees: Roster,
        employee_id: str,
        credentials: Credentials,
        *,
        actor_role: Role,
    ) -> RosterUpdate:
        """Give an employee a login, or update the one already linked."""
        self._gate.require_staff_manager(actor_role)
        role = coerce_role(credentials.role)
        if role is None:
            raise ValidationError(f"Unknown role: {credentials.role}")
        self._gate.require_role_assignment(actor_role, role)
        username = require_non_empty(credentials.username, "Username")
        employee = _find(employees, employee_id)
        password = credentials.password or None

        if employee.linked_user_id:
            self._gate.require_fixed(FixedAction.EDIT_LINKED_ACCOUNT, actor_role)
            existing = self._users.get_by_id(employee.linked_user_id)
            if existing is None:
                logger.warning(
                    "Employee %s linked to missing user %s, recreating it", employee.id, employee.linked_user_id
                )
                self._users.create_user(
                    User(
                        id=employee.linked_user_id,
                        username=username,
                        name=employee.name,
                        role=role,
                        password_hash=generate_password_hash(password) if password else None,
                    )
                )
            else:
                self._users.update_user(
                    replace(
                        existing,
                        username=username,
                        name=employee.name,
                        role=role,
                        password_hash=generate_password_hash(password) if password else existing.password_hash,
                    )
                )
            return RosterUpdate(employees=tuple(employees), employee=employee)

        user = User(
            id=linked_user_id_for(employee.id),
            username=username,
            name=employee.name,
            role=role,
            password_hash=generate_password_hash(password) if password else None,
        )
        self._users.create_user(user)
        updated = replace(employee, linked_user_id=user.id)
        return RosterUpdate(employees=_replace_in(employees, updated), employee=updated)

    def unlink_user_account(self, employees: Roster, employee_id: str, *, actor_role: Role) -> RosterUpdate:
        """Delete the linked login and clear the link; the employee stays."""
        self._gate.require_fixed(FixedAction.DELETE_USER_ACCOUNT, actor_role)
        employee = _find(employees, employee_id)
        if not employee.linked_user_id:
            raise NotFound(f"Employee {employee_id} has no linked user account")

        try:
            self._users.delete_user(employee.linked_user_id)
        except NotFound:
            logger.warning("Linked user %s was already gone, clearing the link", employee.linked_user_id)

        updated = replace(employee, linked_user_id=None)
        return RosterUpdate(employees=_replace_in(employees, updated), employee=updated)

    @staticmethod
    def _append(
        employee: Employee,
        amount: float,
        deduction_type: DeductionType,
        reason: str,
        today: Optional[date],
    ) -> Employee:
        deduction = Deduction(
            id=new_id(),
            date=today_iso(today),
            amount=amount,
            type=deduction_type,
            reason=reason,
        )
        return replace(
            employee,
            net_salary=employee.net_salary - amount,
            deductions=(*employee.deductions, deduction),
        )


def search_employees(employees: Roster, term: str) -> tuple[Employee, ...]:
    """Case-insensitive match on name or position; blank term returns all."""
    needle = (term or "").strip().lower()
    if not needle:
        return tuple(employees)
    return tuple(emp for emp in employees if needle in emp.name.lower() or needle in emp.position.lower())


def salary_summary(employee: Employee) -> SalarySummary:
    advances = sum(d.amount for d in employee.deductions if d.type == DeductionType.ADVANCE)
    day_deductions = sum(d.amount for d in employee.deductions if d.type != DeductionType.ADVANCE)
    return SalarySummary(
        base_salary=employee.base_salary,
        day_deductions=day_deductions,
        advances=advances,
        net_salary=employee.net_salary,
    )
