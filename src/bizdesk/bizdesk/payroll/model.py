from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import DeductionType, EmployeeStatus


@dataclass(frozen=True)
class Deduction:
    """Immutable once appended to an employee."""

    id: str
    date: str
    amount: float
    type: DeductionType
    reason: str


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee aggregate.

    ``net_salary`` has no enforced floor. ``linked_user_id`` is a weak
    reference into the user directory.
    """

    id: str
    name: str
    position: str
    base_salary: float
    net_salary: float
    status: EmployeeStatus
    join_date: str
    deductions: tuple[Deduction, ...] = ()
    linked_user_id: Optional[str] = None


@dataclass(frozen=True)
class EmployeePatch:
    """Fields an operator may edit; None means "leave as is"."""

    name: Optional[str] = None
    position: Optional[str] = None
    base_salary: Optional[float] = None
    status: Optional[EmployeeStatus] = None


@dataclass(frozen=True)
class PayrollPolicy:
    # Advances are always bounded by net salary; day deductions only when set.
    floor_net_salary_at_zero: bool = False


@dataclass(frozen=True)
class RosterUpdate:
    """Result of an engine operation: the new roster plus the touched record."""

    employees: tuple[Employee, ...]
    employee: Optional[Employee] = None


@dataclass(frozen=True)
class SalarySummary:
    base_salary: float
    day_deductions: float
    advances: float
    net_salary: float
