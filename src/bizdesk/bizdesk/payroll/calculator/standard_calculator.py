from __future__ import annotations

from ...core.constants import DAYS_PER_MONTH
from ...core.enums import DeductionType
from ..model import Employee
from .base import DeductionCalculator

DAY_FACTORS = {
    DeductionType.QUARTER_DAY: 0.25,
    DeductionType.HALF_DAY: 0.5,
    DeductionType.FULL_DAY: 1.0,
}


class StandardDeductionCalculator(DeductionCalculator):
    """Standard rule: base salary / 30 per day, times the day fraction.

    OTHER has no factor and yields 0.
    """

    def daily_rate(self, employee: Employee) -> float:
        return employee.base_salary / DAYS_PER_MONTH

    def amount_for(self, employee: Employee, deduction_type: DeductionType) -> float:
        return self.daily_rate(employee) * DAY_FACTORS.get(deduction_type, 0.0)
