from dataclasses import replace

import pytest

from src.bizdesk.bizdesk.core.enums import DeductionType, EmployeeStatus
from src.bizdesk.bizdesk.payroll.calculator.standard_calculator import StandardDeductionCalculator
from src.bizdesk.bizdesk.payroll.model import Employee


def _employee(base_salary: float) -> Employee:
    return Employee(
        id="e1",
        name="A",
        position="Cashier",
        base_salary=base_salary,
        net_salary=base_salary,
        status=EmployeeStatus.ACTIVE,
        join_date="2026-01-01",
    )


@pytest.mark.parametrize(
    "deduction_type, expected",
    [
        (DeductionType.QUARTER_DAY, 25.0),
        (DeductionType.HALF_DAY, 50.0),
        (DeductionType.FULL_DAY, 100.0),
        (DeductionType.OTHER, 0.0),
    ],
)
def test_standard_calculator_uses_thirty_day_rate(deduction_type, expected):
    calc = StandardDeductionCalculator()
    assert calc.amount_for(_employee(3000), deduction_type) == pytest.approx(expected)


def test_daily_rate_follows_base_not_net_salary():
    calc = StandardDeductionCalculator()
    emp = replace(_employee(4500), net_salary=10)
    assert calc.daily_rate(emp) == pytest.approx(150)
