from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import DeductionType
from ..model import Employee


class DeductionCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll deductions)."""

    @abstractmethod
    def amount_for(self, employee: Employee, deduction_type: DeductionType) -> float:
        raise NotImplementedError
