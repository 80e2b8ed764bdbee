from __future__ import annotations

from typing import Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Single owner of the employees aggregate."""

    def load_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def save_all(self, employees: Sequence[Employee]) -> None:
        raise NotImplementedError
