from __future__ import annotations

from typing import Protocol

from .gate import PermissionGate
from .policies import CapabilityMatrix


class PermissionRepository(Protocol):
    def load_gate(self) -> PermissionGate:
        raise NotImplementedError

    def save_matrix(self, matrix: CapabilityMatrix) -> None:
        raise NotImplementedError
