from __future__ import annotations

from ..core.constants import PERMISSIONS_KEY
from ..storage.port import KeyValueStore
from .gate import PermissionGate
from .model import DEFAULT_ROLE_PERMISSIONS, RolePermission
from .policies import CapabilityMatrix, coerce_role
from .repository import PermissionRepository


class StorePermissionRepository(PermissionRepository):
    """Permission matrix persisted under ``role_permissions_v3``.

    A fresh store yields the default matrix.
    """

    def __init__(self, store: KeyValueStore):
        self._store = store

    def load_gate(self) -> PermissionGate:
        docs = self._store.load(PERMISSIONS_KEY, None)
        if docs is None:
            return PermissionGate(CapabilityMatrix.from_rows(DEFAULT_ROLE_PERMISSIONS))
        rows = [RolePermission.from_doc(d) for d in docs if coerce_role(d.get("role")) is not None]
        return PermissionGate(CapabilityMatrix.from_rows(rows))

    def save_matrix(self, matrix: CapabilityMatrix) -> None:
        self._store.save(PERMISSIONS_KEY, [row.to_doc() for row in matrix.to_rows()])
