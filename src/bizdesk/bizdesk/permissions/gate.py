from __future__ import annotations

import logging

from ..core.enums import Capability, FixedAction, Role
from ..core.exceptions import Forbidden
from .policies import CapabilityMatrix, FixedTierPolicy, RoleLike, coerce_role

logger = logging.getLogger("bizdesk.permissions")

# Roles allowed into the payroll screen's staff management actions.
STAFF_MANAGER_ROLES = frozenset({Role.OWNER, Role.ADMIN, Role.MANAGER})


class PermissionGate:
    """Composes the fixed tier and the configurable matrix.

    The gate is a value: ``set_permission`` returns a new gate and leaves
    this one untouched.
    """

    def __init__(self, matrix: CapabilityMatrix | None = None, *, fixed: FixedTierPolicy | None = None):
        self._fixed = fixed or FixedTierPolicy()
        self._matrix = matrix or CapabilityMatrix.default()

    @property
    def matrix(self) -> CapabilityMatrix:
        return self._matrix

    def is_allowed(self, role: RoleLike, capability: Capability) -> bool:
        return self._matrix.is_allowed(role, capability)

    def require_capability(self, role: RoleLike, capability: Capability) -> None:
        if not self.is_allowed(role, capability):
            raise Forbidden(f"Role {role} lacks {capability.value}")

    def require_fixed(self, action: FixedAction, role: RoleLike) -> None:
        self._fixed.require(action, role)

    def require_role_assignment(self, actor_role: RoleLike, target_role: Role) -> None:
        self._fixed.require_role_assignment(actor_role, target_role)

    def can_manage_staff(self, role: RoleLike) -> bool:
        return coerce_role(role) in STAFF_MANAGER_ROLES

    def require_staff_manager(self, role: RoleLike) -> None:
        if not self.can_manage_staff(role):
            raise Forbidden("Managing staff requires OWNER, ADMIN or MANAGER")

    def set_permission(
        self, actor_role: RoleLike, role: Role, capability: Capability, value: bool
    ) -> "PermissionGate":
        self._fixed.require(FixedAction.EDIT_PERMISSION_MATRIX, actor_role)
        matrix = self._matrix.with_permission(role, capability, value)
        logger.info("Permission %s for %s set to %s", capability.value, role.value, bool(value))
        return PermissionGate(matrix, fixed=self._fixed)
