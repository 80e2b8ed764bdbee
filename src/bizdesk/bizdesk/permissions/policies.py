"""The two authorization tiers.

FixedTierPolicy holds the OWNER-only rules that no configuration can relax.
CapabilityMatrix holds the per-role table an owner may tune. They are kept
as separate objects and only composed by ``PermissionGate``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Union

from ..core.enums import Capability, FixedAction, Role
from ..core.exceptions import Forbidden, ValidationError
from .model import DEFAULT_ROLE_PERMISSIONS, RolePermission

RoleLike = Union[Role, str, None]

ELEVATED_ROLES = frozenset({Role.ADMIN, Role.OWNER})


def coerce_role(role: RoleLike) -> Optional[Role]:
    if isinstance(role, Role):
        return role
    if role is None:
        return None
    try:
        return Role(str(role))
    except ValueError:
        return None


class FixedTierPolicy:
    """Hardcoded OWNER-only checks for the most sensitive primitives."""

    _OWNER_ONLY: Mapping[FixedAction, frozenset[Role]] = {
        action: frozenset({Role.OWNER}) for action in FixedAction
    }

    def permits(self, action: FixedAction, role: RoleLike) -> bool:
        actor = coerce_role(role)
        return actor is not None and actor in self._OWNER_ONLY[action]

    def require(self, action: FixedAction, role: RoleLike) -> None:
        if not self.permits(action, role):
            raise Forbidden(f"{action.value} requires the OWNER role")

    def require_role_assignment(self, actor_role: RoleLike, target_role: Role) -> None:
        if target_role in ELEVATED_ROLES:
            self.require(FixedAction.ELEVATE_USER_ROLE, actor_role)


@dataclass(frozen=True)
class CapabilityMatrix:
    """Immutable role -> RolePermission table."""

    rows: Mapping[Role, RolePermission]

    @classmethod
    def from_rows(cls, rows: Iterable[RolePermission]) -> "CapabilityMatrix":
        table: dict[Role, RolePermission] = {}
        for row in rows:
            if row.role == Role.OWNER:
                continue
            table[row.role] = row
        return cls(rows=table)

    @classmethod
    def default(cls) -> "CapabilityMatrix":
        return cls.from_rows(DEFAULT_ROLE_PERMISSIONS)

    def is_allowed(self, role: RoleLike, capability: Capability) -> bool:
        actor = coerce_role(role)
        if actor is None:
            return False
        if actor == Role.OWNER:
            return True
        row = self.rows.get(actor)
        return row.allows(capability) if row else False

    def with_permission(self, role: Role, capability: Capability, value: bool) -> "CapabilityMatrix":
        if role == Role.OWNER:
            raise ValidationError("The OWNER role has no configurable permissions")
        current = self.rows.get(role) or RolePermission(role=role)
        table = dict(self.rows)
        table[role] = current.with_capability(capability, value)
        return CapabilityMatrix(rows=table)

    def to_rows(self) -> tuple[RolePermission, ...]:
        return tuple(self.rows.values())
