from __future__ import annotations

from dataclasses import dataclass, replace

from ..core.enums import Capability, Role


@dataclass(frozen=True)
class RolePermission:
    """One row of the configurable matrix."""

    role: Role
    can_edit_settings: bool = False
    can_delete_items: bool = False
    can_view_reports: bool = False
    can_manage_users: bool = False

    def allows(self, capability: Capability) -> bool:
        return bool(getattr(self, _FIELD_BY_CAPABILITY[capability]))

    def with_capability(self, capability: Capability, value: bool) -> "RolePermission":
        return replace(self, **{_FIELD_BY_CAPABILITY[capability]: bool(value)})

    def to_doc(self) -> dict:
        doc: dict = {"role": self.role.value}
        for capability in Capability:
            doc[capability.value] = self.allows(capability)
        return doc

    @classmethod
    def from_doc(cls, doc: dict) -> "RolePermission":
        row = cls(role=Role(doc["role"]))
        for capability in Capability:
            row = row.with_capability(capability, bool(doc.get(capability.value, False)))
        return row


_FIELD_BY_CAPABILITY = {
    Capability.EDIT_SETTINGS: "can_edit_settings",
    Capability.DELETE_ITEMS: "can_delete_items",
    Capability.VIEW_REPORTS: "can_view_reports",
    Capability.MANAGE_USERS: "can_manage_users",
}


DEFAULT_ROLE_PERMISSIONS: tuple[RolePermission, ...] = (
    RolePermission(Role.ADMIN, can_delete_items=True, can_view_reports=True, can_manage_users=True),
    RolePermission(Role.MANAGER, can_delete_items=True, can_view_reports=True, can_manage_users=True),
    RolePermission(Role.ACCOUNTANT, can_view_reports=True),
    RolePermission(Role.SALES),
    RolePermission(Role.VIEWER),
)
