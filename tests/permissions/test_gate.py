from __future__ import annotations

import pytest

from src.bizdesk.bizdesk.core.constants import PERMISSIONS_KEY
from src.bizdesk.bizdesk.core.enums import Capability, FixedAction, Role
from src.bizdesk.bizdesk.core.exceptions import Forbidden, ValidationError
from src.bizdesk.bizdesk.permissions.gate import PermissionGate
from src.bizdesk.bizdesk.permissions.policies import CapabilityMatrix, FixedTierPolicy
from src.bizdesk.bizdesk.permissions.store_permission_repository import StorePermissionRepository


@pytest.mark.parametrize(
    "role, capability, expected",
    [
        (Role.MANAGER, Capability.EDIT_SETTINGS, False),
        (Role.MANAGER, Capability.DELETE_ITEMS, True),
        (Role.MANAGER, Capability.VIEW_REPORTS, True),
        (Role.MANAGER, Capability.MANAGE_USERS, True),
        (Role.ADMIN, Capability.MANAGE_USERS, True),
        (Role.ACCOUNTANT, Capability.VIEW_REPORTS, True),
        (Role.ACCOUNTANT, Capability.DELETE_ITEMS, False),
        (Role.SALES, Capability.VIEW_REPORTS, False),
        (Role.VIEWER, Capability.VIEW_REPORTS, False),
    ],
)
def test_default_matrix(role, capability, expected):
    assert PermissionGate().is_allowed(role, capability) is expected


@pytest.mark.parametrize("capability", list(Capability))
def test_owner_is_allowed_everything(capability):
    assert PermissionGate().is_allowed(Role.OWNER, capability)


@pytest.mark.parametrize("role", [None, "", "GUEST"])
def test_unknown_or_missing_role_is_denied(role):
    gate = PermissionGate()
    assert gate.is_allowed(role, Capability.VIEW_REPORTS) is False
    with pytest.raises(Forbidden):
        gate.require_capability(role, Capability.VIEW_REPORTS)


def test_role_as_plain_string_is_accepted():
    assert PermissionGate().is_allowed("MANAGER", Capability.DELETE_ITEMS)


@pytest.mark.parametrize("action", list(FixedAction))
def test_fixed_tier_is_owner_only(action):
    policy = FixedTierPolicy()
    assert policy.permits(action, Role.OWNER)
    PermissionGate().require_fixed(action, Role.OWNER)
    for role in (Role.ADMIN, Role.MANAGER, Role.ACCOUNTANT, Role.VIEWER, Role.SALES, None):
        assert not policy.permits(action, role)
        with pytest.raises(Forbidden):
            PermissionGate().require_fixed(action, role)


def test_matrix_cannot_relax_fixed_tier():
    matrix = CapabilityMatrix.default()
    for capability in Capability:
        matrix = matrix.with_permission(Role.ADMIN, capability, True)
    gate = PermissionGate(matrix)

    with pytest.raises(Forbidden):
        gate.require_fixed(FixedAction.DELETE_EMPLOYEE, Role.ADMIN)


def test_set_permission_returns_new_gate():
    gate = PermissionGate()

    updated = gate.set_permission(Role.OWNER, Role.SALES, Capability.VIEW_REPORTS, True)

    assert updated.is_allowed(Role.SALES, Capability.VIEW_REPORTS)
    assert not gate.is_allowed(Role.SALES, Capability.VIEW_REPORTS)


@pytest.mark.parametrize("actor", [Role.ADMIN, Role.MANAGER])
def test_only_owner_edits_matrix(actor):
    with pytest.raises(Forbidden):
        PermissionGate().set_permission(actor, Role.SALES, Capability.VIEW_REPORTS, True)


def test_owner_row_is_not_configurable():
    with pytest.raises(ValidationError):
        PermissionGate().set_permission(Role.OWNER, Role.OWNER, Capability.VIEW_REPORTS, False)


def test_role_assignment_guards_elevated_roles():
    gate = PermissionGate()
    gate.require_role_assignment(Role.MANAGER, Role.SALES)
    gate.require_role_assignment(Role.OWNER, Role.ADMIN)
    with pytest.raises(Forbidden):
        gate.require_role_assignment(Role.MANAGER, Role.ADMIN)


@pytest.mark.parametrize(
    "role, expected",
    [(Role.OWNER, True), (Role.ADMIN, True), (Role.MANAGER, True), (Role.ACCOUNTANT, False), (Role.SALES, False)],
)
def test_staff_manager_set(role, expected):
    assert PermissionGate().can_manage_staff(role) is expected


def test_repository_defaults_and_round_trip(store):
    repo = StorePermissionRepository(store)
    assert repo.load_gate().matrix == CapabilityMatrix.default()

    gate = repo.load_gate().set_permission(Role.OWNER, Role.VIEWER, Capability.VIEW_REPORTS, True)
    repo.save_matrix(gate.matrix)

    assert repo.load_gate().is_allowed(Role.VIEWER, Capability.VIEW_REPORTS)
    docs = store.load(PERMISSIONS_KEY)
    assert {"role": "VIEWER", "canViewReports": True}.items() <= next(d for d in docs if d["role"] == "VIEWER").items()


def test_repository_skips_unknown_role_rows(store):
    store.save(PERMISSIONS_KEY, [{"role": "GUEST", "canViewReports": True}, {"role": "SALES", "canViewReports": True}])

    gate = StorePermissionRepository(store).load_gate()

    assert gate.is_allowed(Role.SALES, Capability.VIEW_REPORTS)
    assert not gate.is_allowed("GUEST", Capability.VIEW_REPORTS)
