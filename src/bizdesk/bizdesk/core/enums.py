from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Authorization identity attached to a user."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    ACCOUNTANT = "ACCOUNTANT"
    MANAGER = "MANAGER"
    VIEWER = "VIEWER"
    SALES = "SALES"


class Capability(str, Enum):
    """Configurable per-role capabilities (the tunable tier)."""

    EDIT_SETTINGS = "canEditSettings"
    DELETE_ITEMS = "canDeleteItems"
    VIEW_REPORTS = "canViewReports"
    MANAGE_USERS = "canManageUsers"


class FixedAction(str, Enum):
    """Sensitive primitives that are OWNER-only and never configurable."""

    EDIT_BASE_SALARY = "EDIT_BASE_SALARY"
    DELETE_EMPLOYEE = "DELETE_EMPLOYEE"
    ELEVATE_USER_ROLE = "ELEVATE_USER_ROLE"
    DELETE_USER_ACCOUNT = "DELETE_USER_ACCOUNT"
    EDIT_PERMISSION_MATRIX = "EDIT_PERMISSION_MATRIX"
    EDIT_LINKED_ACCOUNT = "EDIT_LINKED_ACCOUNT"


class InvoiceStatus(str, Enum):
    PAID = "PAID"
    PENDING = "PENDING"
    # Reserved: nothing assigns it yet.
    OVERDUE = "OVERDUE"


class EmployeeStatus(str, Enum):
    ACTIVE = "ACTIVE"
    LEAVE = "LEAVE"


class DeductionType(str, Enum):
    QUARTER_DAY = "QUARTER_DAY"
    HALF_DAY = "HALF_DAY"
    FULL_DAY = "FULL_DAY"
    OTHER = "OTHER"
    ADVANCE = "ADVANCE"


class StockAlertMode(str, Enum):
    """How the low-stock threshold of an item is derived."""

    REORDER_LEVEL = "REORDER_LEVEL"
    GLOBAL_MIN = "GLOBAL_MIN"
    PERCENTAGE = "PERCENTAGE"
