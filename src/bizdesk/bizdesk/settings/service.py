from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import Capability, Role, StockAlertMode
from ..core.exceptions import ValidationError
from ..inventory.model import StockAlertConfig
from ..permissions.gate import PermissionGate
from ..permissions.repository import PermissionRepository
from .model import CompanySettings
from .repository import SettingsRepository

logger = logging.getLogger("bizdesk.settings")

_EDITABLE_FIELDS = frozenset({"name", "currency", "tax_rate", "address", "logo_url"})


class SettingsService:
    """Use case: company settings and the permission matrix."""

    def __init__(self, settings: SettingsRepository, permissions: PermissionRepository):
        self._settings = settings
        self._permissions = permissions

    def get_settings(self) -> CompanySettings:
        return self._settings.load()

    def stock_alert(self) -> StockAlertConfig:
        return self._settings.load().stock_alert

    def gate(self) -> PermissionGate:
        return self._permissions.load_gate()

    def update_settings(self, *, actor_role: Role, **changes: Any) -> CompanySettings:
        self.gate().require_capability(actor_role, Capability.EDIT_SETTINGS)
        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown settings: {', '.join(sorted(unknown))}")
        if "name" in changes:
            changes["name"] = require_non_empty(changes["name"], "Company name")
        if "tax_rate" in changes:
            changes["tax_rate"] = require_non_negative(changes["tax_rate"], "Tax rate")

        updated = replace(self._settings.load(), **changes)
        self._settings.save(updated)
        logger.info("Company settings updated: %s", ", ".join(sorted(changes)))
        return updated

    def set_stock_alert(self, *, actor_role: Role, mode: StockAlertMode, value: float = 0) -> StockAlertConfig:
        self.gate().require_capability(actor_role, Capability.EDIT_SETTINGS)
        try:
            mode = StockAlertMode(mode)
        except ValueError:
            raise ValidationError(f"Unknown stock alert mode: {mode}")
        config = StockAlertConfig(mode=mode, value=require_non_negative(value, "Alert value"))
        self._settings.save(replace(self._settings.load(), stock_alert=config))
        logger.info("Stock alert set to %s (%s)", mode.value, config.value)
        return config

    def set_permission(self, *, actor_role: Role, role: Role, capability: Capability, value: bool) -> PermissionGate:
        gate = self.gate().set_permission(actor_role, role, capability, value)
        self._permissions.save_matrix(gate.matrix)
        return gate
