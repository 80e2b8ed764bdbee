from __future__ import annotations

from ..core.constants import SETTINGS_KEY
from ..core.enums import StockAlertMode
from ..inventory.model import StockAlertConfig
from ..storage.port import KeyValueStore
from .model import CompanySettings
from .repository import SettingsRepository


def settings_to_doc(s: CompanySettings) -> dict:
    doc = {
        "name": s.name,
        "currency": s.currency,
        "taxRate": s.tax_rate,
        "stockAlert": {"mode": s.stock_alert.mode.value, "value": s.stock_alert.value},
    }
    if s.address:
        doc["address"] = s.address
    if s.logo_url:
        doc["logoUrl"] = s.logo_url
    return doc


def settings_from_doc(doc: dict) -> CompanySettings:
    defaults = CompanySettings()
    alert = doc.get("stockAlert") or {}
    try:
        mode = StockAlertMode(alert.get("mode", StockAlertMode.REORDER_LEVEL.value))
    except ValueError:
        mode = StockAlertMode.REORDER_LEVEL
    return CompanySettings(
        name=doc.get("name", defaults.name),
        currency=doc.get("currency", defaults.currency),
        tax_rate=doc.get("taxRate", defaults.tax_rate),
        address=doc.get("address"),
        logo_url=doc.get("logoUrl"),
        stock_alert=StockAlertConfig(mode=mode, value=alert.get("value", 0)),
    )


class StoreSettingsRepository(SettingsRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def load(self) -> CompanySettings:
        doc = self._store.load(SETTINGS_KEY, None)
        return settings_from_doc(doc) if doc else CompanySettings()

    def save(self, settings: CompanySettings) -> None:
        self._store.save(SETTINGS_KEY, settings_to_doc(settings))
