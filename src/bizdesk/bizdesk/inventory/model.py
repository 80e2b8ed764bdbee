from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import StockAlertMode


@dataclass(frozen=True)
class InventoryItem:
    """Domain entity: stocked item."""

    id: str
    sku: str
    name: str
    quantity: float
    unit: str
    unit_price: float
    reorder_level: float
    category: str


@dataclass(frozen=True)
class StockAlertConfig:
    """``value`` is ignored in REORDER_LEVEL mode, an absolute minimum in
    GLOBAL_MIN mode and a percentage of the reorder level in PERCENTAGE mode."""

    mode: StockAlertMode = StockAlertMode.REORDER_LEVEL
    value: float = 0
