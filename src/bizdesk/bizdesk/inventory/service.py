from __future__ import annotations

import logging
from typing import Optional

from ..common.ids import new_id, sequence_label
from ..common.validators import require_non_empty, require_non_negative
from ..core.constants import DEFAULT_ITEM_CATEGORY, DEFAULT_ITEM_UNIT
from ..core.enums import Capability, Role
from ..core.exceptions import NotFound
from ..permissions.repository import PermissionRepository
from .model import InventoryItem, StockAlertConfig
from .repository import InventoryRepository
from .stock_alert import low_stock_items

logger = logging.getLogger("bizdesk.inventory")


class InventoryService:
    """Use case: maintain stock items and report low stock."""

    def __init__(self, items: InventoryRepository, permissions: PermissionRepository):
        self._items = items
        self._permissions = permissions

    def list_items(self) -> tuple[InventoryItem, ...]:
        return tuple(self._items.load_all())

    def add_item(
        self,
        *,
        name: str,
        sku: Optional[str] = None,
        quantity: float = 0,
        unit: Optional[str] = None,
        unit_price: float = 0,
        reorder_level: float = 0,
        category: Optional[str] = None,
    ) -> InventoryItem:
        name = require_non_empty(name, "Item name")
        items = tuple(self._items.load_all())
        item = InventoryItem(
            id=new_id(),
            sku=(sku or "").strip() or sequence_label("SKU", len(items) + 1),
            name=name,
            quantity=require_non_negative(quantity or 0, "Quantity"),
            unit=(unit or "").strip() or DEFAULT_ITEM_UNIT,
            unit_price=require_non_negative(unit_price or 0, "Unit price"),
            reorder_level=require_non_negative(reorder_level or 0, "Reorder level"),
            category=(category or "").strip() or DEFAULT_ITEM_CATEGORY,
        )
        self._items.save_all((*items, item))
        logger.info("Added inventory item sku=%s", item.sku)
        return item

    def remove_item(self, item_id: str, *, actor_role: Role) -> None:
        self._permissions.load_gate().require_capability(actor_role, Capability.DELETE_ITEMS)
        items = tuple(self._items.load_all())
        remaining = tuple(i for i in items if i.id != item_id)
        if len(remaining) == len(items):
            raise NotFound(f"Inventory item {item_id} does not exist")
        self._items.save_all(remaining)
        logger.info("Removed inventory item id=%s", item_id)

    def low_stock(self, config: StockAlertConfig) -> tuple[InventoryItem, ...]:
        return low_stock_items(self._items.load_all(), config)
