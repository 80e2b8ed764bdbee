from __future__ import annotations

from ..core.constants import INVENTORY_KEY
from ..storage.collection import StoredCollection
from ..storage.port import KeyValueStore
from .model import InventoryItem


def item_to_doc(item: InventoryItem) -> dict:
    return {
        "id": item.id,
        "sku": item.sku,
        "name": item.name,
        "quantity": item.quantity,
        "unit": item.unit,
        "unitPrice": item.unit_price,
        "reorderLevel": item.reorder_level,
        "category": item.category,
    }


def item_from_doc(doc: dict) -> InventoryItem:
    return InventoryItem(
        id=str(doc["id"]),
        sku=doc.get("sku", ""),
        name=doc["name"],
        quantity=doc.get("quantity", 0),
        unit=doc.get("unit", ""),
        unit_price=doc.get("unitPrice", 0),
        reorder_level=doc.get("reorderLevel", 0),
        category=doc.get("category", ""),
    )


class StoreInventoryRepository(StoredCollection[InventoryItem]):
    def __init__(self, store: KeyValueStore):
        super().__init__(store, INVENTORY_KEY, to_doc=item_to_doc, from_doc=item_from_doc)
