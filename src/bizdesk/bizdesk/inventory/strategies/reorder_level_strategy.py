from __future__ import annotations

from ..model import InventoryItem, StockAlertConfig
from .base import ThresholdStrategy


class ReorderLevelStrategy(ThresholdStrategy):
    """Per-item threshold: the item's own reorder level."""

    def threshold(self, item: InventoryItem, config: StockAlertConfig) -> float:
        return item.reorder_level
