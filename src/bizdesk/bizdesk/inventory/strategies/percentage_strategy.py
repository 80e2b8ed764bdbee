from __future__ import annotations

from ..model import InventoryItem, StockAlertConfig
from .base import ThresholdStrategy


class PercentageStrategy(ThresholdStrategy):
    """Threshold relative to the item's reorder level (value is a percent)."""

    def threshold(self, item: InventoryItem, config: StockAlertConfig) -> float:
        return item.reorder_level * (config.value / 100)
