from __future__ import annotations

from ..model import InventoryItem, StockAlertConfig
from .base import ThresholdStrategy


class GlobalMinStrategy(ThresholdStrategy):
    """Uniform absolute minimum; the item's reorder level is ignored."""

    def threshold(self, item: InventoryItem, config: StockAlertConfig) -> float:
        return config.value
