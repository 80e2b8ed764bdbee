from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import InventoryItem, StockAlertConfig


class ThresholdStrategy(ABC):
    """Strategy Pattern: encapsulate how the low-stock threshold is derived."""

    @abstractmethod
    def threshold(self, item: InventoryItem, config: StockAlertConfig) -> float:
        raise NotImplementedError
