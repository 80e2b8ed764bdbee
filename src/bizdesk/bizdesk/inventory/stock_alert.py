from __future__ import annotations

from typing import Iterable

from .factory import ThresholdStrategyFactory
from .model import InventoryItem, StockAlertConfig

_factory = ThresholdStrategyFactory()


def resolve(item: InventoryItem, config: StockAlertConfig) -> bool:
    """True when the item is at or below its low-stock threshold.

    Recomputed on every call; nothing is cached.
    """
    strategy = _factory.for_config(config)
    return item.quantity <= strategy.threshold(item, config)


def low_stock_items(items: Iterable[InventoryItem], config: StockAlertConfig) -> tuple[InventoryItem, ...]:
    strategy = _factory.for_config(config)
    return tuple(item for item in items if item.quantity <= strategy.threshold(item, config))
