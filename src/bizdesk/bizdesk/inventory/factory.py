from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import StockAlertMode
from .model import StockAlertConfig
from .strategies.base import ThresholdStrategy
from .strategies.global_min_strategy import GlobalMinStrategy
from .strategies.percentage_strategy import PercentageStrategy
from .strategies.reorder_level_strategy import ReorderLevelStrategy


@dataclass
class ThresholdStrategyFactory:
    """Factory Pattern: choose the threshold strategy for the configured mode."""

    def for_config(self, config: StockAlertConfig) -> ThresholdStrategy:
        if config.mode == StockAlertMode.GLOBAL_MIN:
            return GlobalMinStrategy()
        if config.mode == StockAlertMode.PERCENTAGE:
            return PercentageStrategy()
        return ReorderLevelStrategy()
