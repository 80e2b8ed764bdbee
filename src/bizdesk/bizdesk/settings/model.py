from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..inventory.model import StockAlertConfig


@dataclass(frozen=True)
class CompanySettings:
    name: str = "My Company"
    currency: str = "EGP"
    tax_rate: float = 0
    address: Optional[str] = None
    logo_url: Optional[str] = None
    stock_alert: StockAlertConfig = field(default_factory=StockAlertConfig)
