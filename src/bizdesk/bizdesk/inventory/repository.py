from __future__ import annotations

from typing import Protocol, Sequence

from .model import InventoryItem


class InventoryRepository(Protocol):
    def load_all(self) -> Sequence[InventoryItem]:
        raise NotImplementedError

    def save_all(self, items: Sequence[InventoryItem]) -> None:
        raise NotImplementedError
