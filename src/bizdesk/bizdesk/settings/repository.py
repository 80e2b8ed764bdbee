from __future__ import annotations

from typing import Protocol

from .model import CompanySettings


class SettingsRepository(Protocol):
    def load(self) -> CompanySettings:
        raise NotImplementedError

    def save(self, settings: CompanySettings) -> None:
        raise NotImplementedError
