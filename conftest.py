from __future__ import annotations

from datetime import date

import pytest

from src.bizdesk.bizdesk.storage.memory_store import InMemoryStore


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 3, 15)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()
