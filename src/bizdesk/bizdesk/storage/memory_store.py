from __future__ import annotations

import json
from typing import Any


class InMemoryStore:
    """Process-local store.

    Values are kept as JSON text so a caller can never alias what was saved.
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._data: dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.save(key, value)

    def load(self, key: str, default: Any = None) -> Any:
        raw = self._data.get(key)
        if raw is None:
            return default
        return json.loads(raw)

    def save(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value, ensure_ascii=False)

    def keys(self) -> list[str]:
        return sorted(self._data)
