from __future__ import annotations

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Persistence port: key-addressed JSON values.

    Note (DIP): repositories depend on this interface, never on a concrete
    storage technology.
    """

    def load(self, key: str, default: Any = None) -> Any:
        raise NotImplementedError

    def save(self, key: str, value: Any) -> None:
        raise NotImplementedError
