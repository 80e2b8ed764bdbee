from __future__ import annotations

from typing import Callable, Generic, Iterable, TypeVar

from .port import KeyValueStore

T = TypeVar("T")


class StoredCollection(Generic[T]):
    """A whole aggregate stored as one JSON list under a single key.

    Reads always build fresh domain objects and writes replace the list, so
    snapshots handed out earlier are never touched.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        *,
        to_doc: Callable[[T], dict],
        from_doc: Callable[[dict], T],
        default: Callable[[], Iterable[T]] = tuple,
    ):
        self._store = store
        self._key = key
        self._to_doc = to_doc
        self._from_doc = from_doc
        self._default = default

    def load_all(self) -> tuple[T, ...]:
        docs = self._store.load(self._key, None)
        if docs is None:
            return tuple(self._default())
        return tuple(self._from_doc(d) for d in docs)

    def save_all(self, items: Iterable[T]) -> None:
        self._store.save(self._key, [self._to_doc(i) for i in items])
