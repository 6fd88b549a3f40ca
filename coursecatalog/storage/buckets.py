"""Typed views over single keys of a key-value store.

Documents are JSON. Reads parse the whole document, writes replace it; there
are no partial updates. A document that is not valid JSON, or does not match
the record shape, raises ``pydantic.ValidationError`` to the caller. Writes
refuse NaN and infinity with ``ValueError`` so every document stays valid JSON.
"""

import json
from typing import Generic, TypeVar

from pydantic import TypeAdapter

from coursecatalog.models.base import StoredModel
from coursecatalog.storage.kv_store import KeyValueStore

T = TypeVar('T', bound=StoredModel)


class CollectionBucket(Generic[T]):
    """A key holding a JSON array of records."""

    def __init__(self, store: KeyValueStore, key: str, model: type[T]):
        self.store = store
        self.key = key
        self._adapter = TypeAdapter(list[model])

    def get_all(self) -> list[T]:
        raw = self.store.get(self.key)
        if not raw:
            return []
        return self._adapter.validate_json(raw)

    def set_all(self, items: list[T]) -> None:
        self.store.set(self.key, json.dumps([item.to_document() for item in items], allow_nan=False))

    def add(self, item: T) -> None:
        items = self.get_all()
        items.append(item)
        self.set_all(items)

    def exists(self) -> bool:
        return self.store.get(self.key) is not None


class RecordBucket(Generic[T]):
    """A key holding at most one record; absent when cleared."""

    def __init__(self, store: KeyValueStore, key: str, model: type[T]):
        self.store = store
        self.key = key
        self.model = model

    def get(self) -> T | None:
        raw = self.store.get(self.key)
        if not raw:
            return None
        return self.model.model_validate_json(raw)

    def set(self, item: T | None) -> None:
        if item is None:
            self.store.delete(self.key)
        else:
            self.store.set(self.key, json.dumps(item.to_document(), allow_nan=False))
