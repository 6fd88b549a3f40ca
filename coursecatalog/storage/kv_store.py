"""Key-value backends for the catalog buckets.

A store maps string keys to serialized documents. ``CatalogStorage`` only
needs ``get``, ``set`` and ``delete``, so any object with those methods can
stand in for the SQL table (tests use ``InMemoryKeyValueStore``).
"""

import logging
from typing import Callable, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from coursecatalog.models.store_entry import StoreEntry

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None:
        ...

    def set(self, key: str, value: str) -> None:
        ...

    def delete(self, key: str) -> None:
        ...


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class SqlKeyValueStore:
    """Stores each key as a row of the ``store_entries`` table.

    Every call opens its own session and commits before returning. Nothing
    coordinates writers: two processes updating the same key race and the
    last commit wins.
    """

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        db = self._session_factory()
        try:
            entry = db.get(StoreEntry, key)
            return entry.value if entry is not None else None
        finally:
            db.close()

    def set(self, key: str, value: str) -> None:
        db = self._session_factory()
        try:
            entry = db.get(StoreEntry, key)
            if entry is None:
                db.add(StoreEntry(key=key, value=value))
            else:
                entry.value = value
            db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception('Failed to write store key %s', key)
            raise
        finally:
            db.close()

    def delete(self, key: str) -> None:
        db = self._session_factory()
        try:
            entry = db.get(StoreEntry, key)
            if entry is not None:
                db.delete(entry)
                db.commit()
        except SQLAlchemyError:
            db.rollback()
            logger.exception('Failed to delete store key %s', key)
            raise
        finally:
            db.close()
