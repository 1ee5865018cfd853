"""
Key/value store contract and its implementations.

The store offers exact-key get and set only: no compare-and-swap, no
transactions, no enumeration. Every service builds its read-modify-write
sequences on top of these two calls, so concurrent writers to the same key
can overwrite each other (last writer wins).
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from brainmate.core.errors import StorageError
from brainmate.models.kv_entry import KVEntry

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """Asynchronous mapping from string key to a JSON-serializable value."""

    @abstractmethod
    async def get(self, key: str) -> Optional[Any]:
        """Return the stored value, or None when the key is absent."""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Store `value` under `key`, replacing any previous value."""


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Store backed by the `kv_store` table."""

    def __init__(self, db: Session):
        self.db = db

    async def get(self, key: str) -> Optional[Any]:
        try:
            entry = self.db.get(KVEntry, key)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"get {key!r} failed: {e}") from e

        if entry is None:
            return None
        # Callers must never mutate the identity-mapped value in place
        return copy.deepcopy(entry.value)

    async def set(self, key: str, value: Any) -> None:
        try:
            entry = self.db.get(KVEntry, key)
            if entry is None:
                self.db.add(KVEntry(key=key, value=value))
            else:
                entry.value = value
            self.db.commit()
        except (SQLAlchemyError, TypeError, ValueError) as e:
            self.db.rollback()
            raise StorageError(f"set {key!r} failed: {e}") from e

        logger.debug(f"Stored {key}")


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store for tests and local tooling."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self.data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    async def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self.data.get(key))

    async def set(self, key: str, value: Any) -> None:
        self.data[key] = copy.deepcopy(value)
