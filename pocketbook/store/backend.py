"""Key-value backends holding the serialized collections.

Every backend maps string keys to byte-string values. set_many and
remove_many apply all of their changes or none of them, which is what keeps
category cascades and clear-all-data consistent across keys.
"""

import logging
import sqlite3
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Protocol

from pocketbook.errors import PersistenceError
from pocketbook.store.schema import KV_TABLE, get_db_path, init_database

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Storage interface consumed by the ledger, goal and category stores."""

    def get(self, key: str) -> bytes | None: ...

    def set(self, key: str, value: bytes) -> None: ...

    def remove(self, key: str) -> None: ...

    def set_many(self, items: Mapping[str, bytes]) -> None: ...

    def remove_many(self, keys: Iterable[str]) -> None: ...


class MemoryStore:
    """In-process store, used for tests and throwaway sessions."""

    def __init__(self, initial: Mapping[str, bytes] | None = None) -> None:
        self._data: dict[str, bytes] = dict(initial or {})

    def get(self, key: str) -> bytes | None:
        return self._data.get(key)

    def set(self, key: str, value: bytes) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def set_many(self, items: Mapping[str, bytes]) -> None:
        self._data.update(items)

    def remove_many(self, keys: Iterable[str]) -> None:
        for key in keys:
            self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)


class SqliteStore:
    """Key-value store backed by a single sqlite table.

    Each call opens its own connection. Batched writes run in one sqlite
    transaction.
    """

    def __init__(self, db_path: Path | None = None, initialize: bool = True) -> None:
        self.db_path = db_path if db_path is not None else get_db_path()
        if initialize:
            try:
                init_database(self.db_path)
            except (sqlite3.Error, OSError) as e:
                raise PersistenceError(f"Could not open database {self.db_path}: {e}") from e

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def get(self, key: str) -> bytes | None:
        try:
            conn = self._connect()
            try:
                row = conn.execute(f"SELECT value FROM {KV_TABLE} WHERE key = ?", (key,)).fetchone()
            finally:
                conn.close()
        except sqlite3.Error as e:
            logger.error("Failed to read key %s: %s", key, e)
            raise PersistenceError(f"Failed to read {key}: {e}") from e
        return bytes(row[0]) if row else None

    def set(self, key: str, value: bytes) -> None:
        self.set_many({key: value})

    def remove(self, key: str) -> None:
        self.remove_many([key])

    def set_many(self, items: Mapping[str, bytes]) -> None:
        self._write(
            f"INSERT OR REPLACE INTO {KV_TABLE} (key, value) VALUES (?, ?)",
            [(key, sqlite3.Binary(value)) for key, value in items.items()],
        )

    def remove_many(self, keys: Iterable[str]) -> None:
        self._write(f"DELETE FROM {KV_TABLE} WHERE key = ?", [(key,) for key in keys])

    def _write(self, statement: str, rows: list[tuple[object, ...]]) -> None:
        try:
            conn = self._connect()
        except sqlite3.Error as e:
            raise PersistenceError(f"Failed to open {self.db_path}: {e}") from e

        try:
            conn.executemany(statement, rows)
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Write to %s failed, rolled back: %s", self.db_path, e)
            raise PersistenceError(f"Failed to write to {self.db_path}: {e}") from e
        finally:
            conn.close()
