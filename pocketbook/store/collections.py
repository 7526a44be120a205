"""JSON encoding of the stored collections.

Each collection is a JSON array stored under its own key. Writes always
replace the whole array.
"""

import json
import secrets
import string
import threading
import time
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import Any, TypeVar

from pocketbook.errors import PersistenceError
from pocketbook.store.backend import KeyValueStore

TRANSACTIONS_KEY = "budget_tracker_transactions"
GOALS_KEY = "budget_tracker_goals"
CATEGORIES_KEY = "budget_tracker_categories"

ALL_KEYS = (TRANSACTIONS_KEY, GOALS_KEY, CATEGORIES_KEY)

# Serialises read-modify-write cycles; one writer at a time per process.
write_lock = threading.RLock()

_ID_ALPHABET = string.ascii_lowercase + string.digits

T = TypeVar("T")


def new_id() -> str:
    """Generate an opaque id: millisecond timestamp plus a random suffix."""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"{int(time.time() * 1000)}{suffix}"


def utc_now_iso() -> str:
    """Current UTC time as an ISO 8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def load_records(store: KeyValueStore, key: str, factory: Callable[[dict[str, Any]], T]) -> list[T] | None:
    """Load and decode a collection.

    Args:
        store: Backend to read from.
        key: Collection key.
        factory: Converts one JSON object into a record.

    Returns:
        Decoded records, or None if the key has never been written.

    Raises:
        PersistenceError: If the backend fails or the stored value is corrupt.
    """
    raw = store.get(key)
    if raw is None:
        return None
    try:
        items = json.loads(raw)
        if not isinstance(items, list):
            raise TypeError(f"expected a JSON array, got {type(items).__name__}")
        return [factory(item) for item in items]
    except (ValueError, TypeError, KeyError) as e:
        raise PersistenceError(f"Stored collection '{key}' is corrupt: {e}") from e


def encode_records(records: Iterable[Any]) -> bytes:
    """Encode records (anything with to_dict) as a JSON array."""
    return json.dumps([record.to_dict() for record in records]).encode("utf-8")


def save_records(store: KeyValueStore, key: str, records: Iterable[Any]) -> None:
    """Replace a whole collection."""
    store.set(key, encode_records(records))
