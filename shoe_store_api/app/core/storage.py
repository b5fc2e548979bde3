"""
Durable ordered map backed by SQLite.

``DurableMap`` stores pydantic models as JSON documents keyed by a
string id.  It exposes the four primitives the services rely on:
``get``, ``insert``, ``remove`` and ``values``.  Each call opens its
own connection and commits before returning, so every primitive is
atomic and its effect survives a process restart.  ``values`` yields
records in key order.

Call :func:`~shoe_store_api.app.core.db.init_db` once for the same
database path and table before using the map.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel

from .db import check_table_name, get_connection, get_cursor
from .exceptions import StorageError


logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class DurableMap(Generic[M]):
    """Ordered ``str -> model`` map persisted in a SQLite table."""

    def __init__(
        self,
        db_path: str,
        model: Type[M],
        table: str = "shoes",
        max_key_size: int = 44,
        max_value_size: int = 1024,
    ) -> None:
        self.db_path = db_path
        self.model = model
        self.table = check_table_name(table)
        self.max_key_size = max_key_size
        self.max_value_size = max_value_size

    def get(self, key: str) -> Optional[M]:
        """Return the value stored under ``key`` or ``None``."""
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(
                f"SELECT value FROM {self.table} WHERE key = ?",
                (key,),
            ).fetchone()
        finally:
            conn.close()
        if row is None:
            return None
        return self.model.model_validate_json(row["value"])

    def insert(self, key: str, value: M) -> None:
        """Store ``value`` under ``key``, replacing any previous value.

        Raises ``StorageError`` when the key or the serialised value
        exceeds the configured size bounds.
        """
        document = value.model_dump_json(by_alias=True)
        if len(key.encode("utf-8")) > self.max_key_size:
            raise StorageError(f"Key exceeds {self.max_key_size} bytes")
        if len(document.encode("utf-8")) > self.max_value_size:
            raise StorageError(f"Value exceeds {self.max_value_size} bytes")
        with get_cursor(self.db_path) as cursor:
            cursor.execute(
                f"INSERT INTO {self.table} (key, value) VALUES (?, ?)"
                " ON CONFLICT(key) DO UPDATE SET value = excluded.value",
                (key, document),
            )
        logger.debug("Stored %s in %s", key, self.table)

    def remove(self, key: str) -> Optional[M]:
        """Delete ``key`` and return the value it held, or ``None``."""
        with get_cursor(self.db_path) as cursor:
            row = cursor.execute(
                f"SELECT value FROM {self.table} WHERE key = ?",
                (key,),
            ).fetchone()
            if row is None:
                return None
            cursor.execute(f"DELETE FROM {self.table} WHERE key = ?", (key,))
        logger.debug("Removed %s from %s", key, self.table)
        return self.model.model_validate_json(row["value"])

    def values(self) -> List[M]:
        """Return every stored value, ordered by key."""
        conn = get_connection(self.db_path)
        try:
            rows = conn.execute(
                f"SELECT value FROM {self.table} ORDER BY key"
            ).fetchall()
        finally:
            conn.close()
        return [self.model.model_validate_json(row["value"]) for row in rows]

    def __len__(self) -> int:
        conn = get_connection(self.db_path)
        try:
            row = conn.execute(f"SELECT COUNT(*) AS total FROM {self.table}").fetchone()
        finally:
            conn.close()
        return row["total"]


def get_storage(request: Request) -> DurableMap:
    """FastAPI dependency returning the application's shoe map."""
    return request.app.state.storage
