from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection, db_cursor, fetchone
from .backend import KeyValueBackend


class MySQLKeyValueBackend(KeyValueBackend):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT payload FROM kv_store WHERE storage_key=%s", (key,))
            row = fetchone(cur)
            return row["payload"] if row else None

    def set(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO kv_store(storage_key, payload)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE payload=VALUES(payload)
                """,
                (key, value),
            )
