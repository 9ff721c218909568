from __future__ import annotations

from .connection import DatabaseConnection, db_cursor

KV_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS kv_store (
    storage_key VARCHAR(64) NOT NULL PRIMARY KEY,
    payload LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
) ENGINE=InnoDB DEFAULT CHARSET=utf8mb4
"""


def ensure_kv_table(conn_factory: DatabaseConnection) -> None:
    """Create the key/value table used by the record store (idempotent)."""
    with db_cursor(conn_factory) as (_, cur):
        cur.execute(KV_TABLE_DDL)


def list_keys(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SELECT storage_key FROM kv_store ORDER BY storage_key")
        return [r[0] for r in cur.fetchall()]
