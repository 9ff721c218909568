from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import mysql.connector


@dataclass(frozen=True)
class DBConfig:
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = ""
    database: str = "timeclock_db"
    # payloads carry accented names and base64 photos
    charset: str = "utf8mb4"

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DBConfig":
        defaults = cls()
        return cls(
            host=str(data.get("host", defaults.host)),
            port=int(data.get("port", defaults.port)),
            user=str(data.get("user", defaults.user)),
            password=str(data.get("password", defaults.password)),
            database=str(data.get("database", defaults.database)),
        )


class DatabaseConnection:
    """Process-wide factory for short-lived MySQL connections.

    The kiosk writes rarely, so each store operation opens and closes its own
    connection instead of holding a pool.
    """

    _instance: Optional["DatabaseConnection"] = None

    def __init__(self, config: DBConfig):
        self.config = config

    @classmethod
    def get_instance(cls, config: DBConfig) -> "DatabaseConnection":
        if cls._instance is None or cls._instance.config != config:
            cls._instance = cls(config)
        return cls._instance

    def connect(self):
        return mysql.connector.connect(
            host=self.config.host,
            port=self.config.port,
            user=self.config.user,
            password=self.config.password,
            database=self.config.database,
            charset=self.config.charset,
        )


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, roll back and re-raise on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None
