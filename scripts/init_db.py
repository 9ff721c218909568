from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.site_timeclock.site_timeclock.database.bootstrap import ensure_kv_table, list_keys
from src.site_timeclock.site_timeclock.database.connection import DatabaseConnection, DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    ensure_kv_table(conn)
    print(
        "OK: kv_store ready -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(keys={len(list_keys(conn))})"
    )


if __name__ == "__main__":
    main()
