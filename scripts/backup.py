"""Backup the record store.

Note: Dumps the four stored documents into one JSON file under ``backups/``,
whatever the configured backend is.
"""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.site_timeclock.site_timeclock.container import build_backend
from src.site_timeclock.site_timeclock.storage.store import EMPLOYEES_KEY, LOGS_KEY, SETTINGS_KEY, SITES_KEY


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    backend = build_backend(settings)

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"timeclock_{ts}.json"

    dump = {}
    for key in (EMPLOYEES_KEY, SITES_KEY, LOGS_KEY, SETTINGS_KEY):
        raw = backend.get(key)
        dump[key] = json.loads(raw) if raw is not None else None

    out_file.write_text(json.dumps(dump, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
