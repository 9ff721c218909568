"""Persist the first-run dataset so it can be edited from the admin area."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.site_timeclock.site_timeclock.container import build_backend
from src.site_timeclock.site_timeclock.storage.store import RecordStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = RecordStore(build_backend(settings))

    employees = store.get_employees()
    sites = store.get_sites()
    store.save_employees(employees)
    store.save_sites(sites)

    print(f"OK: Seeded store ({settings.STORAGE_BACKEND}) -> employees={len(employees)} sites={len(sites)}")


if __name__ == "__main__":
    main()
