from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .backend import KeyValueBackend


class JsonFileBackend(KeyValueBackend):
    """One ``<key>.json`` file per collection inside ``data_dir``."""

    def __init__(self, data_dir: str | os.PathLike):
        self._dir = Path(data_dir)

    def _path(self, key: str) -> Path:
        return self._dir / f"{key}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def set(self, key: str, value: str) -> None:
        self._dir.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        tmp.write_text(value, encoding="utf-8")
        os.replace(tmp, path)
