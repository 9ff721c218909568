from __future__ import annotations

import json
import logging
from typing import Callable, Optional, Protocol, Sequence, TypeVar

from ..employees.model import Employee
from ..punches.model import TimeLog
from ..settings.model import AppSettings
from ..sites.model import Site
from .backend import KeyValueBackend
from .seed import SEED_EMPLOYEES, SEED_SITES

logger = logging.getLogger(__name__)

EMPLOYEES_KEY = "cp_employees"
SITES_KEY = "cp_sites"
LOGS_KEY = "cp_logs"
SETTINGS_KEY = "cp_settings"

T = TypeVar("T")


class LogForwarder(Protocol):
    def forward(
        self,
        log: TimeLog,
        *,
        settings: AppSettings,
        employees: Sequence[Employee],
        sites: Sequence[Site],
    ) -> None:
        raise NotImplementedError


class RecordStore:
    """Read/write facade over four keyed JSON documents.

    Collections come back in insertion order and ``save_*`` replaces the whole
    collection. Missing employees/sites fall back to the seed dataset. A
    malformed document raises ``json.JSONDecodeError`` to the caller.
    Single writer assumed: there is no locking between read and write.
    """

    def __init__(self, backend: KeyValueBackend, *, forwarder: Optional[LogForwarder] = None):
        self._backend = backend
        self._forwarder = forwarder

    def _read(self, key: str, parse: Callable[[dict], T], default: Sequence[T]) -> list[T]:
        raw = self._backend.get(key)
        if raw is None:
            return list(default)
        return [parse(item) for item in json.loads(raw)]

    def _write(self, key: str, items) -> None:
        self._backend.set(key, json.dumps([i.to_dict() for i in items], ensure_ascii=False))

    def get_employees(self) -> list[Employee]:
        return self._read(EMPLOYEES_KEY, Employee.from_dict, SEED_EMPLOYEES)

    def save_employees(self, employees: Sequence[Employee]) -> None:
        self._write(EMPLOYEES_KEY, employees)

    def get_sites(self) -> list[Site]:
        return self._read(SITES_KEY, Site.from_dict, SEED_SITES)

    def save_sites(self, sites: Sequence[Site]) -> None:
        self._write(SITES_KEY, sites)

    def get_logs(self) -> list[TimeLog]:
        return self._read(LOGS_KEY, TimeLog.from_dict, ())

    def add_log(self, log: TimeLog) -> None:
        logs = self.get_logs()
        logs.append(log)
        self._write(LOGS_KEY, logs)
        logger.debug("Appended %s punch %s for employee %s", log.type.value, log.id, log.employee_id)

        if self._forwarder is not None:
            self._forwarder.forward(
                log,
                settings=self.get_settings(),
                employees=self.get_employees(),
                sites=self.get_sites(),
            )

    def get_settings(self) -> AppSettings:
        raw = self._backend.get(SETTINGS_KEY)
        if raw is None:
            return AppSettings()
        return AppSettings.from_dict(json.loads(raw))

    def save_settings(self, settings: AppSettings) -> None:
        self._backend.set(SETTINGS_KEY, json.dumps(settings.to_dict(), ensure_ascii=False))
