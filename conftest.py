from __future__ import annotations

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

import pytest

from src.site_timeclock.site_timeclock.storage.store import RecordStore

KIOSK_TZ = ZoneInfo("America/Sao_Paulo")


class InMemoryBackend:
    def __init__(self, data: Optional[dict[str, str]] = None):
        self.data: dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class RecordingForwarder:
    def __init__(self):
        self.calls = []

    def forward(self, log, *, settings, employees, sites):
        self.calls.append((log, settings))


@pytest.fixture
def tz():
    return KIOSK_TZ


@pytest.fixture
def fixed_now():
    # Wednesday afternoon, kiosk local time
    return datetime(2025, 6, 18, 15, 0, tzinfo=KIOSK_TZ)


@pytest.fixture
def backend():
    return InMemoryBackend()


@pytest.fixture
def forwarder():
    return RecordingForwarder()


@pytest.fixture
def store(backend, forwarder):
    return RecordStore(backend, forwarder=forwarder)
