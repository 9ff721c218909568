from __future__ import annotations

from typing import Protocol

from .model import AppSettings


class SettingsRepository(Protocol):
    def get_settings(self) -> AppSettings:
        raise NotImplementedError

    def save_settings(self, settings: AppSettings) -> None:
        raise NotImplementedError
