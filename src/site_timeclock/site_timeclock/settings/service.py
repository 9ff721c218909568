from __future__ import annotations

from typing import Optional

from ..common.validators import require_http_url
from .model import AppSettings
from .repository import SettingsRepository


class SettingsService:
    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> AppSettings:
        return self._settings.get_settings()

    def update_webhook_url(self, url: Optional[str]) -> AppSettings:
        """Set the spreadsheet webhook; a blank value turns forwarding off."""
        if url and url.strip():
            settings = AppSettings(webhook_url=require_http_url(url, "URL do webhook"))
        else:
            settings = AppSettings()
        self._settings.save_settings(settings)
        return settings
