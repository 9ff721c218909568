from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AppSettings:
    webhook_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {"webhook_url": self.webhook_url} if self.webhook_url else {}

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        return cls(webhook_url=data.get("webhook_url") or None)
