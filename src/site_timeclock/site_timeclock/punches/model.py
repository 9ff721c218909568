from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..common.datetime_utils import from_epoch_ms, to_epoch_ms
from ..core.enums import PunchType


@dataclass(frozen=True)
class TimeLog:
    """Domain entity: a single punch. Append-only."""

    id: str
    employee_id: str
    site_id: str
    timestamp: datetime
    type: PunchType
    photo_snapshot: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "employee_id": self.employee_id,
            "site_id": self.site_id,
            "timestamp": to_epoch_ms(self.timestamp),
            "type": self.type.value,
            "photo_snapshot": self.photo_snapshot,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TimeLog":
        return cls(
            id=str(data["id"]),
            employee_id=str(data["employee_id"]),
            site_id=str(data["site_id"]),
            timestamp=from_epoch_ms(data["timestamp"]),
            type=PunchType(data["type"]),
            photo_snapshot=data.get("photo_snapshot") or "",
        )
