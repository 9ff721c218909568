from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..common.validators import digits_only
from ..core.enums import Role


@dataclass(frozen=True)
class Schedule:
    """Weekly schedule: weekday labels plus start/end as ``HH:MM``."""

    days: tuple[str, ...] = ()
    start: str = "08:00"
    end: str = "17:00"

    def to_dict(self) -> dict:
        return {"days": list(self.days), "start": self.start, "end": self.end}

    @classmethod
    def from_dict(cls, data: dict) -> "Schedule":
        return cls(days=tuple(data.get("days") or ()), start=data.get("start", "08:00"), end=data.get("end", "17:00"))


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    The phone number doubles as the kiosk credential: the last 4 digits
    identify the worker at punch time.
    """

    id: str
    name: str
    phone: str
    email: str
    role: Role
    hourly_rate: float
    schedule: Schedule = field(default_factory=Schedule)
    photo_url: Optional[str] = None
    active: bool = True

    @property
    def first_name(self) -> str:
        return self.name.split(" ")[0] if self.name else ""

    def phone_suffix(self, length: int) -> str:
        digits = digits_only(self.phone)
        return digits[-length:] if len(digits) >= length else ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "role": self.role.value,
            "hourly_rate": self.hourly_rate,
            "schedule": self.schedule.to_dict(),
            "photo_url": self.photo_url,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            phone=data["phone"],
            email=data.get("email", ""),
            role=Role(data.get("role", Role.WORKER.value)),
            hourly_rate=float(data.get("hourly_rate", 0)),
            schedule=Schedule.from_dict(data.get("schedule") or {}),
            photo_url=data.get("photo_url"),
            active=bool(data.get("active", True)),
        )
