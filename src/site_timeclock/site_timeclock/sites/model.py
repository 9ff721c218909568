from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Site:
    """Domain entity: construction site a punch is recorded against."""

    id: str
    name: str
    address: str = ""
    active: bool = True

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "address": self.address, "active": self.active}

    @classmethod
    def from_dict(cls, data: dict) -> "Site":
        return cls(
            id=str(data["id"]),
            name=data["name"],
            address=data.get("address", ""),
            active=bool(data.get("active", True)),
        )
