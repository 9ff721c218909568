from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Employee role shown on the roster and sent to the assistant."""

    ADMIN = "admin"
    WORKER = "worker"
    FOREMAN = "foreman"
    ENGINEER = "engineer"

    @property
    def label(self) -> str:
        return {
            Role.ADMIN: "Admin",
            Role.WORKER: "Operário",
            Role.FOREMAN: "Mestre de Obras",
            Role.ENGINEER: "Engenheiro",
        }[self]


class PunchType(str, Enum):
    """Direction of a punch."""

    IN = "IN"
    OUT = "OUT"

    @property
    def label(self) -> str:
        return "ENTRADA" if self is PunchType.IN else "SAÍDA"


class SessionState(str, Enum):
    IDENTIFY = "IDENTIFY"
    CONFIRM = "CONFIRM"


class MessageKind(str, Enum):
    """Kind of transient kiosk message; drives the colour on the client."""

    SUCCESS = "success"
    EXIT = "exit"
    ERROR = "error"
