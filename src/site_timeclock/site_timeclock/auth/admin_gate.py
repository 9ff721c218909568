from __future__ import annotations

from typing import Protocol

from werkzeug.security import check_password_hash, generate_password_hash


class AdminGate(Protocol):
    """Decides whether a PIN opens the administrative area."""

    def verify(self, pin: str) -> bool:
        raise NotImplementedError


class PinAdminGate(AdminGate):
    """Single configured PIN, kept only as a hash in memory."""

    def __init__(self, pin: str):
        self._pin_hash = generate_password_hash(pin)

    def verify(self, pin: str) -> bool:
        try:
            return check_password_hash(self._pin_hash, pin or "")
        except ValueError:
            return False
