from __future__ import annotations

from typing import Optional, Protocol


class KeyValueBackend(Protocol):
    """Durable keyed storage for serialized documents.

    The record store depends on this interface, not on a concrete medium.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError
