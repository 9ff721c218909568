from __future__ import annotations

from typing import Protocol, Sequence

from .model import TimeLog


class TimeLogRepository(Protocol):
    """Append-only punch log."""

    def get_logs(self) -> Sequence[TimeLog]:
        raise NotImplementedError

    def add_log(self, log: TimeLog) -> None:
        """Append one entry. Implementations may relay it to a remote sink afterwards."""

        raise NotImplementedError
