from __future__ import annotations

import uuid
from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import truncate_to_ms
from ..core.enums import PunchType
from .model import TimeLog
from .repository import TimeLogRepository


def next_punch_type(logs: Sequence[TimeLog], employee_id: str) -> PunchType:
    """OUT if the employee's latest punch (by timestamp) was IN, otherwise IN."""
    last = max(
        (log for log in logs if log.employee_id == employee_id),
        key=lambda log: log.timestamp,
        default=None,
    )
    if last is not None and last.type is PunchType.IN:
        return PunchType.OUT
    return PunchType.IN


class PunchService:
    """Use case: append a punch with the inferred direction."""

    def __init__(self, logs: TimeLogRepository):
        self._logs = logs

    def next_type_for(self, employee_id: str) -> PunchType:
        return next_punch_type(self._logs.get_logs(), employee_id)

    def record(self, *, employee_id: str, site_id: str, photo_snapshot: str, now: datetime) -> TimeLog:
        log = TimeLog(
            id=str(uuid.uuid4()),
            employee_id=employee_id,
            site_id=site_id,
            timestamp=truncate_to_ms(now),
            type=self.next_type_for(employee_id),
            photo_snapshot=photo_snapshot,
        )
        self._logs.add_log(log)
        return log
