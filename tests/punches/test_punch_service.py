from __future__ import annotations

from datetime import timedelta

from src.site_timeclock.site_timeclock.core.enums import PunchType
from src.site_timeclock.site_timeclock.punches.model import TimeLog
from src.site_timeclock.site_timeclock.punches.service import PunchService, next_punch_type


def _log(log_id, employee_id, when, punch):
    return TimeLog(id=log_id, employee_id=employee_id, site_id="1", timestamp=when, type=punch)


def test_directions_alternate_from_empty(store, fixed_now):
    svc = PunchService(store)

    types = [
        svc.record(employee_id="1", site_id="1", photo_snapshot="", now=fixed_now + timedelta(minutes=i)).type
        for i in range(5)
    ]

    assert types == [PunchType.IN, PunchType.OUT, PunchType.IN, PunchType.OUT, PunchType.IN]


def test_direction_uses_latest_timestamp_not_insertion_order(fixed_now):
    logs = [
        _log("a", "1", fixed_now, PunchType.IN),
        _log("b", "1", fixed_now - timedelta(hours=3), PunchType.OUT),
    ]

    assert next_punch_type(logs, "1") == PunchType.OUT


def test_direction_is_per_employee(fixed_now):
    logs = [_log("a", "2", fixed_now, PunchType.IN)]

    assert next_punch_type(logs, "1") == PunchType.IN
    assert next_punch_type(logs, "2") == PunchType.OUT

