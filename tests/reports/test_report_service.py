from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta

import pytest

from conftest import KIOSK_TZ
from src.site_timeclock.site_timeclock.core.enums import PunchType
from src.site_timeclock.site_timeclock.punches.model import TimeLog
from src.site_timeclock.site_timeclock.reports.service import (
    ReportService,
    active_today_count,
    daily_hours,
    weekly_totals,
)
from src.site_timeclock.site_timeclock.storage.seed import SEED_EMPLOYEES


def _at(day: int, hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 6, day, hour, minute, tzinfo=KIOSK_TZ)


def _log(employee_id, when, punch, log_id=None):
    return TimeLog(
        id=log_id or f"{employee_id}-{when.isoformat()}",
        employee_id=employee_id,
        site_id="1",
        timestamp=when,
        type=punch,
    )


IN = PunchType.IN
OUT = PunchType.OUT


def test_single_shift_hours_and_cost(fixed_now):
    logs = [_log("1", _at(18, 8), IN), _log("1", _at(18, 10), OUT)]

    hours, cost = weekly_totals(SEED_EMPLOYEES, logs, now=fixed_now)

    assert hours == pytest.approx(2.0)
    assert cost == pytest.approx(70.0)


def test_shift_over_fourteen_hours_is_discarded(fixed_now):
    logs = [_log("1", _at(17, 6), IN), _log("1", _at(17, 21), OUT)]

    assert weekly_totals(SEED_EMPLOYEES, logs, now=fixed_now) == (0.0, 0.0)


def test_orphan_out_contributes_nothing(fixed_now):
    logs = [_log("1", _at(18, 10), OUT)]

    assert weekly_totals(SEED_EMPLOYEES, logs, now=fixed_now) == (0.0, 0.0)


def test_later_in_replaces_unmatched_in(fixed_now):
    logs = [
        _log("2", _at(18, 7), IN),
        _log("2", _at(18, 9), IN),
        _log("2", _at(18, 12), OUT),
    ]

    hours, cost = weekly_totals(SEED_EMPLOYEES, logs, now=fixed_now)

    assert hours == pytest.approx(3.0)
    assert cost == pytest.approx(255.0)


def test_pairs_outside_the_window_are_ignored(fixed_now):
    logs = [_log("1", _at(10, 8), IN), _log("1", _at(10, 12), OUT)]

    assert weekly_totals(SEED_EMPLOYEES, logs, now=fixed_now) == (0.0, 0.0)


def test_unsorted_history_is_paired_by_time(fixed_now):
    logs = [_log("1", _at(18, 12), OUT), _log("1", _at(18, 8), IN)]

    hours, _ = weekly_totals(SEED_EMPLOYEES, logs, now=fixed_now)

    assert hours == pytest.approx(4.0)


def test_active_today_starts_at_local_midnight(fixed_now):
    logs = [
        _log("1", _at(17, 23, 59), IN),
        _log("2", _at(18, 0, 0), IN),
        _log("2", _at(18, 8), OUT),
        _log("ghost", _at(18, 9), IN),
    ]

    assert active_today_count(SEED_EMPLOYEES, logs, now=fixed_now) == 1


def test_active_today_ignores_inactive_employees(fixed_now):
    carlos, ana = SEED_EMPLOYEES
    roster = [replace(carlos, active=False), ana]
    logs = [_log("1", _at(18, 8), IN)]

    assert active_today_count(roster, logs, now=fixed_now) == 0


def test_daily_series_covers_last_seven_days(fixed_now):
    series = daily_hours([], now=fixed_now)

    assert [d.day for d in series] == [date(2025, 6, 12) + timedelta(days=i) for i in range(7)]
    assert series[-1].label == "qua."
    assert all(d.hours == 0 for d in series)


def test_overnight_shift_is_credited_to_the_in_day(fixed_now):
    logs = [_log("1", _at(17, 22), IN), _log("1", _at(18, 2), OUT)]

    series = {d.day: d.hours for d in daily_hours(logs, now=fixed_now)}

    assert series[date(2025, 6, 17)] == pytest.approx(4.0)
    assert series[date(2025, 6, 18)] == 0


def test_daily_pairing_skips_earlier_out_to_reach_in(fixed_now):
    logs = [
        _log("1", _at(18, 8), IN),
        _log("1", _at(18, 10), OUT),
        _log("1", _at(18, 11), OUT),
    ]

    series = {d.day: d.hours for d in daily_hours(logs, now=fixed_now)}

    assert series[date(2025, 6, 18)] == pytest.approx(5.0)


def test_daily_pairing_skips_other_employees(fixed_now):
    logs = [
        _log("1", _at(18, 8), IN),
        _log("2", _at(18, 9), OUT),
        _log("1", _at(18, 11), OUT),
    ]

    series = {d.day: d.hours for d in daily_hours(logs, now=fixed_now)}

    assert series[date(2025, 6, 18)] == pytest.approx(3.0)


def test_daily_pair_of_a_day_or_more_is_discarded(fixed_now):
    logs = [_log("1", _at(16, 8), IN), _log("1", _at(17, 8), OUT)]

    assert all(d.hours == 0 for d in daily_hours(logs, now=fixed_now))


def _service(store, fixed_now):
    return ReportService(employees=store, sites=store, logs=store, clock=lambda: fixed_now)


def test_dashboard_hides_cost_unless_requested(store, fixed_now):
    store.add_log(_log("1", _at(18, 8), IN))
    store.add_log(_log("1", _at(18, 10), OUT))
    svc = _service(store, fixed_now)

    plain = svc.dashboard()
    full = svc.dashboard(include_financials=True)

    assert plain.cost_week is None
    assert "cost_week" not in plain.to_dict()
    assert full.cost_week == pytest.approx(70.0)
    assert full.active_today == 1
    assert full.total_employees == 2
    assert full.absent_today == 1
    assert full.active_sites == 2
    assert full.to_dict()["hours_week"] == 2.0


def test_payroll_lists_every_employee_by_cost(store, fixed_now):
    store.add_log(_log("1", _at(18, 6), IN))
    store.add_log(_log("1", _at(18, 14), OUT))
    store.add_log(_log("2", _at(18, 9), IN))
    store.add_log(_log("2", _at(18, 13), OUT))

    lines = _service(store, fixed_now).payroll()

    assert [line.employee_id for line in lines] == ["2", "1"]
    assert lines[0].cost == pytest.approx(340.0)
    assert lines[1].hours == pytest.approx(8.0)
    assert lines[1].cost == pytest.approx(280.0)


def test_payroll_includes_employees_without_hours(store, fixed_now):
    lines = _service(store, fixed_now).payroll()

    assert {line.employee_id for line in lines} == {"1", "2"}
    assert all(line.cost == 0 for line in lines)
