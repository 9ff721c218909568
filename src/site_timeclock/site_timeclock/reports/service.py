from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Callable, Iterator, Optional, Sequence

from ..common.datetime_utils import hours_between, last_days, start_of_day
from ..core.constants import MAX_PAIR_HOURS, MAX_SHIFT_HOURS, REPORT_DAYS, WEEKDAY_SHORT_NAMES
from ..core.enums import PunchType
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..punches.model import TimeLog
from ..punches.repository import TimeLogRepository
from ..sites.repository import SiteRepository


@dataclass(frozen=True)
class DayHours:
    day: date
    label: str
    hours: float

    def to_dict(self) -> dict:
        return {"date": self.day.isoformat(), "name": self.label, "hours": round(self.hours, 2)}


@dataclass(frozen=True)
class DashboardStats:
    active_today: int
    total_employees: int
    active_sites: int
    hours_week: float
    cost_week: Optional[float]
    daily: list[DayHours]

    @property
    def absent_today(self) -> int:
        return self.total_employees - self.active_today

    def to_dict(self) -> dict:
        data = {
            "active_today": self.active_today,
            "total_employees": self.total_employees,
            "absent_today": self.absent_today,
            "active_sites": self.active_sites,
            "hours_week": round(self.hours_week, 1),
            "daily": [d.to_dict() for d in self.daily],
        }
        if self.cost_week is not None:
            data["cost_week"] = round(self.cost_week, 2)
        return data


@dataclass(frozen=True)
class PayrollLine:
    employee_id: str
    name: str
    role: str
    hourly_rate: float
    hours: float
    cost: float

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "name": self.name,
            "role": self.role,
            "hourly_rate": self.hourly_rate,
            "hours": round(self.hours, 2),
            "cost": round(self.cost, 2),
        }


def active_today_count(employees: Sequence[Employee], logs: Sequence[TimeLog], *, now: datetime) -> int:
    """Distinct active employees with any punch since local midnight."""
    midnight = start_of_day(now)
    roster = {e.id for e in employees if e.active}
    return len({log.employee_id for log in logs if log.timestamp >= midnight and log.employee_id in roster})


def _weekly_shifts(logs: Sequence[TimeLog], *, now: datetime) -> Iterator[tuple[str, float]]:
    """(employee_id, hours) for each IN→OUT pair in the last 7×24h, anomalies excluded.

    A later IN replaces an unmatched one; an OUT consumes the open IN even
    when the interval is discarded.
    """
    since = now - timedelta(days=REPORT_DAYS)
    window = sorted((log for log in logs if log.timestamp >= since), key=lambda log: log.timestamp)

    open_in: dict[str, datetime] = {}
    for log in window:
        if log.type is PunchType.IN:
            open_in[log.employee_id] = log.timestamp
        elif log.employee_id in open_in:
            hours = hours_between(open_in.pop(log.employee_id), log.timestamp)
            if hours < MAX_SHIFT_HOURS:
                yield log.employee_id, hours


def weekly_totals(employees: Sequence[Employee], logs: Sequence[TimeLog], *, now: datetime) -> tuple[float, float]:
    rates = {e.id: e.hourly_rate for e in employees}
    total_hours = 0.0
    total_cost = 0.0
    for employee_id, hours in _weekly_shifts(logs, now=now):
        total_hours += hours
        if employee_id in rates:
            total_cost += hours * rates[employee_id]
    return total_hours, total_cost


def _paired_in(logs: Sequence[TimeLog], index: int) -> Optional[TimeLog]:
    """Nearest earlier IN of the same employee; earlier OUTs are skipped."""
    employee_id = logs[index].employee_id
    for prev in reversed(logs[:index]):
        if prev.employee_id == employee_id and prev.type is PunchType.IN:
            return prev
    return None


def daily_hours(logs: Sequence[TimeLog], *, now: datetime) -> list[DayHours]:
    """Hours per local calendar day over the last 7 days, keyed by the day of the IN."""
    tz = now.tzinfo
    days = last_days(now.date(), REPORT_DAYS)
    totals = {d: 0.0 for d in days}

    for index, log in enumerate(logs):
        if log.type is not PunchType.OUT:
            continue
        start = _paired_in(logs, index)
        if start is None:
            continue
        day = start.timestamp.astimezone(tz).date()
        if day not in totals:
            continue
        hours = hours_between(start.timestamp, log.timestamp)
        if 0 <= hours < MAX_PAIR_HOURS:
            totals[day] += hours

    return [DayHours(day=d, label=WEEKDAY_SHORT_NAMES[d.weekday()], hours=totals[d]) for d in days]


class ReportService:
    """Read-only statistics, recomputed from the full log history on each call."""

    def __init__(
        self,
        *,
        employees: EmployeeRepository,
        sites: SiteRepository,
        logs: TimeLogRepository,
        clock: Callable[[], datetime],
    ):
        self._employees = employees
        self._sites = sites
        self._logs = logs
        self._clock = clock

    def dashboard(self, *, include_financials: bool = False, now: datetime | None = None) -> DashboardStats:
        now = now or self._clock()
        employees = list(self._employees.get_employees())
        logs = list(self._logs.get_logs())
        hours, cost = weekly_totals(employees, logs, now=now)

        return DashboardStats(
            active_today=active_today_count(employees, logs, now=now),
            total_employees=sum(1 for e in employees if e.active),
            active_sites=sum(1 for s in self._sites.get_sites() if s.active),
            hours_week=hours,
            cost_week=cost if include_financials else None,
            daily=daily_hours(logs, now=now),
        )

    def payroll(self, *, now: datetime | None = None) -> list[PayrollLine]:
        """Per-employee weekly hours and labor cost, most expensive first."""
        now = now or self._clock()
        employees = list(self._employees.get_employees())
        hours_by_employee: dict[str, float] = {}
        for employee_id, hours in _weekly_shifts(list(self._logs.get_logs()), now=now):
            hours_by_employee[employee_id] = hours_by_employee.get(employee_id, 0.0) + hours

        lines = [
            PayrollLine(
                employee_id=e.id,
                name=e.name,
                role=e.role.label,
                hourly_rate=e.hourly_rate,
                hours=hours_by_employee.get(e.id, 0.0),
                cost=hours_by_employee.get(e.id, 0.0) * e.hourly_rate,
            )
            for e in employees
        ]
        lines.sort(key=lambda line: line.cost, reverse=True)
        return lines
