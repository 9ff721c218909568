from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)


def load_timezone(name: str) -> tzinfo:
    """Resolve a timezone name, falling back to the host's local zone."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        fallback = datetime.now().astimezone().tzinfo
        logger.warning("Unknown timezone %r, falling back to host zone %s", name, fallback)
        return fallback


def now_local(tz: tzinfo) -> datetime:
    """Current time in the kiosk timezone.

    Note: Wrapped so tests can patch/mock easier.
    """
    return datetime.now(tz)


def start_of_day(moment: datetime) -> datetime:
    return datetime.combine(moment.date(), time.min, tzinfo=moment.tzinfo)


def last_days(today: date, count: int) -> list[date]:
    """The ``count`` calendar days ending at ``today``, oldest first."""
    return [today - timedelta(days=count - 1 - i) for i in range(count)]


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def truncate_to_ms(moment: datetime) -> datetime:
    """Drop sub-millisecond precision so the value survives persistence unchanged."""
    return moment.replace(microsecond=moment.microsecond // 1000 * 1000)


def to_epoch_ms(moment: datetime) -> int:
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def from_epoch_ms(value: int) -> datetime:
    return _EPOCH + timedelta(milliseconds=int(value))


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 3600


def format_br_date(moment: datetime, tz: tzinfo) -> str:
    return moment.astimezone(tz).strftime("%d/%m/%Y")


def format_br_time(moment: datetime, tz: tzinfo) -> str:
    return moment.astimezone(tz).strftime("%H:%M:%S")


def format_br_datetime(moment: datetime, tz: tzinfo) -> str:
    return f"{format_br_date(moment, tz)}, {format_br_time(moment, tz)}"
