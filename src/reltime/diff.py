"""Per-unit differences between two instants.

Seconds through weeks are derived from the elapsed time by successive
rounding; months and years follow the calendar (variable month lengths)
through ``dateutil.relativedelta``. All rounding is half away from zero so
past and future differences are symmetric.

Usage:
    from reltime.diff import diff

    report = diff(datetime(2024, 1, 31), datetime(2024, 3, 1))
    report["day"]    # 30
    report["month"]  # 1
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from datetime import date, datetime, time
from typing import Any, Iterator, Mapping

from dateutil import parser as dateutil_parser
from dateutil.relativedelta import relativedelta

from reltime.exceptions import InvalidDateError

# Leftover days that round a partial calendar month up
_HALF_MONTH_DAYS = 15


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass(frozen=True)
class DiffReport(Mapping[str, int]):
    """Signed differences from one instant to another, per unit.

    Negative values mean the target instant lies in the past.
    """
    millisecond: int
    second: int
    minute: int
    hour: int
    day: int
    week: int
    month: int
    year: int

    def __getitem__(self, unit: Any) -> int:
        key = getattr(unit, "value", unit)
        if key not in self.units():
            raise KeyError(unit)
        return getattr(self, key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.units())

    def __len__(self) -> int:
        return len(fields(self))

    @classmethod
    def units(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


def _reconcile(from_dt: datetime, to_dt: datetime) -> tuple[datetime, datetime]:
    """Make both datetimes naive or both aware (naive is taken as local time)."""
    if (from_dt.tzinfo is None) == (to_dt.tzinfo is None):
        return from_dt, to_dt
    if from_dt.tzinfo is None:
        return from_dt.astimezone(), to_dt
    return from_dt, to_dt.astimezone()


def _calendar_months(from_dt: datetime, to_dt: datetime) -> int:
    """Whole calendar months from ``from_dt`` to ``to_dt``, half-month rounded."""
    delta = relativedelta(to_dt, from_dt)
    months = delta.years * 12 + delta.months
    if abs(delta.days) >= _HALF_MONTH_DAYS:
        months += 1 if delta.days > 0 else -1
    return months


def diff(from_dt: datetime, to_dt: datetime) -> DiffReport:
    """Compute the per-unit difference from ``from_dt`` to ``to_dt``."""
    from_dt, to_dt = _reconcile(from_dt, to_dt)

    millisecond = _round((to_dt - from_dt).total_seconds() * 1000)
    second = _round(millisecond / 1000)
    minute = _round(second / 60)
    hour = _round(minute / 60)
    day = _round(hour / 24)
    week = _round(day / 7)
    month = _calendar_months(from_dt, to_dt)
    year = _round(month / 12)

    return DiffReport(
        millisecond=millisecond,
        second=second,
        minute=minute,
        hour=hour,
        day=day,
        week=week,
        month=month,
        year=year,
    )


def coerce_instant(value: Any) -> datetime:
    """Convert a formatter input into a datetime.

    Accepts datetimes, dates (taken at midnight), POSIX timestamps in seconds
    and date strings.

    Raises:
        InvalidDateError: If the value does not resolve to a real instant
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if not math.isfinite(value):
            raise InvalidDateError(value)
        try:
            return datetime.fromtimestamp(value)
        except (OverflowError, OSError, ValueError):
            raise InvalidDateError(value) from None

    if isinstance(value, str) and value.strip():
        try:
            return dateutil_parser.parse(value)
        except (ValueError, OverflowError):
            raise InvalidDateError(value) from None

    raise InvalidDateError(value)
