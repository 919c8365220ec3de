import calendar as _calendar
import logging
from datetime import date, datetime, time, timedelta
from typing import Union

import numpy as np

logger = logging.getLogger(__name__)

ArrayLike = Union[int, "np.ndarray"]

# Days per month in a common year, January first.
_MONTH_DAYS = np.array([31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31], dtype=np.int64)


def sunday_weekday(value: date) -> int:
    """Weekday index with Sunday as 0 and Saturday as 6."""
    return (value.weekday() + 1) % 7


def strip_time(value: date) -> date:
    """Drop any time-of-day component, keeping year/month/day."""
    return date(value.year, value.month, value.day)


# ── month arithmetic ─────────────────────────────────────────────────────

def _roll_month(year, month):
    # 13 -> January of the next year, 0 -> December of the previous one.
    shift, index = divmod(month - 1, 12)
    return year + shift, index + 1


def _leap_mask(years):
    return (years % 4 == 0) & ((years % 100 != 0) | (years % 400 == 0))


def _years_of(values: np.ndarray) -> np.ndarray:
    if np.issubdtype(values.dtype, np.datetime64):
        return values.astype("datetime64[Y]").astype(np.int64) + 1970
    return values.astype(np.int64)


def days_in_month(year: ArrayLike, month: ArrayLike) -> ArrayLike:
    """
    Number of days in the 1-indexed ``month`` of ``year``.

    Month values outside 1..12 roll over into the neighbouring years, so
    ``days_in_month(2024, 13)`` is the length of January 2025.  Arrays are
    broadcast against each other and yield an integer array.
    """
    if np.ndim(year) == 0 and np.ndim(month) == 0:
        y, m = _roll_month(int(year), int(month))
        return _calendar.monthrange(y, m)[1]

    y, m = _roll_month(
        np.asarray(year, dtype=np.int64),
        np.asarray(month, dtype=np.int64),
    )
    return _MONTH_DAYS[m - 1] + ((m == 2) & _leap_mask(y))


def is_leap_year(target) -> Union[bool, np.ndarray]:
    """
    Gregorian leap-year test.

    ``target`` is a date, an integer year, or an array of years or
    ``datetime64`` values.
    """
    if isinstance(target, date):
        year = target.year
        if year % 400 == 0:
            return True
        if year % 100 == 0:
            return False
        return year % 4 == 0

    scalar = np.ndim(target) == 0
    mask = _leap_mask(_years_of(np.asarray(target)))
    return bool(mask) if scalar else mask


# ── ranges ───────────────────────────────────────────────────────────────

def is_date_in_range(
    value,
    range_start: date,
    range_end: date,
) -> Union[bool, np.ndarray]:
    """
    True when ``range_start <= value <= range_end`` by calendar day.

    Time of day is ignored on all three arguments.  ``value`` may also be an
    array of ``datetime64`` (or date) values, giving a boolean array.
    """
    start = strip_time(range_start)
    end = strip_time(range_end)
    if isinstance(value, date):
        return start <= strip_time(value) <= end

    scalar = np.ndim(value) == 0
    days = np.asarray(value).astype("datetime64[D]")
    lo = np.datetime64(start, "D")
    hi = np.datetime64(end, "D")
    mask = (days >= lo) & (days <= hi)
    return bool(mask) if scalar else mask


def _coerce_like(value: date, like: date) -> date:
    if isinstance(like, datetime) and not isinstance(value, datetime):
        return datetime.combine(value, time())
    if not isinstance(like, datetime) and isinstance(value, datetime):
        return value.date()
    return value


def remaining_dates_by_day(
    start_date: date,
    end_date: date,
    interval: int = 1,
) -> list[date]:
    """Dates from ``start_date`` to ``end_date`` inclusive, ``interval`` days apart."""
    end_date = _coerce_like(end_date, start_date)
    if end_date < start_date:
        logger.debug("End %s precedes start %s; no dates.", end_date, start_date)
        return []
    if interval <= 0:
        logger.debug("Non-positive interval %r; no dates.", interval)
        return []

    step = timedelta(days=interval)
    dates: list[date] = []
    current = start_date
    while True:
        dates.append(current)
        # Never step past end_date; date.max + 1 day overflows.
        if end_date - current < step:
            break
        current += step
    return dates
