from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from .calendar import days_in_month, sunday_weekday

WeekRow = list[Optional[int]]

DAYS_PER_WEEK = 7


def _empty_week() -> WeekRow:
    return [None] * DAYS_PER_WEEK


def week_dates(value: date) -> list[date]:
    """
    The seven dates, Sunday to Saturday, of the week containing ``value``.

    The result has the same type as ``value``; a datetime keeps its time.
    """
    sunday = value - timedelta(days=sunday_weekday(value))
    return [sunday + timedelta(days=i) for i in range(DAYS_PER_WEEK)]


def month_grid(current_date: date) -> list[WeekRow]:
    """
    Sunday-first rows of day numbers for the month containing ``current_date``.

    Every row has seven slots.  Slots before the 1st and after the last day
    of the month hold ``None``.
    """
    year, month = current_date.year, current_date.month
    n_days = days_in_month(year, month)
    first_weekday = sunday_weekday(date(year, month, 1))

    weeks: list[WeekRow] = []
    week = _empty_week()
    for day in range(1, n_days + 1):
        index = (first_weekday + day - 1) % DAYS_PER_WEEK
        week[index] = day
        if index == DAYS_PER_WEEK - 1 or day == n_days:
            weeks.append(week)
            week = _empty_week()
    return weeks
