from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Literal, Optional

import numpy as np

from caltools.calendar import sunday_weekday

logger = logging.getLogger(__name__)

WeekType = Literal["none", "mon", "tue", "wed", "thu", "fri", "sat", "sun"]

# Indexed by date.weekday(), Monday first.
WEEKDAY_CODES: tuple[WeekType, ...] = ("mon", "tue", "wed", "thu", "fri", "sat", "sun")

MONTH_LABEL = "{year}년 {month}월"
WEEK_LABEL = "{year}년 {month}월 {week}주"

_THURSDAY = 4  # Sunday-first index


def fill_zero(value: int, size: int = 2) -> str:
    """Left-pad ``value`` with zeros to at least ``size`` characters."""
    return str(value).rjust(size, "0")


def format_date(current_date: date, day: Optional[int] = None) -> str:
    """``YYYY-MM-DD`` for ``current_date``, optionally with another day of the month."""
    return "-".join([
        str(current_date.year),
        fill_zero(current_date.month),
        fill_zero(current_date.day if day is None else day),
    ])


def format_month(current_date: date) -> str:
    return MONTH_LABEL.format(year=current_date.year, month=current_date.month)


def format_week(target_date: date) -> str:
    """
    Week label ``"{year}년 {month}월 {n}주"`` for a Sunday-first week.

    A week belongs to the month of its Thursday, and week 1 of a month is
    the week holding that month's first Thursday.  A week straddling two
    months is therefore labelled with whichever month owns its Thursday.
    """
    thursday = target_date - timedelta(days=sunday_weekday(target_date) - _THURSDAY)
    first_of_month = date(thursday.year, thursday.month, 1)
    first_thursday = first_of_month + timedelta(
        days=(_THURSDAY - sunday_weekday(first_of_month) + 7) % 7
    )
    # Both are Thursdays of the same month, so the difference is whole weeks.
    week = (date(thursday.year, thursday.month, thursday.day) - first_thursday).days // 7 + 1
    return WEEK_LABEL.format(year=thursday.year, month=thursday.month, week=week)


def weekday_short(value) -> WeekType:
    """
    Lowercase three-letter weekday code (``"mon"`` .. ``"sun"``).

    Values without a weekday (``None``, ``NaT``, non-dates) give ``"none"``.
    """
    if isinstance(value, date):
        return WEEKDAY_CODES[value.weekday()]
    if isinstance(value, np.datetime64) and not np.isnat(value):
        day = value.astype("datetime64[D]").item()
        if isinstance(day, date):
            return WEEKDAY_CODES[day.weekday()]
    logger.debug("No weekday for %r; returning 'none'.", value)
    return "none"
