# src/caltools/calendar/__init__.py
"""
caltools.calendar
~~~~~~~~~~~~~~~~~

Calendar arithmetic on plain ``datetime.date`` values: month lengths, leap
years, Sunday-first week and month grids, inclusive date ranges and stepped
date sequences.  Every function is pure; dates are never modified in place.

Basic usage::

    from datetime import date
    from caltools.calendar import days_in_month, month_grid

    days_in_month(2024, 2)                 # → 29
    month_grid(date(2024, 2, 14))[0]       # → [None, None, None, None, 1, 2, 3]

NumPy arrays are accepted by the month-length, leap-year and range tests::

    import numpy as np
    days_in_month(2024, np.arange(1, 13))
    is_date_in_range(np.array(["2024-01-01", "2024-02-01"], dtype="datetime64[D]"),
                     date(2024, 1, 1), date(2024, 1, 31))   # → [True, False]

Public API
----------
days_in_month            Day count of a (possibly rolled-over) month.
is_leap_year             Gregorian leap-year test.
is_date_in_range         Inclusive calendar-day range test.
remaining_dates_by_day   Dates from start to end at a fixed day interval.
week_dates               The Sunday-to-Saturday week around a date.
month_grid               Sunday-first rows of day numbers for a month.
events_for_day           Events falling on a given day of the month.
CalendarError            Base exception for all calendar-related errors.
"""

from __future__ import annotations

from caltools.calendar._exceptions import CalendarError
from caltools.calendar.calendar import (
    days_in_month,
    is_date_in_range,
    is_leap_year,
    remaining_dates_by_day,
    strip_time,
    sunday_weekday,
)
from caltools.calendar.events import event_date, events_for_day
from caltools.calendar.grid import month_grid, week_dates

__all__ = [
    "CalendarError",
    "days_in_month",
    "event_date",
    "events_for_day",
    "is_date_in_range",
    "is_leap_year",
    "month_grid",
    "remaining_dates_by_day",
    "strip_time",
    "sunday_weekday",
    "week_dates",
]
