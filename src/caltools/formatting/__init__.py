# src/caltools/formatting/__init__.py
"""
caltools.formatting
~~~~~~~~~~~~~~~~~~~

Display labels for calendar views: zero-padded ISO dates, Korean month and
week headings, and short English weekday codes.

Basic usage::

    from datetime import date
    from caltools.formatting import format_date, format_week, weekday_short

    format_date(date(2024, 1, 5))          # → "2024-01-05"
    format_date(date(2024, 1, 5), 20)      # → "2024-01-20"
    format_week(date(2024, 1, 5))          # → "2024년 1월 1주"
    weekday_short(date(2024, 1, 5))        # → "fri"

Public API
----------
fill_zero       Left-pad an integer with zeros.
format_date     "YYYY-MM-DD" label.
format_month    "{year}년 {month}월" label.
format_week     "{year}년 {month}월 {n}주" label, Thursday-anchored.
weekday_short   "mon" .. "sun", or "none" for values without a weekday.
WeekType        Literal type of weekday_short results.
"""

from __future__ import annotations

from caltools.formatting.labels import (
    WEEKDAY_CODES,
    WeekType,
    fill_zero,
    format_date,
    format_month,
    format_week,
    weekday_short,
)

__all__ = [
    "WEEKDAY_CODES",
    "WeekType",
    "fill_zero",
    "format_date",
    "format_month",
    "format_week",
    "weekday_short",
]
