"""
tests/formatting/test_labels.py

Covers:
  - Zero padding
  - YYYY-MM-DD dates, with and without a day override
  - Korean month and Thursday-anchored week labels
  - Weekday codes and the "none" sentinel
"""

import logging
from datetime import date, datetime, timedelta

import numpy as np
import pytest

from caltools.calendar import week_dates
from caltools.formatting import (
    WEEKDAY_CODES,
    fill_zero,
    format_date,
    format_month,
    format_week,
    weekday_short,
)


# ── fill_zero ─────────────────────────────────────────────────────────────────

class TestFillZero:

    def test_single_digit(self):
        assert fill_zero(5) == "05"

    def test_two_digits(self):
        assert fill_zero(12) == "12"

    def test_longer_than_size_not_truncated(self):
        assert fill_zero(123, 2) == "123"

    def test_custom_size(self):
        assert fill_zero(7, 3) == "007"

    def test_zero(self):
        assert fill_zero(0) == "00"


# ── format_date / format_month ────────────────────────────────────────────────

class TestFormatDate:

    def test_pads_month_and_day(self):
        assert format_date(date(2024, 1, 5)) == "2024-01-05"

    def test_day_override(self):
        assert format_date(date(2024, 1, 5), 20) == "2024-01-20"

    def test_single_digit_override(self):
        assert format_date(date(2024, 11, 25), 3) == "2024-11-03"

    def test_datetime_ignores_time(self):
        assert format_date(datetime(2024, 12, 25, 10, 30)) == "2024-12-25"


class TestFormatMonth:

    def test_label(self):
        assert format_month(date(2024, 1, 5)) == "2024년 1월"

    def test_month_not_padded(self):
        assert format_month(date(2023, 12, 31)) == "2023년 12월"

    def test_keyword_argument(self):
        assert format_month(current_date=datetime(2024, 7, 1, 9)) == "2024년 7월"


# ── format_week ───────────────────────────────────────────────────────────────

class TestFormatWeek:

    def test_first_week(self):
        assert format_week(date(2024, 1, 5)) == "2024년 1월 1주"

    def test_second_week_starts_sunday(self):
        assert format_week(date(2024, 1, 7)) == "2024년 1월 2주"

    def test_week_belongs_to_month_of_its_thursday(self):
        # Wed 31 Jan 2024; that week's Thursday is 1 Feb
        assert format_week(date(2024, 1, 31)) == "2024년 2월 1주"

    def test_leap_day_thursday_gives_fifth_week(self):
        assert format_week(date(2024, 3, 1)) == "2024년 2월 5주"

    def test_year_boundary(self):
        assert format_week(date(2024, 12, 31)) == "2025년 1월 1주"

    def test_month_starting_sunday(self):
        assert format_week(date(2024, 9, 1)) == "2024년 9월 1주"

    def test_datetime_input(self):
        assert format_week(datetime(2024, 1, 5, 23, 59)) == "2024년 1월 1주"

    def test_same_label_across_a_week(self):
        labels = {format_week(d) for d in week_dates(date(2024, 5, 15))}
        assert labels == {"2024년 5월 3주"}

    def test_week_number_increases_by_one(self):
        sundays = [date(2023, 12, 31) + timedelta(weeks=i) for i in range(4)]
        assert [format_week(d) for d in sundays] == [
            "2024년 1월 1주",
            "2024년 1월 2주",
            "2024년 1월 3주",
            "2024년 1월 4주",
        ]

    @pytest.mark.parametrize("year", [2023, 2024, 2025])
    def test_first_week_of_every_month(self, year):
        for month in range(1, 13):
            first = date(year, month, 1)
            first_thursday = first + timedelta(days=(3 - first.weekday()) % 7)
            assert format_week(first_thursday) == f"{year}년 {month}월 1주"


# ── weekday_short ─────────────────────────────────────────────────────────────

class TestWeekdayShort:

    def test_monday(self):
        assert weekday_short(date(2024, 1, 1)) == "mon"

    def test_full_week_sunday_first(self):
        assert [weekday_short(d) for d in week_dates(date(2024, 1, 10))] == [
            "sun", "mon", "tue", "wed", "thu", "fri", "sat",
        ]

    def test_codes_are_lowercase_three_letters(self):
        assert all(len(c) == 3 and c.islower() for c in WEEKDAY_CODES)

    def test_datetime(self):
        assert weekday_short(datetime(2024, 1, 5, 23, 59)) == "fri"

    def test_datetime64(self):
        assert weekday_short(np.datetime64("2024-01-05")) == "fri"

    def test_nat_is_none(self):
        assert weekday_short(np.datetime64("NaT")) == "none"

    @pytest.mark.parametrize("value", [None, "2024-01-01", 20240101])
    def test_non_dates_are_none(self, value):
        assert weekday_short(value) == "none"

    def test_fallback_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="caltools.formatting.labels"):
            weekday_short(None)
        assert "none" in caplog.text
