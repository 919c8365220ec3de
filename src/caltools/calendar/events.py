from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any, TypeVar

from ._exceptions import CalendarError

logger = logging.getLogger(__name__)

E = TypeVar("E")


def event_date(event: Any) -> date:
    """
    Parsed ``date`` field of an event.

    Accepts objects with a ``date`` attribute and mappings with a ``"date"``
    key.  The value is either a date/datetime or an ISO-8601 string.
    """
    if isinstance(event, Mapping):
        try:
            value = event["date"]
        except KeyError as exc:
            raise CalendarError(f"Event has no 'date' field: {event!r}.") from exc
    else:
        try:
            value = event.date
        except AttributeError as exc:
            raise CalendarError(f"Event has no 'date' field: {event!r}.") from exc

    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value)
        except ValueError as exc:
            raise CalendarError(f"Event date is not ISO-8601: {value!r}.") from exc
    raise CalendarError(
        f"Event date must be a date or ISO-8601 string; got {type(value).__name__}."
    )


def events_for_day(events: Iterable[E], day: int) -> list[E]:
    """
    Events whose date falls on day-of-month ``day``.

    Only the day of the month is compared, not the year or month: pass the
    events of a single month.  Events without a readable date are skipped.
    """
    matches: list[E] = []
    for event in events:
        try:
            parsed = event_date(event)
        except CalendarError as exc:
            logger.debug("Skipping event: %s", exc)
            continue
        if parsed.day == day:
            matches.append(event)
    return matches
