"""Week boundary rules shared by the weekly and daily projections.

Week 1 runs from the profile's start date through the Sunday on or after
it (1-7 days). Every later week is a full Monday-Sunday block:

    start Wed 2024-01-03
    week 1: Wed 01-03 .. Sun 01-07   (5 days)
    week 2: Mon 01-08 .. Sun 01-14
    week 3: Mon 01-15 .. Sun 01-21

Weekday numbers in this module use the Sunday = 0 convention. All helpers
take the reference date explicitly; only the start-date fallback consults
the clock, and it accepts an injected ``today``.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional

import structlog

from weightplan.tracking.models import StartDate, UserProfile, WeekRange

logger = structlog.get_logger(__name__)

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def sunday_first_weekday(d: date) -> int:
    """Return the weekday with Sunday = 0 ... Saturday = 6."""
    return (d.weekday() + 1) % 7


def day_name(d: date) -> str:
    """Return the English weekday name for a date."""
    return DAY_NAMES[sunday_first_weekday(d)]


def sunday_of(d: date) -> date:
    """Return ``d`` if it is a Sunday, otherwise the following Sunday."""
    weekday = sunday_first_weekday(d)
    if weekday == 0:
        return d
    return d + timedelta(days=7 - weekday)


def next_monday_after(d: date) -> date:
    """Return the first Monday strictly after ``d``."""
    weekday = sunday_first_weekday(d)
    if weekday == 0:
        return d + timedelta(days=1)
    return d + timedelta(days=8 - weekday)


def _parse_start_date(value: StartDate) -> date:
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            # Project onto the local calendar day
            value = value.astimezone().replace(tzinfo=None)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"unsupported start date type: {type(value).__name__}")

    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return _parse_start_date(datetime.fromisoformat(text))


def resolve_start_date(value: StartDate, today: Optional[date] = None) -> date:
    """Resolve a profile start date to a local calendar date.

    A missing or unparseable value falls back to ``today`` (the current local
    date when not given). Bad values are logged, never raised.

    Args:
        value: date, datetime or ISO-8601 string from the profile
        today: Fallback date; defaults to date.today()

    Returns:
        Calendar date the projection starts on
    """
    fallback = today if today is not None else date.today()

    if value is None or (isinstance(value, str) and not value.strip()):
        logger.info("start_date_missing", fallback=fallback.isoformat())
        return fallback

    try:
        return _parse_start_date(value)
    except (TypeError, ValueError) as e:
        logger.warning(
            "start_date_invalid",
            value=str(value),
            error=str(e),
            fallback=fallback.isoformat(),
        )
        return fallback


def days_in_first_week(start: date) -> int:
    """Number of days from ``start`` through its Sunday, inclusive (1-7)."""
    return (sunday_of(start) - start).days + 1


def week_range_from_start(start: date, week_number: int) -> WeekRange:
    """Compute the inclusive date range for a week index.

    Args:
        start: First day of the projection
        week_number: 1-based week index

    Returns:
        WeekRange for that week

    Raises:
        ValueError: If week_number is less than 1
    """
    if week_number < 1:
        raise ValueError(f"week_number must be >= 1, got {week_number}")

    if week_number == 1:
        return WeekRange(start_date=start, end_date=sunday_of(start))

    week_start = next_monday_after(start) + timedelta(weeks=week_number - 2)
    return WeekRange(start_date=week_start, end_date=week_start + timedelta(days=6))


def day_offset(start: date, week_number: int) -> int:
    """Days elapsed between ``start`` and the first day of a week."""
    if week_number == 1:
        return 0
    return days_in_first_week(start) + (week_number - 2) * 7


def resolve_week_range(
    profile: UserProfile,
    week_number: int,
    today: Optional[date] = None,
) -> WeekRange:
    """Compute the date range owned by a week of the profile's projection.

    Args:
        profile: User profile (only start_date is used)
        week_number: 1-based week index
        today: Fallback for a missing or invalid start date

    Returns:
        WeekRange with inclusive start and end dates
    """
    start = resolve_start_date(profile.start_date, today)
    return week_range_from_start(start, week_number)


def find_week_number(start: date, day: date) -> Optional[int]:
    """Return the week index whose range contains ``day``.

    Returns None for days before the projection starts.
    """
    if day < start:
        return None
    first_sunday = sunday_of(start)
    if day <= first_sunday:
        return 1
    return 2 + (day - first_sunday - timedelta(days=1)).days // 7
