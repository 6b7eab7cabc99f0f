"""Tests for week boundary resolution."""

from __future__ import annotations

import time
from dataclasses import replace
from datetime import date, datetime, timedelta, timezone

import pytest
from structlog.testing import capture_logs

from weightplan.projection.calendar import (
    day_name,
    day_offset,
    days_in_first_week,
    find_week_number,
    next_monday_after,
    resolve_start_date,
    resolve_week_range,
    sunday_first_weekday,
    sunday_of,
    week_range_from_start,
)

# 2024-01-01 is a Monday
MONDAY = date(2024, 1, 1)
WEDNESDAY = date(2024, 1, 3)
SATURDAY = date(2024, 1, 6)
SUNDAY = date(2024, 1, 7)


class TestDayHelpers:
    """Tests for the Sunday-first weekday helpers."""

    def test_sunday_is_zero(self) -> None:
        """Sunday = 0, Saturday = 6."""
        assert sunday_first_weekday(SUNDAY) == 0
        assert sunday_first_weekday(MONDAY) == 1
        assert sunday_first_weekday(SATURDAY) == 6

    def test_day_name(self) -> None:
        """English weekday names."""
        assert day_name(SUNDAY) == "Sunday"
        assert day_name(WEDNESDAY) == "Wednesday"

    def test_sunday_of_sunday_is_itself(self) -> None:
        """A Sunday is its own week end."""
        assert sunday_of(SUNDAY) == SUNDAY

    def test_sunday_of_weekdays(self) -> None:
        """Every day Monday-Saturday maps to the same coming Sunday."""
        for offset in range(6):
            assert sunday_of(MONDAY + timedelta(days=offset)) == SUNDAY

    def test_next_monday_after_sunday(self) -> None:
        """The Monday after a Sunday is the next day."""
        assert next_monday_after(SUNDAY) == date(2024, 1, 8)

    def test_next_monday_after_monday(self) -> None:
        """A Monday maps to the following Monday, not itself."""
        assert next_monday_after(MONDAY) == date(2024, 1, 8)

    def test_next_monday_after_weekdays(self) -> None:
        """Weekdays map to the Monday after their Sunday."""
        assert next_monday_after(WEDNESDAY) == date(2024, 1, 8)
        assert next_monday_after(SATURDAY) == date(2024, 1, 8)


class TestWeekRange:
    """Tests for week_range_from_start and resolve_week_range."""

    def test_week1_from_wednesday(self) -> None:
        """Wednesday start: week 1 is Wednesday through Sunday (5 days)."""
        week1 = week_range_from_start(WEDNESDAY, 1)
        assert week1.start_date == WEDNESDAY
        assert week1.end_date == SUNDAY
        assert week1.days == 5

    def test_week1_from_sunday_is_one_day(self) -> None:
        """Sunday start: week 1 is that single day."""
        week1 = week_range_from_start(SUNDAY, 1)
        assert week1.start_date == week1.end_date == SUNDAY
        assert week1.days == 1

    def test_week1_from_monday_is_full(self) -> None:
        """Monday start: week 1 is a full week."""
        assert week_range_from_start(MONDAY, 1).days == 7

    def test_week2_starts_next_monday(self) -> None:
        """Week 2 is the Monday-Sunday after week 1."""
        week2 = week_range_from_start(WEDNESDAY, 2)
        assert week2.start_date == date(2024, 1, 8)
        assert week2.end_date == date(2024, 1, 14)

    def test_later_weeks_are_monday_to_sunday(self) -> None:
        """Every week >= 2 spans exactly 7 days, Monday through Sunday."""
        for start in (MONDAY + timedelta(days=i) for i in range(14)):
            for week in range(2, 30):
                r = week_range_from_start(start, week)
                assert r.start_date.weekday() == 0
                assert r.end_date.weekday() == 6
                assert r.days == 7

    def test_weeks_tile_without_gaps(self) -> None:
        """Consecutive weeks neither overlap nor leave gaps."""
        for start in (MONDAY + timedelta(days=i) for i in range(14)):
            prev = week_range_from_start(start, 1)
            assert prev.start_date == start
            assert 1 <= prev.days <= 7
            for week in range(2, 20):
                current = week_range_from_start(start, week)
                assert current.start_date == prev.end_date + timedelta(days=1)
                prev = current

    def test_week_number_must_be_positive(self) -> None:
        """Week 0 is rejected."""
        with pytest.raises(ValueError, match="week_number"):
            week_range_from_start(MONDAY, 0)

    def test_as_dict_uses_iso_dates(self) -> None:
        """Ranges serialize as YYYY-MM-DD."""
        assert week_range_from_start(WEDNESDAY, 1).as_dict() == {
            "start_date": "2024-01-03",
            "end_date": "2024-01-07",
        }

    def test_resolve_from_profile(self, losing_profile) -> None:
        """resolve_week_range reads the profile's start date."""
        r = resolve_week_range(losing_profile, 3)
        assert r.start_date == date(2024, 1, 15)
        assert r.end_date == date(2024, 1, 21)

    def test_resolve_keeps_string_dates(self, losing_profile) -> None:
        """An ISO timestamp with time of day resolves to its calendar day."""
        profile = replace(losing_profile, start_date="2024-01-03T18:45:00")
        assert resolve_week_range(profile, 1).start_date == WEDNESDAY
        assert resolve_week_range(profile, 1).days == 5


class TestDayCounting:
    """Tests for first-week length and day offsets."""

    def test_days_in_first_week(self) -> None:
        """Monday: 7, Wednesday: 5, Saturday: 2, Sunday: 1."""
        assert days_in_first_week(MONDAY) == 7
        assert days_in_first_week(WEDNESDAY) == 5
        assert days_in_first_week(SATURDAY) == 2
        assert days_in_first_week(SUNDAY) == 1

    def test_day_offset_matches_range(self) -> None:
        """Offset equals the days between start and the week's first day."""
        for week in range(1, 10):
            expected = (week_range_from_start(WEDNESDAY, week).start_date - WEDNESDAY).days
            assert day_offset(WEDNESDAY, week) == expected

    def test_find_week_number(self) -> None:
        """Days map back to the week whose range contains them."""
        for week in range(1, 10):
            r = week_range_from_start(WEDNESDAY, week)
            for d in r.dates():
                assert find_week_number(WEDNESDAY, d) == week

    def test_find_week_number_before_start(self) -> None:
        """Days before the start belong to no week."""
        assert find_week_number(WEDNESDAY, MONDAY) is None


class TestResolveStartDate:
    """Tests for start date parsing and fallback."""

    def test_date_passes_through(self) -> None:
        assert resolve_start_date(WEDNESDAY) == WEDNESDAY

    def test_naive_datetime_keeps_day(self) -> None:
        assert resolve_start_date(datetime(2024, 1, 3, 23, 59)) == WEDNESDAY

    def test_iso_date_string(self) -> None:
        assert resolve_start_date("2024-01-03") == WEDNESDAY

    def test_iso_datetime_string(self) -> None:
        assert resolve_start_date("2024-01-03T08:00:00") == WEDNESDAY

    def test_utc_timestamp_uses_local_day(self) -> None:
        """The mobile app's toISOString() format lands on the local calendar day."""
        expected = datetime(2024, 1, 3, 5, 0, tzinfo=timezone.utc).astimezone().date()
        assert resolve_start_date("2024-01-03T05:00:00.000Z") == expected

    def test_offset_timestamp_uses_local_day(self) -> None:
        value = "2024-01-03T23:30:00-08:00"
        expected = datetime.fromisoformat(value).astimezone().date()
        assert resolve_start_date(value) == expected

    def test_aware_datetime_uses_local_day(self) -> None:
        moment = datetime(2024, 1, 7, 3, 0, tzinfo=timezone(timedelta(hours=9)))
        assert resolve_start_date(moment) == moment.astimezone().date()

    @pytest.mark.skipif(not hasattr(time, "tzset"), reason="needs time.tzset")
    def test_utc_timestamp_can_shift_day(self, monkeypatch) -> None:
        """Early-morning UTC is still the previous evening at UTC-5."""
        monkeypatch.setenv("TZ", "EST5")  # UTC-5, no tz database needed
        time.tzset()
        try:
            assert resolve_start_date("2024-01-03T02:00:00.000Z") == date(2024, 1, 2)
            start = resolve_start_date("2024-01-03T02:00:00.000Z")
            assert week_range_from_start(start, 1).days == 6
        finally:
            monkeypatch.undo()
            time.tzset()

    def test_invalid_falls_back_to_today(self) -> None:
        """Unparseable values use the injected today and log a warning."""
        with capture_logs() as logs:
            result = resolve_start_date("not-a-date", today=SATURDAY)

        assert result == SATURDAY
        assert any(
            entry["event"] == "start_date_invalid" and entry["log_level"] == "warning"
            for entry in logs
        )

    def test_missing_falls_back_to_today(self) -> None:
        """None and empty strings use today."""
        assert resolve_start_date(None, today=SATURDAY) == SATURDAY
        assert resolve_start_date("  ", today=SATURDAY) == SATURDAY

    def test_invalid_profile_date_does_not_raise(self, losing_profile) -> None:
        """A bad profile start date still yields a range."""
        profile = replace(losing_profile, start_date="31/12/2024")
        r = resolve_week_range(profile, 1, today=SUNDAY)
        assert r.start_date == SUNDAY
        assert r.days == 1
