"""Tests for the progress summary and actual-versus-projected comparison."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta, timezone

import pytest

from weightplan.projection.body_calc import compute_bmr, compute_net_calories
from weightplan.projection.calendar import days_in_first_week, resolve_week_range
from weightplan.projection.progress import (
    compare_weeks,
    current_week,
    is_goal_reached,
    summarize,
)
from weightplan.projection.weekly import project_weight
from weightplan.tracking.models import Measurement
from weightplan.tracking.queries import MeasurementStore


class TestSummarize:
    """Tests for summarize."""

    def test_rates(self, losing_profile) -> None:
        """BMR 1873, burned 2173, -373 kcal/day = 9.38 days per pound."""
        result = summarize(losing_profile, now=datetime(2024, 1, 10, 12, 0))
        assert result.bmr == 1873
        assert result.total_burned == pytest.approx(2173)
        assert result.net_calories == pytest.approx(-373)
        assert result.pounds_per_day == pytest.approx(-373 / 3500)
        assert result.days_per_pound == pytest.approx(3500 / 373)
        assert result.weight_to_goal == pytest.approx(20.0)

    def test_calorie_progress(self, losing_profile) -> None:
        """7.5 days at 373 kcal against 20 lb * 3500 kcal."""
        result = summarize(losing_profile, now=datetime(2024, 1, 10, 12, 0))
        assert result.days_since_start == pytest.approx(7.5)
        assert result.calorie_progress == pytest.approx(373 * 7.5 / 70000)

    def test_calorie_progress_clamped(self, losing_profile) -> None:
        """Progress never exceeds 1 or drops below 0."""
        late = summarize(losing_profile, now=datetime(2030, 1, 1))
        early = summarize(losing_profile, now=datetime(2023, 12, 1))
        assert late.calorie_progress == 1.0
        assert early.calorie_progress == 0.0
        assert early.days_since_start == 0.0

    def test_expected_end_date(self, losing_profile) -> None:
        """The goal date is the start of the last projected week."""
        result = summarize(losing_profile, now=datetime(2024, 1, 10))
        assert result.weeks == 29
        assert result.goal_reached is True
        assert result.expected_end_date == resolve_week_range(losing_profile, 29).start_date
        assert result.expected_end_date == date(2024, 7, 15)
        assert result.current_week == 2

    def test_zero_balance_not_reached(self, reference_profile) -> None:
        """A capped series reports the goal as not reached."""
        profile = replace(reference_profile, calories_eaten=compute_bmr(reference_profile))
        result = summarize(profile, now=datetime(2024, 1, 2))
        assert result.weeks == 104
        assert result.goal_reached is False
        assert result.days_per_pound == 0.0

    def test_to_dict(self, losing_profile) -> None:
        """Dates serialize as ISO strings."""
        data = summarize(losing_profile, now=datetime(2024, 1, 10)).to_dict()
        assert data["expected_end_date"] == "2024-07-15"
        assert data["current_week"] == 2

    def test_timezone_aware_now(self, losing_profile) -> None:
        """An aware timestamp is read on the local clock, like a naive one."""
        aware = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
        local = aware.astimezone().replace(tzinfo=None)

        result = summarize(losing_profile, now=aware)

        assert result == summarize(losing_profile, now=local)
        assert result.days_since_start == pytest.approx(
            (local - datetime(2024, 1, 3)).total_seconds() / 86400
        )


class TestGoalReached:
    """Tests for is_goal_reached."""

    def test_reached(self, losing_profile) -> None:
        assert is_goal_reached(losing_profile, project_weight(losing_profile))

    def test_capped(self, reference_profile) -> None:
        profile = replace(reference_profile, calories_eaten=1773)
        assert not is_goal_reached(profile, project_weight(profile))

    def test_goal_exactly_on_running_weight(self, reference_profile) -> None:
        """A goal equal to a week's accumulated start weight is reached there."""
        profile = replace(
            reference_profile, weight_lbs=200.0, calories_eaten=1816.0  # -57 kcal/day
        )
        net = compute_net_calories(profile)
        assert net == -57

        # Monday start: week 1 is a full week; weeks 2-4 add one week each
        weight = profile.weight_lbs + (net * 7) / 3500
        for _ in range(3):
            weight = weight + (net * 7) / 3500
        profile = replace(profile, goal_weight_lbs=weight)

        projections = project_weight(profile)
        assert len(projections) == 5
        assert is_goal_reached(profile, projections)
        assert summarize(profile, projections, now=datetime(2024, 2, 1)).goal_reached

    def test_agrees_with_series_length(self, reference_profile) -> None:
        """Every series that stops before the cap reports the goal as reached."""
        for eaten in (1726.0, 1660.0, 1410.0):
            for offset in range(7):
                start = date(2024, 1, 1) + timedelta(days=offset)
                base = replace(reference_profile, calories_eaten=eaten, start_date=start)
                net = compute_net_calories(base)

                weight = base.weight_lbs + (net * days_in_first_week(start)) / 3500
                running = [weight]
                for _ in range(40):
                    weight = weight + (net * 7) / 3500
                    running.append(weight)

                for goal in (running[2], running[9], running[39]):
                    profile = replace(base, goal_weight_lbs=goal)
                    projections = project_weight(profile)
                    assert len(projections) < 104
                    assert is_goal_reached(profile, projections)


class TestCurrentWeek:
    """Tests for current_week."""

    def test_first_week(self, losing_profile) -> None:
        projections = project_weight(losing_profile)
        assert current_week(losing_profile, projections, date(2024, 1, 3)) == 1
        assert current_week(losing_profile, projections, date(2024, 1, 7)) == 1

    def test_later_week(self, losing_profile) -> None:
        projections = project_weight(losing_profile)
        assert current_week(losing_profile, projections, date(2024, 1, 8)) == 2
        assert current_week(losing_profile, projections, date(2024, 1, 21)) == 3

    def test_before_start(self, losing_profile) -> None:
        projections = project_weight(losing_profile)
        assert current_week(losing_profile, projections, date(2023, 12, 31)) is None

    def test_after_last_week(self, losing_profile) -> None:
        """Days past the projected series are not in any week."""
        projections = project_weight(losing_profile)
        assert current_week(losing_profile, projections, date(2025, 6, 1)) is None


class TestCompareWeeks:
    """Tests for actual-versus-projected comparison."""

    @staticmethod
    def _compare(temp_db, profile, entries):
        projections = project_weight(profile)
        with temp_db.get_connection() as conn:
            for entry in entries:
                MeasurementStore.save(conn, entry)
            return compare_weeks(
                profile,
                projections,
                lambda r: MeasurementStore.most_recent_weight_in_range(
                    conn, r.start_date, r.end_date
                ),
            )

    def test_latest_weight_in_week_wins(self, temp_db, losing_profile) -> None:
        """The last logged weight inside the week is used; calorie-only days are skipped."""
        comparisons = self._compare(
            temp_db,
            losing_profile,
            [
                Measurement(date="2024-01-12", weight_lbs=198.5),
                Measurement(date="2024-01-09", weight_lbs=199.0),
                Measurement(date="2024-01-13", calories_eaten=1700),
                Measurement(date="2024-01-15", weight_lbs=150.0),  # week 3
            ],
        )
        week2 = comparisons[1]

        assert week2.week == 2
        assert week2.range.start_date == date(2024, 1, 8)
        assert week2.actual_weight == pytest.approx(198.5)
        assert week2.projected_end_weight == pytest.approx(198.7)
        assert week2.difference == pytest.approx(-0.2)
        assert week2.on_track is True
        assert comparisons[2].actual_weight == pytest.approx(150.0)

    def test_behind_schedule(self, temp_db, losing_profile) -> None:
        """Weighing more than projected is off track."""
        comparisons = self._compare(
            temp_db, losing_profile, [Measurement(date="2024-01-05", weight_lbs=201.0)]
        )
        assert comparisons[0].on_track is False
        assert comparisons[0].difference == pytest.approx(1.5)

    def test_no_actuals(self, losing_profile) -> None:
        """Weeks without a weight have no comparison."""
        projections = project_weight(losing_profile)
        comparisons = compare_weeks(losing_profile, projections, lambda r: None)
        assert len(comparisons) == len(projections)
        assert all(c.actual_weight is None for c in comparisons)
        assert all(c.on_track is None and c.difference is None for c in comparisons)

    def test_lookup_receives_week_ranges(self, losing_profile) -> None:
        """The lookup is asked about each week's own date range."""
        projections = project_weight(losing_profile)
        seen = []
        compare_weeks(losing_profile, projections, lambda r: seen.append(r))
        assert seen == [resolve_week_range(losing_profile, p.week) for p in projections]
