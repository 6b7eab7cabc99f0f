"""Progress summary and actual-versus-projected comparison.

Combines the projection engine with logged measurements to answer the
questions the overview screen asks: how fast is the weight moving, when is
the goal expected, which week are we in, and is the user on track.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Callable, Optional

from weightplan.projection.body_calc import (
    CALORIES_PER_POUND,
    compute_bmr,
    compute_net_calories,
    pounds_per_day,
)
from weightplan.projection.calendar import (
    find_week_number,
    resolve_start_date,
    week_range_from_start,
)
from weightplan.projection.weekly import accumulate_weeks, goal_crossed, project_weight
from weightplan.tracking.models import UserProfile, WeeklyProjection, WeekRange

# Looks up the logged weight to compare against a week's projection
ActualWeightLookup = Callable[[WeekRange], Optional[float]]


@dataclass
class ProgressSummary:
    """Headline numbers for a profile's projection."""

    bmr: int
    net_calories: float
    total_burned: float
    pounds_per_day: float
    days_per_pound: float        # 0 when the calorie balance is zero
    weight_to_goal: float        # positive when there is weight to lose
    calorie_progress: float      # 0-1 share of the goal's calories already banked
    days_since_start: float
    weeks: int
    expected_end_date: Optional[date]
    goal_reached: bool           # False when the week cap ended the series
    current_week: Optional[int]

    def to_dict(self) -> dict:
        return {
            "bmr": self.bmr,
            "net_calories": self.net_calories,
            "total_burned": self.total_burned,
            "pounds_per_day": round(self.pounds_per_day, 4),
            "days_per_pound": round(self.days_per_pound, 2),
            "weight_to_goal": round(self.weight_to_goal, 1),
            "calorie_progress": round(self.calorie_progress, 4),
            "days_since_start": round(self.days_since_start, 2),
            "weeks": self.weeks,
            "expected_end_date": (
                self.expected_end_date.isoformat() if self.expected_end_date else None
            ),
            "goal_reached": self.goal_reached,
            "current_week": self.current_week,
        }


@dataclass
class WeekComparison:
    """Projected end weight of a week next to the latest logged weight."""

    week: int
    range: WeekRange
    projected_end_weight: float
    actual_weight: Optional[float]

    @property
    def difference(self) -> Optional[float]:
        if self.actual_weight is None:
            return None
        return round(self.actual_weight - self.projected_end_weight, 1)

    @property
    def on_track(self) -> Optional[bool]:
        if self.actual_weight is None:
            return None
        return self.actual_weight <= self.projected_end_weight

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            **self.range.as_dict(),
            "projected_end_weight": self.projected_end_weight,
            "actual_weight": self.actual_weight,
            "difference": self.difference,
            "on_track": self.on_track,
        }


def current_week(
    profile: UserProfile,
    projections: list[WeeklyProjection],
    today: Optional[date] = None,
) -> Optional[int]:
    """Return the projected week containing ``today``, if any."""
    today = today if today is not None else date.today()
    start = resolve_start_date(profile.start_date, today)
    week = find_week_number(start, today)
    if week is None or week > len(projections):
        return None
    return week


def is_goal_reached(
    profile: UserProfile,
    projections: list[WeeklyProjection],
    today: Optional[date] = None,
) -> bool:
    """Whether the series ended because the goal was reached.

    False means the week cap cut the projection off. The last week's start
    weight is taken from the same running total project_weight() uses, so
    the answer always matches why the series stopped.
    """
    if len(projections) < 2:
        return False
    net_calories = compute_net_calories(profile)
    start = resolve_start_date(profile.start_date, today)
    last_week = projections[-1].week

    for week, start_weight, _ in accumulate_weeks(profile, start, last_week):
        if week == last_week:
            return goal_crossed(start_weight, profile.goal_weight_lbs, net_calories)
    return False


def _local_naive(moment: datetime) -> datetime:
    if moment.tzinfo is not None:
        # Project onto the local wall clock, like start dates
        return moment.astimezone().replace(tzinfo=None)
    return moment


def summarize(
    profile: UserProfile,
    projections: Optional[list[WeeklyProjection]] = None,
    now: Optional[datetime] = None,
) -> ProgressSummary:
    """Build the overview numbers for a profile.

    Args:
        profile: User profile
        projections: Precomputed weekly projections (computed if None)
        now: Current time, naive local or timezone-aware; defaults to datetime.now()

    Returns:
        ProgressSummary
    """
    now = _local_naive(now) if now is not None else datetime.now()
    if projections is None:
        projections = project_weight(profile, today=now.date())

    bmr = compute_bmr(profile)
    net_calories = compute_net_calories(profile)
    rate = pounds_per_day(net_calories)
    days_per_pound = 1 / abs(rate) if rate != 0 else 0.0

    weight_to_goal = profile.weight_lbs - profile.goal_weight_lbs

    start = resolve_start_date(profile.start_date, now.date())
    start_dt = datetime.combine(start, datetime.min.time())
    days_since_start = max(0.0, (now - start_dt).total_seconds() / 86400)

    calories_to_goal = weight_to_goal * CALORIES_PER_POUND
    if calories_to_goal > 0:
        banked = abs(net_calories) * days_since_start
        calorie_progress = max(0.0, min(1.0, banked / calories_to_goal))
    else:
        calorie_progress = 0.0

    return ProgressSummary(
        bmr=bmr,
        net_calories=net_calories,
        total_burned=bmr + profile.calories_burned_exercise,
        pounds_per_day=rate,
        days_per_pound=days_per_pound,
        weight_to_goal=weight_to_goal,
        calorie_progress=calorie_progress,
        days_since_start=days_since_start,
        weeks=len(projections),
        expected_end_date=projections[-1].date if projections else None,
        goal_reached=is_goal_reached(profile, projections, now.date()),
        current_week=current_week(profile, projections, now.date()),
    )


def compare_weeks(
    profile: UserProfile,
    projections: list[WeeklyProjection],
    actual_weight: ActualWeightLookup,
    today: Optional[date] = None,
) -> list[WeekComparison]:
    """Pair each projected week with the latest weight logged inside it.

    Args:
        profile: User profile
        projections: Weekly projections from project_weight()
        actual_weight: Returns the logged weight for a week's date range
            (MeasurementStore.most_recent_weight_in_range in the CLI)
        today: Fallback for a missing or invalid start date

    Returns:
        One WeekComparison per projected week
    """
    start = resolve_start_date(profile.start_date, today)

    comparisons = []
    for proj in projections:
        week_range = week_range_from_start(start, proj.week)
        comparisons.append(
            WeekComparison(
                week=proj.week,
                range=week_range,
                projected_end_weight=proj.end_weight,
                actual_weight=actual_weight(week_range),
            )
        )
    return comparisons
