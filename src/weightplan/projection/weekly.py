"""Week-by-week weight projection until the goal weight is reached."""

from __future__ import annotations

from datetime import date
from typing import Iterator, Optional

import structlog

from weightplan.projection.body_calc import (
    CALORIES_PER_POUND,
    compute_net_calories,
    round_weight,
)
from weightplan.projection.calendar import (
    days_in_first_week,
    resolve_start_date,
    week_range_from_start,
)
from weightplan.tracking.models import UserProfile, WeeklyProjection

logger = structlog.get_logger(__name__)

# Safety limit: 2 years
MAX_WEEKS = 104


def goal_crossed(start_weight: float, goal_weight: float, net_calories: float) -> bool:
    """Whether a week's start weight has reached the goal.

    The direction of travel comes from the sign of the calorie balance. A
    balance of exactly zero has no direction and never reaches the goal.
    """
    if net_calories < 0:
        return start_weight <= goal_weight
    if net_calories > 0:
        return start_weight >= goal_weight
    return False


def project_weight(
    profile: UserProfile,
    today: Optional[date] = None,
    max_weeks: int = MAX_WEEKS,
) -> list[WeeklyProjection]:
    """Project weekly weight checkpoints from the profile's start date.

    Week 1 covers the start date through its Sunday; later weeks are full
    Monday-Sunday weeks. From week 2 on, the series stops after the first
    week whose start weight has reached the goal, so the last entry may
    overshoot the goal by up to one week of change. Without convergence the
    series stops at ``max_weeks``.

    The running weight is carried unrounded; only emitted values are rounded.

    Args:
        profile: User profile
        today: Fallback for a missing or invalid start date
        max_weeks: Hard cap on the number of weeks

    Returns:
        Weekly projections ordered by week, starting at week 1
    """
    net_calories = compute_net_calories(profile)
    start = resolve_start_date(profile.start_date, today)

    projections = []
    for week, start_weight, end_weight in accumulate_weeks(profile, start, max_weeks):
        projections.append(
            WeeklyProjection(
                week=week,
                start_weight=round_weight(start_weight),
                end_weight=round_weight(end_weight),
                date=week_range_from_start(start, week).start_date,
            )
        )

        if week > 1 and goal_crossed(start_weight, profile.goal_weight_lbs, net_calories):
            break
    else:
        logger.info(
            "projection_capped",
            max_weeks=max_weeks,
            net_calories=net_calories,
            goal_weight_lbs=profile.goal_weight_lbs,
        )

    return projections


def accumulate_weeks(
    profile: UserProfile,
    start: date,
    max_weeks: int = MAX_WEEKS,
) -> Iterator[tuple[int, float, float]]:
    """Yield unrounded ``(week, start_weight, end_weight)`` for weeks 1..max_weeks.

    Week 1 covers the start date through its Sunday; every later week adds
    one full week of change to the previous week's end weight. Anything that
    needs to agree exactly with project_weight() must walk this sequence
    rather than recompute weights from a day offset.
    """
    net_calories = compute_net_calories(profile)

    week1_days = days_in_first_week(start)
    start_weight = profile.weight_lbs
    end_weight = start_weight + (net_calories * week1_days) / CALORIES_PER_POUND
    yield 1, start_weight, end_weight

    weekly_change = (net_calories * 7) / CALORIES_PER_POUND

    for week in range(2, max_weeks + 1):
        start_weight = end_weight
        end_weight = start_weight + weekly_change
        yield week, start_weight, end_weight
