"""Day-by-day expansion of a single projection week."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Optional

from weightplan.projection.body_calc import (
    compute_net_calories,
    pounds_per_day,
    round_weight,
)
from weightplan.projection.calendar import (
    day_name,
    day_offset,
    resolve_start_date,
    week_range_from_start,
)
from weightplan.tracking.models import DailyProjection, UserProfile


def project_daily(
    profile: UserProfile,
    week_number: int,
    today: Optional[date] = None,
) -> list[DailyProjection]:
    """Project the weight at the start of each day of one week.

    The weight on the week's first day is derived from the profile's base
    weight and the number of days since the start date, so any week can be
    expanded on its own and agrees with project_weight().

    Args:
        profile: User profile
        week_number: 1-based week index
        today: Fallback for a missing or invalid start date

    Returns:
        One DailyProjection per day of the week (1-7 for week 1, else 7)

    Raises:
        ValueError: If week_number is less than 1
    """
    daily_change = pounds_per_day(compute_net_calories(profile))
    start = resolve_start_date(profile.start_date, today)
    week_range = week_range_from_start(start, week_number)

    current_weight = profile.weight_lbs + daily_change * day_offset(start, week_number)

    projections = []
    for index in range(week_range.days):
        current_date = week_range.start_date + timedelta(days=index)
        projections.append(
            DailyProjection(
                day=index,
                weight=round_weight(current_weight),
                date=current_date,
                day_name=day_name(current_date),
            )
        )
        current_weight += daily_change

    return projections
