"""Projection engine: calorie balance to weekly and daily weight curves.

Key components:
- Mifflin-St Jeor BMR and net calorie balance
- Week boundaries (partial first week, then Monday-Sunday)
- Weekly projection until the goal weight or a 104-week cap
- Daily expansion of any single week
- Progress summary and actual-versus-projected comparison
"""

from __future__ import annotations

from weightplan.projection.body_calc import compute_bmr, compute_net_calories
from weightplan.projection.calendar import resolve_week_range
from weightplan.projection.daily import project_daily
from weightplan.projection.progress import (
    ProgressSummary,
    WeekComparison,
    compare_weeks,
    current_week,
    summarize,
)
from weightplan.projection.weekly import MAX_WEEKS, project_weight

__all__ = [
    "MAX_WEEKS",
    "ProgressSummary",
    "WeekComparison",
    "compare_weeks",
    "compute_bmr",
    "compute_net_calories",
    "current_week",
    "project_daily",
    "project_weight",
    "resolve_week_range",
    "summarize",
]
