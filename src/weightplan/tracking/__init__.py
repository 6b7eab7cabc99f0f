"""User profile and measurement tracking.

Key components:
- UserProfile and the projection value types
- ProfileStore: the single stored profile (one JSON record)
- MeasurementStore: per-day actuals merged field by field
"""

from __future__ import annotations

from weightplan.tracking.models import (
    DailyProjection,
    Measurement,
    Sex,
    UserProfile,
    WeeklyProjection,
    WeekRange,
)
from weightplan.tracking.queries import MeasurementStore, ProfileStore

__all__ = [
    "DailyProjection",
    "Measurement",
    "MeasurementStore",
    "ProfileStore",
    "Sex",
    "UserProfile",
    "WeekRange",
    "WeeklyProjection",
]
