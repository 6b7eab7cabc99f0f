"""Data models for the user profile, projections and logged actuals."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, Optional, Union

StartDate = Union[date, datetime, str, None]


class Sex(Enum):
    """Biological sex for BMR calculation."""
    MALE = "male"
    FEMALE = "female"


# Record keys written by the original mobile app, mapped to field names
_LEGACY_PROFILE_KEYS = {
    "weight": "weight_lbs",
    "heightFeet": "height_feet",
    "heightInches": "height_inches",
    "gender": "sex",
    "caloriesEaten": "calories_eaten",
    "caloriesBurnedExercise": "calories_burned_exercise",
    "startDate": "start_date",
    "goalWeight": "goal_weight_lbs",
    "dailyGoals": "daily_goals",
}


@dataclass
class UserProfile:
    """Biometrics and daily calorie plan driving every projection."""

    age: int
    weight_lbs: float
    height_feet: int
    height_inches: int
    sex: Sex
    calories_eaten: float
    calories_burned_exercise: float
    goal_weight_lbs: float
    start_date: StartDate = None  # date, datetime or ISO-8601 string
    daily_goals: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.sex, Sex):
            try:
                self.sex = Sex(str(self.sex).lower())
            except ValueError:
                raise ValueError(
                    f"sex must be 'male' or 'female', got '{self.sex}'"
                ) from None

    @property
    def total_height_inches(self) -> int:
        return self.height_feet * 12 + self.height_inches

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable record."""
        start = self.start_date
        if isinstance(start, (date, datetime)):
            start = start.isoformat()
        return {
            "age": self.age,
            "weight_lbs": self.weight_lbs,
            "height_feet": self.height_feet,
            "height_inches": self.height_inches,
            "sex": self.sex.value,
            "calories_eaten": self.calories_eaten,
            "calories_burned_exercise": self.calories_burned_exercise,
            "goal_weight_lbs": self.goal_weight_lbs,
            "start_date": start,
            "daily_goals": list(self.daily_goals),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UserProfile":
        """Build a profile from a stored record.

        Accepts both this package's field names and the camelCase keys used
        by records exported from the mobile app.
        """
        values = {_LEGACY_PROFILE_KEYS.get(k, k): v for k, v in data.items()}
        return cls(
            age=int(values["age"]),
            weight_lbs=float(values["weight_lbs"]),
            height_feet=int(values["height_feet"]),
            height_inches=int(values["height_inches"]),
            sex=values["sex"],
            calories_eaten=float(values.get("calories_eaten") or 0),
            calories_burned_exercise=float(
                values.get("calories_burned_exercise") or 0
            ),
            goal_weight_lbs=float(values["goal_weight_lbs"]),
            start_date=values.get("start_date"),
            daily_goals=list(values.get("daily_goals") or []),
        )


@dataclass(frozen=True)
class WeekRange:
    """Inclusive calendar range owned by one projection week."""

    start_date: date
    end_date: date

    @property
    def days(self) -> int:
        """Number of calendar days in the range, both ends included."""
        return (self.end_date - self.start_date).days + 1

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def dates(self) -> list[date]:
        return [self.start_date + timedelta(days=i) for i in range(self.days)]

    def as_dict(self) -> dict[str, str]:
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
        }


@dataclass(frozen=True)
class WeeklyProjection:
    """One weekly checkpoint of the projected weight curve."""

    week: int
    start_weight: float
    end_weight: float
    date: date  # first day of the week

    @property
    def change(self) -> float:
        return round(self.end_weight - self.start_weight, 1)

    def to_dict(self) -> dict[str, Any]:
        return {
            "week": self.week,
            "start_weight": self.start_weight,
            "end_weight": self.end_weight,
            "date": self.date.isoformat(),
        }


@dataclass(frozen=True)
class DailyProjection:
    """Projected weight at the start of one day of a week."""

    day: int
    weight: float
    date: date
    day_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "day": self.day,
            "weight": self.weight,
            "date": self.date.isoformat(),
            "day_name": self.day_name,
        }


@dataclass
class Measurement:
    """Self-reported actuals for a single calendar day.

    Unset fields (None) mean "not logged" and never overwrite stored values
    when the record is merged.
    """

    date: str  # YYYY-MM-DD
    weight_lbs: Optional[float] = None
    calories_eaten: Optional[float] = None
    calories_burned_exercise: Optional[float] = None
    completed_goals: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if isinstance(self.date, datetime):
            self.date = self.date.date().isoformat()
        elif isinstance(self.date, date):
            self.date = self.date.isoformat()
        else:
            # Validates the format; also normalizes full ISO timestamps
            self.date = date.fromisoformat(str(self.date)[:10]).isoformat()
        self.completed_goals = list(dict.fromkeys(self.completed_goals))

    @property
    def day(self) -> date:
        return date.fromisoformat(self.date)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "weight_lbs": self.weight_lbs,
            "calories_eaten": self.calories_eaten,
            "calories_burned_exercise": self.calories_burned_exercise,
            "completed_goals": list(self.completed_goals),
        }
