"""Energy balance calculator for weight projection.

Calculates BMR (Basal Metabolic Rate) and the net daily calorie balance
implied by a user profile's intake and exercise.

Uses Mifflin-St Jeor equation for BMR as it's widely validated for
calculating resting metabolic rate.
"""

from __future__ import annotations

import math

from weightplan.tracking.models import Sex, UserProfile

# Unit conversions
KG_PER_LB = 0.453592
CM_PER_INCH = 2.54

# 3500 calories = 1 lb of body weight
CALORIES_PER_POUND = 3500

# Mifflin-St Jeor sex constants
SEX_MODIFIERS = {
    Sex.MALE: 5,
    Sex.FEMALE: -161,
}


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going toward positive infinity.

    Python's round() uses banker's rounding; projections are displayed with
    the conventional rule instead (2.5 -> 3, -2.5 -> -2).

    Args:
        value: Number to round
        digits: Decimal places to keep

    Returns:
        Rounded value
    """
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def round_weight(weight_lbs: float) -> float:
    """Round a weight to one decimal place for output."""
    return round_half_up(weight_lbs, 1)


def compute_bmr(profile: UserProfile) -> int:
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    BMR = 10 * weight(kg) + 6.25 * height(cm) - 5 * age + s
    where s is +5 for males and -161 for females.

    Inputs are not range-checked; degenerate values produce a number.

    Args:
        profile: User profile (weight in lbs, height in feet/inches)

    Returns:
        BMR in calories per day, rounded half-up to an integer
    """
    # Convert to metric
    weight_kg = profile.weight_lbs * KG_PER_LB
    height_cm = profile.total_height_inches * CM_PER_INCH

    base = (10 * weight_kg) + (6.25 * height_cm) - (5 * profile.age)
    return int(round_half_up(base + SEX_MODIFIERS[profile.sex]))


def compute_net_calories(profile: UserProfile) -> float:
    """Calculate the net daily calorie balance.

    Positive values are a surplus (weight gain), negative values a deficit
    (weight loss). The result is not rounded.

    Args:
        profile: User profile

    Returns:
        calories_eaten - (BMR + calories_burned_exercise)
    """
    total_burned = compute_bmr(profile) + profile.calories_burned_exercise
    return profile.calories_eaten - total_burned


def pounds_per_day(net_calories: float) -> float:
    """Convert a daily calorie balance to a daily weight change in lbs."""
    return net_calories / CALORIES_PER_POUND
