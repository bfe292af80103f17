"""Energy expenditure and calorie target calculations."""

import math

from meal_planner.domain.diet_rules import DEFAULT_MACRO_RATIOS, DIET_MACRO_RATIOS
from meal_planner.domain.errors import InsufficientProfileData
from meal_planner.domain.models import CalorieTarget, GenerationRequest, UserProfile
from meal_planner.domain.stats import DailyGoals

KCAL_PER_KG = 7700
MIN_DAILY_CALORIES = 1200
MAX_DAILY_ADJUSTMENT = 1000
MUSCLE_BUILDING_SURPLUS = 300
DEFAULT_ACTIVITY_FACTOR = 1.55
DEFAULT_PERIOD_DAYS = 28

ACTIVITY_FACTORS = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "extra-active": 1.9,
}

PERIOD_DAYS = {
    "4-weeks": 28,
    "2-months": 60,
    "3-months": 90,
    "4-months": 120,
    "5-months": 150,
    "6-months": 180,
}

_MALE = {"m", "male", "man"}
_FEMALE = {"f", "female", "woman"}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


def normalize_gender(raw: str | None) -> str | None:
    """Map free-form gender input to male/female, or None if unknown."""
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in _MALE:
        return "male"
    if value in _FEMALE:
        return "female"
    return None


def compute_bmr(
    weight_kg: float, height_cm: float, age_years: float, gender: str
) -> float:
    """Mifflin-St Jeor basal metabolic rate."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
    if gender == "male":
        return base + 5
    if gender == "female":
        return base - 161
    raise ValueError(f"Unsupported gender: {gender}")


def compute_tdee(bmr: float, activity_level: str | None) -> int:
    """Total daily energy expenditure for an activity level."""
    factor = ACTIVITY_FACTORS.get(activity_level or "", DEFAULT_ACTIVITY_FACTOR)
    return round_half_up(bmr * factor)


def period_days(label: str | None) -> int:
    """Number of days covered by a diet period label."""
    return PERIOD_DAYS.get(label or "", DEFAULT_PERIOD_DAYS)


def compute_calorie_goal(
    current_weight: float,
    goal_weight: float,
    tdee: float,
    period_label: str | None,
    diet_goal: str,
) -> int:
    """Daily calorie target for a goal, clamped to safe bounds."""
    days = period_days(period_label)
    if diet_goal == "muscle-building":
        if goal_weight > current_weight:
            surplus = round_half_up((goal_weight - current_weight) * KCAL_PER_KG / days)
            return round_half_up(tdee + min(surplus, MAX_DAILY_ADJUSTMENT))
        return round_half_up(tdee + MUSCLE_BUILDING_SURPLUS)
    if diet_goal == "keto":
        return round_half_up(tdee * 0.9)
    if diet_goal in {"lean-mass", "maintenance"}:
        return round_half_up(tdee)

    adjustment = round_half_up((goal_weight - current_weight) * KCAL_PER_KG / days)
    adjusted = tdee + adjustment
    if adjustment > 0:
        adjusted = min(tdee + MAX_DAILY_ADJUSTMENT, adjusted)
    elif adjustment < 0:
        adjusted = max(tdee - MAX_DAILY_ADJUSTMENT, adjusted)
    # never below the floor, even when TDEE itself is
    return round_half_up(max(MIN_DAILY_CALORIES, adjusted))


def calorie_target_for_profile(
    profile: UserProfile, request: GenerationRequest | None = None
) -> CalorieTarget:
    """Compute BMR, TDEE and the calorie goal for a stored profile."""
    request = request or GenerationRequest()
    gender = normalize_gender(profile.gender)
    missing: list[str] = []
    if not _positive(profile.weight_kg):
        missing.append("weight")
    if not _positive(profile.height_cm):
        missing.append("height")
    if not _positive(profile.age):
        missing.append("age")
    if gender is None:
        missing.append("gender")
    if missing:
        raise InsufficientProfileData(tuple(missing))

    bmr = compute_bmr(profile.weight_kg, profile.height_cm, profile.age, gender)
    tdee = compute_tdee(bmr, profile.activity_level)
    if request.calorie_goal_override:
        return CalorieTarget(
            bmr=bmr, tdee=tdee, calorie_goal=int(request.calorie_goal_override)
        )
    goal_weight = (
        request.goal_weight_kg or profile.goal_weight_kg or profile.weight_kg
    )
    calorie_goal = compute_calorie_goal(
        current_weight=profile.weight_kg,
        goal_weight=goal_weight,
        tdee=tdee,
        period_label=request.period or profile.diet_period,
        diet_goal=request.diet_goal or profile.diet_goal,
    )
    return CalorieTarget(bmr=bmr, tdee=tdee, calorie_goal=calorie_goal)


def macro_ratios_for_diet(diet_preference: str) -> tuple[float, float, float]:
    """Return (protein, carbs, fat) calorie shares for a diet preference."""
    return DIET_MACRO_RATIOS.get(diet_preference, DEFAULT_MACRO_RATIOS)


def goals_for_calorie_target(calories: float, diet_preference: str) -> DailyGoals:
    """Split a calorie target into gram goals using the diet's macro ratios."""
    protein_ratio, carbs_ratio, fat_ratio = macro_ratios_for_diet(diet_preference)
    return DailyGoals(
        calories=round_half_up(calories),
        protein_g=round_half_up(calories * protein_ratio / 4),
        carbs_g=round_half_up(calories * carbs_ratio / 4),
        fat_g=round_half_up(calories * fat_ratio / 9),
    )


def _positive(value: float | None) -> bool:
    return isinstance(value, int | float) and value > 0
