"""Domain models for user profiles and generation requests."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserProfile:
    """Health profile stored for a user."""

    user_id: UUID
    full_name: str | None = None
    gender: str | None = None
    age: int | None = None
    weight_kg: float | None = None
    height_cm: float | None = None
    diet_preference: str = "non-veg"
    diet_goal: str = "maintenance"
    medical_conditions: tuple[str, ...] = ()
    allergies: str = ""
    activity_level: str = "moderate"
    goal_weight_kg: float | None = None
    diet_period: str = "4-weeks"
    meal_plans_generated: int = 0


@dataclass(frozen=True)
class GenerationRequest:
    """Overrides supplied when asking for a new meal plan."""

    diet_preference: str | None = None
    diet_goal: str | None = None
    calorie_goal_override: int | None = None
    period: str | None = None
    goal_weight_kg: float | None = None
    strategy: str | None = None


@dataclass(frozen=True)
class CalorieTarget:
    """Energy figures computed from a profile."""

    bmr: float
    tdee: int
    calorie_goal: int
