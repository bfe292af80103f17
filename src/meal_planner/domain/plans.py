"""Domain models for generated meal plans."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from meal_planner.domain.nutrition import (
    FoodDietProperties,
    FoodMedicalProperties,
    MacroProfile,
    Portion,
)

DAYS = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
MEAL_SLOTS = ("Breakfast", "Lunch", "Dinner", "Snack")
MEAL_CALORIE_SHARES = {
    "Breakfast": 0.25,
    "Lunch": 0.35,
    "Dinner": 0.30,
    "Snack": 0.10,
}
FASTING_MEAL_TIMES = {
    "Lunch": "12:00 PM",
    "Snack": "4:00 PM",
    "Dinner": "8:00 PM",
}


class SourceStrategy(StrEnum):
    """Which food source the generator reaches for first."""

    PREFER_REGIONAL = "prefer-regional"
    PREFER_INTERNATIONAL = "prefer-international"
    PREFER_CUSTOM = "prefer-custom"


@dataclass(frozen=True)
class GenerationParams:
    """Immutable inputs for one plan generation."""

    diet_preference: str
    diet_goal: str
    calorie_goal: int
    period: str
    strategy: SourceStrategy
    medical_conditions: tuple[str, ...] = ()
    allergies: tuple[str, ...] = ()
    activity_level: str = "moderate"
    goal_weight_kg: float | None = None

    def to_document(self) -> dict[str, object]:
        """Serialize generation parameters for provenance."""
        return {
            "dietPreference": self.diet_preference,
            "dietGoal": self.diet_goal,
            "calorieGoal": self.calorie_goal,
            "dietPeriod": self.period,
            "goalWeight": self.goal_weight_kg,
            "medicalConditions": list(self.medical_conditions),
            "allergies": ", ".join(self.allergies),
            "activityLevel": self.activity_level,
            "strategy": str(self.strategy),
        }


@dataclass(frozen=True)
class PlanItem:
    """A single food placed in a meal slot."""

    meal: str
    food: str
    portion: Portion
    nutrition: MacroProfile
    source: str
    food_id: str
    time: str | None = None
    warning: str | None = None
    diet_verified: bool = field(default=False, repr=False)
    diet_properties: FoodDietProperties | None = field(default=None, repr=False)
    medical_properties: FoodMedicalProperties | None = field(default=None, repr=False)

    def to_document(self) -> dict[str, object]:
        """Serialize the item the way stored plans expect."""
        document: dict[str, object] = {"meal": self.meal}
        if self.time:
            document["time"] = self.time
        document.update(
            {
                "food": self.food,
                "quantity": self.portion.description,
                "calories": self.nutrition.calories,
                "protein": self.nutrition.protein_g,
                "carbs": self.nutrition.carbs_g,
                "fat": self.nutrition.fat_g,
                "source": self.source,
                "id": self.food_id,
            }
        )
        if self.warning:
            document["warning"] = self.warning
        return document


@dataclass(frozen=True)
class DayPlan:
    """Meals planned for one day."""

    day: str
    meals: tuple[PlanItem, ...]

    def to_document(self) -> dict[str, object]:
        """Serialize the day."""
        return {"day": self.day, "meals": [meal.to_document() for meal in self.meals]}


@dataclass(frozen=True)
class MealPlan:
    """Seven days of meals plus the parameters that produced them."""

    days: tuple[DayPlan, ...]
    params: GenerationParams
    source: str
    created_at: datetime
    id: str | None = None

    def to_document(self) -> dict[str, object]:
        """Serialize the plan with provenance."""
        document = self.params.to_document()
        document.update(
            {
                "plan": [day.to_document() for day in self.days],
                "createdAt": self.created_at.isoformat(),
                "source": self.source,
            }
        )
        if self.id is not None:
            document["id"] = self.id
        return document
