"""Domain models for daily food logs."""

from dataclasses import dataclass
from datetime import date

from meal_planner.domain.nutrition import MacroProfile, Portion

DEFAULT_MEALS = ("Breakfast", "Lunch", "Dinner", "Snack")


@dataclass(frozen=True)
class LoggedFood:
    """A food logged into a meal with its per-serving nutrition."""

    id: str
    food_id: str
    source: str
    name: str
    quantity: float
    serving: Portion
    nutrition: MacroProfile

    def totals(self) -> MacroProfile:
        """Nutrition multiplied by the logged quantity."""
        return self.nutrition.scaled(self.quantity)

    def to_document(self) -> dict[str, object]:
        """Serialize the logged food for storage and display."""
        return {
            "id": self.id,
            "foodId": self.food_id,
            "source": self.source,
            "name": self.name,
            "quantity": self.quantity,
            "servingSize": {
                "amount": self.serving.amount,
                "unit": self.serving.unit,
                "description": self.serving.description,
            },
            "nutrition": _macros_document(self.nutrition),
        }


@dataclass(frozen=True)
class MealEntry:
    """Foods logged in one meal slot."""

    name: str
    foods: tuple[LoggedFood, ...] = ()
    totals: MacroProfile = MacroProfile(0.0, 0.0, 0.0, 0.0)

    def to_document(self) -> dict[str, object]:
        """Serialize the meal with its cached totals."""
        return {
            "name": self.name,
            "foods": [food.to_document() for food in self.foods],
            "totals": _macros_document(self.totals),
        }


@dataclass(frozen=True)
class DailyLog:
    """All meals logged by a user on one date."""

    user_id: str
    log_date: date
    meals: tuple[MealEntry, ...]

    def meal(self, name: str) -> MealEntry | None:
        """Return the meal with the given label, if present."""
        for entry in self.meals:
            if entry.name.lower() == name.lower():
                return entry
        return None

    def to_document(self) -> dict[str, object]:
        """Serialize the log keyed by ISO date."""
        return {
            "userId": self.user_id,
            "date": self.log_date.isoformat(),
            "meals": [meal.to_document() for meal in self.meals],
        }


@dataclass(frozen=True)
class LogFoodCommand:
    """Request to log a food into a meal."""

    food_id: str
    source: str
    quantity: float
    serving: Portion
    name: str | None = None
    nutrition: MacroProfile | None = None


def _macros_document(macros: MacroProfile) -> dict[str, float]:
    return {
        "calories": macros.calories,
        "protein": macros.protein_g,
        "carbs": macros.carbs_g,
        "fat": macros.fat_g,
    }
