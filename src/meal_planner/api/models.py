"""Pydantic models for API request bodies."""

from pydantic import BaseModel, ConfigDict, Field

from meal_planner.domain.imports import CompositionRow
from meal_planner.domain.meals import LogFoodCommand
from meal_planner.domain.models import GenerationRequest
from meal_planner.domain.nutrition import MacroProfile, Portion
from meal_planner.domain.plans import SourceStrategy


class PlanRequest(BaseModel):
    """Overrides for a meal plan generation."""

    model_config = ConfigDict(populate_by_name=True)

    diet_preference: str | None = Field(default=None, alias="dietPreference")
    diet_goal: str | None = Field(default=None, alias="dietGoal")
    calorie_goal_override: int | None = Field(
        default=None, alias="calorieGoalOverride", gt=0
    )
    period: str | None = None
    goal_weight: float | None = Field(default=None, alias="goalWeight", gt=0)
    strategy: SourceStrategy | None = None
    seed: int | None = None

    def to_request(self) -> GenerationRequest:
        """Convert to the domain request."""
        return GenerationRequest(
            diet_preference=self.diet_preference,
            diet_goal=self.diet_goal,
            calorie_goal_override=self.calorie_goal_override,
            period=self.period,
            goal_weight_kg=self.goal_weight,
            strategy=str(self.strategy) if self.strategy else None,
        )


class ServingSize(BaseModel):
    """Serving size payload."""

    amount: float = Field(gt=0)
    unit: str = "serving"
    description: str | None = None

    def to_portion(self) -> Portion:
        """Convert to a domain portion."""
        return Portion(
            amount=self.amount,
            unit=self.unit,
            description=self.description or f"{self.amount:g} {self.unit}",
        )


class NutritionPayload(BaseModel):
    """Per-serving nutrition supplied by the client."""

    calories: float = Field(ge=0)
    protein: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)

    def to_macros(self) -> MacroProfile:
        """Convert to a macro profile."""
        return MacroProfile(
            calories=self.calories,
            protein_g=self.protein,
            fat_g=self.fat,
            carbs_g=self.carbs,
        )


class LogFoodRequest(BaseModel):
    """Log a food into a meal."""

    model_config = ConfigDict(populate_by_name=True)

    food_id: str = Field(alias="foodId", min_length=1)
    source: str
    quantity: float = Field(default=1, gt=0)
    serving_size: ServingSize = Field(alias="servingSize")
    name: str | None = None
    nutrition: NutritionPayload | None = None

    def to_command(self) -> LogFoodCommand:
        """Convert to the domain command."""
        return LogFoodCommand(
            food_id=self.food_id,
            source=self.source,
            quantity=self.quantity,
            serving=self.serving_size.to_portion(),
            name=self.name,
            nutrition=self.nutrition.to_macros() if self.nutrition else None,
        )


class GoalsUpdate(BaseModel):
    """Partial update of daily goals."""

    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)

    def changes(self) -> dict[str, float]:
        """Return only the supplied fields, keyed by goal field name."""
        mapping = {
            "calories": self.calories,
            "protein_g": self.protein,
            "carbs_g": self.carbs,
            "fat_g": self.fat,
        }
        return {key: value for key, value in mapping.items() if value is not None}


class ImportNutrients(BaseModel):
    """Nested per-100 g nutrients of an imported composition row."""

    model_config = ConfigDict(populate_by_name=True)

    calories: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbohydrates: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    sodium: float | None = Field(default=None, ge=0)
    saturated_fat: float | None = Field(default=None, alias="saturatedFat", ge=0)
    glycemic_index: float | None = Field(default=None, alias="glycemicIndex", ge=0)


class FoodImportRow(BaseModel):
    """A raw regional composition row; nutrients may be nested or flat."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | int | None = None
    name: str = ""
    category: str = ""
    description: str = ""
    region: str | None = None
    is_vegetarian: bool | None = Field(default=None, alias="isVegetarian")
    is_vegan: bool | None = Field(default=None, alias="isVegan")
    contains_egg: bool | None = Field(default=None, alias="containsEgg")
    contains_gluten: bool | None = Field(default=None, alias="containsGluten")
    contains_onion_garlic: bool | None = Field(
        default=None, alias="containsOnionGarlic"
    )
    contains_root_vegetables: bool | None = Field(
        default=None, alias="containsRootVegetables"
    )
    nutrients: ImportNutrients | None = None
    energy: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    carbohydrates: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    standard_portion: ServingSize | None = Field(default=None, alias="standardPortion")
    keywords: list[str] = Field(default_factory=list)
    meal_types: list[str] = Field(default_factory=list, alias="mealTypes")
    allergens: list[str] = Field(default_factory=list)

    def to_row(self) -> CompositionRow:
        """Convert to a domain composition row, preferring nested nutrients."""
        nested = self.nutrients or ImportNutrients()

        def pick(value: float | None, flat: float | None) -> float:
            if value is not None:
                return value
            return flat or 0.0

        return CompositionRow(
            id=str(self.id) if self.id is not None else None,
            name=self.name,
            category=self.category,
            description=self.description,
            region=self.region,
            calories=pick(nested.calories, self.energy),
            protein_g=pick(nested.protein, self.protein),
            carbs_g=pick(nested.carbohydrates, self.carbohydrates),
            fat_g=pick(nested.fat, self.fat),
            fiber_g=nested.fiber,
            sugar_g=nested.sugar,
            sodium_mg=nested.sodium,
            saturated_fat_g=nested.saturated_fat,
            glycemic_index=nested.glycemic_index,
            is_vegetarian=self.is_vegetarian,
            is_vegan=self.is_vegan,
            contains_egg=self.contains_egg,
            contains_gluten=self.contains_gluten,
            contains_onion_garlic=self.contains_onion_garlic,
            contains_root_vegetables=self.contains_root_vegetables,
            standard_portion=(
                self.standard_portion.to_portion() if self.standard_portion else None
            ),
            keywords=tuple(keyword.lower() for keyword in self.keywords),
            meal_types=tuple(meal.lower() for meal in self.meal_types),
            allergens=tuple(allergen.lower() for allergen in self.allergens),
        )
