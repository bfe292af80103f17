"""Portion sizing and per-portion nutrition for each food source."""

import logging

from meal_planner.domain.nutrition import (
    BASIS_PER_SERVING,
    SOURCE_CUSTOM,
    SOURCE_INTERNATIONAL,
    SOURCE_REGIONAL,
    SOURCE_TEMPLATE,
    FoodRecord,
    MacroProfile,
    Portion,
)
from meal_planner.services.calculator import round_half_up

_logger = logging.getLogger(__name__)

GOAL_PORTION_FACTORS = {
    "weight-loss": 0.8,
    "weight-gain": 1.2,
    "muscle-building": 1.2,
}
MEAL_PORTION_FACTORS = {
    "snack": 0.5,
    "lunch": 1.1,
    "dinner": 1.1,
}
MIN_CALORIES = 10
MIN_MACRO_G = 1

# (keywords, value per 100 g); first match wins, the trailing empty tuple
# is the default.
_DefaultTable = tuple[tuple[tuple[str, ...], float], ...]

_REGIONAL_DEFAULTS: dict[str, _DefaultTable] = {
    "calories": (
        (("rice", "roti", "bread"), 150),
        (("dal", "curry"), 120),
        (("vegetable", "sabzi"), 80),
        ((), 100),
    ),
    "protein": (
        (("dal", "paneer", "milk"), 8),
        (("rice", "roti"), 3),
        ((), 5),
    ),
    "carbs": (
        (("rice", "roti", "bread"), 25),
        (("dal",), 15),
        (("vegetable", "sabzi"), 10),
        ((), 15),
    ),
    "fat": (
        (("ghee", "oil", "butter"), 10),
        (("paneer", "milk"), 6),
        ((), 3),
    ),
}

_INTERNATIONAL_DEFAULTS: dict[str, _DefaultTable] = {
    "calories": (
        (("rice", "bread", "pasta"), 150),
        (("vegetable", "fruit"), 80),
        (("meat", "chicken", "fish"), 200),
        (("milk", "yogurt"), 120),
        ((), 100),
    ),
    "protein": (
        (("meat", "chicken", "fish"), 20),
        (("milk", "yogurt", "cheese"), 8),
        (("bean", "lentil"), 15),
        (("rice", "bread", "pasta"), 3),
        ((), 5),
    ),
    "carbs": (
        (("rice", "bread", "pasta"), 30),
        (("vegetable",), 10),
        (("fruit",), 15),
        (("bean", "lentil"), 20),
        ((), 15),
    ),
    "fat": (
        (("oil", "butter"), 10),
        (("meat", "cheese"), 8),
        (("milk", "yogurt"), 4),
        ((), 3),
    ),
}


def calculate_portion(record: FoodRecord, diet_goal: str, meal_type: str) -> Portion:
    """Choose a portion for a food given the diet goal and meal slot."""
    if record.source == SOURCE_TEMPLATE or record.basis == BASIS_PER_SERVING:
        return Portion(amount=1, unit="serving", description="1 serving")
    if record.source == SOURCE_CUSTOM:
        return record.standard_portion or Portion(
            amount=100, unit="g", description="1 serving"
        )

    if record.source == SOURCE_REGIONAL:
        base = _regional_base_portion(record)
    elif record.source == SOURCE_INTERNATIONAL:
        base = _international_base_portion(record)
    else:
        base = _standard_amount(record)
    if isinstance(base, Portion):
        return base

    amount, unit = base
    goal_factor = GOAL_PORTION_FACTORS.get(diet_goal)
    if goal_factor is not None:
        amount = round_half_up(amount * goal_factor)
    meal_factor = MEAL_PORTION_FACTORS.get(meal_type.lower())
    if meal_factor is not None:
        amount = round_half_up(amount * meal_factor)
    return Portion(amount=amount, unit=unit, description=describe_amount(amount, unit))


def describe_amount(amount: float, unit: str) -> str:
    """Human-readable portion with a household measure where one fits."""
    if unit == "g" and 100 <= amount <= 200:
        return f"{amount:g} g (about {round_half_up(amount / 100)} cup)"
    if unit == "ml" and amount >= 240:
        return f"{amount:g} ml (about {round_half_up(amount / 240)} cup)"
    return f"{amount:g} {unit}"


def _standard_amount(record: FoodRecord) -> tuple[float, str]:
    if record.standard_portion and record.standard_portion.amount > 0:
        return record.standard_portion.amount, record.standard_portion.unit or "g"
    return 100, "g"


def _regional_base_portion(record: FoodRecord) -> tuple[float, str] | Portion:
    amount, unit = _standard_amount(record)
    category = record.category.lower()
    name = record.name.lower()
    if "rice" in category or any(key in name for key in ("rice", "pulao", "biryani")):
        return 150, "g"
    if "bread" in category or any(key in name for key in ("roti", "paratha", "naan")):
        return Portion(amount=30, unit="g", description="1 piece")
    if "curry" in category or "curry" in name or "sabzi" in name:
        return 150, "g"
    if "dal" in category or "dal" in name:
        return 150, "g"
    if "idli" in name:
        return Portion(amount=40, unit="g", description="2 pieces")
    if "dosa" in name:
        return Portion(amount=80, unit="g", description="1 medium")
    return amount, unit


def _international_base_portion(record: FoodRecord) -> tuple[float, str] | Portion:
    amount, unit = _standard_amount(record)
    category = record.category.lower()
    name = record.name.lower()
    if "dairy" in category or "milk" in name or "yogurt" in name:
        return 240, "ml"
    if "grain" in category or "cereal" in name or "rice" in name:
        return 50, "g"
    if "meat" in category or "chicken" in name or "beef" in name:
        return 85, "g"
    if "fruit" in category or "fruit" in name:
        return 150, "g"
    if "vegetable" in category or "vegetable" in name:
        return 100, "g"
    if "egg" in name:
        return Portion(amount=50, unit="g", description="1 large egg")
    return amount, unit


def _estimate(table: _DefaultTable, text: str) -> float:
    for keywords, value in table:
        if not keywords or any(keyword in text for keyword in keywords):
            return value
    return table[-1][1]


def calculate_nutrition_for_portion(record: FoodRecord, amount: float) -> MacroProfile:
    """Scale a record's nutrients to a portion, filling gaps with estimates.

    Per-100g records scale by amount/100, per-serving records by the number of
    servings. Missing values are derived from the other macros when possible,
    then estimated from the food's name, and finally floored so nothing used in
    a plan or log is ever zero.
    """
    if record.basis == BASIS_PER_SERVING:
        multiplier = amount
    else:
        multiplier = amount / 100
    base = record.nutrients
    calories = float(round_half_up(base.calories * multiplier))
    protein = float(round_half_up(base.protein_g * multiplier))
    carbs = float(round_half_up(base.carbs_g * multiplier))
    fat = float(round_half_up(base.fat_g * multiplier))

    if min(calories, protein, carbs, fat) <= 0:
        _logger.info(
            "Missing nutrient data for %s %s (%s); estimating",
            record.source,
            record.id,
            record.name,
        )
        defaults = (
            _REGIONAL_DEFAULTS
            if record.source == SOURCE_REGIONAL
            else _INTERNATIONAL_DEFAULTS
        )
        text = record.search_text()
        if calories <= 0 and (protein > 0 or carbs > 0 or fat > 0):
            calories = protein * 4 + carbs * 4 + fat * 9
        if calories <= 0:
            calories = _estimate(defaults["calories"], text) * multiplier
        if protein <= 0:
            protein = _estimate(defaults["protein"], text) * multiplier
        if carbs <= 0:
            carbs = _estimate(defaults["carbs"], text) * multiplier
        if fat <= 0:
            fat = _estimate(defaults["fat"], text) * multiplier

    return MacroProfile(
        calories=max(round_half_up(calories), MIN_CALORIES),
        protein_g=max(round_half_up(protein), MIN_MACRO_G),
        fat_g=max(round_half_up(fat), MIN_MACRO_G),
        carbs_g=max(round_half_up(carbs), MIN_MACRO_G),
    )
