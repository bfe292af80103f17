"""Diet and medical compliance checks for foods and plans."""

from collections.abc import Callable, Iterable
from dataclasses import replace

from meal_planner.domain.diet_rules import (
    BLOOD_TYPE_ALLOWED_FOODS,
    DIET_ALLOWED_FOODS,
    DIET_AVOID_FOODS,
    HINDU_FASTING_FOODS,
    REGIONAL_ALLOWED_FOODS,
)
from meal_planner.domain.medical_rules import (
    FOODS_RECOMMENDED,
    FOODS_TO_AVOID,
    MEDICAL_THRESHOLDS,
)
from meal_planner.domain.nutrition import (
    FoodDietProperties,
    FoodMedicalProperties,
    FoodRecord,
)
from meal_planner.domain.plans import DayPlan, PlanItem

_KNOWN_PREFERENCES = (
    set(DIET_ALLOWED_FOODS) | set(DIET_AVOID_FOODS) | {"blood-type", "indian-regional"}
)

_DIET_PROPERTY_RULES: dict[str, Callable[[FoodDietProperties], bool]] = {
    "vegetarian": lambda p: p.is_vegetarian,
    "vegan": lambda p: p.is_vegan,
    "indian-vegetarian": lambda p: p.is_vegetarian and p.is_egg_free,
    "eggetarian": lambda p: p.is_vegetarian and not p.is_egg_free,
    "gluten-free": lambda p: p.is_gluten_free,
    "jain-diet": lambda p: (
        p.is_vegetarian
        and p.is_egg_free
        and not p.contains_onion_garlic
        and not p.contains_root_vegetables
    ),
    "sattvic-diet": lambda p: (
        p.is_vegetarian
        and p.is_egg_free
        and not p.contains_onion_garlic
        and not p.is_processed
        and not p.is_fried
        and not p.is_high_glycemic
    ),
    "keto": lambda p: p.is_low_carb and p.is_high_fat,
}


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def _allowed_keywords(
    diet_preference: str, properties: FoodDietProperties | None
) -> tuple[str, ...] | None:
    if diet_preference == "blood-type":
        blood_type = (properties.blood_type if properties else None) or "O"
        return BLOOD_TYPE_ALLOWED_FOODS.get(blood_type.upper())
    if diet_preference == "indian-regional":
        region = (properties.region if properties else None) or "north"
        return REGIONAL_ALLOWED_FOODS.get(region.lower())
    return DIET_ALLOWED_FOODS.get(diet_preference)


def is_diet_compliant(
    food_name: str,
    diet_preference: str,
    properties: FoodDietProperties | None = None,
) -> bool:
    """Return True when a food fits the diet preference.

    Structured properties decide when the preference has a property rule;
    otherwise the food name is matched against avoid and allow keywords.
    Unknown preferences always comply.
    """
    if diet_preference not in _KNOWN_PREFERENCES:
        return True
    rule = _DIET_PROPERTY_RULES.get(diet_preference)
    if properties is not None and rule is not None:
        return rule(properties)

    lower_name = food_name.lower()
    if _contains_any(lower_name, DIET_AVOID_FOODS.get(diet_preference, ())):
        return False
    allowed = _allowed_keywords(diet_preference, properties)
    return not (allowed is not None and not _contains_any(lower_name, allowed))


def _threshold_verdict(
    condition: str, properties: FoodMedicalProperties
) -> bool | None:
    """Return the threshold verdict, or None when no relevant value is known."""
    thresholds = MEDICAL_THRESHOLDS.get(condition)
    if not thresholds:
        return None
    checks: list[bool] = []

    def upper(value: float | None, key: str) -> None:
        if value is not None and key in thresholds:
            checks.append(value <= thresholds[key])

    def lower(value: float | None, key: str) -> None:
        if value is not None and key in thresholds:
            checks.append(value >= thresholds[key])

    def flag(value: bool | None, key: str) -> None:
        if value is not None and thresholds.get(key):
            checks.append(not value)

    upper(properties.glycemic_index, "max_glycemic_index")
    upper(properties.sugar_g, "max_sugar_g")
    upper(properties.caffeine_mg, "max_caffeine_mg")
    upper(properties.insulin_index, "max_insulin_index")
    upper(properties.saturated_fat_g, "max_saturated_fat_g")
    upper(properties.sodium_mg, "max_sodium_mg")
    upper(properties.purine_mg, "max_purine_mg")
    upper(properties.oxalate_mg, "max_oxalate_mg")
    lower(properties.fiber_g, "min_fiber_g")
    flag(properties.goitrogens, "avoid_goitrogens")
    flag(properties.fodmap, "avoid_fodmap")
    flag(properties.tyramine, "avoid_tyramine")
    if not checks:
        return None
    return all(checks)


def is_safe_for_condition(
    food_name: str,
    condition: str,
    properties: FoodMedicalProperties | None = None,
) -> bool:
    """Return True when a food is safe for a medical condition.

    Measured properties decide when any of them applies to the condition;
    otherwise the food name is matched against the avoid keywords.
    Unknown conditions are always safe.
    """
    if condition not in FOODS_TO_AVOID:
        return True
    if properties is not None:
        verdict = _threshold_verdict(condition, properties)
        if verdict is not None:
            return verdict
    return not _contains_any(food_name.lower(), FOODS_TO_AVOID[condition])


def _flag_verdict(*checks: tuple[bool | None, bool]) -> bool | None:
    """Compare (flag, wanted) pairs; None when a needed flag is unknown."""
    known = [flag == wanted for flag, wanted in checks if flag is not None]
    if not all(known):
        return False
    if len(known) < len(checks):
        return None
    return True


def record_diet_verdict(record: FoodRecord, diet_preference: str) -> bool | None:
    """Decide a diet from a record's own flags.

    Returns None when the record does not carry the flags the diet needs,
    as with untagged international hits, or when the diet is not flag based.
    """
    name = record.name.lower()
    vegetarian = (record.is_vegetarian, True)
    no_onion_garlic = (record.contains_onion_garlic, False)
    if diet_preference in {"vegetarian", "indian-vegetarian"}:
        return _flag_verdict(vegetarian)
    if diet_preference == "vegan":
        return _flag_verdict((record.is_vegan, True))
    if diet_preference == "eggetarian":
        return True if "egg" in name else _flag_verdict(vegetarian)
    if diet_preference == "gluten-free":
        return _flag_verdict((record.contains_gluten, False))
    if diet_preference == "jain-diet":
        return _flag_verdict(
            vegetarian, no_onion_garlic, (record.contains_root_vegetables, False)
        )
    if diet_preference == "sattvic-diet":
        if "spicy" in record.category.lower():
            return False
        return _flag_verdict(vegetarian, no_onion_garlic)
    if diet_preference == "hindu-fasting":
        return _contains_any(name, HINDU_FASTING_FOODS)
    return None


def is_suitable_for_diet(record: FoodRecord, diet_preference: str) -> bool:
    """Eligibility of a source record for a diet.

    Only flags the record actually carries can exclude it; untagged records
    rely on the diet-aware search terms that found them.
    """
    return record_diet_verdict(record, diet_preference) is not False


def recommended_foods_for_condition(condition: str) -> tuple[str, ...]:
    """Return the foods recommended for a condition."""
    return FOODS_RECOMMENDED.get(condition, ())


def recommended_foods_for_diet(diet_preference: str) -> tuple[str, ...]:
    """Return allowed foods for a diet, flattening per-group tables."""
    if diet_preference in {"blood-type", "indian-regional"}:
        table = (
            BLOOD_TYPE_ALLOWED_FOODS
            if diet_preference == "blood-type"
            else REGIONAL_ALLOWED_FOODS
        )
        flattened: dict[str, None] = {}
        for foods in table.values():
            flattened.update(dict.fromkeys(foods))
        return tuple(flattened)
    return DIET_ALLOWED_FOODS.get(diet_preference, ())


def active_conditions(medical_conditions: Iterable[str]) -> tuple[str, ...]:
    """Drop the "none" sentinel and blanks from a condition list."""
    return tuple(
        condition
        for condition in medical_conditions
        if condition and condition.lower() != "none"
    )


def warning_for_item(
    item: PlanItem, diet_preference: str, medical_conditions: Iterable[str]
) -> str | None:
    """Build the warning text for one planned item, or None when it passes."""
    messages: list[str] = []
    if (
        diet_preference
        and not item.diet_verified
        and not is_diet_compliant(item.food, diet_preference, item.diet_properties)
    ):
        alternatives = ", ".join(recommended_foods_for_diet(diet_preference)[:3])
        suggestion = f" such as {alternatives}" if alternatives else ""
        messages.append(
            f"This meal may not comply with your {diet_preference} diet. "
            f"Consider substituting with a {diet_preference}-friendly "
            f"alternative{suggestion}."
        )
    unsafe = [
        condition
        for condition in active_conditions(medical_conditions)
        if not is_safe_for_condition(item.food, condition, item.medical_properties)
    ]
    if unsafe:
        substitutes = ", ".join(recommended_foods_for_condition(unsafe[0])[:3])
        messages.append(
            "This meal may not be suitable for the following conditions: "
            f"{', '.join(unsafe)}. Consider substituting with {substitutes}."
        )
    if not messages:
        return None
    return " ".join(messages)


def annotate_with_warnings(
    days: Iterable[DayPlan],
    diet_preference: str,
    medical_conditions: Iterable[str],
) -> tuple[DayPlan, ...]:
    """Return new day plans with warnings attached to non-compliant items."""
    conditions = tuple(medical_conditions)
    annotated: list[DayPlan] = []
    for day in days:
        meals: list[PlanItem] = []
        for item in day.meals:
            warning = warning_for_item(item, diet_preference, conditions)
            meals.append(item if warning is None else replace(item, warning=warning))
        annotated.append(DayPlan(day=day.day, meals=tuple(meals)))
    return tuple(annotated)
