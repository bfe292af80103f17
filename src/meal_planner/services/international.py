"""International food source backed by USDA FoodData Central."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import httpx

from meal_planner.adapters.fdc_client import FdcClient
from meal_planner.domain.errors import UpstreamUnavailable
from meal_planner.domain.nutrition import (
    SOURCE_INTERNATIONAL,
    FoodMedicalProperties,
    FoodRecord,
    MacroProfile,
    Portion,
)
from meal_planner.services.cache import Cache

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

_logger = logging.getLogger(__name__)

NUTRIENT_NUMBERS = {
    "208": "calories",
    "203": "protein",
    "204": "fat",
    "205": "carbs",
    "291": "fiber",
    "269": "sugar",
    "301": "calcium",
    "303": "iron",
    "307": "sodium",
    "401": "vitamin_c",
    "320": "vitamin_a",
    "328": "vitamin_d",
    "323": "vitamin_e",
    "430": "vitamin_k",
    "415": "vitamin_b6",
    "418": "vitamin_b12",
    "417": "folate",
    "309": "zinc",
    "304": "magnesium",
    "306": "potassium",
    "601": "cholesterol",
    "606": "saturated_fat",
    "605": "trans_fat",
    "645": "monounsaturated_fat",
    "646": "polyunsaturated_fat",
}

_NUTRIENT_IDS = {
    1008: "calories",
    1003: "protein",
    1004: "fat",
    1005: "carbs",
}

_NAME_HINTS = (
    ("energy", "calories"),
    ("protein", "protein"),
    ("carbohydrate", "carbs"),
    ("total lipid", "fat"),
)

_MEAL_TERMS = {
    "breakfast": [
        "cereal",
        "oatmeal",
        "egg",
        "toast",
        "pancake",
        "waffle",
        "yogurt",
        "fruit",
    ],
    "lunch": ["sandwich", "salad", "soup", "wrap", "bowl"],
    "dinner": ["chicken", "fish", "beef", "pork", "tofu", "pasta", "rice", "potato"],
    "snack": ["fruit", "nuts", "yogurt", "granola", "bar", "smoothie"],
}
_MEATS = {"chicken", "fish", "beef", "pork"}


@dataclass
class InternationalFoodSource:
    """FDC lookups with caching and a short retry."""

    fdc_client: FdcClient
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    name: str = SOURCE_INTERNATIONAL

    async def search_by_term(
        self, term: str, limit: int = 10, page_number: int = 1
    ) -> list[FoodRecord]:
        """Search FDC foods with caching."""
        cache_key = f"fdc:search:{term.lower()}:{limit}:{page_number}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.fdc_client.search_foods(
                term, page_size=limit, page_number=page_number
            ),
            action=f"search:{term}",
        )
        foods = [
            parse_fdc_food(food)
            for food in payload.get("foods") or []
            if food.get("fdcId") is not None
        ]
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        _logger.debug("FDC search: term=%s results=%s", term, len(foods))
        return foods

    async def get_by_id(self, food_id: str) -> FoodRecord | None:
        """Retrieve food details from FDC, or None when the id is unknown."""
        if not str(food_id).isdigit():
            return None
        cache_key = f"fdc:food:{food_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodRecord):
            return cached

        try:
            payload = await self._call_with_retry(
                lambda: self.fdc_client.get_food(int(food_id)),
                action=f"get_food:{food_id}",
            )
        except UpstreamUnavailable as exc:
            if exc.status_code == httpx.codes.NOT_FOUND:
                return None
            raise
        record = parse_fdc_food(payload)
        self.cache.set(cache_key, record, ttl_seconds=self.food_ttl_seconds)
        return record

    def search_terms(self, meal: str, diet_preference: str) -> list[str]:
        """Meal-appropriate search terms filtered for the diet."""
        meal_key = meal.lower()
        terms = list(_MEAL_TERMS.get(meal_key, ["meal", "food", "dish"]))
        if diet_preference in {"vegetarian", "indian-vegetarian", "sattvic-diet"}:
            terms = [term for term in terms if term not in _MEATS]
            if meal_key == "dinner":
                terms.extend(["lentil", "bean", "chickpea", "paneer"])
        elif diet_preference == "vegan":
            excluded = _MEATS | {"egg", "yogurt"}
            terms = [term for term in terms if term not in excluded]
            terms.extend(["tofu", "tempeh", "seitan", "lentil", "bean"])
        elif diet_preference == "jain-diet":
            excluded = _MEATS | {"egg", "potato", "onion", "garlic"}
            terms = [term for term in terms if term not in excluded]
            terms.extend(["lentil", "bean", "rice", "fruit"])
        elif diet_preference == "hindu-fasting":
            terms = [
                "potato",
                "fruit",
                "nut",
                "seed",
                "milk",
                "yogurt",
                "buckwheat",
                "amaranth",
            ]
        return list(dict.fromkeys(terms))

    def invalidate(self) -> int:
        """Drop all cached FDC responses."""
        return self.cache.invalidate_prefix("fdc:")

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call the FDC client with a short retry, mapping failures."""
        attempt = 0
        while True:
            try:
                return await func()
            except httpx.HTTPError as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                _logger.warning(
                    "FDC %s failed (attempt %s/%s, status=%s): %s",
                    action,
                    attempt,
                    self.retry_attempts + 1,
                    status_code if status_code is not None else "n/a",
                    exc,
                )
                not_found = status_code == httpx.codes.NOT_FOUND
                if attempt > self.retry_attempts or not_found:
                    raise UpstreamUnavailable(
                        self.name,
                        f"USDA API error: {status_code or 'network'}",
                        status_code=status_code,
                    ) from exc
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> int | None:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return status_code
    return None


def extract_nutrients(food_nutrients: list[dict[str, object]]) -> dict[str, float]:
    """Map FDC nutrient entries to named per-100g amounts."""
    values: dict[str, float] = {}
    for entry in food_nutrients:
        nutrient = entry.get("nutrient") or {}
        number = entry.get("nutrientNumber") or nutrient.get("number")
        nutrient_id = entry.get("nutrientId") or nutrient.get("id")
        amount = entry.get("value")
        if amount is None:
            amount = entry.get("amount")
        if not isinstance(amount, int | float):
            continue
        key = NUTRIENT_NUMBERS.get(str(number)) if number is not None else None
        if key is None and isinstance(nutrient_id, int):
            key = _NUTRIENT_IDS.get(nutrient_id)
        if key is None:
            key = _key_from_name(entry, nutrient)
        if key is not None and key not in values:
            values[key] = float(amount)
    return values


def _key_from_name(entry: dict[str, object], nutrient: dict[str, object]) -> str | None:
    name = str(entry.get("nutrientName") or nutrient.get("name") or "").lower()
    unit = str(entry.get("unitName") or nutrient.get("unitName") or "").lower()
    for hint, key in _NAME_HINTS:
        if hint in name:
            if key == "calories" and unit == "kj":
                return None
            return key
    return None


def parse_fdc_food(payload: dict[str, object]) -> FoodRecord:
    """Build a food record from an FDC search hit or detail payload."""
    values = extract_nutrients(payload.get("foodNutrients") or [])
    category = payload.get("foodCategory") or ""
    if isinstance(category, dict):
        category = category.get("description") or ""
    portions = payload.get("foodPortions") or []
    standard_portion = None
    if portions and isinstance(portions[0].get("gramWeight"), int | float):
        grams = float(portions[0]["gramWeight"])
        standard_portion = Portion(amount=grams, unit="g", description=f"{grams:g} g")
    medical = None
    if any(key in values for key in ("fiber", "sugar", "sodium", "saturated_fat")):
        medical = FoodMedicalProperties(
            fiber_g=values.get("fiber"),
            sugar_g=values.get("sugar"),
            sodium_mg=values.get("sodium"),
            saturated_fat_g=values.get("saturated_fat"),
        )
    return FoodRecord(
        id=str(payload["fdcId"]),
        source=SOURCE_INTERNATIONAL,
        name=str(payload.get("description") or ""),
        nutrients=MacroProfile(
            calories=values.get("calories", 0.0),
            protein_g=values.get("protein", 0.0),
            fat_g=values.get("fat", 0.0),
            carbs_g=values.get("carbs", 0.0),
        ),
        category=str(category),
        description=str(payload.get("additionalDescriptions") or ""),
        standard_portion=standard_portion,
        medical_properties=medical,
    )
