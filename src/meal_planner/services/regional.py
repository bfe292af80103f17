"""Regional food composition table source."""

import logging
from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.errors import UpstreamUnavailable
from meal_planner.domain.nutrition import SOURCE_REGIONAL, FoodRecord
from meal_planner.services.cache import Cache

_logger = logging.getLogger(__name__)

_MEAL_TERMS = {
    "breakfast": ["idli", "dosa", "upma", "poha", "paratha", "chilla", "uttapam"],
    "lunch": ["rice", "roti", "dal", "sabzi", "curry", "biryani", "pulao", "thali"],
    "dinner": ["roti", "sabzi", "dal", "curry", "khichdi", "paratha"],
    "snack": ["pakora", "samosa", "chaat", "bhel", "vada", "dhokla", "kachori"],
}
_EXCLUDED_TERMS = {
    "vegetarian": {"non-veg", "chicken", "fish", "meat"},
    "indian-vegetarian": {"non-veg", "chicken", "fish", "meat"},
    "vegan": {"non-veg", "chicken", "fish", "meat", "paneer", "milk", "curd", "ghee"},
    "jain-diet": {"onion", "garlic", "potato", "non-veg"},
}


class RegionalFoodRepository(Protocol):
    """Persistence interface for the regional composition table."""

    def search_by_keyword(self, keyword: str, limit: int) -> list[FoodRecord]:
        """Return foods tagged with an exact keyword."""

    def list_foods(self, limit: int) -> list[FoodRecord]:
        """Return foods for a full scan."""

    def get_food(self, food_id: str) -> FoodRecord | None:
        """Return a food by id."""


@dataclass
class RegionalFoodSource:
    """Keyword search over the regional table with a substring fallback."""

    repository: RegionalFoodRepository
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    scan_limit: int = 500
    name: str = SOURCE_REGIONAL

    async def search_by_term(self, term: str, limit: int = 10) -> list[FoodRecord]:
        """Search by keyword tag, falling back to a substring scan."""
        needle = term.strip().lower()
        cache_key = f"regional:search:{needle}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        try:
            foods = self.repository.search_by_keyword(needle, limit)
            if not foods:
                foods = [
                    food
                    for food in self.repository.list_foods(self.scan_limit)
                    if needle in food.search_text()
                ][:limit]
        except Exception as exc:
            raise UpstreamUnavailable(
                self.name, f"Regional food search failed: {exc}"
            ) from exc
        self.cache.set(cache_key, foods, ttl_seconds=self.search_ttl_seconds)
        _logger.debug("Regional search: term=%s results=%s", needle, len(foods))
        return foods

    async def get_by_id(self, food_id: str) -> FoodRecord | None:
        """Return a regional food by id."""
        cache_key = f"regional:food:{food_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodRecord):
            return cached
        try:
            food = self.repository.get_food(food_id)
        except Exception as exc:
            raise UpstreamUnavailable(
                self.name, f"Regional food lookup failed: {exc}"
            ) from exc
        if food is not None:
            self.cache.set(cache_key, food, ttl_seconds=self.food_ttl_seconds)
        return food

    def search_terms(self, meal: str, diet_preference: str) -> list[str]:
        """Regional dishes typical for a meal slot."""
        terms = _MEAL_TERMS.get(meal.lower(), ["food", "meal", "dish"])
        excluded = _EXCLUDED_TERMS.get(diet_preference, set())
        return [term for term in terms if term not in excluded]

    def invalidate(self) -> int:
        """Drop all cached regional lookups."""
        return self.cache.invalidate_prefix("regional:")
