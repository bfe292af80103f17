"""Curated custom foods and meal templates."""

from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.errors import UpstreamUnavailable
from meal_planner.domain.nutrition import SOURCE_CUSTOM, FoodRecord
from meal_planner.services.cache import Cache


class CustomFoodRepository(Protocol):
    """Persistence interface for custom foods and meal templates."""

    def search_foods(self, term: str, limit: int) -> list[FoodRecord]:
        """Return custom foods whose name or category contains the term."""

    def search_templates(self, term: str, limit: int) -> list[FoodRecord]:
        """Return templates whose name or meal type contains the term."""

    def get_food(self, food_id: str) -> FoodRecord | None:
        """Return a custom food by id."""

    def get_template(self, template_id: str) -> FoodRecord | None:
        """Return a meal template by id."""


@dataclass
class CustomFoodSource:
    """Search over custom foods and templates with caching."""

    repository: CustomFoodRepository
    cache: Cache
    search_ttl_seconds: int = 3600
    food_ttl_seconds: int = 86400
    name: str = SOURCE_CUSTOM

    async def search_by_term(self, term: str, limit: int = 10) -> list[FoodRecord]:
        """Search custom foods and templates."""
        needle = term.strip().lower()
        cache_key = f"custom:search:{needle}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached
        try:
            foods = self.repository.search_foods(needle, limit)
            templates = self.repository.search_templates(needle, limit)
        except Exception as exc:
            raise UpstreamUnavailable(
                self.name, f"Custom food search failed: {exc}"
            ) from exc
        results = [*foods, *templates]
        self.cache.set(cache_key, results, ttl_seconds=self.search_ttl_seconds)
        return results

    async def get_by_id(self, food_id: str) -> FoodRecord | None:
        """Return a custom food or template by id."""
        cache_key = f"custom:food:{food_id}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, FoodRecord):
            return cached
        try:
            record = self.repository.get_food(food_id)
            if record is None:
                record = self.repository.get_template(food_id)
        except Exception as exc:
            raise UpstreamUnavailable(
                self.name, f"Custom food lookup failed: {exc}"
            ) from exc
        if record is not None:
            self.cache.set(cache_key, record, ttl_seconds=self.food_ttl_seconds)
        return record

    def search_terms(self, meal: str, diet_preference: str) -> list[str]:
        """Custom content is tagged by meal label."""
        return [meal.lower()]

    def invalidate(self) -> int:
        """Drop cached custom lookups, e.g. after curators edit content."""
        return self.cache.invalidate_prefix("custom:")
