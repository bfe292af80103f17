"""Food source interface and registry."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.nutrition import (
    SOURCE_CUSTOM,
    SOURCE_INTERNATIONAL,
    SOURCE_REGIONAL,
    SOURCE_TEMPLATE,
    FoodRecord,
)

SOURCE_ALIASES = {
    "regional": SOURCE_REGIONAL,
    "ifct": SOURCE_REGIONAL,
    "international": SOURCE_INTERNATIONAL,
    "usda": SOURCE_INTERNATIONAL,
    "custom": SOURCE_CUSTOM,
    SOURCE_TEMPLATE: SOURCE_CUSTOM,
}


class FoodSource(Protocol):
    """Capability set shared by every food source."""

    name: str

    async def search_by_term(self, term: str, limit: int = 10) -> list[FoodRecord]:
        """Return foods matching a search term; empty when nothing matches."""

    async def get_by_id(self, food_id: str) -> FoodRecord | None:
        """Return a food by its source-native id."""

    def search_terms(self, meal: str, diet_preference: str) -> list[str]:
        """Return search terms suited to a meal slot and diet."""


@dataclass
class FoodSourceRegistry:
    """Lookup of food sources by name or alias."""

    sources: dict[str, FoodSource]

    @classmethod
    def of(cls, sources: Iterable[FoodSource]) -> "FoodSourceRegistry":
        """Build a registry keyed by each source's name."""
        return cls({source.name: source for source in sources})

    def get(self, name: str) -> FoodSource:
        """Return a source by name or alias."""
        key = SOURCE_ALIASES.get(name.lower(), name.lower())
        source = self.sources.get(key)
        if source is None:
            raise ValueError(f"Unknown food source: {name}")
        return source

    def names(self) -> list[str]:
        """Return registered source names."""
        return list(self.sources)


def matches_allergy(record: FoodRecord, allergies: Iterable[str]) -> bool:
    """Return True when any allergy token appears in the food's text or allergens."""
    text = record.search_text()
    allergens = [allergen.lower() for allergen in record.allergens]
    for allergy in allergies:
        if not allergy:
            continue
        if allergy in text or any(allergy in allergen for allergen in allergens):
            return True
    return False
