"""Regional food composition import with derived diet and medical tags."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.diet_rules import DIET_AVOID_FOODS
from meal_planner.domain.errors import PersistenceFailure
from meal_planner.domain.imports import CompositionRow, ImportReport
from meal_planner.domain.nutrition import (
    SOURCE_REGIONAL,
    FoodDietProperties,
    FoodMedicalProperties,
    FoodRecord,
    MacroProfile,
)
from meal_planner.services.cache import Cache

_logger = logging.getLogger(__name__)

IMPORT_BATCH_SIZE = 500
ID_PREFIX = "ifct_"
LOW_CARB_MAX_G = 10.0
HIGH_FAT_MIN_SHARE = 0.6
HIGH_GLYCEMIC_INDEX = 70.0
MIN_KEYWORD_LENGTH = 3

_EGG_WORDS = ("egg", "omelette")
_ONION_GARLIC_WORDS = ("onion", "garlic", "pyaz", "lehsun")
_ROOT_VEGETABLE_WORDS = (
    "potato",
    "aloo",
    "carrot",
    "gajar",
    "beetroot",
    "radish",
    "mooli",
    "onion",
    "garlic",
    "ginger",
    "yam",
)
_FRIED_WORDS = (
    "fried",
    "fry",
    "pakora",
    "samosa",
    "vada",
    "puri",
    "bhatura",
    "kachori",
)
_PROCESSED_WORDS = ("instant", "packaged", "processed", "canned", "chips", "namkeen")


class RegionalFoodStore(Protocol):
    """Write interface for the regional composition table."""

    def upsert_foods(self, foods: list[FoodRecord]) -> int:
        """Insert or replace foods by id and return how many were written."""


def _contains_any(text: str, keywords: Iterable[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def _row_text(row: CompositionRow) -> str:
    return " ".join(
        part for part in (row.name, row.category, row.description) if part
    ).lower()


def generate_keywords(row: CompositionRow) -> tuple[str, ...]:
    """Search tags from the name words, category, region and dietary flags."""
    keywords: dict[str, None] = {}
    for word in row.name.lower().replace(",", " ").split():
        if len(word) >= MIN_KEYWORD_LENGTH:
            keywords[word] = None
    for extra in (row.category, row.region):
        if extra:
            keywords[extra.lower()] = None
    if row.is_vegetarian:
        keywords["vegetarian"] = None
    if row.is_vegan:
        keywords["vegan"] = None
    if row.contains_gluten is False:
        keywords["gluten-free"] = None
    return tuple(keywords)


def derive_diet_properties(row: CompositionRow) -> FoodDietProperties:
    """Structured diet tags; explicit row flags win over name heuristics."""
    text = _row_text(row)
    vegetarian = (
        row.is_vegetarian
        if row.is_vegetarian is not None
        else not _contains_any(text, DIET_AVOID_FOODS["vegetarian"])
    )
    vegan = (
        row.is_vegan
        if row.is_vegan is not None
        else vegetarian and not _contains_any(text, DIET_AVOID_FOODS["vegan"])
    )
    egg = (
        row.contains_egg
        if row.contains_egg is not None
        else _contains_any(text, _EGG_WORDS)
    )
    gluten = (
        row.contains_gluten
        if row.contains_gluten is not None
        else _contains_any(text, DIET_AVOID_FOODS["gluten-free"])
    )
    energy = row.protein_g * 4 + row.carbs_g * 4 + row.fat_g * 9
    return FoodDietProperties(
        is_vegetarian=vegetarian,
        is_vegan=vegan,
        is_egg_free=not egg,
        is_gluten_free=not gluten,
        contains_onion_garlic=(
            row.contains_onion_garlic
            if row.contains_onion_garlic is not None
            else _contains_any(text, _ONION_GARLIC_WORDS)
        ),
        contains_root_vegetables=(
            row.contains_root_vegetables
            if row.contains_root_vegetables is not None
            else _contains_any(text, _ROOT_VEGETABLE_WORDS)
        ),
        is_processed=_contains_any(text, _PROCESSED_WORDS),
        is_fried=_contains_any(text, _FRIED_WORDS),
        is_high_glycemic=(
            row.glycemic_index is not None
            and row.glycemic_index >= HIGH_GLYCEMIC_INDEX
        ),
        is_low_carb=row.carbs_g <= LOW_CARB_MAX_G,
        is_high_fat=energy > 0 and row.fat_g * 9 / energy >= HIGH_FAT_MIN_SHARE,
        region=row.region,
    )


def derive_medical_properties(row: CompositionRow) -> FoodMedicalProperties | None:
    """Measured values relevant to medical thresholds, or None if none are known."""
    values = (
        row.glycemic_index,
        row.sodium_mg,
        row.saturated_fat_g,
        row.fiber_g,
        row.sugar_g,
    )
    if all(value is None for value in values):
        return None
    return FoodMedicalProperties(
        glycemic_index=row.glycemic_index,
        sodium_mg=row.sodium_mg,
        saturated_fat_g=row.saturated_fat_g,
        fiber_g=row.fiber_g,
        sugar_g=row.sugar_g,
    )


def build_record(row: CompositionRow, index: int) -> FoodRecord:
    """Turn a raw row into a tagged regional food record."""
    raw_id = row.id or f"food_{index}"
    food_id = raw_id if raw_id.startswith(ID_PREFIX) else f"{ID_PREFIX}{raw_id}"
    diet = derive_diet_properties(row)
    return FoodRecord(
        id=food_id,
        source=SOURCE_REGIONAL,
        name=row.name.strip(),
        nutrients=MacroProfile(
            calories=row.calories,
            protein_g=row.protein_g,
            fat_g=row.fat_g,
            carbs_g=row.carbs_g,
        ),
        category=row.category or "Uncategorized",
        description=row.description,
        region=row.region,
        keywords=row.keywords or generate_keywords(row),
        meal_types=row.meal_types,
        allergens=row.allergens,
        standard_portion=row.standard_portion,
        is_vegetarian=diet.is_vegetarian,
        is_vegan=diet.is_vegan,
        contains_gluten=not diet.is_gluten_free,
        contains_onion_garlic=diet.contains_onion_garlic,
        contains_root_vegetables=diet.contains_root_vegetables,
        diet_properties=diet,
        medical_properties=derive_medical_properties(row),
    )


@dataclass
class FoodImportService:
    """Imports composition rows into the regional table in batches.

    Rows without a name are skipped. Cached regional lookups are dropped
    after any write so searches see the new data.
    """

    store: RegionalFoodStore
    cache: Cache
    batch_size: int = IMPORT_BATCH_SIZE

    def import_rows(self, rows: Iterable[CompositionRow]) -> ImportReport:
        """Tag and upsert rows; raises PersistenceFailure with partial progress."""
        by_id: dict[str, FoodRecord] = {}
        skipped: list[int] = []
        for index, row in enumerate(rows):
            if not row.name.strip():
                skipped.append(index)
                continue
            record = build_record(row, index)
            # later rows replace earlier ones with the same id
            by_id[record.id] = record
        records = list(by_id.values())

        imported: list[str] = []
        try:
            for start in range(0, len(records), self.batch_size):
                batch = records[start : start + self.batch_size]
                self.store.upsert_foods(batch)
                imported.extend(record.id for record in batch)
        except Exception as exc:
            _logger.warning(
                "Food import stopped after %s of %s rows: %s",
                len(imported),
                len(records),
                exc,
            )
            raise PersistenceFailure(
                "Failed to import foods",
                payload=ImportReport(
                    imported=len(imported), skipped=tuple(skipped), ids=tuple(imported)
                ),
            ) from exc
        finally:
            if imported:
                self.cache.invalidate_prefix("regional:")

        _logger.info(
            "Imported %s regional foods (%s skipped)", len(imported), len(skipped)
        )
        return ImportReport(
            imported=len(imported), skipped=tuple(skipped), ids=tuple(imported)
        )
