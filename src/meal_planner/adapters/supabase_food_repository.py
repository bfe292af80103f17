"""Supabase repositories for regional and custom food content."""

from dataclasses import asdict, dataclass, fields, replace
from datetime import UTC, datetime

from supabase import Client

from meal_planner.domain.nutrition import (
    BASIS_PER_100G,
    BASIS_PER_SERVING,
    SOURCE_CUSTOM,
    SOURCE_REGIONAL,
    SOURCE_TEMPLATE,
    FoodDietProperties,
    FoodMedicalProperties,
    FoodRecord,
    MacroProfile,
    Portion,
)
from meal_planner.services.custom import CustomFoodRepository
from meal_planner.services.food_import import RegionalFoodStore
from meal_planner.services.regional import RegionalFoodRepository

_FILTER_UNSAFE = str.maketrans("", "", ",()%")


@dataclass
class SupabaseRegionalFoodRepository(RegionalFoodRepository, RegionalFoodStore):
    """Supabase implementation for the regional composition table."""

    client: Client

    def search_by_keyword(self, keyword: str, limit: int) -> list[FoodRecord]:
        """Return foods whose keyword array contains the keyword."""
        response = (
            self.client.table("regional_foods")
            .select("*")
            .contains("keywords", [keyword])
            .limit(limit)
            .execute()
        )
        return [_parse_food(row, SOURCE_REGIONAL) for row in response.data or []]

    def list_foods(self, limit: int) -> list[FoodRecord]:
        """Return up to limit foods for substring scanning."""
        response = (
            self.client.table("regional_foods")
            .select("*")
            .order("name", desc=False)
            .limit(limit)
            .execute()
        )
        return [_parse_food(row, SOURCE_REGIONAL) for row in response.data or []]

    def get_food(self, food_id: str) -> FoodRecord | None:
        """Return a regional food by id, if present."""
        response = (
            self.client.table("regional_foods")
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0], SOURCE_REGIONAL)

    def upsert_foods(self, foods: list[FoodRecord]) -> int:
        """Insert or replace regional foods keyed by id."""
        if not foods:
            return 0
        updated_at = datetime.now(tz=UTC).isoformat()
        rows = [{**_food_row(food), "updated_at": updated_at} for food in foods]
        response = (
            self.client.table("regional_foods")
            .upsert(rows, on_conflict="id")
            .execute()
        )
        return len(response.data or rows)


@dataclass
class SupabaseCustomFoodRepository(CustomFoodRepository):
    """Supabase implementation for curated foods and meal templates."""

    client: Client

    def search_foods(self, term: str, limit: int) -> list[FoodRecord]:
        """Search custom foods by name or category."""
        pattern = _pattern(term)
        response = (
            self.client.table("custom_foods")
            .select("*")
            .or_(f"name.ilike.{pattern},category.ilike.{pattern}")
            .limit(limit)
            .execute()
        )
        return [_parse_food(row, SOURCE_CUSTOM) for row in response.data or []]

    def search_templates(self, term: str, limit: int) -> list[FoodRecord]:
        """Search meal templates by name or meal type."""
        pattern = _pattern(term)
        response = (
            self.client.table("meal_templates")
            .select("*")
            .or_(f"name.ilike.{pattern},meal_type.ilike.{pattern}")
            .limit(limit)
            .execute()
        )
        return [_parse_template(row) for row in response.data or []]

    def get_food(self, food_id: str) -> FoodRecord | None:
        """Return a custom food by id, if present."""
        response = (
            self.client.table("custom_foods")
            .select("*")
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_food(response.data[0], SOURCE_CUSTOM)

    def get_template(self, template_id: str) -> FoodRecord | None:
        """Return a meal template by id, if present."""
        response = (
            self.client.table("meal_templates")
            .select("*")
            .eq("id", template_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_template(response.data[0])


def _pattern(term: str) -> str:
    return f"%{term.translate(_FILTER_UNSAFE).strip()}%"


def _float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0


def _optional_bool(value: object) -> bool | None:
    if value is None:
        return None
    return bool(value)


def _strings(value: object) -> tuple[str, ...]:
    if isinstance(value, str):
        tokens = (token.strip().lower() for token in value.split(","))
        return tuple(token for token in tokens if token)
    if isinstance(value, list | tuple):
        return tuple(str(token).lower() for token in value if token)
    return ()


def _macros(row: dict[str, object]) -> MacroProfile:
    return MacroProfile(
        calories=_float(row.get("calories")),
        protein_g=_float(row.get("protein")),
        fat_g=_float(row.get("fat")),
        carbs_g=_float(row.get("carbs")),
    )


def _standard_portion(row: dict[str, object]) -> Portion | None:
    amount = _float(row.get("serving_amount"))
    if amount <= 0:
        return None
    unit = str(row.get("serving_unit") or "g")
    description = str(row.get("serving_description") or f"{amount:g} {unit}")
    return Portion(amount=amount, unit=unit, description=description)


def _diet_properties(raw: object) -> FoodDietProperties | None:
    if not isinstance(raw, dict):
        return None
    known = {field.name for field in fields(FoodDietProperties)}
    return FoodDietProperties(**{key: raw[key] for key in raw if key in known})


def _medical_properties(row: dict[str, object]) -> FoodMedicalProperties | None:
    raw = row.get("medical_properties")
    values = dict(raw) if isinstance(raw, dict) else {}
    for column, key in (
        ("fiber", "fiber_g"),
        ("sugar", "sugar_g"),
        ("sodium", "sodium_mg"),
        ("glycemic_index", "glycemic_index"),
    ):
        if row.get(column) is not None and key not in values:
            values[key] = _float(row.get(column))
    known = {field.name for field in fields(FoodMedicalProperties)}
    values = {key: value for key, value in values.items() if key in known}
    if not values:
        return None
    return FoodMedicalProperties(**values)


def _parse_food(row: dict[str, object], source: str) -> FoodRecord:
    """Parse a regional or custom food row into a food record."""
    return FoodRecord(
        id=str(row["id"]),
        source=source,
        name=str(row.get("name") or ""),
        nutrients=_macros(row),
        basis=str(row.get("basis") or BASIS_PER_100G),
        category=str(row.get("category") or ""),
        description=str(row.get("description") or ""),
        region=row.get("region"),
        keywords=_strings(row.get("keywords")),
        meal_types=_strings(row.get("meal_types")),
        allergens=_strings(row.get("allergens")),
        unsafe_conditions=_strings(row.get("unsafe_conditions")),
        standard_portion=_standard_portion(row),
        is_vegetarian=_optional_bool(row.get("is_vegetarian")),
        is_vegan=_optional_bool(row.get("is_vegan")),
        contains_gluten=_optional_bool(row.get("contains_gluten")),
        contains_onion_garlic=_optional_bool(row.get("contains_onion_garlic")),
        contains_root_vegetables=_optional_bool(row.get("contains_root_vegetables")),
        diet_properties=_diet_properties(row.get("diet_properties")),
        medical_properties=_medical_properties(row),
    )


def _parse_template(row: dict[str, object]) -> FoodRecord:
    """Parse a meal template row; template nutrition is per serving."""
    record = _parse_food({**row, "basis": BASIS_PER_SERVING}, SOURCE_TEMPLATE)
    meal_type = row.get("meal_type")
    if meal_type and not record.meal_types:
        return replace(record, meal_types=(str(meal_type).lower(),))
    return record


def _food_row(food: FoodRecord) -> dict[str, object]:
    """Serialize a food record into the columns _parse_food reads."""
    portion = food.standard_portion
    medical = (
        {
            key: value
            for key, value in asdict(food.medical_properties).items()
            if value is not None
        }
        if food.medical_properties
        else None
    )
    return {
        "id": food.id,
        "name": food.name,
        "category": food.category,
        "description": food.description,
        "region": food.region,
        "basis": food.basis,
        "calories": food.nutrients.calories,
        "protein": food.nutrients.protein_g,
        "fat": food.nutrients.fat_g,
        "carbs": food.nutrients.carbs_g,
        "keywords": list(food.keywords),
        "meal_types": list(food.meal_types),
        "allergens": list(food.allergens),
        "unsafe_conditions": list(food.unsafe_conditions),
        "serving_amount": portion.amount if portion else None,
        "serving_unit": portion.unit if portion else None,
        "serving_description": portion.description if portion else None,
        "is_vegetarian": food.is_vegetarian,
        "is_vegan": food.is_vegan,
        "contains_gluten": food.contains_gluten,
        "contains_onion_garlic": food.contains_onion_garlic,
        "contains_root_vegetables": food.contains_root_vegetables,
        "diet_properties": (
            asdict(food.diet_properties) if food.diet_properties else None
        ),
        "medical_properties": medical,
    }
