"""Nutrition domain models."""

from dataclasses import dataclass

SOURCE_REGIONAL = "ifct"
SOURCE_INTERNATIONAL = "usda"
SOURCE_CUSTOM = "custom"
SOURCE_TEMPLATE = "template"
SOURCE_FALLBACK = "fallback"

BASIS_PER_100G = "per100g"
BASIS_PER_SERVING = "perServing"


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient profile for a food item."""

    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float

    def scaled(self, factor: float) -> "MacroProfile":
        """Return the profile multiplied by a factor."""
        return MacroProfile(
            calories=self.calories * factor,
            protein_g=self.protein_g * factor,
            fat_g=self.fat_g * factor,
            carbs_g=self.carbs_g * factor,
        )

    def plus(self, other: "MacroProfile") -> "MacroProfile":
        """Return the field-wise sum of two profiles."""
        return MacroProfile(
            calories=self.calories + other.calories,
            protein_g=self.protein_g + other.protein_g,
            fat_g=self.fat_g + other.fat_g,
            carbs_g=self.carbs_g + other.carbs_g,
        )

    def is_empty(self) -> bool:
        """Return True when every macro is zero or negative."""
        return (
            self.calories <= 0
            and self.protein_g <= 0
            and self.fat_g <= 0
            and self.carbs_g <= 0
        )


ZERO_MACROS = MacroProfile(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True)
class Portion:
    """Amount of a food as served."""

    amount: float
    unit: str
    description: str


@dataclass(frozen=True)
class FoodDietProperties:
    """Structured diet tags for a food."""

    is_vegetarian: bool = False
    is_vegan: bool = False
    is_egg_free: bool = True
    is_gluten_free: bool = False
    contains_onion_garlic: bool = False
    contains_root_vegetables: bool = False
    is_processed: bool = False
    is_fried: bool = False
    is_high_glycemic: bool = False
    is_low_carb: bool = False
    is_high_fat: bool = False
    blood_type: str | None = None
    region: str | None = None


@dataclass(frozen=True)
class FoodMedicalProperties:
    """Structured per-100g measurements relevant to medical conditions."""

    glycemic_index: float | None = None
    sodium_mg: float | None = None
    saturated_fat_g: float | None = None
    fiber_g: float | None = None
    sugar_g: float | None = None
    caffeine_mg: float | None = None
    goitrogens: bool | None = None
    insulin_index: float | None = None
    fodmap: bool | None = None
    purine_mg: float | None = None
    oxalate_mg: float | None = None
    tyramine: bool | None = None


@dataclass(frozen=True)
class FoodRecord:
    """Food from any source, with nutrients per 100 g or per serving."""

    id: str
    source: str
    name: str
    nutrients: MacroProfile
    basis: str = BASIS_PER_100G
    category: str = ""
    description: str = ""
    region: str | None = None
    keywords: tuple[str, ...] = ()
    meal_types: tuple[str, ...] = ()
    allergens: tuple[str, ...] = ()
    unsafe_conditions: tuple[str, ...] = ()
    standard_portion: Portion | None = None
    is_vegetarian: bool | None = None
    is_vegan: bool | None = None
    contains_gluten: bool | None = None
    contains_onion_garlic: bool | None = None
    contains_root_vegetables: bool | None = None
    diet_properties: FoodDietProperties | None = None
    medical_properties: FoodMedicalProperties | None = None

    def search_text(self) -> str:
        """Lowercased text used for keyword matching."""
        return " ".join(
            part for part in (self.name, self.category, self.description) if part
        ).lower()
