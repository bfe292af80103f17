"""Domain models for food composition imports."""

from dataclasses import dataclass, field

from meal_planner.domain.nutrition import Portion


@dataclass(frozen=True)
class CompositionRow:
    """One raw row of a regional composition table, per 100 g."""

    name: str
    id: str | None = None
    category: str = ""
    description: str = ""
    region: str | None = None
    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float | None = None
    sugar_g: float | None = None
    sodium_mg: float | None = None
    saturated_fat_g: float | None = None
    glycemic_index: float | None = None
    is_vegetarian: bool | None = None
    is_vegan: bool | None = None
    contains_egg: bool | None = None
    contains_gluten: bool | None = None
    contains_onion_garlic: bool | None = None
    contains_root_vegetables: bool | None = None
    standard_portion: Portion | None = None
    keywords: tuple[str, ...] = ()
    meal_types: tuple[str, ...] = ()
    allergens: tuple[str, ...] = ()


@dataclass(frozen=True)
class ImportReport:
    """Outcome of an import run."""

    imported: int
    skipped: tuple[int, ...] = ()
    ids: tuple[str, ...] = field(default=(), repr=False)

    def to_document(self) -> dict[str, object]:
        """Serialize the report for API responses."""
        return {
            "imported": self.imported,
            "skipped": list(self.skipped),
            "ids": list(self.ids),
        }
