"""Domain models for statistics and goals."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DailyTotals:
    """Daily total macros."""

    day: date | None
    calories: float
    protein_g: float
    fat_g: float
    carbs_g: float


@dataclass(frozen=True)
class DailyGoals:
    """Per-user daily targets."""

    calories: float = 2000
    protein_g: float = 150
    carbs_g: float = 225
    fat_g: float = 67


@dataclass(frozen=True)
class MacroDelta:
    """Per-field values relative to goals."""

    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float


@dataclass(frozen=True)
class DailySummary:
    """Totals for a day compared against goals."""

    totals: DailyTotals
    goals: DailyGoals
    remaining: MacroDelta
    progress_percent: MacroDelta
