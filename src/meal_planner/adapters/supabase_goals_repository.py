"""Supabase repository for daily goals."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from meal_planner.domain.stats import DailyGoals
from meal_planner.services.goals import GoalsRepository


@dataclass
class SupabaseGoalsRepository(GoalsRepository):
    """Supabase implementation for per-user goals."""

    client: Client

    def get_goals(self, user_id: UUID) -> DailyGoals | None:
        """Return stored goals for a user."""
        response = (
            self.client.table("daily_goals")
            .select("calories, protein_g, carbs_g, fat_g")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        defaults = DailyGoals()
        return DailyGoals(
            calories=_goal(row, "calories", defaults.calories),
            protein_g=_goal(row, "protein_g", defaults.protein_g),
            carbs_g=_goal(row, "carbs_g", defaults.carbs_g),
            fat_g=_goal(row, "fat_g", defaults.fat_g),
        )

    def save_goals(self, user_id: UUID, goals: DailyGoals) -> None:
        """Upsert the user's goals."""
        self.client.table("daily_goals").upsert(
            {
                "user_id": str(user_id),
                "calories": goals.calories,
                "protein_g": goals.protein_g,
                "carbs_g": goals.carbs_g,
                "fat_g": goals.fat_g,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()


def _goal(row: dict[str, object], key: str, default: float) -> float:
    value = row.get(key)
    if value is None:
        return default
    return float(value)
