"""Supabase-backed profile repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from meal_planner.config import parse_csv_tokens
from meal_planner.domain.models import UserProfile
from meal_planner.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for user profiles."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile for a user, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def increment_plans_generated(self, user_id: UUID) -> None:
        """Increment the generated plan counter."""
        response = (
            self.client.table("profiles")
            .select("meal_plans_generated")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        current = 0
        if response.data:
            current = int(response.data[0].get("meal_plans_generated") or 0)
        self.client.table("profiles").update(
            {"meal_plans_generated": current + 1}
        ).eq("id", str(user_id)).execute()


def _number(value: object) -> float | None:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str) and value.strip():
        try:
            return float(value)
        except ValueError:
            return None
    return None


def _parse_profile(row: dict[str, object]) -> UserProfile:
    """Parse a profile row; numeric fields may arrive as form strings."""
    conditions = row.get("medical_conditions")
    if isinstance(conditions, str):
        medical_conditions = parse_csv_tokens(conditions)
    else:
        medical_conditions = tuple(str(item).lower() for item in conditions or [])
    age = _number(row.get("age"))
    return UserProfile(
        user_id=UUID(str(row["id"])),
        full_name=row.get("full_name"),
        gender=row.get("gender"),
        age=int(age) if age is not None else None,
        weight_kg=_number(row.get("weight")),
        height_cm=_number(row.get("height")),
        diet_preference=str(row.get("diet_preference") or "non-veg"),
        diet_goal=str(row.get("diet_goal") or "maintenance"),
        medical_conditions=medical_conditions,
        allergies=str(row.get("allergies") or ""),
        activity_level=str(row.get("activity_level") or "moderate"),
        goal_weight_kg=_number(row.get("goal_weight")),
        diet_period=str(row.get("diet_period") or "4-weeks"),
        meal_plans_generated=int(row.get("meal_plans_generated") or 0),
    )
