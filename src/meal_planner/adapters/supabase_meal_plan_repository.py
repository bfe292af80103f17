"""Supabase repository for generated meal plans."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from meal_planner.domain.errors import PersistenceFailure
from meal_planner.domain.plans import MealPlan
from meal_planner.services.planner import MealPlanRepository


@dataclass
class SupabaseMealPlanRepository(MealPlanRepository):
    """Supabase implementation for meal plan history."""

    client: Client

    def save_plan(self, user_id: UUID, plan: MealPlan) -> str:
        """Insert a plan with its generation parameters and return its id."""
        params = plan.params
        response = (
            self.client.table("meal_plans")
            .insert(
                {
                    "user_id": str(user_id),
                    "diet_preference": params.diet_preference,
                    "diet_goal": params.diet_goal,
                    "calorie_goal": params.calorie_goal,
                    "diet_period": params.period,
                    "goal_weight": params.goal_weight_kg,
                    "medical_conditions": list(params.medical_conditions),
                    "allergies": ", ".join(params.allergies),
                    "activity_level": params.activity_level,
                    "strategy": str(params.strategy),
                    "plan": [day.to_document() for day in plan.days],
                    "source": plan.source,
                    "created_at": plan.created_at.isoformat(),
                }
            )
            .execute()
        )
        if not response.data:
            raise PersistenceFailure("Failed to save meal plan", payload=plan)
        return str(response.data[0]["id"])

    def list_plans(self, user_id: UUID, limit: int) -> list[dict[str, object]]:
        """Return plan documents for a user, newest first."""
        response = (
            self.client.table("meal_plans")
            .select("*")
            .eq("user_id", str(user_id))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_plan_document(row) for row in response.data or []]


def _plan_document(row: dict[str, object]) -> dict[str, object]:
    """Map a plan row to the camelCase document shape."""
    return {
        "id": str(row.get("id")),
        "dietPreference": row.get("diet_preference"),
        "dietGoal": row.get("diet_goal"),
        "calorieGoal": row.get("calorie_goal"),
        "dietPeriod": row.get("diet_period"),
        "goalWeight": row.get("goal_weight"),
        "medicalConditions": row.get("medical_conditions") or [],
        "allergies": row.get("allergies") or "",
        "activityLevel": row.get("activity_level"),
        "strategy": row.get("strategy"),
        "plan": row.get("plan") or [],
        "source": row.get("source"),
        "createdAt": row.get("created_at"),
    }
