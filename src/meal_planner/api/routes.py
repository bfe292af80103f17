"""Meal planner API endpoints with shared-token auth."""

from __future__ import annotations

import random
from dataclasses import asdict
from datetime import UTC, date, datetime
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from meal_planner.api.models import (  # noqa: TC001
    FoodImportRow,
    GoalsUpdate,
    LogFoodRequest,
    PlanRequest,
)
from meal_planner.domain.stats import DailySummary, DailyTotals

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer
    from meal_planner.domain.stats import DailyGoals
    from meal_planner.services.stats import PeriodSummary


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include the shared API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


router = APIRouter(dependencies=[Depends(require_api_token)])


@router.get("/foods/search")
async def search_foods(
    request: Request, term: str, source: str = "regional", limit: int = 10
) -> dict[str, object]:
    """Search one food source by term."""
    container: AppContainer = request.app.state.container
    try:
        food_source = container.food_sources.get(source)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    foods = await food_source.search_by_term(term, max(1, min(limit, 50)))
    return {
        "source": food_source.name,
        "foods": [
            {
                "id": food.id,
                "source": food.source,
                "name": food.name,
                "category": food.category,
                "basis": food.basis,
                "calories": food.nutrients.calories,
                "protein": food.nutrients.protein_g,
                "carbs": food.nutrients.carbs_g,
                "fat": food.nutrients.fat_g,
            }
            for food in foods
        ],
    }


@router.post("/foods/regional/import")
async def import_regional_foods(
    rows: list[FoodImportRow], request: Request
) -> dict[str, object]:
    """Import raw composition rows into the regional food table."""
    container: AppContainer = request.app.state.container
    report = container.food_import.import_rows(row.to_row() for row in rows)
    return report.to_document()


@router.get("/users/{user_id}/calorie-target")
async def calorie_target(user_id: UUID, request: Request) -> dict[str, object]:
    """Return BMR, TDEE and the calorie goal for a stored profile."""
    container: AppContainer = request.app.state.container
    target = container.profile_service.calorie_target(user_id)
    return {
        "bmr": target.bmr,
        "tdee": target.tdee,
        "calorieGoal": target.calorie_goal,
    }


@router.post("/users/{user_id}/meal-plans", status_code=status.HTTP_201_CREATED)
async def generate_plan(
    user_id: UUID, body: PlanRequest, request: Request
) -> dict[str, object]:
    """Generate and store a seven-day meal plan."""
    container: AppContainer = request.app.state.container
    rng = random.Random(body.seed) if body.seed is not None else None
    plan = await container.plan_service.generate_for_user(
        user_id, body.to_request(), rng
    )
    return plan.to_document()


@router.get("/users/{user_id}/meal-plans")
async def list_plans(
    user_id: UUID, request: Request, limit: int = 10
) -> dict[str, object]:
    """Return the user's stored plans, newest first."""
    container: AppContainer = request.app.state.container
    return {"plans": container.plan_service.list_plans(user_id, max(1, limit))}


@router.get("/users/{user_id}/logs/{log_date}")
async def get_log(user_id: UUID, log_date: date, request: Request) -> dict[str, object]:
    """Return the daily log with its summary."""
    container: AppContainer = request.app.state.container
    log = container.daily_log_service.get_log(user_id, log_date)
    summary = container.stats_service.summarize_log(user_id, log)
    return {"log": log.to_document(), "summary": summary_document(summary)}


@router.post(
    "/users/{user_id}/logs/{log_date}/meals/{meal}/foods",
    status_code=status.HTTP_201_CREATED,
)
async def log_food(
    user_id: UUID, log_date: date, meal: str, body: LogFoodRequest, request: Request
) -> dict[str, object]:
    """Log a food into a meal."""
    container: AppContainer = request.app.state.container
    try:
        log = await container.daily_log_service.add_food(
            user_id, log_date, meal, body.to_command()
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    summary = container.stats_service.summarize_log(user_id, log)
    return {"log": log.to_document(), "summary": summary_document(summary)}


@router.delete("/users/{user_id}/logs/{log_date}/meals/{meal}/foods/{entry_id}")
async def remove_food(
    user_id: UUID, log_date: date, meal: str, entry_id: str, request: Request
) -> dict[str, object]:
    """Remove a logged food from a meal."""
    container: AppContainer = request.app.state.container
    try:
        log = container.daily_log_service.remove_food(
            user_id, log_date, meal, entry_id
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    summary = container.stats_service.summarize_log(user_id, log)
    return {"log": log.to_document(), "summary": summary_document(summary)}


@router.get("/users/{user_id}/goals")
async def get_goals(user_id: UUID, request: Request) -> dict[str, object]:
    """Return the user's daily goals."""
    container: AppContainer = request.app.state.container
    return goals_document(container.goals_service.get_goals(user_id))


@router.patch("/users/{user_id}/goals")
async def update_goals(
    user_id: UUID, body: GoalsUpdate, request: Request
) -> dict[str, object]:
    """Merge supplied goal fields."""
    container: AppContainer = request.app.state.container
    try:
        goals = container.goals_service.update_goals(user_id, body.changes())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return goals_document(goals)


@router.post("/users/{user_id}/goals/from-target")
async def goals_from_target(user_id: UUID, request: Request) -> dict[str, object]:
    """Derive macro goals from the profile's calorie target."""
    container: AppContainer = request.app.state.container
    profile = container.profile_service.get_profile(user_id)
    target = container.profile_service.calorie_target(user_id)
    goals = container.goals_service.apply_calorie_target(
        user_id, target.calorie_goal, profile.diet_preference
    )
    return goals_document(goals)


@router.get("/users/{user_id}/stats/week")
async def week_stats(
    user_id: UUID, request: Request, end: date | None = None
) -> dict[str, object]:
    """Return seven days of totals ending at a date."""
    container: AppContainer = request.app.state.container
    end_day = end or datetime.now(tz=UTC).date()
    return period_document(container.stats_service.get_week(user_id, end_day))


def goals_document(goals: DailyGoals) -> dict[str, float]:
    """Serialize goals with display field names."""
    return {
        "calories": goals.calories,
        "protein": goals.protein_g,
        "carbs": goals.carbs_g,
        "fat": goals.fat_g,
    }


def totals_document(totals: DailyTotals) -> dict[str, object]:
    """Serialize day totals."""
    return {
        "date": totals.day.isoformat() if totals.day else None,
        "calories": totals.calories,
        "protein": totals.protein_g,
        "carbs": totals.carbs_g,
        "fat": totals.fat_g,
    }


def summary_document(summary: DailySummary) -> dict[str, object]:
    """Serialize a daily summary."""
    remaining = asdict(summary.remaining)
    progress = asdict(summary.progress_percent)
    return {
        "totals": totals_document(summary.totals),
        "goals": goals_document(summary.goals),
        "remaining": {
            "calories": remaining["calories"],
            "protein": remaining["protein_g"],
            "carbs": remaining["carbs_g"],
            "fat": remaining["fat_g"],
        },
        "progressPercent": {
            "calories": progress["calories"],
            "protein": progress["protein_g"],
            "carbs": progress["carbs_g"],
            "fat": progress["fat_g"],
        },
    }


def period_document(summary: PeriodSummary) -> dict[str, object]:
    """Serialize a period summary."""
    return {
        "daily": [totals_document(entry) for entry in summary.daily],
        "averages": {
            "calories": summary.avg_calories,
            "protein": summary.avg_protein_g,
            "carbs": summary.avg_carbs_g,
            "fat": summary.avg_fat_g,
        },
    }
