"""Supabase repository for daily food logs."""

from dataclasses import dataclass
from datetime import UTC, date, datetime
from uuid import UUID

from supabase import Client

from meal_planner.domain.meals import DailyLog, LoggedFood, MealEntry
from meal_planner.domain.nutrition import MacroProfile, Portion
from meal_planner.services.daily_log import DailyLogRepository


@dataclass
class SupabaseDailyLogRepository(DailyLogRepository):
    """Supabase implementation storing one row per user and date."""

    client: Client

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        """Return the log for a date, if present."""
        response = (
            self.client.table("daily_logs")
            .select("user_id, log_date, meals")
            .eq("user_id", str(user_id))
            .eq("log_date", log_date.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_log(response.data[0])

    def list_logs(self, user_id: UUID, start: date, end: date) -> list[DailyLog]:
        """Return logs in the date range."""
        response = (
            self.client.table("daily_logs")
            .select("user_id, log_date, meals")
            .eq("user_id", str(user_id))
            .gte("log_date", start.isoformat())
            .lt("log_date", end.isoformat())
            .order("log_date", desc=False)
            .execute()
        )
        return [_parse_log(row) for row in response.data or []]

    def save_log(self, log: DailyLog) -> None:
        """Upsert the log for its user and date."""
        self.client.table("daily_logs").upsert(
            {
                "user_id": log.user_id,
                "log_date": log.log_date.isoformat(),
                "meals": [meal.to_document() for meal in log.meals],
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id,log_date",
        ).execute()


def _float(value: object, default: float = 0.0) -> float:
    if isinstance(value, int | float):
        return float(value)
    return default


def _parse_macros(raw: object) -> MacroProfile:
    values = raw if isinstance(raw, dict) else {}
    return MacroProfile(
        calories=_float(values.get("calories")),
        protein_g=_float(values.get("protein")),
        fat_g=_float(values.get("fat")),
        carbs_g=_float(values.get("carbs")),
    )


def _parse_food(raw: dict[str, object]) -> LoggedFood:
    serving = raw.get("servingSize") or {}
    amount = _float(serving.get("amount"), 1.0)
    unit = str(serving.get("unit") or "serving")
    return LoggedFood(
        id=str(raw.get("id") or ""),
        food_id=str(raw.get("foodId") or ""),
        source=str(raw.get("source") or ""),
        name=str(raw.get("name") or ""),
        quantity=_float(raw.get("quantity"), 1.0),
        serving=Portion(
            amount=amount,
            unit=unit,
            description=str(serving.get("description") or f"{amount:g} {unit}"),
        ),
        nutrition=_parse_macros(raw.get("nutrition")),
    )


def _parse_meal(raw: dict[str, object]) -> MealEntry:
    return MealEntry(
        name=str(raw.get("name") or ""),
        foods=tuple(_parse_food(food) for food in raw.get("foods") or []),
        totals=_parse_macros(raw.get("totals")),
    )


def _parse_log(row: dict[str, object]) -> DailyLog:
    """Parse a daily log row into a domain model."""
    return DailyLog(
        user_id=str(row["user_id"]),
        log_date=date.fromisoformat(str(row["log_date"])),
        meals=tuple(_parse_meal(meal) for meal in row.get("meals") or []),
    )
