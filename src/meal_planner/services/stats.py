"""Daily nutrition aggregation and goal tracking."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Protocol
from uuid import UUID

from meal_planner.domain.meals import DailyLog, MealEntry
from meal_planner.domain.nutrition import ZERO_MACROS, MacroProfile
from meal_planner.domain.stats import DailyGoals, DailySummary, DailyTotals, MacroDelta
from meal_planner.services.calculator import round_half_up
from meal_planner.services.goals import GoalsService

WEEK_DAYS = 7


class DailyLogReader(Protocol):
    """Read access to stored daily logs."""

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        """Return the log for a date."""

    def list_logs(self, user_id: UUID, start: date, end: date) -> list[DailyLog]:
        """Return logs dated from start (inclusive) to end (exclusive)."""


@dataclass
class PeriodSummary:
    """Aggregated totals for a period."""

    daily: list[DailyTotals]
    avg_calories: float
    avg_protein_g: float
    avg_fat_g: float
    avg_carbs_g: float


def aggregate_meal(entry: MealEntry) -> MacroProfile:
    """Sum nutrition times quantity over the foods of a meal."""
    total = ZERO_MACROS
    for food in entry.foods:
        total = total.plus(food.totals())
    return total


def aggregate_day(meals: Iterable[MealEntry], day: date | None = None) -> DailyTotals:
    """Fold meals into day totals, recomputed from their foods."""
    total = ZERO_MACROS
    for entry in meals:
        total = total.plus(aggregate_meal(entry))
    return DailyTotals(
        day=day,
        calories=total.calories,
        protein_g=total.protein_g,
        fat_g=total.fat_g,
        carbs_g=total.carbs_g,
    )


def compute_remaining(totals: DailyTotals, goals: DailyGoals) -> MacroDelta:
    """Goals minus totals; negative values mean the goal was exceeded."""
    return MacroDelta(
        calories=goals.calories - totals.calories,
        protein_g=goals.protein_g - totals.protein_g,
        carbs_g=goals.carbs_g - totals.carbs_g,
        fat_g=goals.fat_g - totals.fat_g,
    )


def _percent(value: float, goal: float) -> int:
    if goal <= 0:
        return 0
    return min(100, max(0, round_half_up(value / goal * 100)))


def compute_progress_percent(totals: DailyTotals, goals: DailyGoals) -> MacroDelta:
    """Percent of each goal reached, clamped to [0, 100] for display."""
    return MacroDelta(
        calories=_percent(totals.calories, goals.calories),
        protein_g=_percent(totals.protein_g, goals.protein_g),
        carbs_g=_percent(totals.carbs_g, goals.carbs_g),
        fat_g=_percent(totals.fat_g, goals.fat_g),
    )


def summarize(totals: DailyTotals, goals: DailyGoals) -> DailySummary:
    """Compare totals with goals."""
    return DailySummary(
        totals=totals,
        goals=goals,
        remaining=compute_remaining(totals, goals),
        progress_percent=compute_progress_percent(totals, goals),
    )


@dataclass
class StatsService:
    """Service for computing daily and weekly summaries."""

    repository: DailyLogReader
    goals_service: GoalsService

    def get_day_summary(self, user_id: UUID, day: date) -> DailySummary:
        """Return totals for a date compared against the user's goals."""
        log = self.repository.get_log(user_id, day)
        totals = aggregate_day(log.meals if log else (), day)
        return summarize(totals, self.goals_service.get_goals(user_id))

    def summarize_log(self, user_id: UUID, log: DailyLog) -> DailySummary:
        """Summarize an already loaded log against the user's goals."""
        totals = aggregate_day(log.meals, log.log_date)
        return summarize(totals, self.goals_service.get_goals(user_id))

    def get_week(self, user_id: UUID, end_day: date) -> PeriodSummary:
        """Return seven days of totals and averages ending at end_day."""
        start = end_day - timedelta(days=WEEK_DAYS - 1)
        logs = self.repository.list_logs(user_id, start, end_day + timedelta(days=1))
        by_day = {log.log_date: log for log in logs}
        daily = []
        for offset in range(WEEK_DAYS):
            day = start + timedelta(days=offset)
            log = by_day.get(day)
            daily.append(aggregate_day(log.meals if log else (), day))
        return PeriodSummary(
            daily=daily,
            avg_calories=sum(entry.calories for entry in daily) / WEEK_DAYS,
            avg_protein_g=sum(entry.protein_g for entry in daily) / WEEK_DAYS,
            avg_fat_g=sum(entry.fat_g for entry in daily) / WEEK_DAYS,
            avg_carbs_g=sum(entry.carbs_g for entry in daily) / WEEK_DAYS,
        )
