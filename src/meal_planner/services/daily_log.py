"""Daily food log service."""

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Protocol
from uuid import UUID, uuid4

from meal_planner.domain.errors import FoodNotFound, PersistenceFailure
from meal_planner.domain.meals import (
    DEFAULT_MEALS,
    DailyLog,
    LogFoodCommand,
    LoggedFood,
    MealEntry,
)
from meal_planner.domain.nutrition import BASIS_PER_SERVING, FoodRecord, Portion
from meal_planner.services.portions import calculate_nutrition_for_portion
from meal_planner.services.sources import FoodSourceRegistry
from meal_planner.services.stats import aggregate_meal

_logger = logging.getLogger(__name__)

_MASS_UNITS = {"g", "ml"}


class DailyLogRepository(Protocol):
    """Persistence interface for daily logs."""

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        """Return the log for a date."""

    def list_logs(self, user_id: UUID, start: date, end: date) -> list[DailyLog]:
        """Return logs dated from start (inclusive) to end (exclusive)."""

    def save_log(self, log: DailyLog) -> None:
        """Create or replace the log for its user and date."""


def empty_log(user_id: UUID, log_date: date) -> DailyLog:
    """A log with the default meal slots and no foods."""
    return DailyLog(
        user_id=str(user_id),
        log_date=log_date,
        meals=tuple(MealEntry(name=meal) for meal in DEFAULT_MEALS),
    )


def portion_amount(record: FoodRecord, serving: Portion) -> float:
    """Amount in the record's nutrient basis for one logged serving."""
    if record.basis == BASIS_PER_SERVING or serving.unit in _MASS_UNITS:
        return serving.amount
    if record.standard_portion is not None:
        return serving.amount * record.standard_portion.amount
    return serving.amount * 100


@dataclass
class DailyLogService:
    """Service that records foods into per-date meal slots."""

    repository: DailyLogRepository
    registry: FoodSourceRegistry

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog:
        """Return the log for a date, creating it on first access."""
        log = self.repository.get_log(user_id, log_date)
        if log is not None:
            return log
        log = empty_log(user_id, log_date)
        self._save(log)
        return log

    async def add_food(
        self, user_id: UUID, log_date: date, meal: str, command: LogFoodCommand
    ) -> DailyLog:
        """Log a food into a meal and refresh the meal totals."""
        if command.quantity <= 0 or command.serving.amount <= 0:
            raise ValueError("Quantity and serving size must be positive")
        log = self.get_log(user_id, log_date)
        entry = _require_meal(log, meal)
        food = await self._resolve_food(command)
        updated = _replace_meal(log, entry, (*entry.foods, food))
        self._save(updated)
        _logger.info(
            "Logged %s from %s into %s on %s",
            food.food_id,
            food.source,
            entry.name,
            log_date.isoformat(),
        )
        return updated

    def remove_food(
        self, user_id: UUID, log_date: date, meal: str, entry_id: str
    ) -> DailyLog:
        """Remove a logged food from a meal."""
        log = self.get_log(user_id, log_date)
        entry = _require_meal(log, meal)
        foods = tuple(food for food in entry.foods if food.id != entry_id)
        if len(foods) == len(entry.foods):
            raise FoodNotFound(entry.name, entry_id)
        updated = _replace_meal(log, entry, foods)
        self._save(updated)
        return updated

    async def _resolve_food(self, command: LogFoodCommand) -> LoggedFood:
        source_name = command.source
        if command.nutrition is not None:
            nutrition = command.nutrition
            name = command.name or command.food_id
        else:
            source = self.registry.get(command.source)
            record = await source.get_by_id(command.food_id)
            if record is None:
                raise FoodNotFound(source.name, command.food_id)
            nutrition = calculate_nutrition_for_portion(
                record, portion_amount(record, command.serving)
            )
            name = command.name or record.name
            source_name = record.source
        return LoggedFood(
            id=uuid4().hex,
            food_id=command.food_id,
            source=source_name,
            name=name,
            quantity=command.quantity,
            serving=command.serving,
            nutrition=nutrition,
        )

    def _save(self, log: DailyLog) -> None:
        try:
            self.repository.save_log(log)
        except Exception as exc:
            _logger.warning(
                "Failed to save daily log %s for %s: %s",
                log.log_date.isoformat(),
                log.user_id,
                exc,
            )
            raise PersistenceFailure("Failed to save daily log", payload=log) from exc


def _require_meal(log: DailyLog, meal: str) -> MealEntry:
    entry = log.meal(meal)
    if entry is None:
        raise ValueError(f"Unknown meal: {meal}")
    return entry


def _replace_meal(
    log: DailyLog, entry: MealEntry, foods: tuple[LoggedFood, ...]
) -> DailyLog:
    refreshed = replace(entry, foods=foods)
    refreshed = replace(refreshed, totals=aggregate_meal(refreshed))
    meals = tuple(refreshed if meal is entry else meal for meal in log.meals)
    return replace(log, meals=meals)
