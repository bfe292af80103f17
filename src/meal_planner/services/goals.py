"""Per-user daily nutrition goals."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Protocol
from uuid import UUID

from meal_planner.domain.errors import PersistenceFailure
from meal_planner.domain.stats import DailyGoals
from meal_planner.services.calculator import goals_for_calorie_target

_logger = logging.getLogger(__name__)

GOAL_FIELDS = tuple(field.name for field in fields(DailyGoals))


class GoalsRepository(Protocol):
    """Persistence interface for daily goals."""

    def get_goals(self, user_id: UUID) -> DailyGoals | None:
        """Return stored goals for a user."""

    def save_goals(self, user_id: UUID, goals: DailyGoals) -> None:
        """Create or replace the user's goals."""


@dataclass
class GoalsService:
    """Service for reading and merging daily goals."""

    repository: GoalsRepository

    def get_goals(self, user_id: UUID) -> DailyGoals:
        """Return goals, storing the defaults on first access."""
        goals = self.repository.get_goals(user_id)
        if goals is not None:
            return goals
        goals = DailyGoals()
        self._save(user_id, goals)
        return goals

    def update_goals(
        self, user_id: UUID, changes: Mapping[str, float | None]
    ) -> DailyGoals:
        """Merge the supplied fields into the stored goals."""
        updates: dict[str, float] = {}
        for key, value in changes.items():
            if key not in GOAL_FIELDS:
                raise ValueError(f"Unknown goal field: {key}")
            if value is None:
                continue
            if value < 0:
                raise ValueError(f"Goal {key} must not be negative")
            updates[key] = value
        goals = replace(self.get_goals(user_id), **updates)
        self._save(user_id, goals)
        return goals

    def apply_calorie_target(
        self, user_id: UUID, calories: float, diet_preference: str
    ) -> DailyGoals:
        """Replace goals with the macro split of a calorie target."""
        goals = goals_for_calorie_target(calories, diet_preference)
        self._save(user_id, goals)
        return goals

    def _save(self, user_id: UUID, goals: DailyGoals) -> None:
        try:
            self.repository.save_goals(user_id, goals)
        except Exception as exc:
            _logger.warning("Failed to save goals for %s: %s", user_id, exc)
            raise PersistenceFailure("Failed to save goals", payload=goals) from exc
