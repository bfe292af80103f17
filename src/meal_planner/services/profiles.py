"""Read access to externally owned user profiles."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from meal_planner.domain.errors import ProfileNotFound
from meal_planner.domain.models import CalorieTarget, GenerationRequest, UserProfile
from meal_planner.services.calculator import calorie_target_for_profile


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return a profile by user id."""

    def increment_plans_generated(self, user_id: UUID) -> None:
        """Bump the counter of plans generated for the user."""


@dataclass
class ProfileService:
    """Profile lookups and the energy figures derived from them."""

    repository: ProfileRepository

    def get_profile(self, user_id: UUID) -> UserProfile:
        """Return a stored profile or raise ProfileNotFound."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise ProfileNotFound(user_id)
        return profile

    def calorie_target(
        self, user_id: UUID, request: GenerationRequest | None = None
    ) -> CalorieTarget:
        """Compute BMR, TDEE and the calorie goal for a user."""
        return calorie_target_for_profile(self.get_profile(user_id), request)

    def record_plan_generated(self, user_id: UUID) -> None:
        """Count a persisted plan against the profile."""
        self.repository.increment_plans_generated(user_id)
