"""Domain error types."""


class MealPlannerError(Exception):
    """Base error for the meal planner."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InsufficientProfileData(MealPlannerError):
    """Profile lacks the biometrics needed for energy calculations."""

    def __init__(self, missing_fields: tuple[str, ...]) -> None:
        super().__init__(
            "Insufficient profile data: " + ", ".join(missing_fields or ("profile",))
        )
        self.missing_fields = missing_fields


class UpstreamUnavailable(MealPlannerError):
    """A food source could not be reached or answered with an error status."""

    def __init__(
        self, source: str, message: str, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.source = source
        self.status_code = status_code


class PersistenceFailure(MealPlannerError):
    """Writing an artifact to the store failed; the write may be retried."""

    retryable = True

    def __init__(self, message: str, payload: object | None = None) -> None:
        super().__init__(message)
        self.payload = payload


class FoodNotFound(MealPlannerError, LookupError):
    """A food id is unknown to its source."""

    def __init__(self, source: str, food_id: str) -> None:
        super().__init__(f"Food {food_id} not found in {source}")
        self.source = source
        self.food_id = food_id


class ProfileNotFound(MealPlannerError, LookupError):
    """No stored profile exists for a user."""

    def __init__(self, user_id: object) -> None:
        super().__init__(f"Profile {user_id} not found")
        self.user_id = user_id
