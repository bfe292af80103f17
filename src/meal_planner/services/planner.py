"""Seven-day meal plan generation."""

import asyncio
import logging
import random
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from meal_planner.config import parse_csv_tokens
from meal_planner.domain.diet_rules import INDIAN_LEANING_PREFERENCES
from meal_planner.domain.errors import PersistenceFailure, UpstreamUnavailable
from meal_planner.domain.models import GenerationRequest
from meal_planner.domain.nutrition import (
    SOURCE_CUSTOM,
    SOURCE_FALLBACK,
    SOURCE_INTERNATIONAL,
    SOURCE_REGIONAL,
    FoodRecord,
    MacroProfile,
    Portion,
)
from meal_planner.domain.plans import (
    DAYS,
    FASTING_MEAL_TIMES,
    MEAL_CALORIE_SHARES,
    MEAL_SLOTS,
    DayPlan,
    GenerationParams,
    MealPlan,
    PlanItem,
    SourceStrategy,
)
from meal_planner.services.calculator import round_half_up
from meal_planner.services.compliance import (
    active_conditions,
    annotate_with_warnings,
    is_suitable_for_diet,
    record_diet_verdict,
)
from meal_planner.services.portions import (
    calculate_nutrition_for_portion,
    calculate_portion,
)
from meal_planner.services.profiles import ProfileService
from meal_planner.services.sources import (
    FoodSource,
    FoodSourceRegistry,
    matches_allergy,
)

_logger = logging.getLogger(__name__)

INTERMITTENT_FASTING = "intermittent-fasting"
FALLBACK_FOOD_ID = "default"
FALLBACK_MACRO_SHARES = (0.25, 0.50, 0.25)

_VEGETARIAN_PREFERENCES = {
    "vegetarian",
    "indian-vegetarian",
    "jain-diet",
    "sattvic-diet",
    "hindu-fasting",
}


def strategy_for_preference(diet_preference: str) -> SourceStrategy:
    """Regional-first for Indian-leaning diets, international-first otherwise."""
    if diet_preference in INDIAN_LEANING_PREFERENCES:
        return SourceStrategy.PREFER_REGIONAL
    return SourceStrategy.PREFER_INTERNATIONAL


def meal_slots_for(diet_preference: str) -> tuple[str, ...]:
    """Meal slots planned per day; intermittent fasting skips breakfast."""
    if diet_preference == INTERMITTENT_FASTING:
        return tuple(slot for slot in MEAL_SLOTS if slot != "Breakfast")
    return MEAL_SLOTS


def fallback_item(meal: str, params: GenerationParams) -> PlanItem:
    """Generic item sized to the meal's share of the daily calorie goal."""
    if params.diet_preference == "vegan":
        label = "Vegan"
    elif params.diet_preference in _VEGETARIAN_PREFERENCES:
        label = "Vegetarian"
    else:
        label = "Mixed"
    calories = round_half_up(params.calorie_goal * MEAL_CALORIE_SHARES[meal])
    protein_share, carbs_share, fat_share = FALLBACK_MACRO_SHARES
    return PlanItem(
        meal=meal,
        food=f"{label} {meal}",
        portion=Portion(amount=1, unit="serving", description="1 serving"),
        nutrition=MacroProfile(
            calories=calories,
            protein_g=round_half_up(calories * protein_share / 4),
            fat_g=round_half_up(calories * fat_share / 9),
            carbs_g=round_half_up(calories * carbs_share / 4),
        ),
        source=SOURCE_FALLBACK,
        food_id=FALLBACK_FOOD_ID,
        diet_verified=True,
    )


@dataclass
class MealPlanGenerator:
    """Builds complete weekly plans from the registered food sources.

    Every day and slot is planned independently. A slot tries its sources in
    a randomly weighted order and falls back to a generic item sized from the
    calorie goal when no source yields an eligible food, so a plan is always
    complete even when every source is down.
    """

    registry: FoodSourceRegistry
    regional_bias_preferred: float = 0.8
    regional_bias_default: float = 0.3
    candidate_limit: int = 10

    async def generate(
        self, params: GenerationParams, rng: random.Random | None = None
    ) -> MealPlan:
        """Generate a seven-day plan; the same seed and sources give the same plan."""
        rng = rng or random.Random()
        slots = meal_slots_for(params.diet_preference)
        tasks = []
        for day in DAYS:
            for meal in slots:
                slot_rng = random.Random(rng.getrandbits(64))
                tasks.append(self._plan_slot(day, meal, params, slot_rng))
        items = await asyncio.gather(*tasks)

        days = []
        for index, day in enumerate(DAYS):
            start = index * len(slots)
            meals = tuple(items[start : start + len(slots)])
            days.append(DayPlan(day=day, meals=meals))
        annotated = annotate_with_warnings(
            days, params.diet_preference, params.medical_conditions
        )
        return MealPlan(
            days=annotated,
            params=params,
            source=f"meal-planner/{params.strategy}",
            created_at=datetime.now(tz=UTC),
        )

    def source_order(
        self, strategy: SourceStrategy, rng: random.Random
    ) -> tuple[str, ...]:
        """Order in which a slot consults the food sources."""
        if strategy == SourceStrategy.PREFER_CUSTOM:
            return (SOURCE_CUSTOM, SOURCE_REGIONAL, SOURCE_INTERNATIONAL)
        bias = (
            self.regional_bias_preferred
            if strategy == SourceStrategy.PREFER_REGIONAL
            else self.regional_bias_default
        )
        if rng.random() < bias:
            return (SOURCE_REGIONAL, SOURCE_CUSTOM, SOURCE_INTERNATIONAL)
        return (SOURCE_CUSTOM, SOURCE_INTERNATIONAL, SOURCE_REGIONAL)

    async def _plan_slot(
        self, day: str, meal: str, params: GenerationParams, rng: random.Random
    ) -> PlanItem:
        time = (
            FASTING_MEAL_TIMES.get(meal)
            if params.diet_preference == INTERMITTENT_FASTING
            else None
        )
        for name in self.source_order(params.strategy, rng):
            source = self.registry.sources.get(name)
            if source is None:
                continue
            try:
                record = await self._pick_candidate(source, meal, params, rng)
            except Exception:
                _logger.warning(
                    "Food source %s failed for %s %s",
                    name,
                    day,
                    meal,
                    exc_info=True,
                )
                continue
            if record is None:
                continue
            portion = calculate_portion(record, params.diet_goal, meal)
            diet_verified = (
                record.diet_properties is None
                and record_diet_verdict(record, params.diet_preference) is True
            )
            return PlanItem(
                meal=meal,
                food=record.name,
                portion=portion,
                nutrition=calculate_nutrition_for_portion(record, portion.amount),
                source=record.source,
                food_id=record.id,
                time=time,
                diet_verified=diet_verified,
                diet_properties=record.diet_properties,
                medical_properties=record.medical_properties,
            )

        _logger.warning("No eligible food for %s %s; using fallback", day, meal)
        return replace(fallback_item(meal, params), time=time)

    async def _pick_candidate(
        self,
        source: FoodSource,
        meal: str,
        params: GenerationParams,
        rng: random.Random,
    ) -> FoodRecord | None:
        terms = source.search_terms(meal, params.diet_preference)
        if not terms:
            return None
        term = rng.choice(terms)
        results = await source.search_by_term(term, self.candidate_limit)
        conditions = set(params.medical_conditions)
        eligible = [
            record
            for record in results
            if not matches_allergy(record, params.allergies)
            and is_suitable_for_diet(record, params.diet_preference)
            and not conditions.intersection(record.unsafe_conditions)
        ]
        if not eligible:
            return None
        record = rng.choice(eligible)
        if source.name != SOURCE_INTERNATIONAL:
            return record
        try:
            detailed = await source.get_by_id(record.id)
        except UpstreamUnavailable as exc:
            _logger.warning("FDC detail fetch failed for %s: %s", record.id, exc)
            return record
        return detailed or record


class MealPlanRepository(Protocol):
    """Persistence interface for generated meal plans."""

    def save_plan(self, user_id: UUID, plan: MealPlan) -> str:
        """Persist a plan and return its id."""

    def list_plans(self, user_id: UUID, limit: int) -> list[dict[str, object]]:
        """Return stored plan documents, newest first."""


@dataclass
class PlanService:
    """Generates plans for stored profiles and keeps their history."""

    profile_service: ProfileService
    repository: MealPlanRepository
    generator: MealPlanGenerator

    def build_params(
        self, user_id: UUID, request: GenerationRequest | None = None
    ) -> GenerationParams:
        """Resolve generation parameters from the profile and request overrides."""
        request = request or GenerationRequest()
        profile = self.profile_service.get_profile(user_id)
        target = self.profile_service.calorie_target(user_id, request)
        diet_preference = request.diet_preference or profile.diet_preference
        strategy = (
            SourceStrategy(request.strategy)
            if request.strategy
            else strategy_for_preference(diet_preference)
        )
        return GenerationParams(
            diet_preference=diet_preference,
            diet_goal=request.diet_goal or profile.diet_goal,
            calorie_goal=target.calorie_goal,
            period=request.period or profile.diet_period,
            strategy=strategy,
            medical_conditions=active_conditions(profile.medical_conditions),
            allergies=parse_csv_tokens(profile.allergies),
            activity_level=profile.activity_level,
            goal_weight_kg=(
                request.goal_weight_kg or profile.goal_weight_kg or profile.weight_kg
            ),
        )

    async def generate_for_user(
        self,
        user_id: UUID,
        request: GenerationRequest | None = None,
        rng: random.Random | None = None,
    ) -> MealPlan:
        """Generate and persist a plan.

        Raises PersistenceFailure carrying the generated plan when the write
        fails, so callers can still show it.
        """
        params = self.build_params(user_id, request)
        plan = await self.generator.generate(params, rng)
        try:
            plan_id = self.repository.save_plan(user_id, plan)
        except Exception as exc:
            _logger.warning("Failed to save meal plan for %s: %s", user_id, exc)
            raise PersistenceFailure("Failed to save meal plan", payload=plan) from exc
        try:
            self.profile_service.record_plan_generated(user_id)
        except Exception:
            _logger.warning(
                "Failed to update plan counter for %s", user_id, exc_info=True
            )
        _logger.info(
            "Generated meal plan %s for %s (strategy=%s)",
            plan_id,
            user_id,
            params.strategy,
        )
        return replace(plan, id=plan_id)

    def list_plans(self, user_id: UUID, limit: int = 10) -> list[dict[str, object]]:
        """Return the user's plan history, newest first."""
        return self.repository.list_plans(user_id, limit)
