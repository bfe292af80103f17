"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date
from uuid import UUID, uuid4

import pytest

from meal_planner.adapters.fdc_client import FdcClient
from meal_planner.config import Settings
from meal_planner.containers import AppContainer
from meal_planner.domain.meals import DailyLog
from meal_planner.domain.models import UserProfile
from meal_planner.domain.nutrition import (
    SOURCE_CUSTOM,
    SOURCE_REGIONAL,
    SOURCE_TEMPLATE,
    FoodRecord,
    MacroProfile,
    Portion,
)
from meal_planner.domain.plans import MealPlan
from meal_planner.domain.stats import DailyGoals
from meal_planner.services.cache import InMemoryCache
from meal_planner.services.custom import CustomFoodRepository, CustomFoodSource
from meal_planner.services.daily_log import DailyLogRepository, DailyLogService
from meal_planner.services.food_import import FoodImportService
from meal_planner.services.goals import GoalsRepository, GoalsService
from meal_planner.services.international import InternationalFoodSource
from meal_planner.services.planner import (
    MealPlanGenerator,
    MealPlanRepository,
    PlanService,
)
from meal_planner.services.profiles import ProfileRepository, ProfileService
from meal_planner.services.regional import RegionalFoodRepository, RegionalFoodSource
from meal_planner.services.sources import FoodSourceRegistry
from meal_planner.services.stats import StatsService
from meal_planner.services.usda_proxy import UsdaProxyService


def regional_food(  # noqa: PLR0913
    food_id: str,
    name: str,
    calories: float = 120,
    protein: float = 6,
    fat: float = 4,
    carbs: float = 15,
    category: str = "",
    keywords: tuple[str, ...] = (),
    is_vegetarian: bool = True,
    contains_onion_garlic: bool = False,
) -> FoodRecord:
    """Build a regional composition table record."""
    return FoodRecord(
        id=food_id,
        source=SOURCE_REGIONAL,
        name=name,
        nutrients=MacroProfile(calories, protein, fat, carbs),
        category=category,
        keywords=keywords,
        is_vegetarian=is_vegetarian,
        is_vegan=False,
        contains_gluten=False,
        contains_onion_garlic=contains_onion_garlic,
        contains_root_vegetables=False,
    )


def custom_food(food_id: str, name: str, meal_types: tuple[str, ...] = ()) -> FoodRecord:
    """Build a curated custom food record."""
    return FoodRecord(
        id=food_id,
        source=SOURCE_CUSTOM,
        name=name,
        nutrients=MacroProfile(200, 10, 8, 20),
        meal_types=meal_types,
        is_vegetarian=True,
        standard_portion=Portion(amount=150, unit="g", description="1 bowl"),
    )


def template_food(
    food_id: str, name: str, unsafe_conditions: tuple[str, ...] = ()
) -> FoodRecord:
    """Build a per-serving meal template record."""
    return FoodRecord(
        id=food_id,
        source=SOURCE_TEMPLATE,
        name=name,
        nutrients=MacroProfile(450, 20, 15, 55),
        basis="perServing",
        unsafe_conditions=unsafe_conditions,
        is_vegetarian=True,
    )


def fdc_food_payload(fdc_id: int = 171705, description: str = "Oatmeal") -> dict:
    """Raw FDC food shaped like a search hit or detail response."""
    return {
        "fdcId": fdc_id,
        "description": description,
        "foodCategory": "Cereal Grains and Pasta",
        "foodNutrients": [
            {"nutrientNumber": "208", "value": 68},
            {"nutrientNumber": "203", "value": 2.4},
            {"nutrientNumber": "204", "value": 1.4},
            {"nutrientNumber": "205", "value": 12},
            {"nutrientNumber": "291", "value": 1.7},
        ],
    }


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)
    increments: list[UUID] = field(default_factory=list)
    fail_increments: bool = False

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def increment_plans_generated(self, user_id: UUID) -> None:
        if self.fail_increments:
            raise RuntimeError("store offline")
        self.increments.append(user_id)


@dataclass
class InMemoryMealPlanRepository(MealPlanRepository):
    """In-memory meal plan repository for tests."""

    plans: list[tuple[UUID, MealPlan]] = field(default_factory=list)
    fail: bool = False

    def save_plan(self, user_id: UUID, plan: MealPlan) -> str:
        if self.fail:
            raise RuntimeError("store offline")
        self.plans.append((user_id, plan))
        return f"plan-{len(self.plans)}"

    def list_plans(self, user_id: UUID, limit: int) -> list[dict[str, object]]:
        documents = [
            plan.to_document() for owner, plan in self.plans if owner == user_id
        ]
        return list(reversed(documents))[:limit]


@dataclass
class InMemoryDailyLogRepository(DailyLogRepository):
    """In-memory daily log repository for tests."""

    logs: dict[tuple[str, date], DailyLog] = field(default_factory=dict)
    saves: int = 0
    fail: bool = False

    def get_log(self, user_id: UUID, log_date: date) -> DailyLog | None:
        return self.logs.get((str(user_id), log_date))

    def list_logs(self, user_id: UUID, start: date, end: date) -> list[DailyLog]:
        return sorted(
            (
                log
                for (owner, day), log in self.logs.items()
                if owner == str(user_id) and start <= day < end
            ),
            key=lambda log: log.log_date,
        )

    def save_log(self, log: DailyLog) -> None:
        if self.fail:
            raise RuntimeError("store offline")
        self.saves += 1
        self.logs[(log.user_id, log.log_date)] = log


@dataclass
class InMemoryGoalsRepository(GoalsRepository):
    """In-memory goals repository for tests."""

    goals: dict[UUID, DailyGoals] = field(default_factory=dict)
    fail: bool = False

    def get_goals(self, user_id: UUID) -> DailyGoals | None:
        return self.goals.get(user_id)

    def save_goals(self, user_id: UUID, goals: DailyGoals) -> None:
        if self.fail:
            raise RuntimeError("store offline")
        self.goals[user_id] = goals


@dataclass
class InMemoryRegionalFoodRepository(RegionalFoodRepository):
    """In-memory regional table for tests."""

    foods: list[FoodRecord] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    upserts: list[list[str]] = field(default_factory=list)
    fail: bool = False

    def search_by_keyword(self, keyword: str, limit: int) -> list[FoodRecord]:
        self.calls.append(f"keyword:{keyword}")
        if self.fail:
            raise RuntimeError("store offline")
        return [food for food in self.foods if keyword in food.keywords][:limit]

    def list_foods(self, limit: int) -> list[FoodRecord]:
        self.calls.append("scan")
        return self.foods[:limit]

    def get_food(self, food_id: str) -> FoodRecord | None:
        for food in self.foods:
            if food.id == food_id:
                return food
        return None

    def upsert_foods(self, foods: list[FoodRecord]) -> int:
        if self.fail:
            raise RuntimeError("store offline")
        self.upserts.append([food.id for food in foods])
        incoming = {food.id: food for food in foods}
        kept = [food for food in self.foods if food.id not in incoming]
        self.foods = kept + list(incoming.values())
        return len(foods)


@dataclass
class InMemoryCustomFoodRepository(CustomFoodRepository):
    """In-memory custom food and template store for tests."""

    foods: list[FoodRecord] = field(default_factory=list)
    templates: list[FoodRecord] = field(default_factory=list)

    def search_foods(self, term: str, limit: int) -> list[FoodRecord]:
        return [
            food
            for food in self.foods
            if term in food.search_text() or term in food.meal_types
        ][:limit]

    def search_templates(self, term: str, limit: int) -> list[FoodRecord]:
        return [
            template
            for template in self.templates
            if term in template.search_text() or term in template.meal_types
        ][:limit]

    def get_food(self, food_id: str) -> FoodRecord | None:
        return next((food for food in self.foods if food.id == food_id), None)

    def get_template(self, template_id: str) -> FoodRecord | None:
        return next(
            (template for template in self.templates if template.id == template_id),
            None,
        )


@dataclass
class FakeFdcClient(FdcClient):
    """Fake FDC client with in-memory responses."""

    search_payload: dict[str, object] = field(
        default_factory=lambda: {"foods": [fdc_food_payload()]}
    )
    food_payload: dict[str, object] = field(default_factory=fdc_food_payload)
    calls: list[str] = field(default_factory=list)

    async def search_foods(
        self, query: str, page_size: int = 25, page_number: int = 1
    ) -> dict[str, object]:
        self.calls.append(f"search:{query}")
        return self.search_payload

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        self.calls.append(f"food:{fdc_id}")
        return self.food_payload


@dataclass
class StaticFoodSource:
    """Food source returning fixed records, or failing on demand."""

    name: str
    foods: list[FoodRecord] = field(default_factory=list)
    terms: list[str] = field(default_factory=lambda: ["food"])
    fail: bool = False
    searches: list[str] = field(default_factory=list)

    async def search_by_term(self, term: str, limit: int = 10) -> list[FoodRecord]:
        self.searches.append(term)
        if self.fail:
            raise RuntimeError(f"{self.name} offline")
        return self.foods[:limit]

    async def get_by_id(self, food_id: str) -> FoodRecord | None:
        if self.fail:
            raise RuntimeError(f"{self.name} offline")
        return next((food for food in self.foods if food.id == food_id), None)

    def search_terms(self, meal: str, diet_preference: str) -> list[str]:
        return list(self.terms)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="service-key",
        api_token="api-token",
        fdc_api_key="fdc-key",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def profile(user_id: UUID) -> UserProfile:
    return UserProfile(
        user_id=user_id,
        full_name="Test User",
        gender="male",
        age=30,
        weight_kg=70,
        height_cm=175,
        diet_preference="vegetarian",
        diet_goal="maintenance",
        allergies="Peanut, shellfish",
    )


@pytest.fixture
def profile_repository(profile: UserProfile) -> InMemoryProfileRepository:
    return InMemoryProfileRepository(profiles={profile.user_id: profile})


@pytest.fixture
def regional_repository() -> InMemoryRegionalFoodRepository:
    return InMemoryRegionalFoodRepository(
        foods=[
            regional_food("r1", "Moong Dal", category="Pulses", keywords=("dal",)),
            regional_food("r2", "Jeera Rice", category="Rice", keywords=("rice",)),
            regional_food("r3", "Plain Roti", keywords=("roti",)),
        ]
    )


@pytest.fixture
def custom_repository() -> InMemoryCustomFoodRepository:
    return InMemoryCustomFoodRepository(
        foods=[custom_food("c1", "Veggie Upma", meal_types=("breakfast",))],
        templates=[template_food("t1", "Lunch Thali")],
    )


@pytest.fixture
def food_sources(
    regional_repository: InMemoryRegionalFoodRepository,
    custom_repository: InMemoryCustomFoodRepository,
) -> FoodSourceRegistry:
    cache = InMemoryCache()
    return FoodSourceRegistry.of(
        [
            RegionalFoodSource(repository=regional_repository, cache=cache),
            CustomFoodSource(repository=custom_repository, cache=cache),
            InternationalFoodSource(
                fdc_client=FakeFdcClient(), cache=cache, retry_delay_seconds=0
            ),
        ]
    )


@pytest.fixture
def container(
    settings: Settings,
    profile_repository: InMemoryProfileRepository,
    regional_repository: InMemoryRegionalFoodRepository,
    food_sources: FoodSourceRegistry,
) -> AppContainer:
    profile_service = ProfileService(profile_repository)
    goals_service = GoalsService(InMemoryGoalsRepository())
    log_repository = InMemoryDailyLogRepository()
    plan_service = PlanService(
        profile_service=profile_service,
        repository=InMemoryMealPlanRepository(),
        generator=MealPlanGenerator(registry=food_sources),
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        food_sources=food_sources,
        profile_service=profile_service,
        plan_service=plan_service,
        goals_service=goals_service,
        daily_log_service=DailyLogService(log_repository, food_sources),
        stats_service=StatsService(log_repository, goals_service),
        usda_proxy=UsdaProxyService(fdc_client=FakeFdcClient(), cache=InMemoryCache()),
        food_import=FoodImportService(store=regional_repository, cache=InMemoryCache()),
        close_resources=close_resources,
    )
