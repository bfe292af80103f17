"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from meal_planner.adapters.supabase_daily_log_repository import (
    SupabaseDailyLogRepository,
)
from meal_planner.adapters.supabase_food_repository import (
    SupabaseCustomFoodRepository,
    SupabaseRegionalFoodRepository,
)
from meal_planner.adapters.supabase_goals_repository import SupabaseGoalsRepository
from meal_planner.adapters.supabase_meal_plan_repository import (
    SupabaseMealPlanRepository,
)
from meal_planner.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from meal_planner.domain.errors import PersistenceFailure
from meal_planner.domain.imports import CompositionRow
from meal_planner.domain.meals import DailyLog, LoggedFood, MealEntry
from meal_planner.domain.nutrition import MacroProfile, Portion
from meal_planner.domain.plans import GenerationParams, MealPlan, SourceStrategy
from meal_planner.domain.stats import DailyGoals
from meal_planner.services.food_import import build_record
from meal_planner.services.planner import fallback_item


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": [], "upsert": []}
    )
    last_payload: object | None = None
    last_options: dict[str, object] = field(default_factory=dict)
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def upsert(self, payload, **options) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        self.last_options = options
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def contains(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def or_(self, filters: str) -> "FakeTable":
        self.last_filters.append(("or", filters))
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def lt(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_regional_repository_parses_rows() -> None:
    client = FakeSupabaseClient()
    table = client.table("regional_foods")
    table.queue(
        "select",
        [
            {
                "id": 12,
                "name": "Moong Dal",
                "category": "Pulses",
                "calories": "104",
                "protein": 7.0,
                "fat": 0.4,
                "carbs": 18,
                "keywords": ["dal", "moong"],
                "is_vegetarian": True,
                "region": "north",
                "sodium": 15,
            }
        ],
    )

    foods = SupabaseRegionalFoodRepository(client).search_by_keyword("dal", 5)

    (food,) = foods
    assert food.id == "12"
    assert food.source == "ifct"
    assert food.nutrients == MacroProfile(104, 7, 0.4, 18)
    assert food.keywords == ("dal", "moong")
    assert food.is_vegetarian is True
    assert food.is_vegan is None
    assert food.medical_properties.sodium_mg == 15
    assert table.last_filters == [("keywords", ["dal"])]


def test_regional_repository_missing_food() -> None:
    client = FakeSupabaseClient()

    assert SupabaseRegionalFoodRepository(client).get_food("404") is None


def test_custom_repository_sanitizes_search_pattern() -> None:
    client = FakeSupabaseClient()
    table = client.table("custom_foods")
    table.queue(
        "select",
        [
            {
                "id": "c1",
                "name": "Veggie Upma",
                "calories": 200,
                "serving_amount": 150,
                "serving_unit": "g",
                "serving_description": "1 bowl",
                "allergens": "Gluten, Nuts",
                "diet_properties": {"is_vegetarian": True, "unknown": 1},
            }
        ],
    )

    (food,) = SupabaseCustomFoodRepository(client).search_foods("upma, (spicy)%", 5)

    assert table.last_filters == [
        ("or", "name.ilike.%upma spicy%,category.ilike.%upma spicy%")
    ]
    assert food.standard_portion == Portion(amount=150, unit="g", description="1 bowl")
    assert food.allergens == ("gluten", "nuts")
    assert food.diet_properties.is_vegetarian is True


def test_custom_repository_templates_are_per_serving() -> None:
    client = FakeSupabaseClient()
    client.table("meal_templates").queue(
        "select",
        [{"id": "t1", "name": "Lunch Thali", "meal_type": "Lunch", "calories": 450}],
    )

    template = SupabaseCustomFoodRepository(client).get_template("t1")

    assert template is not None
    assert template.source == "template"
    assert template.basis == "perServing"
    assert template.meal_types == ("lunch",)


def test_profile_repository_parses_form_values() -> None:
    client = FakeSupabaseClient()
    user_id = uuid4()
    client.table("profiles").queue(
        "select",
        [
            {
                "id": str(user_id),
                "gender": "Female",
                "age": "34",
                "weight": 62.5,
                "height": "165",
                "medical_conditions": "Diabetes, hypertension",
                "goal_weight": None,
                "diet_preference": "vegan",
            }
        ],
    )

    profile = SupabaseProfileRepository(client).get_profile(user_id)

    assert profile is not None
    assert profile.user_id == user_id
    assert profile.age == 34
    assert profile.height_cm == 165
    assert profile.medical_conditions == ("diabetes", "hypertension")
    assert profile.goal_weight_kg is None
    assert profile.diet_goal == "maintenance"


def test_profile_repository_increments_counter() -> None:
    client = FakeSupabaseClient()
    user_id = uuid4()
    table = client.table("profiles")
    table.queue("select", [{"meal_plans_generated": 4}])

    SupabaseProfileRepository(client).increment_plans_generated(user_id)

    assert table.last_payload == {"meal_plans_generated": 5}


def _plan() -> MealPlan:
    params = GenerationParams(
        diet_preference="vegan",
        diet_goal="maintenance",
        calorie_goal=2000,
        period="4-weeks",
        strategy=SourceStrategy.PREFER_INTERNATIONAL,
        allergies=("peanut", "soy"),
    )
    return MealPlan(
        days=(),
        params=params,
        source="meal-planner/prefer-international",
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )


def test_meal_plan_repository_saves_provenance() -> None:
    client = FakeSupabaseClient()
    table = client.table("meal_plans")
    table.queue("insert", [{"id": 77}])
    user_id = uuid4()

    plan_id = SupabaseMealPlanRepository(client).save_plan(user_id, _plan())

    assert plan_id == "77"
    payload = table.last_payload
    assert payload["user_id"] == str(user_id)
    assert payload["allergies"] == "peanut, soy"
    assert payload["strategy"] == "prefer-international"
    assert payload["created_at"] == "2024-01-01T00:00:00+00:00"


def test_meal_plan_repository_raises_when_insert_returns_nothing() -> None:
    client = FakeSupabaseClient()

    with pytest.raises(PersistenceFailure):
        SupabaseMealPlanRepository(client).save_plan(uuid4(), _plan())


def test_meal_plan_repository_lists_documents() -> None:
    client = FakeSupabaseClient()
    lunch = fallback_item("Lunch", _plan().params)
    client.table("meal_plans").queue(
        "select",
        [
            {
                "id": 3,
                "diet_preference": "vegan",
                "calorie_goal": 2000,
                "plan": [{"day": "Monday", "meals": [lunch.to_document()]}],
                "created_at": "2024-01-01T00:00:00+00:00",
            }
        ],
    )

    (document,) = SupabaseMealPlanRepository(client).list_plans(uuid4(), 5)

    assert document["id"] == "3"
    assert document["calorieGoal"] == 2000
    assert document["medicalConditions"] == []
    assert document["plan"][0]["meals"][0]["food"] == "Vegan Lunch"


def test_goals_repository_keeps_stored_zeros() -> None:
    client = FakeSupabaseClient()
    client.table("daily_goals").queue(
        "select", [{"calories": 1800, "protein_g": 0, "carbs_g": None, "fat_g": 50}]
    )

    goals = SupabaseGoalsRepository(client).get_goals(uuid4())

    assert goals == DailyGoals(calories=1800, protein_g=0, carbs_g=225, fat_g=50)


def test_goals_repository_upserts_by_user() -> None:
    client = FakeSupabaseClient()
    table = client.table("daily_goals")
    user_id = uuid4()

    SupabaseGoalsRepository(client).save_goals(user_id, DailyGoals())

    assert table.last_payload["user_id"] == str(user_id)
    assert table.last_payload["protein_g"] == 150
    assert table.last_options == {"on_conflict": "user_id"}


def test_daily_log_repository_roundtrips_documents() -> None:
    client = FakeSupabaseClient()
    table = client.table("daily_logs")
    user_id = uuid4()
    food = LoggedFood(
        id="e1",
        food_id="r1",
        source="ifct",
        name="Moong Dal",
        quantity=2,
        serving=Portion(amount=150, unit="g", description="150 g"),
        nutrition=MacroProfile(180, 9, 6, 23),
    )
    log = DailyLog(
        user_id=str(user_id),
        log_date=date(2024, 3, 4),
        meals=(
            MealEntry(
                name="Lunch", foods=(food,), totals=MacroProfile(360, 18, 12, 46)
            ),
        ),
    )
    repository = SupabaseDailyLogRepository(client)

    repository.save_log(log)
    table.queue(
        "select",
        [
            {
                "user_id": table.last_payload["user_id"],
                "log_date": table.last_payload["log_date"],
                "meals": table.last_payload["meals"],
            }
        ],
    )
    fetched = repository.get_log(user_id, date(2024, 3, 4))

    assert table.last_options == {"on_conflict": "user_id,log_date"}
    assert fetched == log


def test_daily_log_repository_lists_range() -> None:
    client = FakeSupabaseClient()
    table = client.table("daily_logs")
    user_id = uuid4()
    table.queue("select", [{"user_id": str(user_id), "log_date": "2024-03-01"}])

    logs = SupabaseDailyLogRepository(client).list_logs(
        user_id, date(2024, 3, 1), date(2024, 3, 8)
    )

    assert [log.log_date for log in logs] == [date(2024, 3, 1)]
    assert logs[0].meals == ()
    assert ("log_date", "2024-03-08") in table.last_filters


def test_regional_repository_upserts_tagged_foods() -> None:
    client = FakeSupabaseClient()
    table = client.table("regional_foods")
    repository = SupabaseRegionalFoodRepository(client)
    food = build_record(
        CompositionRow(
            id="7",
            name="Khandvi",
            category="Snacks",
            calories=160,
            protein_g=7,
            carbs_g=18,
            fat_g=6,
            sodium_mg=420,
            is_vegetarian=True,
            standard_portion=Portion(60, "g", "4 pieces"),
        ),
        0,
    )

    written = repository.upsert_foods([food])

    assert written == 1
    assert table.last_options == {"on_conflict": "id"}
    (row,) = table.last_payload
    assert row["id"] == "ifct_7"
    assert row["serving_description"] == "4 pieces"
    assert row["medical_properties"] == {"sodium_mg": 420}
    assert row["diet_properties"]["is_vegetarian"] is True
    assert "updated_at" in row

    table.queue("select", [row])
    stored = repository.get_food("ifct_7")

    assert stored.diet_properties == food.diet_properties
    assert stored.medical_properties == food.medical_properties
    assert stored.keywords == food.keywords


def test_regional_repository_skips_empty_upserts() -> None:
    client = FakeSupabaseClient()

    assert SupabaseRegionalFoodRepository(client).upsert_foods([]) == 0
    assert client.table("regional_foods").last_payload is None
