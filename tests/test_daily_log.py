import asyncio
from datetime import date
from uuid import UUID

import pytest

from meal_planner.domain.errors import FoodNotFound, PersistenceFailure
from meal_planner.domain.meals import DEFAULT_MEALS, DailyLog, LogFoodCommand
from meal_planner.domain.nutrition import MacroProfile, Portion
from meal_planner.services.daily_log import DailyLogService, portion_amount
from meal_planner.services.sources import FoodSourceRegistry
from tests.conftest import InMemoryDailyLogRepository, custom_food, template_food

DAY = date(2024, 3, 4)


def _service(
    food_sources: FoodSourceRegistry,
) -> tuple[DailyLogService, InMemoryDailyLogRepository]:
    repository = InMemoryDailyLogRepository()
    return DailyLogService(repository, food_sources), repository


def test_get_log_creates_default_meals_once(
    food_sources: FoodSourceRegistry, user_id: UUID
) -> None:
    service, repository = _service(food_sources)

    log = service.get_log(user_id, DAY)
    again = service.get_log(user_id, DAY)

    assert tuple(meal.name for meal in log.meals) == DEFAULT_MEALS
    assert all(not meal.foods for meal in log.meals)
    assert again == log
    assert repository.saves == 1


def test_add_food_resolves_nutrition_from_source(
    food_sources: FoodSourceRegistry, user_id: UUID
) -> None:
    service, repository = _service(food_sources)
    command = LogFoodCommand(
        food_id="r1",
        source="regional",
        quantity=2,
        serving=Portion(amount=150, unit="g", description="150 g"),
    )

    log = asyncio.run(service.add_food(user_id, DAY, "lunch", command))

    lunch = log.meal("Lunch")
    assert lunch is not None
    (food,) = lunch.foods
    assert food.name == "Moong Dal"
    assert food.source == "ifct"
    assert food.nutrition == MacroProfile(180, 9, 6, 23)
    assert lunch.totals == MacroProfile(360, 18, 12, 46)
    assert repository.logs[(str(user_id), DAY)] == log


def test_add_food_uses_standard_portion_for_serving_units(
    food_sources: FoodSourceRegistry, user_id: UUID
) -> None:
    service, _ = _service(food_sources)
    command = LogFoodCommand(
        food_id="c1",
        source="custom",
        quantity=1,
        serving=Portion(amount=1, unit="serving", description="1 bowl"),
    )

    log = asyncio.run(service.add_food(user_id, DAY, "Breakfast", command))

    assert log.meal("breakfast").foods[0].nutrition == MacroProfile(300, 15, 12, 30)


def test_add_food_accepts_explicit_nutrition(
    food_sources: FoodSourceRegistry, user_id: UUID
) -> None:
    service, _ = _service(food_sources)
    command = LogFoodCommand(
        food_id="homemade-1",
        source="custom",
        quantity=0.5,
        serving=Portion(amount=1, unit="serving", description="1 plate"),
        name="Grandma's Khichdi",
        nutrition=MacroProfile(400, 12, 10, 60),
    )

    log = asyncio.run(service.add_food(user_id, DAY, "Dinner", command))

    dinner = log.meal("Dinner")
    assert dinner.foods[0].name == "Grandma's Khichdi"
    assert dinner.totals == MacroProfile(200, 6, 5, 30)


def test_add_food_rejects_unknown_food_and_meal(
    food_sources: FoodSourceRegistry, user_id: UUID
) -> None:
    service, _ = _service(food_sources)
    serving = Portion(amount=100, unit="g", description="100 g")

    with pytest.raises(FoodNotFound):
        asyncio.run(
            service.add_food(
                user_id, DAY, "Lunch", LogFoodCommand("nope", "regional", 1, serving)
            )
        )
    with pytest.raises(ValueError, match="Unknown meal"):
        asyncio.run(
            service.add_food(
                user_id, DAY, "Brunch", LogFoodCommand("r1", "regional", 1, serving)
            )
        )
    with pytest.raises(ValueError, match="must be positive"):
        asyncio.run(
            service.add_food(
                user_id, DAY, "Lunch", LogFoodCommand("r1", "regional", 0, serving)
            )
        )


def test_remove_food_refreshes_totals(
    food_sources: FoodSourceRegistry, user_id: UUID
) -> None:
    service, _ = _service(food_sources)
    command = LogFoodCommand(
        food_id="r2",
        source="ifct",
        quantity=1,
        serving=Portion(amount=100, unit="g", description="100 g"),
    )
    log = asyncio.run(service.add_food(user_id, DAY, "Lunch", command))
    entry_id = log.meal("Lunch").foods[0].id

    updated = service.remove_food(user_id, DAY, "Lunch", entry_id)

    assert updated.meal("Lunch").foods == ()
    assert updated.meal("Lunch").totals == MacroProfile(0, 0, 0, 0)
    with pytest.raises(FoodNotFound):
        service.remove_food(user_id, DAY, "Lunch", entry_id)


def test_save_failure_carries_log(
    food_sources: FoodSourceRegistry, user_id: UUID
) -> None:
    repository = InMemoryDailyLogRepository(fail=True)
    service = DailyLogService(repository, food_sources)

    with pytest.raises(PersistenceFailure) as excinfo:
        service.get_log(user_id, DAY)

    assert isinstance(excinfo.value.payload, DailyLog)
    assert excinfo.value.payload.log_date == DAY


def test_portion_amount() -> None:
    serving = Portion(amount=2, unit="serving", description="2 servings")

    assert portion_amount(template_food("t1", "Thali"), serving) == 2
    assert portion_amount(custom_food("c1", "Upma"), serving) == 300
    assert portion_amount(
        custom_food("c1", "Upma"), Portion(amount=80, unit="g", description="80 g")
    ) == 80
