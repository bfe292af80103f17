import asyncio

import httpx
import pytest

from meal_planner.adapters.fdc_client import HttpxFdcClient
from meal_planner.domain.errors import UpstreamUnavailable
from meal_planner.services.cache import InMemoryCache
from meal_planner.services.custom import CustomFoodSource
from meal_planner.services.international import (
    InternationalFoodSource,
    extract_nutrients,
    parse_fdc_food,
)
from meal_planner.services.regional import RegionalFoodSource
from meal_planner.services.sources import FoodSourceRegistry, matches_allergy
from tests.conftest import (
    FakeFdcClient,
    InMemoryCustomFoodRepository,
    InMemoryRegionalFoodRepository,
    fdc_food_payload,
    regional_food,
)


def test_regional_search_prefers_keyword_tags(
    regional_repository: InMemoryRegionalFoodRepository,
) -> None:
    source = RegionalFoodSource(repository=regional_repository, cache=InMemoryCache())

    results = asyncio.run(source.search_by_term(" Dal "))

    assert [food.id for food in results] == ["r1"]
    assert regional_repository.calls == ["keyword:dal"]


def test_regional_search_falls_back_to_substring_scan(
    regional_repository: InMemoryRegionalFoodRepository,
) -> None:
    source = RegionalFoodSource(repository=regional_repository, cache=InMemoryCache())

    results = asyncio.run(source.search_by_term("jeera"))

    assert [food.name for food in results] == ["Jeera Rice"]
    assert regional_repository.calls == ["keyword:jeera", "scan"]


def test_regional_search_is_cached_until_invalidated(
    regional_repository: InMemoryRegionalFoodRepository,
) -> None:
    source = RegionalFoodSource(repository=regional_repository, cache=InMemoryCache())

    asyncio.run(source.search_by_term("dal"))
    asyncio.run(source.search_by_term("dal"))
    assert len(regional_repository.calls) == 1

    assert source.invalidate() == 1
    asyncio.run(source.search_by_term("dal"))
    assert len(regional_repository.calls) == 2


def test_regional_failures_become_upstream_errors() -> None:
    source = RegionalFoodSource(
        repository=InMemoryRegionalFoodRepository(fail=True), cache=InMemoryCache()
    )

    with pytest.raises(UpstreamUnavailable) as excinfo:
        asyncio.run(source.search_by_term("dal"))

    assert excinfo.value.source == "ifct"


def test_regional_terms_respect_diet() -> None:
    source = RegionalFoodSource(
        repository=InMemoryRegionalFoodRepository(), cache=InMemoryCache()
    )

    assert "biryani" in source.search_terms("Lunch", "non-veg")
    assert source.search_terms("Tea", "vegan") == ["food", "meal", "dish"]


def test_regional_get_by_id(regional_repository: InMemoryRegionalFoodRepository) -> None:
    source = RegionalFoodSource(repository=regional_repository, cache=InMemoryCache())

    assert asyncio.run(source.get_by_id("r3")).name == "Plain Roti"
    assert asyncio.run(source.get_by_id("missing")) is None


def test_custom_search_merges_foods_and_templates(
    custom_repository: InMemoryCustomFoodRepository,
) -> None:
    source = CustomFoodSource(repository=custom_repository, cache=InMemoryCache())

    breakfast = asyncio.run(source.search_by_term("Breakfast"))
    lunch = asyncio.run(source.search_by_term("lunch"))

    assert [food.id for food in breakfast] == ["c1"]
    assert [food.id for food in lunch] == ["t1"]
    assert source.search_terms("Dinner", "vegan") == ["dinner"]


def test_custom_get_by_id_checks_templates(
    custom_repository: InMemoryCustomFoodRepository,
) -> None:
    source = CustomFoodSource(repository=custom_repository, cache=InMemoryCache())

    assert asyncio.run(source.get_by_id("t1")).basis == "perServing"
    assert asyncio.run(source.get_by_id("c1")).standard_portion.amount == 150
    assert asyncio.run(source.get_by_id("zzz")) is None


def test_parse_fdc_food_maps_nutrient_numbers() -> None:
    record = parse_fdc_food(fdc_food_payload())

    assert record.id == "171705"
    assert record.source == "usda"
    assert record.name == "Oatmeal"
    assert record.category == "Cereal Grains and Pasta"
    assert record.nutrients.calories == 68
    assert record.nutrients.protein_g == 2.4
    assert record.nutrients.fat_g == 1.4
    assert record.nutrients.carbs_g == 12
    assert record.medical_properties.fiber_g == 1.7


def test_extract_nutrients_handles_detail_shape() -> None:
    values = extract_nutrients(
        [
            {
                "nutrient": {"id": 1008, "name": "Energy", "unitName": "kcal"},
                "amount": 52,
            },
            {"nutrient": {"name": "Energy", "unitName": "kJ"}, "amount": 218},
            {"nutrient": {"name": "Protein"}, "amount": 0.3},
            {"nutrientName": "Total lipid (fat)", "value": 0.2},
            {"nutrientNumber": "205", "value": None},
        ]
    )

    assert values == {"calories": 52.0, "protein": 0.3, "fat": 0.2}


def test_international_search_is_cached() -> None:
    fdc = FakeFdcClient()
    source = InternationalFoodSource(fdc_client=fdc, cache=InMemoryCache())

    first = asyncio.run(source.search_by_term("oatmeal", limit=5))
    second = asyncio.run(source.search_by_term("oatmeal", limit=5))

    assert first == second
    assert fdc.calls == ["search:oatmeal"]


def test_international_get_by_id_skips_non_numeric_ids() -> None:
    fdc = FakeFdcClient()
    source = InternationalFoodSource(fdc_client=fdc, cache=InMemoryCache())

    assert asyncio.run(source.get_by_id("abc")) is None
    assert asyncio.run(source.get_by_id("171705")).name == "Oatmeal"
    assert fdc.calls == ["food:171705"]


def test_international_unknown_id_returns_none() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(404, json={"error": "not found"})

    client = HttpxFdcClient(
        api_key="key",
        base_url="https://fdc.example/v1",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    source = InternationalFoodSource(
        fdc_client=client, cache=InMemoryCache(), retry_delay_seconds=0
    )

    assert asyncio.run(source.get_by_id("999")) is None
    assert calls == ["/v1/food/999"]


def test_international_retries_then_raises() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(503, json={"error": "unavailable"})

    client = HttpxFdcClient(
        api_key="key",
        base_url="https://fdc.example/v1",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    source = InternationalFoodSource(
        fdc_client=client, cache=InMemoryCache(), retry_delay_seconds=0
    )

    with pytest.raises(UpstreamUnavailable) as excinfo:
        asyncio.run(source.search_by_term("rice"))

    assert excinfo.value.status_code == 503
    assert excinfo.value.message == "USDA API error: 503"
    assert len(calls) == 2


def test_international_terms_for_diets() -> None:
    source = InternationalFoodSource(fdc_client=FakeFdcClient(), cache=InMemoryCache())

    vegetarian = source.search_terms("Dinner", "vegetarian")
    vegan = source.search_terms("Breakfast", "vegan")

    assert "chicken" not in vegetarian
    assert "lentil" in vegetarian
    assert "egg" not in vegan
    assert "tofu" in vegan
    assert source.search_terms("Lunch", "hindu-fasting")[0] == "potato"


def test_registry_resolves_aliases(food_sources: FoodSourceRegistry) -> None:
    assert food_sources.get("regional").name == "ifct"
    assert food_sources.get("USDA").name == "usda"
    assert food_sources.get("template").name == "custom"
    assert food_sources.names() == ["ifct", "custom", "usda"]
    with pytest.raises(ValueError, match="Unknown food source"):
        food_sources.get("openfoodfacts")


def test_matches_allergy_checks_text_and_allergens() -> None:
    chikki = regional_food("r1", "Peanut Chikki")
    kheer = regional_food("r2", "Rice Kheer")

    assert matches_allergy(chikki, ("peanut",))
    assert not matches_allergy(kheer, ("peanut", ""))
