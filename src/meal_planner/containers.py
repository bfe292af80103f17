"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from meal_planner.adapters.fdc_client import HttpxFdcClient, HttpxFdcProxyClient
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
from meal_planner.config import Settings
from meal_planner.services.cache import InMemoryCache
from meal_planner.services.custom import CustomFoodSource
from meal_planner.services.daily_log import DailyLogService
from meal_planner.services.food_import import FoodImportService
from meal_planner.services.goals import GoalsService
from meal_planner.services.international import InternationalFoodSource
from meal_planner.services.planner import MealPlanGenerator, PlanService
from meal_planner.services.profiles import ProfileService
from meal_planner.services.regional import RegionalFoodSource
from meal_planner.services.sources import FoodSourceRegistry
from meal_planner.services.stats import StatsService
from meal_planner.services.usda_proxy import UsdaProxyService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_sources: FoodSourceRegistry
    profile_service: ProfileService
    plan_service: PlanService
    goals_service: GoalsService
    daily_log_service: DailyLogService
    stats_service: StatsService
    usda_proxy: UsdaProxyService
    food_import: FoodImportService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    cache = InMemoryCache(max_entries=resolved_settings.cache_max_entries)
    fdc_client = HttpxFdcClient.create(
        api_key=resolved_settings.fdc_api_key,
        base_url=resolved_settings.fdc_base_url,
    )
    proxy_client = (
        HttpxFdcProxyClient.create(resolved_settings.fdc_proxy_url)
        if resolved_settings.fdc_proxy_url
        else None
    )
    search_ttl = resolved_settings.search_cache_ttl_seconds
    food_ttl = resolved_settings.food_cache_ttl_seconds
    regional_repository = SupabaseRegionalFoodRepository(supabase_client)
    food_sources = FoodSourceRegistry.of(
        [
            RegionalFoodSource(
                repository=regional_repository,
                cache=cache,
                search_ttl_seconds=search_ttl,
                food_ttl_seconds=food_ttl,
            ),
            CustomFoodSource(
                repository=SupabaseCustomFoodRepository(supabase_client),
                cache=cache,
                search_ttl_seconds=search_ttl,
                food_ttl_seconds=food_ttl,
            ),
            InternationalFoodSource(
                fdc_client=proxy_client or fdc_client,
                cache=cache,
                search_ttl_seconds=search_ttl,
                food_ttl_seconds=food_ttl,
            ),
        ]
    )
    profile_service = ProfileService(SupabaseProfileRepository(supabase_client))
    goals_service = GoalsService(SupabaseGoalsRepository(supabase_client))
    daily_log_repository = SupabaseDailyLogRepository(supabase_client)
    plan_service = PlanService(
        profile_service=profile_service,
        repository=SupabaseMealPlanRepository(supabase_client),
        generator=MealPlanGenerator(
            registry=food_sources,
            regional_bias_preferred=resolved_settings.regional_bias_preferred,
            regional_bias_default=resolved_settings.regional_bias_default,
        ),
    )
    usda_proxy = UsdaProxyService(
        fdc_client=fdc_client, cache=cache, ttl_seconds=search_ttl
    )

    async def close_resources() -> None:
        await fdc_client.close()
        if proxy_client is not None:
            await proxy_client.close()

    return AppContainer(
        settings=resolved_settings,
        food_sources=food_sources,
        profile_service=profile_service,
        plan_service=plan_service,
        goals_service=goals_service,
        daily_log_service=DailyLogService(daily_log_repository, food_sources),
        stats_service=StatsService(daily_log_repository, goals_service),
        usda_proxy=usda_proxy,
        food_import=FoodImportService(store=regional_repository, cache=cache),
        close_resources=close_resources,
    )
