"""Same-origin proxy over the FoodData Central API."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx

from meal_planner.adapters.fdc_client import FdcClient
from meal_planner.domain.errors import UpstreamUnavailable
from meal_planner.services.cache import Cache

_logger = logging.getLogger(__name__)


@dataclass
class UsdaProxyService:
    """Forwards search and detail requests to FDC with response caching."""

    fdc_client: FdcClient
    cache: Cache
    ttl_seconds: int = 3600

    async def search(
        self, query: str, page_size: int = 25, page_number: int = 1
    ) -> dict[str, object]:
        """Return the raw FDC search response."""
        cache_key = f"proxy:search:{query}:{page_size}:{page_number}"
        return await self._cached(
            cache_key,
            lambda: self.fdc_client.search_foods(
                query, page_size=page_size, page_number=page_number
            ),
        )

    async def details(self, fdc_id: int) -> dict[str, object]:
        """Return the raw FDC food detail response."""
        return await self._cached(
            f"proxy:details:{fdc_id}", lambda: self.fdc_client.get_food(fdc_id)
        )

    async def _cached(
        self, cache_key: str, fetch: Callable[[], Awaitable[dict[str, object]]]
    ) -> dict[str, object]:
        cached = self.cache.get(cache_key)
        if isinstance(cached, dict):
            return cached
        try:
            payload = await fetch()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            _logger.warning("USDA proxy %s failed: status=%s", cache_key, status_code)
            raise UpstreamUnavailable(
                "usda", f"USDA API error: {status_code}", status_code=status_code
            ) from exc
        except httpx.HTTPError as exc:
            _logger.warning("USDA proxy %s failed: %s", cache_key, exc)
            raise UpstreamUnavailable("usda", "USDA API error: network") from exc
        self.cache.set(cache_key, payload, ttl_seconds=self.ttl_seconds)
        return payload
