"""USDA FoodData Central API clients."""

from dataclasses import dataclass
from typing import Protocol

import httpx

SEARCH_DATA_TYPES = ["Foundation", "SR Legacy", "Survey (FNDDS)"]


class FdcClient(Protocol):
    """Interface for FoodData Central API interactions."""

    async def search_foods(
        self, query: str, page_size: int = 25, page_number: int = 1
    ) -> dict[str, object]:
        """Search foods by query and return raw API data."""

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id and return raw API data."""


@dataclass
class HttpxFdcClient(FdcClient):
    """HTTPX-backed client talking to the FDC API directly."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxFdcClient":
        """Create an FDC client with a managed httpx session."""
        return cls(api_key=api_key, base_url=base_url, http_client=httpx.AsyncClient())

    async def search_foods(
        self, query: str, page_size: int = 25, page_number: int = 1
    ) -> dict[str, object]:
        """Search survey and reference foods by query."""
        url = f"{self.base_url}/foods/search"
        response = await self.http_client.post(
            url,
            params={"api_key": self.api_key},
            json={
                "query": query,
                "dataType": SEARCH_DATA_TYPES,
                "pageSize": page_size,
                "pageNumber": page_number,
                "sortBy": "dataType.keyword",
                "sortOrder": "asc",
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch a food by FDC id."""
        url = f"{self.base_url}/food/{fdc_id}"
        response = await self.http_client.get(
            url,
            params={"api_key": self.api_key},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


@dataclass
class HttpxFdcProxyClient(FdcClient):
    """HTTPX-backed client for a same-origin proxy in front of FDC."""

    proxy_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, proxy_url: str) -> "HttpxFdcProxyClient":
        """Create a proxy client with a managed httpx session."""
        return cls(proxy_url=proxy_url, http_client=httpx.AsyncClient())

    async def search_foods(
        self, query: str, page_size: int = 25, page_number: int = 1
    ) -> dict[str, object]:
        """Search foods through the proxy."""
        response = await self.http_client.get(
            self.proxy_url,
            params={
                "action": "search",
                "query": query,
                "pageSize": page_size,
                "pageNumber": page_number,
            },
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def get_food(self, fdc_id: int) -> dict[str, object]:
        """Fetch food details through the proxy."""
        response = await self.http_client.get(
            self.proxy_url,
            params={"action": "details", "fdcId": fdc_id},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
