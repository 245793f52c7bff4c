"""Open Food Facts API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx

DEFAULT_BASE_URL = "https://world.openfoodfacts.org"
USER_AGENT = "calorie-bot/0.1 (Telegram calorie counter)"


class OpenFoodFactsClient(Protocol):
    """Interface for Open Food Facts product search."""

    async def search_products(
        self, query: str, page_size: int = 1
    ) -> dict[str, object]:
        """Search products by free text and return raw API data."""


@dataclass
class HttpxOpenFoodFactsClient(OpenFoodFactsClient):
    """HTTPX-backed Open Food Facts client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout_seconds: float = 15

    @classmethod
    def create(
        cls, base_url: str = DEFAULT_BASE_URL, timeout_seconds: float = 15
    ) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url,
            http_client=httpx.AsyncClient(headers={"User-Agent": USER_AGENT}),
            timeout_seconds=timeout_seconds,
        )

    async def search_products(
        self, query: str, page_size: int = 1
    ) -> dict[str, object]:
        """Search products by name."""
        url = f"{self.base_url.rstrip('/')}/cgi/search.pl"
        response = await self.http_client.get(
            url,
            params={
                "action": "process",
                "search_terms": query,
                "json": 1,
                "page_size": page_size,
            },
            timeout=self.timeout_seconds,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
