"""Three-tier calorie resolution."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

from calorie_bot.domain.foods import (
    LOCAL_FOOD_DB,
    LookupFailed,
    NotFound,
    Resolved,
    normalize_query,
)
from calorie_bot.services.cache import EnergyCache

_logger = logging.getLogger(__name__)


class RemoteResolver(Protocol):
    """Interface for the remote fallback of the pipeline."""

    async def resolve(self, query: str) -> Resolved | NotFound | LookupFailed:
        """Resolve a food name remotely."""


@dataclass
class CalorieResolver:
    """Resolve food names via the static table, the cache, then the remote API."""

    cache: EnergyCache
    remote: RemoteResolver
    static_foods: Mapping[str, int] = field(default_factory=lambda: LOCAL_FOOD_DB)

    async def resolve(self, query: str) -> Resolved | NotFound | LookupFailed:
        """Return the first hit, caching values fetched remotely."""
        key = normalize_query(query)
        if not key:
            return NotFound()

        static_kcal = self.static_foods.get(key)
        if static_kcal is not None:
            return Resolved(kcal=static_kcal, source="static")

        cached_kcal = self.cache.get(key)
        if cached_kcal is not None:
            return Resolved(kcal=cached_kcal, source="cache")

        result = await self.remote.resolve(key)
        if isinstance(result, Resolved):
            self.cache.put(key, result.kcal)
            _logger.info("Cached remote value: query=%s kcal=%s", key, result.kcal)
            return Resolved(kcal=result.kcal, source="remote")
        return result
