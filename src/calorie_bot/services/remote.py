"""Remote energy lookup backed by Open Food Facts."""

import logging
import math
from dataclasses import dataclass

import httpx

from calorie_bot.adapters.off_client import OpenFoodFactsClient
from calorie_bot.domain.foods import LookupFailed, NotFound, Resolved

_ENERGY_FIELD = "energy-kcal_100g"

_logger = logging.getLogger(__name__)


@dataclass
class RemoteEnergyService:
    """Resolve a food name to kcal per 100 g with a single remote search."""

    client: OpenFoodFactsClient

    async def resolve(self, query: str) -> Resolved | NotFound | LookupFailed:
        """Return the first product's energy value; failures never raise."""
        try:
            payload = await self.client.search_products(query, page_size=1)
            kcal = _extract_kcal(payload)
        except (httpx.HTTPError, ValueError) as exc:
            _logger.warning(
                "Open Food Facts lookup failed: query=%s status=%s error=%s",
                query,
                _status_code_from_exception(exc),
                exc,
            )
            return LookupFailed(error=f"{type(exc).__name__}: {exc}")
        if kcal is None:
            _logger.info("Open Food Facts has no energy value: query=%s", query)
            return NotFound()
        _logger.info("Open Food Facts hit: query=%s kcal=%s", query, kcal)
        return Resolved(kcal=kcal, source="remote")


def _extract_kcal(payload: object) -> int | None:
    """Pull a rounded kcal/100g value out of a search response.

    Raises ValueError when the response does not have the search shape.
    """
    if not isinstance(payload, dict):
        raise ValueError("search response is not a JSON object")
    products = payload.get("products") or []
    if not isinstance(products, list):
        raise ValueError("search response products is not a list")
    if not products:
        return None
    product = products[0]
    if not isinstance(product, dict):
        raise ValueError("product record is not a JSON object")
    nutriments = product.get("nutriments") or {}
    if not isinstance(nutriments, dict):
        return None
    value = nutriments.get(_ENERGY_FIELD)
    if isinstance(value, str):
        try:
            value = float(value)
        except ValueError:
            return None
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return round(value)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
