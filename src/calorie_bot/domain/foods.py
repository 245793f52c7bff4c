"""Food energy domain models."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Literal

ResolutionSource = Literal["static", "cache", "remote"]

LOCAL_FOOD_DB: MappingProxyType[str, int] = MappingProxyType(
    {
        "яблоко": 52,
        "банан": 96,
        "хлеб": 265,
        "молоко": 42,
        "сыр": 402,
        "курица": 239,
        "рис": 130,
        "яйцо": 155,
    }
)


def normalize_query(query: str) -> str:
    """Return the lookup key for a food name."""
    return query.strip().casefold()


@dataclass(frozen=True)
class Resolved:
    """A food name resolved to kcal per 100 g."""

    kcal: int
    source: ResolutionSource


@dataclass(frozen=True)
class NotFound:
    """No energy value is known for a food name."""


@dataclass(frozen=True)
class LookupFailed:
    """The remote lookup failed; the detail is for logs only."""

    error: str


Resolution = Resolved | NotFound | LookupFailed


@dataclass(frozen=True)
class ItemReport:
    """Outcome for a single query token."""

    query: str
    kcal: int | None

    @property
    def found(self) -> bool:
        return self.kcal is not None


@dataclass(frozen=True)
class FoodLogReport:
    """Outcome of logging one message of food names."""

    items: list[ItemReport] = field(default_factory=list)
    added_kcal: int = 0
    day_total: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.items
