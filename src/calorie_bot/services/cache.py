"""Energy cache abstractions."""

from dataclasses import dataclass, field
from typing import Protocol

from calorie_bot.adapters.json_store import KeyValueStore


class EnergyCache(Protocol):
    """Cache interface mapping a food query to kcal per 100 g."""

    def get(self, query: str) -> int | None:
        """Return the cached value for the query, if any."""

    def put(self, query: str, kcal: int) -> None:
        """Store a value for the query, replacing any previous one."""


def _check_kcal(kcal: int) -> None:
    if isinstance(kcal, bool) or not isinstance(kcal, int) or kcal < 0:
        raise ValueError(f"kcal must be a non-negative integer, got {kcal!r}")


@dataclass
class InMemoryEnergyCache(EnergyCache):
    """Process-local cache without persistence."""

    entries: dict[str, int] = field(default_factory=dict)

    def get(self, query: str) -> int | None:
        """Return the cached value for the query."""
        return self.entries.get(query)

    def put(self, query: str, kcal: int) -> None:
        """Store a value for the query."""
        _check_kcal(kcal)
        self.entries[query] = kcal


@dataclass
class PersistentEnergyCache(EnergyCache):
    """Cache that never expires and persists every write through a store."""

    store: KeyValueStore
    _entries: dict[str, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._entries = {
            key: value
            for key, value in self.store.load().items()
            if isinstance(value, int) and not isinstance(value, bool) and value >= 0
        }

    def get(self, query: str) -> int | None:
        """Return the cached value for the query."""
        return self._entries.get(query)

    def put(self, query: str, kcal: int) -> None:
        """Store a value and rewrite the backing file."""
        _check_kcal(kcal)
        entries = {**self._entries, query: kcal}
        self.store.save(entries)
        self._entries = entries

    def __len__(self) -> int:
        return len(self._entries)
