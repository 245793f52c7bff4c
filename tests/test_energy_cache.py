"""Tests for energy caches."""

import pytest

from calorie_bot.adapters.json_store import JsonFileStore
from calorie_bot.services.cache import InMemoryEnergyCache, PersistentEnergyCache
from tests.conftest import InMemoryStore


def test_persistent_cache_put_persists_immediately(tmp_path) -> None:
    store = JsonFileStore(tmp_path / "cache.json")
    cache = PersistentEnergyCache(store)

    cache.put("гречка", 343)

    assert cache.get("гречка") == 343
    assert store.load() == {"гречка": 343}


def test_persistent_cache_survives_restart(tmp_path) -> None:
    path = tmp_path / "cache.json"
    PersistentEnergyCache(JsonFileStore(path)).put("гречка", 343)

    reloaded = PersistentEnergyCache(JsonFileStore(path))

    assert reloaded.get("гречка") == 343
    assert reloaded.get("овсянка") is None


def test_persistent_cache_put_overwrites(tmp_path) -> None:
    cache = PersistentEnergyCache(JsonFileStore(tmp_path / "cache.json"))

    cache.put("гречка", 343)
    cache.put("гречка", 330)

    assert cache.get("гречка") == 330
    assert len(cache) == 1


def test_persistent_cache_ignores_invalid_values(tmp_path) -> None:
    store = JsonFileStore(tmp_path / "cache.json")
    store.save({"ok": 10, "zero": 0, "negative": -5, "text": "100", "flag": True})

    cache = PersistentEnergyCache(store)

    assert cache.get("ok") == 10
    assert cache.get("zero") == 0
    assert cache.get("negative") is None
    assert cache.get("text") is None
    assert cache.get("flag") is None


@pytest.mark.parametrize("value", [-1, 1.5, True])
def test_put_rejects_invalid_kcal(value) -> None:
    cache = InMemoryEnergyCache()

    with pytest.raises(ValueError):
        cache.put("гречка", value)
    assert cache.get("гречка") is None


def test_failed_put_is_not_cached() -> None:
    store = InMemoryStore(fail_saves=True)
    cache = PersistentEnergyCache(store)

    with pytest.raises(OSError):
        cache.put("гречка", 343)

    assert cache.get("гречка") is None
    assert len(cache) == 0
