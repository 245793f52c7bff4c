"""Shared test fixtures."""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any

import pytest

from calorie_bot.adapters.json_store import KeyValueStore
from calorie_bot.adapters.off_client import OpenFoodFactsClient
from calorie_bot.adapters.telegram_client import TelegramClient
from calorie_bot.config import Settings
from calorie_bot.containers import AppContainer
from calorie_bot.domain.foods import LookupFailed, NotFound, Resolved
from calorie_bot.services.cache import InMemoryEnergyCache
from calorie_bot.services.commands import CommandHandler
from calorie_bot.services.food_log import FoodLogService
from calorie_bot.services.ledger import DailyLedger
from calorie_bot.services.resolution import CalorieResolver, RemoteResolver
from calorie_bot.services.updates import UpdateDispatcher

TODAY = date(2024, 5, 17)


@dataclass
class InMemoryStore(KeyValueStore):
    """In-memory key-value store that counts saves."""

    data: dict[str, Any] = field(default_factory=dict)
    saves: int = 0
    fail_saves: bool = False

    def load(self) -> dict[str, Any]:
        return {key: value for key, value in self.data.items()}

    def save(self, data: dict[str, Any]) -> None:
        if self.fail_saves:
            raise OSError("disk full")
        self.saves += 1
        self.data = {key: value for key, value in data.items()}


@dataclass
class FixedClock:
    """Clock returning a settable date."""

    today: date = TODAY

    def __call__(self) -> date:
        return self.today


@dataclass
class StubRemoteResolver(RemoteResolver):
    """Remote resolver answering from a dict and recording queries."""

    values: dict[str, int] = field(default_factory=dict)
    failing: set[str] = field(default_factory=set)
    calls: list[str] = field(default_factory=list)

    async def resolve(self, query: str) -> Resolved | NotFound | LookupFailed:
        self.calls.append(query)
        if query in self.failing:
            return LookupFailed(error="ConnectError: boom")
        if query in self.values:
            return Resolved(kcal=self.values[query], source="remote")
        return NotFound()


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Open Food Facts client returning a fixed payload or raising."""

    payload: object = field(default_factory=lambda: {"products": []})
    error: Exception | None = None
    queries: list[str] = field(default_factory=list)

    async def search_products(
        self, query: str, page_size: int = 1
    ) -> dict[str, object]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload  # type: ignore[return-value]


@dataclass
class FakeTelegramClient(TelegramClient):
    """Fake Telegram client that records messages."""

    messages: list[tuple[int, str]] = field(default_factory=list)
    commands: list[dict[str, str]] | None = None
    menu_button: dict[str, object] | None = None
    update_batches: list[list[dict[str, object]]] = field(default_factory=list)
    offsets: list[int | None] = field(default_factory=list)

    async def send_message(self, chat_id: int, text: str) -> None:
        self.messages.append((chat_id, text))

    async def set_my_commands(self, commands: list[dict[str, str]]) -> None:
        self.commands = commands

    async def set_chat_menu_button(
        self, menu_button: dict[str, object] | None = None
    ) -> None:
        self.menu_button = menu_button

    async def get_updates(
        self, offset: int | None = None, timeout: int = 30
    ) -> list[dict[str, object]]:
        self.offsets.append(offset)
        if self.update_batches:
            return self.update_batches.pop(0)
        return []


def text_update(update_id: int, text: str, user_id: int = 123) -> dict[str, object]:
    """Build a raw Telegram update carrying a private text message."""
    return {
        "update_id": update_id,
        "message": {
            "message_id": update_id * 10,
            "date": 1700000000,
            "chat": {"id": user_id, "type": "private"},
            "from": {"id": user_id, "is_bot": False, "first_name": "Test"},
            "text": text,
        },
    }


@pytest.fixture(autouse=True)
def _propagate_app_logs() -> None:
    """Let caplog see app loggers even after configure_logging ran."""
    logger = logging.getLogger("calorie_bot")
    logger.handlers.clear()
    logger.propagate = True


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        telegram_bot_token="test-token",
        cache_path=tmp_path / "calorie_cache.json",
        ledger_path=tmp_path / "calories.json",
    )


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def ledger_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def ledger(ledger_store: InMemoryStore, clock: FixedClock) -> DailyLedger:
    return DailyLedger(store=ledger_store, clock=clock)


@pytest.fixture
def remote() -> StubRemoteResolver:
    return StubRemoteResolver(values={"гречка": 343, "вода": 0})


@pytest.fixture
def cache() -> InMemoryEnergyCache:
    return InMemoryEnergyCache()


@pytest.fixture
def resolver(
    cache: InMemoryEnergyCache, remote: StubRemoteResolver
) -> CalorieResolver:
    return CalorieResolver(cache=cache, remote=remote)


@pytest.fixture
def food_log_service(resolver: CalorieResolver, ledger: DailyLedger) -> FoodLogService:
    return FoodLogService(resolver=resolver, ledger=ledger)


@pytest.fixture
def telegram_client() -> FakeTelegramClient:
    return FakeTelegramClient()


@pytest.fixture
def container(
    settings: Settings,
    telegram_client: FakeTelegramClient,
    resolver: CalorieResolver,
    ledger: DailyLedger,
    food_log_service: FoodLogService,
) -> AppContainer:
    command_handler = CommandHandler(ledger)
    dispatcher = UpdateDispatcher(
        telegram_client=telegram_client,
        command_handler=command_handler,
        food_log_service=food_log_service,
    )
    closed: list[bool] = []

    async def close_resources() -> None:
        closed.append(True)

    container = AppContainer(
        settings=settings,
        telegram_client=telegram_client,
        resolver=resolver,
        ledger=ledger,
        food_log_service=food_log_service,
        command_handler=command_handler,
        dispatcher=dispatcher,
        close_resources=close_resources,
    )
    container.closed = closed  # type: ignore[attr-defined]
    return container
