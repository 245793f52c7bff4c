"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_bot.adapters.json_store import JsonFileStore
from calorie_bot.adapters.off_client import HttpxOpenFoodFactsClient
from calorie_bot.adapters.telegram_client import HttpxTelegramClient, TelegramClient
from calorie_bot.config import Settings
from calorie_bot.services.cache import PersistentEnergyCache
from calorie_bot.services.commands import CommandHandler
from calorie_bot.services.food_log import FoodLogService
from calorie_bot.services.ledger import DailyLedger, timezone_clock
from calorie_bot.services.remote import RemoteEnergyService
from calorie_bot.services.resolution import CalorieResolver
from calorie_bot.services.updates import UpdateDispatcher


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    telegram_client: TelegramClient
    resolver: CalorieResolver
    ledger: DailyLedger
    food_log_service: FoodLogService
    command_handler: CommandHandler
    dispatcher: UpdateDispatcher
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    telegram_client = HttpxTelegramClient.create(resolved_settings.telegram_bot_token)
    off_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.off_base_url,
        timeout_seconds=resolved_settings.off_timeout_seconds,
    )
    resolver = CalorieResolver(
        cache=PersistentEnergyCache(JsonFileStore(resolved_settings.cache_path)),
        remote=RemoteEnergyService(off_client),
    )
    ledger = DailyLedger(
        store=JsonFileStore(resolved_settings.ledger_path),
        clock=timezone_clock(resolved_settings.ledger_timezone),
    )
    food_log_service = FoodLogService(resolver=resolver, ledger=ledger)
    command_handler = CommandHandler(ledger)
    dispatcher = UpdateDispatcher(
        telegram_client=telegram_client,
        command_handler=command_handler,
        food_log_service=food_log_service,
    )

    async def close_resources() -> None:
        await telegram_client.close()
        await off_client.close()

    return AppContainer(
        settings=resolved_settings,
        telegram_client=telegram_client,
        resolver=resolver,
        ledger=ledger,
        food_log_service=food_log_service,
        command_handler=command_handler,
        dispatcher=dispatcher,
        close_resources=close_resources,
    )
