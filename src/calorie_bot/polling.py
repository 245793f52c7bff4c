"""Long-polling transport for the Telegram bot."""

import asyncio
import logging

from pydantic import ValidationError

from calorie_bot.api.telegram_models import TelegramUpdate
from calorie_bot.containers import AppContainer
from calorie_bot.telegram_commands import CHAT_MENU_BUTTON, telegram_commands

_logger = logging.getLogger(__name__)


async def process_updates(
    container: AppContainer, raw_updates: list[dict[str, object]]
) -> int | None:
    """Handle a batch of raw updates and return the next offset to request."""
    next_offset: int | None = None
    for raw in raw_updates:
        update_id = raw.get("update_id")
        if isinstance(update_id, int):
            next_offset = update_id + 1
        try:
            update = TelegramUpdate.model_validate(raw)
        except ValidationError:
            _logger.warning("Skipping malformed update: update_id=%s", update_id)
            continue
        try:
            await container.dispatcher.handle_update(update)
        except Exception:
            _logger.exception(
                "Failed to handle Telegram update", extra={"update_id": update_id}
            )
    return next_offset


async def run_polling(
    container: AppContainer,
    *,
    retry_delay_seconds: float = 3.0,
    max_batches: int | None = None,
) -> None:
    """Poll Telegram for updates until cancelled (or ``max_batches`` is reached)."""
    client = container.telegram_client
    try:
        await client.set_my_commands(telegram_commands())
        await client.set_chat_menu_button(CHAT_MENU_BUTTON)
    except Exception:
        _logger.exception("Failed to sync Telegram bot commands")

    _logger.info("Calorie bot started (Open Food Facts API)")
    offset: int | None = None
    batches = 0
    try:
        while max_batches is None or batches < max_batches:
            batches += 1
            try:
                raw_updates = await client.get_updates(
                    offset=offset, timeout=container.settings.polling_timeout_seconds
                )
            except Exception:
                _logger.exception("Failed to fetch Telegram updates")
                await asyncio.sleep(retry_delay_seconds)
                continue
            next_offset = await process_updates(container, raw_updates)
            if next_offset is not None:
                offset = next_offset
    finally:
        await container.close_resources()
