"""Route Telegram updates to command and food logging handlers."""

import logging
from dataclasses import dataclass

from calorie_bot.adapters.telegram_client import TelegramClient
from calorie_bot.api.telegram_models import TelegramUpdate
from calorie_bot.services.commands import CommandHandler
from calorie_bot.services.food_log import FoodLogService, format_report
from calorie_bot.telegram_commands import parse_command

SAVE_FAILED_TEXT = "Не удалось сохранить данные. Попробуйте позже."

_logger = logging.getLogger(__name__)


@dataclass
class UpdateDispatcher:
    """Handle one Telegram update and send the reply."""

    telegram_client: TelegramClient
    command_handler: CommandHandler
    food_log_service: FoodLogService

    async def handle_update(self, update: TelegramUpdate) -> None:
        """Dispatch a text message; other update kinds are ignored."""
        message = update.message
        if message is None or message.text is None or message.from_user is None:
            return
        user_id = message.from_user.id
        chat_id = message.chat.id
        text = message.text.strip()

        if text.startswith("/"):
            command = parse_command(text)
            if command is None:
                return
            try:
                reply = self.command_handler.handle(command, user_id)
            except OSError:
                _logger.exception(
                    "Command failed", extra={"command": command.value.command}
                )
                reply = SAVE_FAILED_TEXT
            await self.telegram_client.send_message(chat_id=chat_id, text=reply)
            return

        try:
            report = await self.food_log_service.log_food(user_id, text)
        except OSError:
            _logger.exception("Failed to record food log", extra={"user_id": user_id})
            reply = SAVE_FAILED_TEXT
        else:
            reply = format_report(report)
        await self.telegram_client.send_message(chat_id=chat_id, text=reply)
