"""Command handlers for Telegram updates."""

from dataclasses import dataclass

from calorie_bot.services.ledger import DailyLedger
from calorie_bot.telegram_commands import BotCommand

WELCOME_TEXT = (
    "👋 Привет! Пришлите название продукта — я добавлю его калории (на 100 г) "
    "к счёту. Можно отправлять несколько продуктов через запятую или с новой "
    "строки.\n\n"
    "Команды:\n"
    "/total — калории за сегодня\n"
    "/reset — сбросить счёт\n"
    "/help  — помощь"
)
HELP_TEXT = (
    "Отправьте названия продуктов (одно или несколько). "
    "Команды: /total, /reset"
)
RESET_TEXT = "Счётчик на сегодня сброшен."


@dataclass
class CommandHandler:
    """Build replies for the bot's slash commands."""

    ledger: DailyLedger

    def handle(self, command: BotCommand, user_id: int) -> str:
        """Run a command for the user and return the reply text."""
        if command is BotCommand.START:
            return WELCOME_TEXT
        if command is BotCommand.HELP:
            return HELP_TEXT
        if command is BotCommand.TOTAL:
            return f"Сегодня вы съели {self.ledger.total(user_id)} ккал."
        self.ledger.reset(user_id)
        return RESET_TEXT
