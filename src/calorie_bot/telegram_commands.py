"""Telegram bot command configuration."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class TelegramCommand:
    """Declarative bot command definition."""

    command: str
    description: str


class BotCommand(Enum):
    """Enum of bot commands (single source of truth)."""

    START = TelegramCommand("start", "Начать работу с ботом")
    TOTAL = TelegramCommand("total", "Калории за сегодня")
    RESET = TelegramCommand("reset", "Сбросить счёт за сегодня")
    HELP = TelegramCommand("help", "Помощь")


def telegram_commands() -> list[dict[str, str]]:
    """Return commands formatted for Telegram API."""
    return [
        {"command": entry.value.command, "description": entry.value.description}
        for entry in BotCommand
    ]


def parse_command(text: str) -> BotCommand | None:
    """Return the bot command a message starts with, if it is a known one."""
    if not text.startswith("/"):
        return None
    word = text.split(maxsplit=1)[0]
    name = word[1:].split("@", maxsplit=1)[0].lower()
    for entry in BotCommand:
        if entry.value.command == name:
            return entry
    return None


CHAT_MENU_BUTTON: dict[str, object] = {"type": "commands"}
