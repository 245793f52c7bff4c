"""Command-line entry point for the calorie bot."""

import argparse
import asyncio
import logging
import sys

import uvicorn
from pydantic import ValidationError

from calorie_bot.api.app import create_app
from calorie_bot.app_logging import configure_logging
from calorie_bot.config import Settings
from calorie_bot.containers import build_container
from calorie_bot.polling import run_polling

_logger = logging.getLogger(__name__)


def load_settings() -> Settings:
    """Load settings, exiting with status 1 when the bot token is missing."""
    try:
        return Settings()
    except ValidationError as exc:
        missing = {
            str(error["loc"][0]) for error in exc.errors() if error.get("loc")
        }
        if "telegram_bot_token" in missing:
            _logger.error("TELEGRAM_BOT_TOKEN is not set")
        else:
            _logger.error("Invalid configuration: %s", exc)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    """Run the bot in long-polling or webhook mode."""
    parser = argparse.ArgumentParser(prog="calorie-bot")
    parser.add_argument("--mode", choices=("polling", "webhook"), default="polling")
    parser.add_argument("--host", default="0.0.0.0")  # noqa: S104
    parser.add_argument("--port", type=int, default=8000)
    args = parser.parse_args(argv)

    configure_logging()
    container = build_container(load_settings())
    if args.mode == "webhook":
        uvicorn.run(create_app(container), host=args.host, port=args.port)
        return
    try:
        asyncio.run(run_polling(container))
    except KeyboardInterrupt:
        _logger.info("Calorie bot stopped")


if __name__ == "__main__":
    main()
