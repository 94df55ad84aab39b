"""
main.py
-------
Entry point for the number conversion Telegram bot.

Responsibilities:
    - Create the conversation state store and the ConversionBot.
    - Configure and start the Telegram bot with all handlers.
    - Log gateway failures without stopping the polling loop.
"""

import sys

from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    CallbackQueryHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from config import CONCURRENT_UPDATES, TELEGRAM_BOT_TOKEN
from handlers.conversion_handler import (
    BOT_DATA_KEY,
    callback_query,
    command_message,
    text_message,
)
from services.conversion_bot import ConversionBot
from services.state_store import ConversationStateStore
from utils.logger import get_logger

logger = get_logger(__name__)


async def set_bot_commands(application: Application) -> None:
    """Register bot commands menu in Telegram on startup."""
    commands = [
        BotCommand("start", "Show the main menu"),
        BotCommand("binary_to_decimal", "Convert a binary number to decimal"),
        BotCommand("decimal_to_binary", "Convert a decimal number to binary"),
    ]
    await application.bot.set_my_commands(commands)
    logger.info("Bot commands menu registered successfully.")


async def on_error(update: object, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Log any exception raised while handling an update; polling goes on."""
    chat_id = None
    if isinstance(update, Update) and update.effective_chat:
        chat_id = update.effective_chat.id
    logger.error(f"Failed to handle update for chat {chat_id}", exc_info=context.error)


def build_application(token: str) -> Application:
    """Build the Application with the conversion handlers and a fresh state store."""
    app = (
        Application.builder()
        .token(token)
        .concurrent_updates(CONCURRENT_UPDATES)
        .post_init(set_bot_commands)
        .build()
    )
    app.bot_data[BOT_DATA_KEY] = ConversionBot(ConversationStateStore())

    app.add_handler(MessageHandler(filters.TEXT & filters.COMMAND, command_message))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, text_message))
    app.add_handler(CallbackQueryHandler(callback_query))
    app.add_error_handler(on_error)
    return app


def main() -> None:
    """Initialize and run the bot."""
    if not TELEGRAM_BOT_TOKEN:
        logger.critical("TELEGRAM_BOT_TOKEN is not set in .env")
        sys.exit(1)

    logger.info("Starting Telegram bot...")
    app = build_application(TELEGRAM_BOT_TOKEN)

    logger.info("Conversion bot is running! Press Ctrl+C to stop.")
    app.run_polling(drop_pending_updates=True, allowed_updates=["message", "callback_query"])
    logger.info("Conversion bot stopped.")


if __name__ == "__main__":
    main()
