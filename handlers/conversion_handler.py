"""
handlers/conversion_handler.py
------------------------------
Bridges python-telegram-bot updates and ConversionBot.

The ConversionBot instance is created once in main.py and kept in
``context.bot_data[BOT_DATA_KEY]``.
"""

from typing import Iterable

from telegram import Bot, Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from config import BOT_USERNAME
from models.events import (
    CallbackEvent,
    EditKeyboard,
    InboundEvent,
    OutboundAction,
    SendText,
    TextMessage,
)
from handlers.keyboards import to_markup
from security.auth import authorized_only
from security.rate_limiter import rate_limited
from services.conversion_bot import ConversionBot
from utils.logger import get_logger

logger = get_logger(__name__)

BOT_DATA_KEY = "conversion_bot"


def strip_bot_mention(text: str, bot_username: str = BOT_USERNAME) -> str:
    """
    Turn the group-chat form ``/start@MyBot`` into ``/start``.

    Only a mention of this bot is removed; ``/start@OtherBot`` is returned
    unchanged so it stays unrecognized.
    """
    command, sep, mention = text.partition("@")
    if sep and bot_username and mention.lower() == bot_username.lower():
        return command
    return text


async def execute(bot: Bot, actions: Iterable[OutboundAction]) -> None:
    """
    Perform the actions in order.

    Telegram errors are not caught here: they reach the application
    error handler registered in main.py.
    """
    for action in actions:
        if isinstance(action, SendText):
            await bot.send_message(
                chat_id=action.chat_id,
                text=action.text,
                reply_markup=to_markup(action.keyboard) if action.keyboard else None,
            )
        elif isinstance(action, EditKeyboard):
            await bot.edit_message_reply_markup(
                chat_id=action.chat_id,
                message_id=action.message_id,
                reply_markup=to_markup(action.keyboard),
            )
        else:
            raise TypeError(f"Unsupported action: {type(action).__name__}")


async def _dispatch(event: InboundEvent, context: ContextTypes.DEFAULT_TYPE) -> None:
    conversion_bot: ConversionBot = context.bot_data[BOT_DATA_KEY]
    await execute(context.bot, conversion_bot.handle(event))


def _text_message(update: Update, text: str, is_command: bool) -> TextMessage:
    return TextMessage(
        chat_id=update.effective_chat.id,
        sender_display_name=update.effective_user.first_name,
        text=text,
        is_command=is_command,
    )


@authorized_only
@rate_limited
async def command_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle any bot command such as /start or /decimal_to_binary."""
    text = strip_bot_mention(update.message.text)
    await _dispatch(_text_message(update, text, is_command=True), context)


@authorized_only
@rate_limited
async def text_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle a plain text message: a number to convert, or nothing."""
    await _dispatch(_text_message(update, update.message.text, is_command=False), context)


@authorized_only
@rate_limited
async def callback_query(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handle a press on one of the inline menu buttons."""
    query = update.callback_query
    try:
        await query.answer()
    except TelegramError as e:
        # e.g. "Query is too old"; the action below still runs
        logger.warning(f"Could not answer callback {query.data!r}: {e}")
    if query.message is None:
        # message too old for Telegram to include it
        logger.warning(f"Callback {query.data!r} from user {query.from_user.id} has no message")
        return

    event = CallbackEvent(
        chat_id=query.message.chat.id,
        message_id=query.message.message_id,
        data=query.data or "",
    )
    await _dispatch(event, context)
