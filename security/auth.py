"""
security/auth.py
-----------------
Authentication middleware for the Telegram bot.
Blocks any user not in the allowed whitelist.
"""

from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

import config
from utils.logger import get_logger

logger = get_logger(__name__)

UNAUTHORIZED_TEXT = "This bot is private."


def authorized_only(func: Callable):
    """
    Decorator that restricts a handler to whitelisted users only.

    Usage:
        @authorized_only
        async def my_handler(update, context):
            ...

    Behavior:
        - If ALLOWED_USER_IDS is empty, ALL users are allowed.
        - If the list is set, only those users can use the bot.
        - Unauthorized attempts are logged and answered once per update.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        if not config.ALLOWED_USER_IDS or user.id in config.ALLOWED_USER_IDS:
            return await func(update, context, *args, **kwargs)

        logger.warning(
            f"Unauthorized access attempt: user_id={user.id}, "
            f"username={user.username}, name={user.first_name}"
        )
        if update.callback_query:
            await update.callback_query.answer(UNAUTHORIZED_TEXT, show_alert=True)
        elif update.effective_message:
            await update.effective_message.reply_text(UNAUTHORIZED_TEXT)

    return wrapper
