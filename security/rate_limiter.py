"""
security/rate_limiter.py
-------------------------
Rate limiting middleware to prevent API abuse.
Limits the number of updates a user can send within a time window.
"""

import time
from functools import wraps
from typing import Callable

from telegram import Update
from telegram.ext import ContextTypes

import config
from utils.logger import get_logger

logger = get_logger(__name__)

RATE_LIMITED_TEXT = "Too many requests, please slow down."

# In-memory storage for rate tracking: {user_id: [timestamp1, timestamp2, ...]}
_user_timestamps: dict[int, list[float]] = {}


def _cleanup() -> None:
    """Remove expired timestamps, and users left with none."""
    cutoff = time.time() - config.RATE_LIMIT_WINDOW_SECONDS
    for user_id in list(_user_timestamps):
        recent = [t for t in _user_timestamps[user_id] if t > cutoff]
        if recent:
            _user_timestamps[user_id] = recent
        else:
            del _user_timestamps[user_id]


def rate_limited(func: Callable):
    """
    Decorator that enforces rate limiting per user.

    Configuration (via .env):
        RATE_LIMIT_MESSAGES: Max updates per window (default: 30).
        RATE_LIMIT_WINDOW_SECONDS: Window duration in seconds (default: 60).

    Behavior:
        - Tracks update timestamps per user, messages and button presses alike.
        - If exceeded, replies with a warning and blocks the handler.
    """
    @wraps(func)
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE, *args, **kwargs):
        user = update.effective_user
        if not user:
            return

        _cleanup()
        timestamps = _user_timestamps.setdefault(user.id, [])

        if len(timestamps) >= config.RATE_LIMIT_MESSAGES:
            logger.warning(f"Rate limit hit for user {user.id}")
            if update.callback_query:
                await update.callback_query.answer(RATE_LIMITED_TEXT)
            elif update.effective_message:
                await update.effective_message.reply_text(RATE_LIMITED_TEXT)
            return

        timestamps.append(time.time())
        return await func(update, context, *args, **kwargs)

    return wrapper
