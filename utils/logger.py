"""
utils/logger.py
---------------
Logging setup for the bot.

Every module calls `get_logger(__name__)`; the first call installs a
stdout handler on the root logger at `LOG_LEVEL`. Records passing through
that handler have the bot token masked, since python-telegram-bot and
httpx put it in request URLs and error messages.
"""

import logging
import sys

from config import LOG_LEVEL, TELEGRAM_BOT_TOKEN

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_QUIET_LOGGERS = ("httpx", "httpcore", "apscheduler")
_handler = None


class TokenFilter(logging.Filter):
    """Replaces the bot token with a placeholder in the formatted message."""

    def __init__(self, token: str, placeholder: str = "<bot-token>"):
        super().__init__()
        self.token = token
        self.placeholder = placeholder

    def filter(self, record: logging.LogRecord) -> bool:
        if self.token:
            message = record.getMessage()
            if self.token in message:
                record.msg = message.replace(self.token, self.placeholder)
                record.args = None
        return True


def _init_logging() -> None:
    global _handler
    if _handler is not None:
        return
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    _handler.addFilter(TokenFilter(TELEGRAM_BOT_TOKEN))

    root = logging.getLogger()
    level = getattr(logging, LOG_LEVEL, None)
    root.setLevel(level if isinstance(level, int) else logging.INFO)
    root.addHandler(_handler)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Named logger; configures the root logger on first use."""
    _init_logging()
    return logging.getLogger(name)
