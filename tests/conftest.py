from unittest.mock import AsyncMock, MagicMock

import pytest

import config
from handlers.conversion_handler import BOT_DATA_KEY
from security import rate_limiter
from services.conversion_bot import ConversionBot
from services.state_store import ConversationStateStore


@pytest.fixture(autouse=True)
def open_access(monkeypatch):
    """Every test starts without a whitelist and with a clean rate limiter."""
    monkeypatch.setattr(config, "ALLOWED_USER_IDS", [])
    monkeypatch.setattr(config, "RATE_LIMIT_MESSAGES", 30)
    rate_limiter._user_timestamps.clear()
    yield
    rate_limiter._user_timestamps.clear()


@pytest.fixture
def store():
    return ConversationStateStore()


@pytest.fixture
def context(store):
    ctx = MagicMock()
    ctx.bot = AsyncMock()
    ctx.bot_data = {BOT_DATA_KEY: ConversionBot(store)}
    return ctx
