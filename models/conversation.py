"""
models/conversation.py
----------------------
Conversation modes and the closed set of command/callback tokens.
"""

from enum import Enum
from typing import Optional


class ConversionMode(Enum):
    """The pending conversion a chat has selected."""
    AWAITING_BINARY_INPUT = "binary_to_decimal"
    AWAITING_DECIMAL_INPUT = "decimal_to_binary"


class Command(Enum):
    """
    Tokens recognized as typed commands or inline button callback data.

    The same string is used in both places: a button's callback data
    is the command it stands for.
    """
    START = "/start"
    BINARY_TO_DECIMAL = "/binary_to_decimal"
    DECIMAL_TO_BINARY = "/decimal_to_binary"
    MENU = "/menu"
    BACK = "/back"

    @classmethod
    def parse(cls, token: str) -> Optional["Command"]:
        """Exact match against the known tokens, None when unrecognized."""
        try:
            return cls(token)
        except ValueError:
            return None

    @property
    def mode(self) -> Optional[ConversionMode]:
        """The conversion mode this command selects, if any."""
        return _MODE_BY_COMMAND.get(self)


_MODE_BY_COMMAND = {
    Command.BINARY_TO_DECIMAL: ConversionMode.AWAITING_BINARY_INPUT,
    Command.DECIMAL_TO_BINARY: ConversionMode.AWAITING_DECIMAL_INPUT,
}
