"""
models/events.py
----------------
Inbound events delivered by the messaging gateway and the outbound
actions the bot asks it to perform.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Button:
    """An inline button: visible label plus the token sent back on press."""
    label: str
    action: str


@dataclass(frozen=True)
class Keyboard:
    """Ordered rows of inline buttons."""
    rows: tuple[tuple[Button, ...], ...]

    @classmethod
    def single_row(cls, *buttons: Button) -> "Keyboard":
        return cls(rows=(tuple(buttons),))


@dataclass(frozen=True)
class TextMessage:
    """
    A text message typed by the user.

    Attributes:
        chat_id: Telegram chat the message belongs to.
        sender_display_name: First name of the sender.
        text: Raw message text, untrimmed.
        is_command: True when Telegram marked the text as a bot command.
    """
    chat_id: int
    sender_display_name: str
    text: str
    is_command: bool = False


@dataclass(frozen=True)
class CallbackEvent:
    """A press on an inline button attached to message `message_id`."""
    chat_id: int
    message_id: int
    data: str


@dataclass(frozen=True)
class SendText:
    chat_id: int
    text: str
    keyboard: Optional[Keyboard] = None


@dataclass(frozen=True)
class EditKeyboard:
    chat_id: int
    message_id: int
    keyboard: Keyboard


InboundEvent = Union[TextMessage, CallbackEvent]
OutboundAction = Union[SendText, EditKeyboard]
