"""
services/conversion_bot.py
--------------------------
Turns inbound chat events into the actions the bot should perform.

The bot never calls Telegram itself: `handle()` returns a list of
SendText / EditKeyboard actions and the presentation layer executes them.
"""

from models.conversation import Command, ConversionMode
from models.events import (
    Button,
    CallbackEvent,
    EditKeyboard,
    InboundEvent,
    Keyboard,
    OutboundAction,
    SendText,
    TextMessage,
)
from services.converter import ParseFailure, binary_to_decimal, decimal_to_binary
from services.state_store import ConversationStateStore
from utils.logger import get_logger

logger = get_logger(__name__)

WELCOME_TEXT = "Hello, {name}! Let's get started converting numbers. HEHE"
PROMPT_TEXT = "Write a number"
MENU_TEXT = "Menu"
RESULT_TEXT = "Converted number: {value}"
ERROR_TEXT = "Error happened, check your input"

MAIN_MENU = Keyboard.single_row(
    Button("Binary to Decimal", Command.BINARY_TO_DECIMAL.value),
    Button("Decimal to Binary", Command.DECIMAL_TO_BINARY.value),
)
RESULT_KEYBOARD = Keyboard.single_row(Button("Back", Command.BACK.value))

_CONVERTERS = {
    ConversionMode.AWAITING_BINARY_INPUT: binary_to_decimal,
    ConversionMode.AWAITING_DECIMAL_INPUT: decimal_to_binary,
}


class ConversionBot:
    """
    Dispatcher for the number conversion conversation.

    Each chat is either idle or waiting for a number in one mode. Picking
    a mode (typed command or menu button) stores it and prompts for input;
    every following plain text message is converted in that mode until
    another mode is picked. A successful conversion does not reset the mode.
    """

    def __init__(self, store: ConversationStateStore):
        self.store = store

    def handle(self, event: InboundEvent) -> list[OutboundAction]:
        """
        Process one inbound event.

        Returns:
            The actions to perform, in order. Empty when the event is
            ignored (unknown token, or free text while the chat is idle).

        Raises:
            TypeError: if `event` is neither a TextMessage nor a CallbackEvent.
        """
        if isinstance(event, TextMessage):
            if event.is_command:
                return self._on_command(event)
            return self._on_text(event)
        if isinstance(event, CallbackEvent):
            return self._on_callback(event)
        raise TypeError(f"Unsupported event type: {type(event).__name__}")

    # ── Typed commands ────────────────────────────────────

    def _on_command(self, message: TextMessage) -> list[OutboundAction]:
        command = Command.parse(message.text)

        if command is Command.START:
            logger.info(f"Chat {message.chat_id} ({message.sender_display_name}) started the bot.")
            return [
                SendText(
                    message.chat_id,
                    WELCOME_TEXT.format(name=message.sender_display_name),
                    MAIN_MENU,
                )
            ]
        if command is not None and command.mode is not None:
            return self._select_mode(message.chat_id, command.mode)

        # /menu and /back are only reachable through buttons
        logger.debug(f"Ignoring command {message.text!r} in chat {message.chat_id}")
        return []

    # ── Free text ─────────────────────────────────────────

    def _on_text(self, message: TextMessage) -> list[OutboundAction]:
        mode = self.store.get(message.chat_id)
        if mode is None:
            return []

        result = _CONVERTERS[mode](message.text)
        if isinstance(result, ParseFailure):
            logger.warning(
                f"Chat {message.chat_id}: cannot convert {result.text!r} "
                f"in mode {mode.value}: {result.reason}"
            )
            return [SendText(message.chat_id, ERROR_TEXT)]

        return [
            SendText(
                message.chat_id,
                RESULT_TEXT.format(value=result.value),
                RESULT_KEYBOARD,
            )
        ]

    # ── Inline buttons ────────────────────────────────────

    def _on_callback(self, callback: CallbackEvent) -> list[OutboundAction]:
        command = Command.parse(callback.data)

        if command is not None and command.mode is not None:
            return self._select_mode(callback.chat_id, command.mode)
        if command is Command.MENU:
            return [SendText(callback.chat_id, MENU_TEXT, MAIN_MENU)]
        if command is Command.BACK:
            return [EditKeyboard(callback.chat_id, callback.message_id, MAIN_MENU)]

        logger.debug(f"Ignoring callback {callback.data!r} in chat {callback.chat_id}")
        return []

    def _select_mode(self, chat_id: int, mode: ConversionMode) -> list[OutboundAction]:
        self.store.put(chat_id, mode)
        logger.info(f"Chat {chat_id} switched to {mode.value}")
        return [SendText(chat_id, PROMPT_TEXT)]
