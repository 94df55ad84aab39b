"""
handlers/keyboards.py
---------------------
Renders domain keyboards as Telegram inline markup.
"""

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from models.events import Keyboard


def to_markup(keyboard: Keyboard) -> InlineKeyboardMarkup:
    """Each Button becomes an InlineKeyboardButton with its action as callback data."""
    return InlineKeyboardMarkup(
        [
            [InlineKeyboardButton(text=button.label, callback_data=button.action) for button in row]
            for row in keyboard.rows
        ]
    )
