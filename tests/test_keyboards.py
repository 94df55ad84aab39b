from telegram import InlineKeyboardMarkup

from handlers.keyboards import to_markup
from models.events import Button, Keyboard
from services.conversion_bot import MAIN_MENU, RESULT_KEYBOARD


def test_main_menu_markup():
    markup = to_markup(MAIN_MENU)
    assert isinstance(markup, InlineKeyboardMarkup)
    assert len(markup.inline_keyboard) == 1
    labels = [(b.text, b.callback_data) for b in markup.inline_keyboard[0]]
    assert labels == [
        ("Binary to Decimal", "/binary_to_decimal"),
        ("Decimal to Binary", "/decimal_to_binary"),
    ]


def test_result_markup():
    [[button]] = to_markup(RESULT_KEYBOARD).inline_keyboard
    assert button.text == "Back"
    assert button.callback_data == "/back"


def test_rows_keep_order():
    keyboard = Keyboard(rows=((Button("a", "/a"),), (Button("b", "/b"), Button("c", "/c"))))
    rows = to_markup(keyboard).inline_keyboard
    assert [[b.text for b in row] for row in rows] == [["a"], ["b", "c"]]
