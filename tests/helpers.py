from unittest.mock import AsyncMock, MagicMock


def make_message_update(text, chat_id=42, user_id=1001, first_name="Alice"):
    update = MagicMock()
    update.callback_query = None
    update.effective_chat.id = chat_id
    update.effective_user.id = user_id
    update.effective_user.first_name = first_name
    update.message.text = text
    update.effective_message.reply_text = AsyncMock()
    return update


def make_callback_update(data, chat_id=42, message_id=900, user_id=1001):
    update = MagicMock()
    update.effective_chat.id = chat_id
    update.effective_user.id = user_id
    query = update.callback_query
    query.data = data
    query.answer = AsyncMock()
    query.message.chat.id = chat_id
    query.message.message_id = message_id
    query.from_user.id = user_id
    return update
