from concurrent.futures import ThreadPoolExecutor

from models.conversation import ConversionMode
from services.state_store import ConversationStateStore


def test_empty_store_is_idle():
    store = ConversationStateStore()
    assert store.get(1) is None
    assert 1 not in store
    assert len(store) == 0


def test_put_overwrites():
    store = ConversationStateStore()
    store.put(1, ConversionMode.AWAITING_BINARY_INPUT)
    store.put(1, ConversionMode.AWAITING_DECIMAL_INPUT)
    assert store.get(1) is ConversionMode.AWAITING_DECIMAL_INPUT
    assert len(store) == 1


def test_chats_are_independent():
    store = ConversationStateStore()
    store.put(1, ConversionMode.AWAITING_BINARY_INPUT)
    store.put(2, ConversionMode.AWAITING_DECIMAL_INPUT)
    assert store.get(1) is ConversionMode.AWAITING_BINARY_INPUT
    assert store.get(2) is ConversionMode.AWAITING_DECIMAL_INPUT


def test_concurrent_puts():
    store = ConversationStateStore()
    modes = list(ConversionMode)

    def worker(chat_id):
        for i in range(200):
            store.put(chat_id, modes[i % 2])
            assert store.get(chat_id) in modes

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(worker, range(50)))

    assert len(store) == 50
    assert all(store.get(chat_id) is modes[1] for chat_id in range(50))
