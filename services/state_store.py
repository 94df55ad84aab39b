"""
services/state_store.py
-----------------------
In-memory store of the pending conversion mode per chat.
"""

import threading
from typing import Optional

from models.conversation import ConversionMode


class ConversationStateStore:
    """
    Maps chat id -> ConversionMode.

    Created empty once at startup and shared by every handler for the
    lifetime of the process. A chat with no entry is idle. Entries are
    overwritten, never removed.
    """

    def __init__(self):
        self._modes: dict[int, ConversionMode] = {}
        self._lock = threading.Lock()

    def get(self, chat_id: int) -> Optional[ConversionMode]:
        with self._lock:
            return self._modes.get(chat_id)

    def put(self, chat_id: int, mode: ConversionMode) -> None:
        with self._lock:
            self._modes[chat_id] = mode

    def __contains__(self, chat_id: int) -> bool:
        with self._lock:
            return chat_id in self._modes

    def __len__(self) -> int:
        with self._lock:
            return len(self._modes)
