"""History Cache - bounded, most-recent-first list of completed translations."""

import threading
from collections import deque

from sarvam_translator.core import TranslationRecord


class HistoryCache:
    """
    Fixed-capacity history. New entries go to the front; once full, the
    oldest entry falls off the back.

    Pushes may come from a worker thread, so every read hands out a copy.
    """

    CAPACITY = 10

    def __init__(self, capacity: int = CAPACITY):
        if capacity <= 0:
            raise ValueError("History capacity must be positive")
        self._entries: deque[TranslationRecord] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._entries.maxlen

    def push(self, record: TranslationRecord) -> None:
        """Insert at the front, evicting the oldest entry when over capacity."""
        with self._lock:
            # appendleft on a full deque drops from the right end
            self._entries.appendleft(record)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def list(self) -> list[TranslationRecord]:
        """Snapshot of the entries, most recent first."""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
