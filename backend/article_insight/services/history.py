"""In-memory analysis history.

Entries live only as long as the process; nothing is persisted.
"""
from typing import Optional, Tuple

from article_insight.schemas.analysis import HistoryEntry

DEFAULT_CAPACITY = 10


class HistoryCache:
    """Capacity-bounded history, most recent first.

    The state is an immutable tuple that is replaced on every change, so a
    snapshot returned by list() never changes under the caller.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("History capacity must be at least 1")
        self._capacity = capacity
        self._entries: Tuple[HistoryEntry, ...] = ()

    @property
    def capacity(self) -> int:
        return self._capacity

    def record(self, entry: HistoryEntry) -> None:
        """Prepend an entry, dropping the oldest beyond capacity."""
        self._entries = ((entry,) + self._entries)[:self._capacity]

    def list(self) -> Tuple[HistoryEntry, ...]:
        return self._entries

    def get(self, entry_id: str) -> Optional[HistoryEntry]:
        for entry in self._entries:
            if entry.id == entry_id:
                return entry
        return None

    def clear(self) -> None:
        self._entries = ()

    def __len__(self) -> int:
        return len(self._entries)
