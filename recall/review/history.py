"""
Bounded mode history.

Both the per-item and the per-session histories are fixed-capacity ring
buffers, so recency and variety checks stay O(window) however long a
session runs.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator, Optional

from recall.review.modes import RetrievalMode


DEFAULT_HISTORY_SIZE = 10


class ModeHistory:
    """Most recent modes, oldest first, capped at `capacity` entries."""

    def __init__(
        self,
        modes: Iterable[RetrievalMode] = (),
        capacity: int = DEFAULT_HISTORY_SIZE
    ):
        if capacity < 1:
            raise ValueError("ModeHistory capacity must be a positive integer")
        self._buffer: deque[RetrievalMode] = deque(modes, maxlen=capacity)

    @property
    def capacity(self) -> int:
        return self._buffer.maxlen

    def record(self, mode: RetrievalMode) -> None:
        self._buffer.append(mode)

    def count(self, mode: RetrievalMode) -> int:
        return self._buffer.count(mode)

    def last(self, n: int) -> tuple[RetrievalMode, ...]:
        if n <= 0:
            return ()
        return tuple(self._buffer)[-n:]

    def snapshot(self) -> tuple[RetrievalMode, ...]:
        return tuple(self._buffer)

    def to_tokens(self) -> list[str]:
        return [mode.value for mode in self._buffer]

    @classmethod
    def from_tokens(
        cls,
        tokens: Iterable[str],
        capacity: int = DEFAULT_HISTORY_SIZE
    ) -> ModeHistory:
        return cls((RetrievalMode(token) for token in tokens), capacity=capacity)

    def __iter__(self) -> Iterator[RetrievalMode]:
        return iter(self._buffer)

    def __len__(self) -> int:
        return len(self._buffer)

    def __repr__(self) -> str:
        return f"ModeHistory({self.to_tokens()!r}, capacity={self.capacity})"


class SessionModeLog:
    """
    Session-scoped mode history: one buffer for the whole session plus one
    buffer per item seen in it.
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_SIZE):
        self.capacity = capacity
        self.session = ModeHistory(capacity=capacity)
        self._items: dict[str, ModeHistory] = {}

    def for_item(self, item_id: str) -> ModeHistory:
        history = self._items.get(item_id)
        if history is None:
            history = ModeHistory(capacity=self.capacity)
            self._items[item_id] = history
        return history

    def record(self, item_id: str, mode: RetrievalMode) -> None:
        self.for_item(item_id).record(mode)
        self.session.record(mode)

    def item_ids(self) -> list[str]:
        return list(self._items)

    def last_mode(self, item_id: str) -> Optional[RetrievalMode]:
        history = self._items.get(item_id)
        if history is None or not len(history):
            return None
        return history.last(1)[0]
