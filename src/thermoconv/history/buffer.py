"""Bounded, newest-first history of saved conversions.

Records are inserted at the front; once the buffer holds more than its
capacity the oldest entries are dropped from the tail. Subscribers are
called synchronously after every mutation so a display never shows stale
state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from thermoconv.history.models import ConversionRecord

logger = logging.getLogger(__name__)

MAX_HISTORY_ITEMS = 10


class HistoryBuffer:
    """In-memory conversion history, capped at *capacity* records.

    Parameters
    ----------
    capacity:
        Maximum number of records kept. Defaults to :data:`MAX_HISTORY_ITEMS`.
    """

    def __init__(self, capacity: int = MAX_HISTORY_ITEMS) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._records: list[ConversionRecord] = []
        self._subscribers: list[Callable[[HistoryBuffer], None]] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def records(self) -> tuple[ConversionRecord, ...]:
        """Snapshot of the history, newest first."""
        return tuple(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ConversionRecord]:
        return iter(self.records)

    def add_record(self, record: ConversionRecord) -> None:
        """Insert *record* at the front, trimming the oldest beyond capacity."""
        self._records.insert(0, record)
        if len(self._records) > self._capacity:
            dropped = len(self._records) - self._capacity
            del self._records[self._capacity :]
            logger.debug("History full, dropped %d oldest record(s)", dropped)
        logger.debug("Added record %s (%d/%d)", record.id, len(self), self._capacity)
        self._notify()

    def clear_history(self) -> None:
        """Remove every record."""
        count = len(self._records)
        self._records.clear()
        logger.debug("Cleared %d history record(s)", count)
        self._notify()

    def subscribe(self, callback: Callable[[HistoryBuffer], None]) -> Callable[[], None]:
        """Call *callback* with this buffer after each mutation.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _notify(self) -> None:
        # Every subscriber runs even when an earlier one raises.
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception:
                logger.warning("History subscriber %s failed", callback, exc_info=True)
