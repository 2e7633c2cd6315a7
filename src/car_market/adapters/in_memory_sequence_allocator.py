from __future__ import annotations

import threading

from car_market.ports.sequence_allocator import SequenceAllocator


class InMemorySequenceAllocator(SequenceAllocator):
    """
    Canonical contract implementation for tests.

    - Counters start at 0 and are created by their first allocation
    - Increment and read happen under one lock, emulating the store's
      atomic increment-and-fetch
    """

    def __init__(self, initial: dict[str, int] | None = None) -> None:
        self._counters: dict[str, int] = dict(initial or {})
        self._lock = threading.Lock()

    def allocate(self, counter_name: str) -> int:
        with self._lock:
            value = self._counters.get(counter_name, 0) + 1
            self._counters[counter_name] = value
            return value

    def current(self, counter_name: str) -> int:
        """Last allocated value (0 if the counter was never used)."""
        with self._lock:
            return self._counters.get(counter_name, 0)
