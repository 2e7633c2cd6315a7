from __future__ import annotations

from abc import ABC, abstractmethod


class SequenceAllocator(ABC):
    """
    Port for named monotonic counters.

    Contract:
        - allocate() is a single atomic increment-and-fetch; read-then-write
          implementations are not acceptable
        - A counter that does not exist yet starts at 0, so its first
          allocation returns 1; creation happens atomically with the increment
        - N concurrent allocations from value V return exactly {V+1, ..., V+N}
        - Allocated values are never handed out again, even if the caller
          fails afterwards
    """

    @abstractmethod
    def allocate(self, counter_name: str) -> int:
        """
        Increment the named counter and return its new value.

        Args:
            counter_name: Counter identifier (e.g. "car_number")

        Returns:
            The post-increment value
        """
        ...
