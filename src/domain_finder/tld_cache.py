"""
Time-boxed in-memory cache for TLD name lists.

The cache is an explicitly owned object passed to the lookup, holding one value
and the time it was stored. Readers share the value until it is older than the
TTL; a refresh replaces it outright.
"""

import time
from typing import Callable, Optional


DEFAULT_TTL_SECONDS = 60 * 60


class TldCache:
    """
    Single-slot TTL cache.

    Concurrent refreshes are tolerated: the last ``put`` wins and readers only
    ever see a complete list.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Args:
            ttl_seconds: How long a stored list stays fresh
            clock: Monotonic time source in seconds (tests inject a fake)
        """
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._ttl = ttl_seconds
        self._clock = clock
        self._value: Optional[list[str]] = None
        self._stored_at = 0.0

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def is_fresh(self) -> bool:
        return self._value is not None and self._clock() - self._stored_at < self._ttl

    def get(self) -> Optional[list[str]]:
        """Return a copy of the cached list while fresh, else None."""
        if not self.is_fresh():
            return None
        return list(self._value)

    def put(self, names: list[str]) -> None:
        self._value = list(names)
        self._stored_at = self._clock()

    def clear(self) -> None:
        self._value = None
        self._stored_at = 0.0
