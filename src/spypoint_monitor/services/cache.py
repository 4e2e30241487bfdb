"""Single-slot time-boxed cache."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Generic, TypeVar

T = TypeVar("T")


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class _CacheEntry(Generic[T]):
    value: T
    expires_at: datetime


class SingleSlotCache(Generic[T]):
    """Holds one value for a fixed duration from the moment it was written.

    Reads and writes are not coordinated, so concurrent misses may each load
    and overwrite the slot.
    """

    def __init__(
        self, ttl_seconds: float, clock: Callable[[], datetime] = _utc_now
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entry: _CacheEntry[T] | None = None

    def get(self) -> T | None:
        """Return the cached value if it hasn't expired."""
        entry = self._entry
        if entry is None:
            return None
        if self._clock() >= entry.expires_at:
            self._entry = None
            return None
        return entry.value

    def set(self, value: T) -> None:
        """Store a value, replacing any previous one."""
        expires_at = self._clock() + timedelta(seconds=self.ttl_seconds)
        self._entry = _CacheEntry(value=value, expires_at=expires_at)

    def clear(self) -> None:
        """Drop the cached value."""
        self._entry = None

    async def get_or_load(self, loader: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value, calling ``loader`` to refill on a miss."""
        cached = self.get()
        if cached is not None:
            return cached
        value = await loader()
        self.set(value)
        return value
