"""TTL cache for raw upstream payloads."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, Optional, Protocol, TypeVar

T = TypeVar("T")


class CacheStore(Protocol):
    """Key-value store consulted by the fetch layer before hitting an upstream."""

    def get(self, key: str, ttl: Optional[float] = None) -> Optional[Any]:
        ...

    def put(self, key: str, value: Any) -> None:
        ...


@dataclass
class CacheEntry(Generic[T]):
    """A cached value with the time it was fetched."""

    value: T
    fetched_at: float

    def age(self, now: float) -> float:
        return now - self.fetched_at


def make_cache_key(source: str, sport: str, **params: Any) -> str:
    """Build a composite key from every request-distinguishing parameter.

    None-valued params are omitted so optional filters don't fragment the cache.

    Example:
        make_cache_key("espn", "soccer/eng.1", dates="20261018")
        # -> "espn:soccer/eng.1:dates=20261018"
    """
    parts = [source, sport]
    for name in sorted(params):
        value = params[name]
        if value is None:
            continue
        parts.append(f"{name}={value}")
    return ":".join(parts)


class TTLCache(Generic[T]):
    """Simple TTL (time-to-live) cache.

    Freshness is checked on read: an entry older than the TTL is treated as a
    miss and dropped. Writes always overwrite. There is no size bound and no
    locking, so two concurrent misses for the same key both fetch and the
    later write wins.

    Example:
        cache = TTLCache[dict](ttl_seconds=120)

        cache.put("theodds:basketball_nba", payload)

        # Returns None once 120s have passed
        value = cache.get("theodds:basketball_nba")

        # Async get-or-fetch pattern
        value = await cache.get_or_fetch("key", fetch_data)
    """

    def __init__(
        self,
        ttl_seconds: float = 120,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize cache.

        Args:
            ttl_seconds: Default time-to-live for cached values
            clock: Time source returning seconds; injectable for tests
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._cache: Dict[str, CacheEntry[T]] = {}

    def get_entry(self, key: str, ttl: Optional[float] = None) -> Optional[CacheEntry[T]]:
        """Return the fresh entry for key, or None on miss/expiry."""
        entry = self._cache.get(key)
        if entry is None:
            return None
        ttl_seconds = ttl if ttl is not None else self.ttl_seconds
        if entry.age(self._clock()) >= ttl_seconds:
            del self._cache[key]
            return None
        return entry

    def get(self, key: str, ttl: Optional[float] = None) -> Optional[T]:
        """Get a value from cache.

        Args:
            key: Cache key
            ttl: Optional override for TTL (seconds)

        Returns:
            Cached value if present and younger than the TTL, None otherwise.
        """
        entry = self.get_entry(key, ttl)
        return entry.value if entry is not None else None

    def put(self, key: str, value: T) -> None:
        """Store a value, overwriting any previous entry."""
        self._cache[key] = CacheEntry(value=value, fetched_at=self._clock())

    async def get_or_fetch(
        self,
        key: str,
        fetch_fn: Callable[[], Awaitable[T]],
        ttl: Optional[float] = None,
    ) -> T:
        """Get from cache or fetch and cache.

        Exceptions raised by fetch_fn propagate and leave the cache untouched.
        """
        value = self.get(key, ttl)
        if value is not None:
            return value
        value = await fetch_fn()
        self.put(key, value)
        return value

    def invalidate(self, key: str) -> bool:
        """Remove a key from cache.

        Returns:
            True if key was present, False otherwise.
        """
        if key in self._cache:
            del self._cache[key]
            return True
        return False

    def clear(self) -> int:
        """Clear all cached values.

        Returns:
            Number of entries cleared.
        """
        count = len(self._cache)
        self._cache.clear()
        return count

    def __len__(self) -> int:
        """Number of entries in cache (including expired)."""
        return len(self._cache)

    def __contains__(self, key: str) -> bool:
        """Check if key is in cache and not expired."""
        return self.get_entry(key) is not None


__all__ = ["CacheStore", "CacheEntry", "TTLCache", "make_cache_key"]
