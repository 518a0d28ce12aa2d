"""TTL-based in-memory cache with an injectable clock."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CachedEntry:
    """Cached value with timestamp."""

    data: Any
    cached_at: datetime


class TTLCache:
    """In-memory TTL cache keyed by case-insensitive strings.

    Entries expire ``ttl_seconds`` after they were stored. Time comes from
    the injected ``clock`` so expiry can be driven without real time passing.
    """

    def __init__(self, ttl_seconds: int = 30, clock: Optional[Clock] = None) -> None:
        """Initialize the cache.

        Args:
            ttl_seconds: How long cached entries remain valid (default: 30s)
            clock: Zero-argument callable returning an aware ``datetime``
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock or _utc_now
        self._cache: Dict[str, CachedEntry] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def _make_key(self, key: str) -> str:
        return key.lower()

    def _is_expired(self, cached: CachedEntry) -> bool:
        """Check if a cached entry has expired."""
        age = self._clock() - cached.cached_at
        return age > timedelta(seconds=self.ttl_seconds)

    def get(self, key: str) -> Optional[Any]:
        """Get cached data if available and not expired.

        Args:
            key: Cache key

        Returns:
            Cached data if fresh, None if missing or expired
        """
        cache_key = self._make_key(key)

        with self._lock:
            cached = self._cache.get(cache_key)

            if cached is None:
                self._misses += 1
                return None

            if self._is_expired(cached):
                del self._cache[cache_key]
                self._misses += 1
                logger.debug(f"Evicted expired cache entry {cache_key!r}")
                return None

            self._hits += 1
            return cached.data

    def set(self, key: str, data: Any) -> None:
        """Store data in the cache, replacing any existing entry."""
        with self._lock:
            self._cache[self._make_key(key)] = CachedEntry(
                data=data,
                cached_at=self._clock(),
            )

    def evict(self, key: str) -> bool:
        """Remove a single entry.

        Returns:
            True if an entry was removed
        """
        with self._lock:
            return self._cache.pop(self._make_key(key), None) is not None

    def clear(self) -> int:
        """Clear all cached entries.

        Returns:
            Number of entries cleared
        """
        with self._lock:
            count = len(self._cache)
            self._cache.clear()
            return count

    def cleanup_expired(self) -> int:
        """Remove expired entries from the cache.

        Returns:
            Number of entries removed
        """
        with self._lock:
            expired_keys = [
                key for key, cached in self._cache.items()
                if self._is_expired(cached)
            ]
            for key in expired_keys:
                del self._cache[key]
            if expired_keys:
                logger.debug(f"Removed {len(expired_keys)} expired cache entries")
            return len(expired_keys)

    def __len__(self) -> int:
        return len(self._cache)

    @property
    def stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            "size": len(self._cache),
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / (self._hits + self._misses) * 100, 1)
            if (self._hits + self._misses) > 0
            else 0.0,
        }
