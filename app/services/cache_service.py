"""
CacheService - In-process response cache with per-key TTL.

Cache-aside: the controllers look a response up by a key built from the
request parameters and store the fresh response on a miss. Leaderboard pages
are keyed by (limit, decoded offset), so every undecodable cursor shares the
first-page entry. Expired entries are swept on every write.
"""

import asyncio
import fnmatch
import logging
import time
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)


# ============================================
# 🔑 Keys
# ============================================

LEADERBOARD_PREFIX = "leaderboard"


def leaderboard_cache_key(limit: int, offset: int) -> str:
    return f"{LEADERBOARD_PREFIX}:{limit}:{offset}"


def arena_stats_cache_key(arena_id: str) -> str:
    return f"arena:{arena_id}:stats"


class CacheService:
    """
    In-memory cache simulating Redis

    Values are stored as-is next to their expiry (monotonic clock seconds).
    """

    def __init__(
        self,
        enabled: bool = True,
        default_ttl: int = 30,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._cache: dict[str, tuple[Any, float]] = {}  # key → (value, expiry)
        # key → (lock, callers holding or waiting on it)
        self._locks: dict[str, tuple[asyncio.Lock, int]] = {}
        self.enabled = enabled
        self.default_ttl = default_ttl
        self._clock = clock

    async def get(self, key: str) -> Optional[Any]:
        """
        Get value from cache

        Returns:
            Cached value if exists and not expired, None otherwise
        """
        if not self.enabled:
            return None

        if key not in self._cache:
            return None

        value, expiry = self._cache[key]

        if self._clock() >= expiry:
            del self._cache[key]
            return None

        return value

    async def set(self, key: str, value: Any, ttl: Optional[int] = None):
        """
        Set value in cache

        Args:
            key: Cache key
            value: Value to cache
            ttl: Time-to-live in seconds (None = use default)
        """
        if not self.enabled:
            return

        now = self._clock()
        self._purge_expired(now)

        ttl_seconds = ttl if ttl is not None else self.default_ttl
        self._cache[key] = (value, now + ttl_seconds)

    def _purge_expired(self, now: float):
        expired = [k for k, (_, expiry) in self._cache.items() if now >= expiry]
        for key in expired:
            del self._cache[key]
        if expired:
            logger.debug(f"Purged {len(expired)} expired cache entries")

    async def get_or_set(
        self,
        key: str,
        fetch: Callable[[], Awaitable[Any]],
        ttl: Optional[int] = None,
    ) -> Any:
        """
        Return the cached value for key, computing and storing it on a miss.

        Concurrent misses on the same key wait for the first one, so a key is
        written at most once per TTL window. Errors from fetch are not cached.
        """
        if not self.enabled:
            return await fetch()

        cached = await self.get(key)
        if cached is not None:
            logger.debug(f"Cache hit: {key}")
            return cached

        lock = self._acquire_lock_slot(key)
        try:
            async with lock:
                cached = await self.get(key)
                if cached is not None:
                    logger.debug(f"Cache hit after wait: {key}")
                    return cached

                logger.debug(f"Cache miss: {key}")
                value = await fetch()
                await self.set(key, value, ttl)
                return value
        finally:
            self._release_lock_slot(key)

    def _acquire_lock_slot(self, key: str) -> asyncio.Lock:
        lock, users = self._locks.get(key, (None, 0))
        if lock is None:
            lock = asyncio.Lock()
        self._locks[key] = (lock, users + 1)
        return lock

    def _release_lock_slot(self, key: str):
        lock, users = self._locks[key]
        if users <= 1:
            del self._locks[key]
        else:
            self._locks[key] = (lock, users - 1)

    async def delete(self, key: str):
        """Delete key from cache"""
        self._cache.pop(key, None)

    async def delete_pattern(self, pattern: str) -> int:
        """
        Delete all keys matching a glob pattern

        Example:
            await cache.delete_pattern("leaderboard:*")
        """
        keys_to_delete = [k for k in self._cache if fnmatch.fnmatchcase(k, pattern)]
        for key in keys_to_delete:
            del self._cache[key]
        return len(keys_to_delete)

    async def invalidate_leaderboard(self) -> int:
        """Drop every cached leaderboard page (e.g. after a round resolves)."""
        removed = await self.delete_pattern(f"{LEADERBOARD_PREFIX}:*")
        logger.info(f"Invalidated {removed} leaderboard page(s)")
        return removed

    async def clear(self):
        """Clear entire cache (for testing)"""
        self._cache.clear()

    def get_stats(self) -> dict:
        return {
            "size": len(self._cache),
            "pending_keys": len(self._locks),
            "enabled": self.enabled,
            "default_ttl_seconds": self.default_ttl,
        }
