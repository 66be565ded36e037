import json
import logging
import re

import redis.asyncio as redis

from comments.config import settings

logger = logging.getLogger(__name__)

# Characters SCAN MATCH treats as glob syntax.
_GLOB_CHARS_RE = re.compile(r"([*?\[\]\\])")


def escape_glob(value: str) -> str:
    """Escape *value* so a SCAN MATCH pattern matches it literally."""
    return _GLOB_CHARS_RE.sub(r"\\\1", value)


class CacheManager:
    """
    Redis store for cached comment pages.

    Without a Redis connection every read is a miss and every write or
    invalidation is skipped, so listings fall through to the database.
    """

    def __init__(self) -> None:
        self._redis: redis.Redis | None = None
        self._hits: int = 0
        self._misses: int = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def connect(self) -> None:
        """Connect to ``settings.REDIS_URL``; run from the app lifespan."""
        self._redis = redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=2,
            socket_timeout=2,
        )
        try:
            await self._redis.ping()
            logger.info("Redis connected: %s", settings.REDIS_URL)
        except Exception as exc:  # pragma: no cover
            logger.warning("Redis ping failed, comment cache disabled: %s", exc)

    async def disconnect(self) -> None:
        """Drop the Redis connection when the app shuts down."""
        if self._redis:
            await self._redis.aclose()
            self._redis = None

    # ------------------------------------------------------------------
    # Core cache operations
    # ------------------------------------------------------------------

    async def get(self, key: str) -> dict | list | None:
        """Decode the JSON page stored at *key*; None when absent or Redis fails."""
        if not self._redis:
            self._misses += 1
            return None
        try:
            data = await self._redis.get(key)
            if data is not None:
                self._hits += 1
                return json.loads(data)
            self._misses += 1
            return None
        except Exception as exc:
            logger.debug("Cache GET error for key=%r: %s", key, exc)
            self._misses += 1
            return None

    async def set(self, key: str, value: dict | list, ttl: int | None = None) -> None:
        """Store *value* as JSON under *key*, expiring after *ttl* seconds."""
        if not self._redis:
            return
        try:
            await self._redis.set(key, json.dumps(value, default=str), ex=ttl)
        except Exception as exc:
            logger.debug("Cache SET error for key=%r: %s", key, exc)

    async def delete_pattern(self, pattern: str) -> None:
        """
        Delete every key matching the SCAN glob *pattern*.

        Callers must escape literal parts with ``escape_glob``.
        """
        if not self._redis:
            return
        try:
            keys: list[str] = []
            async for key in self._redis.scan_iter(match=pattern):
                keys.append(key)
            if keys:
                await self._redis.delete(*keys)
                logger.debug("Cache invalidated %d key(s) matching %r", len(keys), pattern)
        except Exception as exc:
            logger.debug("Cache DELETE_PATTERN error for pattern=%r: %s", pattern, exc)

    # ------------------------------------------------------------------
    # Comment keys
    # ------------------------------------------------------------------

    @staticmethod
    def list_key(video_id: str, limit: int, offset: int) -> str:
        return f"comments:list:{video_id}:{limit}:{offset}"

    async def invalidate_comments(self, video_id: str | None = None) -> None:
        """
        Drop cached comment pages.

        With *video_id* only that video's pages go; without it every
        cached page is purged.
        """
        if video_id is None:
            await self.delete_pattern("comments:list:*")
        else:
            await self.delete_pattern(f"comments:list:{escape_glob(video_id)}:*")

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    @property
    def stats(self) -> dict:
        """Return a snapshot of hit/miss counters for the metrics endpoint."""
        total = self._hits + self._misses
        return {
            "hits": self._hits,
            "misses": self._misses,
            "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
        }


# Module-level singleton shared across all request handlers.
cache = CacheManager()
