"""
Redis-backed memoization for menu authorization results and badges.

Results are keyed by node identity plus a context key derived from the
request principal, expire after the node's TTL and are never invalidated
explicitly beyond ``forget``/``flush``.
"""

import logging
from collections.abc import Callable
from typing import Any

import orjson
from redis import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import RedisError

from admin_panel.context import PanelContext, default_context_key

logger = logging.getLogger(__name__)

AUTH_KEY_PREFIX = "menu_auth_"
BADGE_KEY_PREFIX = "menu_badge_"


class MenuAuthorizationCache:
    """
    Cache store for menu authorization decisions.

    Features:
    - Injectable context-key strategy (defaults to the principal id)
    - Per-node TTL, falling back to ``default_ttl``
    - Graceful fallback to direct predicate calls when Redis is unavailable
    - JSON serialization with orjson
    """

    def __init__(
        self,
        redis_client: Redis | None,
        default_ttl: int = 300,
        enabled: bool = True,
        context_key: Callable[[PanelContext | None], str] = default_context_key,
    ):
        """
        Initialize the authorization cache.

        Args:
            redis_client: Redis client instance (None = caching disabled)
            default_ttl: TTL in seconds used when a node gives none
            enabled: Master switch for caching
            context_key: Maps a request context to its cache partition
        """
        self.redis = redis_client
        self.default_ttl = default_ttl
        self.enabled = enabled and redis_client is not None
        self.context_key = context_key

        if self.enabled:
            try:
                self.redis.ping()
                logger.info("Menu authorization cache initialized successfully")
            except (RedisConnectionError, RedisError, AttributeError) as exc:
                logger.warning("Redis unavailable, menu authorization caching disabled: %s", exc)
                self.enabled = False

    def key_for(self, context: PanelContext | None) -> str:
        return self.context_key(context)

    def remember(self, key: str, ttl: int | None, compute: Callable[[], Any]) -> Any:
        """
        Return the cached value for ``key`` or compute, store and return it.

        Errors raised by ``compute`` propagate and nothing is stored.
        """
        if not self.enabled:
            return compute()

        ttl = ttl or self.default_ttl

        try:
            cached = self.redis.get(key)
            if cached is not None:
                logger.debug("Cache HIT: %s", key)
                return orjson.loads(cached)
        except (RedisConnectionError, RedisError) as exc:
            logger.warning("Redis GET error for %s: %s", key, exc)

        logger.debug("Cache MISS: %s", key)
        value = compute()

        try:
            self.redis.setex(key, ttl, orjson.dumps(value))
            logger.debug("Cached: %s (TTL=%ds)", key, ttl)
        except (RedisConnectionError, RedisError, TypeError) as exc:
            logger.warning("Redis SET error for %s: %s", key, exc)

        return value

    def forget(self, key: str) -> bool:
        if not self.enabled:
            return False

        try:
            deleted = self.redis.delete(key)
            if deleted:
                logger.debug("Invalidated key: %s", key)
            return bool(deleted)
        except (RedisConnectionError, RedisError) as exc:
            logger.warning("Redis DELETE error for %s: %s", key, exc)
            return False

    def flush(self) -> int:
        """Drop every cached authorization result and badge value."""
        if not self.enabled:
            return 0

        deleted = 0
        for pattern in (f"{AUTH_KEY_PREFIX}*", f"{BADGE_KEY_PREFIX}*"):
            try:
                keys = list(self.redis.scan_iter(match=pattern, count=100))
                if keys:
                    deleted += self.redis.delete(*keys)
            except (RedisConnectionError, RedisError) as exc:
                logger.warning("Redis invalidation error for %s: %s", pattern, exc)

        if deleted:
            logger.info("Flushed %d menu cache keys", deleted)
        return deleted

    def get_stats(self) -> dict[str, Any]:
        if not self.enabled:
            return {"enabled": False}

        try:
            info = self.redis.info("stats")
            hits = int(info.get("keyspace_hits", 0))
            misses = int(info.get("keyspace_misses", 0))
            total = hits + misses
            return {
                "enabled": True,
                "default_ttl": self.default_ttl,
                "hits": hits,
                "misses": misses,
                "hit_rate": round(hits / total * 100, 2) if total else 0.0,
            }
        except (RedisConnectionError, RedisError) as exc:
            logger.warning("Redis INFO error: %s", exc)
            return {"enabled": True, "error": str(exc)}
