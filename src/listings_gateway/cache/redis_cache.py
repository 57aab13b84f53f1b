"""Redis-backed response cache, shared across gateway processes."""

from __future__ import annotations

import redis.asyncio as redis

from ..logging import get_logger

logger = get_logger(__name__)


class RedisResponseCache:
    """Response cache storing bodies in Redis with native key expiry."""

    def __init__(self, client: redis.Redis, key_prefix: str = ""):
        self._client = client
        self.key_prefix = key_prefix

    @classmethod
    def from_url(cls, url: str, key_prefix: str = "") -> RedisResponseCache:
        pool = redis.ConnectionPool.from_url(
            url,
            decode_responses=True,
            max_connections=50,
            socket_connect_timeout=5,
            socket_timeout=5,
            health_check_interval=30,
        )
        logger.info("Redis connection pool initialized", max_connections=50)
        # The client owns the pool; aclose() disconnects it too
        return cls(redis.Redis.from_pool(pool), key_prefix=key_prefix)

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def get(self, key: str) -> str | None:
        return await self._client.get(self._key(key))

    async def set(self, key: str, value: str, ttl: int) -> None:
        if ttl <= 0:
            return
        await self._client.set(self._key(key), value, ex=ttl)

    async def ping(self) -> None:
        await self._client.ping()

    async def close(self) -> None:
        await self._client.aclose()
        logger.info("Redis client closed")
