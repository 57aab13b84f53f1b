"""Factory for the configured response cache backend."""

from __future__ import annotations

from ..config import Settings
from ..logging import get_logger
from .base import ResponseCache
from .memory import InMemoryResponseCache

logger = get_logger(__name__)


def create_response_cache(settings: Settings) -> ResponseCache:
    """Create the response cache selected by ``settings.cache_backend``.

    Raises:
        ValueError: If the backend name is unknown
    """
    backend = settings.cache_backend

    if backend == "memory":
        logger.info("Using in-memory response cache", max_entries=settings.cache_max_entries)
        return InMemoryResponseCache(max_entries=settings.cache_max_entries)

    if backend == "redis":
        from .redis_cache import RedisResponseCache

        logger.info("Using Redis response cache", key_prefix=settings.cache_key_prefix)
        return RedisResponseCache.from_url(settings.redis_url, key_prefix=settings.cache_key_prefix)

    raise ValueError(f"Unknown cache backend: {backend}")
