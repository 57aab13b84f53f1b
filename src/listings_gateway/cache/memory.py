"""In-process LRU cache with per-entry expiry."""

from __future__ import annotations

from time import monotonic
from collections import OrderedDict

from ..logging import get_logger

logger = get_logger(__name__)


class InMemoryResponseCache:
    """Bounded in-memory cache, evicting least recently used entries first.

    No method awaits while mutating the store, so the cache is safe to share
    between tasks on one event loop.
    """

    def __init__(self, max_entries: int = 1024):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._entries: OrderedDict[str, tuple[float, str]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    async def get(self, key: str) -> str | None:
        entry = self._entries.get(key)
        if entry is None:
            return None

        expires_at, value = entry
        if expires_at <= monotonic():
            del self._entries[key]
            return None

        self._entries.move_to_end(key)
        return value

    async def set(self, key: str, value: str, ttl: int) -> None:
        if ttl <= 0:
            return

        self._entries[key] = (monotonic() + ttl, value)
        self._entries.move_to_end(key)

        while len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Evicted cache entry", key=evicted)

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        self._entries.clear()
