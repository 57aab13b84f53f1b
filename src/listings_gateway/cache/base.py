"""Response cache interface."""

from __future__ import annotations

from typing import Protocol


class ResponseCache(Protocol):
    """Key/value store for upstream response bodies.

    Implementations must be safe to share between concurrent requests.
    """

    async def get(self, key: str) -> str | None:
        """Return the cached value for ``key``, or None when absent or expired."""
        ...

    async def set(self, key: str, value: str, ttl: int) -> None:
        """Store ``value`` under ``key`` for ``ttl`` seconds."""
        ...

    async def ping(self) -> None:
        """Raise if the backend is unreachable."""
        ...

    async def close(self) -> None:
        """Release any backend resources."""
        ...
