"""Process-wide response cache used by the upstream client."""

from .base import ResponseCache
from .factory import create_response_cache
from .memory import InMemoryResponseCache

__all__ = ["ResponseCache", "InMemoryResponseCache", "create_response_cache"]
