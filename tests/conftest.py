"""
Shared pytest fixtures and configuration for all tests.
"""

import os
import sys
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

# Add src directory to path so imports work without an install
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from listings_gateway.config import Settings  # noqa: E402

UPSTREAM_BASE_URL = "https://upstream.test/"


class StubUpstream:
    """Scriptable stand-in for the listings REST service.

    Routes are keyed by path relative to the base URL. Unknown paths 404.
    Every request is recorded in ``calls``.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Callable[[httpx.Request], httpx.Response]] = {}
        self.calls: list[str] = []

    def add(
        self,
        path: str,
        json: Any = None,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content, headers=headers)
            return httpx.Response(status_code, json=json, headers=headers)

        self.routes[path] = respond

    def fail(self, path: str, error: Exception) -> None:
        def respond(request: httpx.Request) -> httpx.Response:
            raise error

        self.routes[path] = respond

    def count(self, path: str) -> int:
        return self.calls.count(path)

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.raw_path.decode("ascii").split("?")[0].lstrip("/")
        self.calls.append(path)
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return route(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream() -> StubUpstream:
    """Provide an empty upstream stub."""
    return StubUpstream()


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the stub upstream with the in-memory cache."""
    return Settings(
        upstream_base_url=UPSTREAM_BASE_URL,
        cache_backend="memory",
        cache_default_ttl=0,
        graphiql=False,
        debug=False,
    )


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")  # type: ignore[reportUnknownMemberType]
    config.addinivalue_line("markers", "integration: mark test as integration test")  # type: ignore[reportUnknownMemberType]
