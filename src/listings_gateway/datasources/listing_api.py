"""Client for the listings REST service.

One ``ListingAPI`` is built per GraphQL operation. The underlying
``httpx.AsyncClient`` connection pool and the response cache are owned by the
application and shared by every instance.
"""

from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote, urljoin

import httpx
from pydantic import TypeAdapter, ValidationError

from ..cache.base import ResponseCache
from ..errors import NotFoundError, UpstreamError
from ..logging import get_logger
from .models import AmenityRecord, ListingRecord

logger = get_logger(__name__)

_listings_adapter = TypeAdapter(list[ListingRecord])
_listing_adapter = TypeAdapter(ListingRecord)
_amenities_adapter = TypeAdapter(list[AmenityRecord])

_UNCACHEABLE_DIRECTIVES = {"no-store", "no-cache", "private"}


def cache_ttl_from_headers(headers: httpx.Headers, default_ttl: int = 0) -> int:
    """Derive how long a response may be cached from its Cache-Control header.

    ``s-maxage`` wins over ``max-age``. Without any directive ``default_ttl``
    applies. Returns 0 when the response must not be cached.
    """
    cache_control = headers.get("cache-control")
    if not cache_control:
        return default_ttl

    directives: dict[str, str | None] = {}
    for part in cache_control.split(","):
        name, _, value = part.strip().partition("=")
        if name:
            directives[name.lower()] = value.strip('"') if value else None

    if _UNCACHEABLE_DIRECTIVES & directives.keys():
        return 0

    for name in ("s-maxage", "max-age"):
        raw = directives.get(name)
        if raw is not None:
            try:
                return max(int(raw), 0)
            except ValueError:
                return 0

    return default_ttl


def _quote_id(listing_id: str) -> str:
    if not listing_id:
        raise ValueError("listing_id must be a non-empty string")
    return quote(listing_id, safe="")


class ListingAPI:
    """REST data source for listings and amenities."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        cache: ResponseCache,
        base_url: str,
        default_ttl: int = 0,
    ):
        self._client = client
        self._cache = cache
        self.base_url = base_url if base_url.endswith("/") else base_url + "/"
        self.default_ttl = default_ttl

    async def get_featured_listings(self) -> list[ListingRecord]:
        """Fetch the featured listings in upstream order."""
        url, data = await self._get("featured-listings")
        return self._parse(_listings_adapter, data, url)

    async def get_listing(self, listing_id: str) -> ListingRecord:
        """Fetch one listing.

        Raises:
            NotFoundError: If upstream has no listing with this ID
            UpstreamError: For any other upstream failure
        """
        url, data = await self._get(f"listings/{_quote_id(listing_id)}")
        return self._parse(_listing_adapter, data, url)

    async def get_amenities(self, listing_id: str) -> list[AmenityRecord]:
        """Fetch the amenities of one listing in upstream order."""
        url, data = await self._get(f"listings/{_quote_id(listing_id)}/amenities")
        return self._parse(_amenities_adapter, data, url)

    async def _get(self, path: str) -> tuple[str, Any]:
        url = urljoin(self.base_url, path)

        cached = await self._cache.get(url)
        if cached is not None:
            logger.debug("Upstream cache hit", url=url)
            return url, self._decode(cached, url)

        try:
            response = await self._client.get(url, headers={"Accept": "application/json"})
        except httpx.HTTPError as e:
            logger.warning("Upstream request failed", url=url, error=str(e))
            raise UpstreamError(f"Request to {url} failed: {e}", url=url) from e

        if response.status_code == 404:
            logger.info("Upstream resource not found", url=url)
            raise NotFoundError(f"Upstream returned 404 for {url}", url=url, status_code=404)

        if not response.is_success:
            logger.warning("Upstream returned error status", url=url, status_code=response.status_code)
            raise UpstreamError(
                f"Upstream returned {response.status_code} for {url}",
                url=url,
                status_code=response.status_code,
            )

        body = response.text
        data = self._decode(body, url)

        ttl = cache_ttl_from_headers(response.headers, self.default_ttl)
        if ttl > 0:
            await self._cache.set(url, body, ttl)

        return url, data

    @staticmethod
    def _decode(body: str, url: str) -> Any:
        try:
            return json.loads(body)
        except json.JSONDecodeError as e:
            logger.warning("Upstream sent malformed JSON", url=url, error=str(e))
            raise UpstreamError(f"Malformed JSON from {url}: {e}", url=url) from e

    @staticmethod
    def _parse(adapter: TypeAdapter, data: Any, url: str) -> Any:
        try:
            return adapter.validate_python(data)
        except ValidationError as e:
            logger.warning("Upstream payload has unexpected shape", url=url, errors=e.error_count())
            raise UpstreamError(f"Unexpected payload shape from {url}", url=url) from e
