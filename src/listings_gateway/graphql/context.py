"""Per-operation GraphQL context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import strawberry
from fastapi import Request

from ..datasources.listing_api import ListingAPI


@dataclass
class DataSources:
    """Data sources available to resolvers for a single operation."""

    listing_api: ListingAPI


def build_context(request: Request) -> dict[str, Any]:
    """Build the resolver context for one GraphQL operation.

    A fresh ``ListingAPI`` is created per operation; it shares the
    application-wide HTTP client and response cache from ``app.state``.
    """
    state = request.app.state
    gateway_settings = state.settings

    listing_api = ListingAPI(
        client=state.http_client,
        cache=state.response_cache,
        base_url=gateway_settings.upstream_base_url,
        default_ttl=gateway_settings.cache_default_ttl,
    )
    return {
        "request": request,
        "data_sources": DataSources(listing_api=listing_api),
    }


def get_data_sources(info: strawberry.Info) -> DataSources:
    """Return the data sources bound to the current operation."""
    return info.context["data_sources"]
