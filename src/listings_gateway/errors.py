"""Exception hierarchy shared by the upstream client and server bootstrap."""

from __future__ import annotations


class ListingsGatewayError(Exception):
    """Base class for all gateway errors."""


class UpstreamError(ListingsGatewayError):
    """The upstream REST API failed, returned non-2xx, or sent an unusable payload."""

    def __init__(self, message: str, url: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class NotFoundError(UpstreamError):
    """The upstream REST API returned 404 for a single-resource lookup."""


class StartupError(ListingsGatewayError):
    """Schema, cache backend or listener initialization failed."""
