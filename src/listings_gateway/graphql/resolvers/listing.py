from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...logging import get_logger
from ..completeness import is_complete
from ..context import get_data_sources

if TYPE_CHECKING:
    from ..types.listing import Amenity, Listing

logger = get_logger(__name__)


# Query resolvers
async def resolve_featured_listings(info: strawberry.Info) -> list[Listing]:
    """Resolve the featured listings, preserving upstream order."""
    from ..types.listing import Listing as ListingType

    records = await get_data_sources(info).listing_api.get_featured_listings()
    return [ListingType.from_record(record) for record in records]


async def resolve_listing(info: strawberry.Info, id: str) -> Listing | None:
    """
    Resolve a single listing by its ID.

    Upstream failures, including 404, propagate as field errors so the
    field resolves to null with an entry in ``errors``.
    """
    from ..types.listing import Listing as ListingType

    record = await get_data_sources(info).listing_api.get_listing(id)
    return ListingType.from_record(record)


# Field resolvers
async def resolve_listing_amenities(listing: Listing, info: strawberry.Info) -> list[Amenity]:
    """
    Resolve amenities for a listing.

    Embedded amenities are returned as-is when they look complete; otherwise
    they are fetched from upstream with exactly one call.
    """
    from ..types.listing import Amenity as AmenityType

    embedded = listing.embedded_amenities
    if embedded is not None and is_complete(embedded):
        logger.debug("Using embedded amenities", listing_id=str(listing.id), count=len(embedded))
        records = embedded
    else:
        logger.debug("Fetching amenities from upstream", listing_id=str(listing.id))
        records = await get_data_sources(info).listing_api.get_amenities(str(listing.id))

    return [AmenityType.from_record(record) for record in records]
