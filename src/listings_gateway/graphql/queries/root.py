"""
Root GraphQL query definitions
"""

import strawberry

from ..types.listing import Listing


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def featured_listings(self, info: strawberry.Info) -> list[Listing]:
        """Get the listings featured on the home page."""
        from ..resolvers.listing import resolve_featured_listings

        return await resolve_featured_listings(info)

    @strawberry.field
    async def listing(self, info: strawberry.Info, id: strawberry.ID) -> Listing | None:
        """Get a listing by ID."""
        from ..resolvers.listing import resolve_listing

        return await resolve_listing(info, id)
