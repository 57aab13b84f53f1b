"""
Listing and amenity GraphQL type definitions
"""

import strawberry

from ...datasources.models import AmenityRecord, ListingRecord


@strawberry.type
class Amenity:
    """A named feature of a listing."""

    id: strawberry.ID | None
    category: str | None
    name: str

    @classmethod
    def from_record(cls, record: AmenityRecord) -> "Amenity":
        return cls(
            id=strawberry.ID(record.id) if record.id is not None else None,
            category=record.category,
            # Nameless amenities surface as a non-null violation for this entry
            name=record.name,  # type: ignore[arg-type]
        )


@strawberry.type
class Listing:
    """A rentable property."""

    id: strawberry.ID
    title: str | None
    description: str | None
    photo_thumbnail: str | None
    num_of_beds: int | None
    cost_per_night: float | None
    closed_for_bookings: bool | None

    embedded_amenities: strawberry.Private[list[AmenityRecord] | None] = None

    @strawberry.field
    async def amenities(self, info: strawberry.Info) -> list[Amenity]:
        """Amenities of this listing, fetched only when the embedded ones are incomplete."""
        from ..resolvers.listing import resolve_listing_amenities

        return await resolve_listing_amenities(self, info)

    @classmethod
    def from_record(cls, record: ListingRecord) -> "Listing":
        return cls(
            id=strawberry.ID(record.id),
            title=record.title,
            description=record.description,
            photo_thumbnail=record.photo_thumbnail,
            num_of_beds=record.num_of_beds,
            cost_per_night=record.cost_per_night,
            closed_for_bookings=record.closed_for_bookings,
            embedded_amenities=record.amenities,
        )
