"""Amenity completeness heuristic."""

from __future__ import annotations

from collections.abc import Sequence

from ..datasources.models import AmenityRecord


def is_complete(amenities: Sequence[AmenityRecord] | None) -> bool:
    """Return True when embedded amenities can be served without a follow-up fetch.

    Upstream sometimes embeds amenity stubs without names. A non-empty
    collection counts as complete as soon as one entry carries a name, even if
    the others are stubs.
    """
    if not amenities:
        return False
    return any(amenity.name is not None for amenity in amenities)
