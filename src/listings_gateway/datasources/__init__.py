"""Upstream data sources."""

from .listing_api import ListingAPI
from .models import AmenityRecord, ListingRecord

__all__ = ["ListingAPI", "ListingRecord", "AmenityRecord"]
