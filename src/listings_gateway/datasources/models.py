"""Typed wire contract for the listings REST service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AmenityRecord(BaseModel):
    """An amenity as returned by upstream, embedded or standalone."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str | None = None
    category: str | None = None
    name: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ListingRecord(BaseModel):
    """A listing as returned by upstream.

    ``amenities`` is None when upstream omits the collection entirely.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: str
    title: str | None = None
    description: str | None = None
    photo_thumbnail: str | None = Field(default=None, alias="photoThumbnail")
    num_of_beds: int | None = Field(default=None, alias="numOfBeds")
    cost_per_night: float | None = Field(default=None, alias="costPerNight")
    closed_for_bookings: bool | None = Field(default=None, alias="closedForBookings")
    amenities: list[AmenityRecord] | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        # Upstream is inconsistent about numeric vs string identifiers
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
