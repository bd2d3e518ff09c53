"""Pydantic DTOs for the Location resource."""

from datetime import datetime

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityFilter, EntityResponse
from dispatch_board.domain.entities import Location


class LocationCreate(CamelModel):
    name: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    province: str | None = None
    district: str | None = None
    address: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)


class LocationUpdate(CamelModel):
    name: str | None = None
    code: str | None = None
    province: str | None = None
    district: str | None = None
    address: str | None = None
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    is_active: bool | None = None


class LocationFilter(EntityFilter):
    province: str | None = None
    is_active: bool | None = None


class LocationResponse(EntityResponse):
    entity_class = Location

    id: str
    name: str
    code: str
    is_active: bool = True
    province: str | None = None
    district: str | None = None
    address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    created_at: datetime | None = None
