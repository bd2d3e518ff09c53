"""Pydantic DTOs for the VehicleType resource."""

from datetime import datetime

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityResponse
from dispatch_board.domain.entities import VehicleType


class VehicleTypeCreate(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class VehicleTypeUpdate(CamelModel):
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None


class VehicleTypeResponse(EntityResponse):
    entity_class = VehicleType

    id: str
    name: str
    description: str | None = None
    created_at: datetime | None = None
