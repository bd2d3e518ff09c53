"""Pydantic DTOs for the Route resource."""

from datetime import datetime

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityFilter, EntityResponse
from dispatch_board.domain.entities import Route, RouteStop


class RouteStopSchema(CamelModel):
    location_id: str = Field(..., min_length=1)
    stop_order: int = Field(..., ge=1)
    id: str | None = None
    distance_from_origin_km: float | None = Field(None, ge=0)
    estimated_minutes_from_origin: int | None = Field(None, ge=0)


class RouteCreate(CamelModel):
    route_code: str = Field(..., min_length=1)
    route_name: str = Field(..., min_length=1)
    origin_id: str = Field(..., min_length=1)
    destination_id: str = Field(..., min_length=1)
    distance_km: float | None = Field(None, ge=0)
    estimated_duration_minutes: int | None = Field(None, ge=0)
    stops: list[RouteStopSchema] | None = None


class RouteUpdate(CamelModel):
    route_code: str | None = None
    route_name: str | None = None
    origin_id: str | None = None
    destination_id: str | None = None
    distance_km: float | None = Field(None, ge=0)
    estimated_duration_minutes: int | None = Field(None, ge=0)
    stops: list[RouteStopSchema] | None = None
    is_active: bool | None = None


class RouteFilter(EntityFilter):
    origin_id: str | None = None
    destination_id: str | None = None
    is_active: bool | None = None


class RouteResponse(EntityResponse):
    entity_class = Route

    id: str
    route_code: str
    route_name: str
    origin_id: str
    destination_id: str
    is_active: bool = True
    distance_km: float | None = None
    estimated_duration_minutes: int | None = None
    stops: list[RouteStopSchema] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_entity(self) -> Route:
        """Map onto ``Route`` with stops sorted by their order on the line."""
        stops = sorted(
            (RouteStop(**stop.model_dump()) for stop in self.stops or []),
            key=lambda stop: stop.stop_order,
        )
        return Route(**self.model_dump(exclude={"stops"}), stops=stops)
