"""Domain entities for routes and their intermediate stops."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class RouteStop:
    location_id: str
    stop_order: int
    id: str | None = None
    distance_from_origin_km: float | None = None
    estimated_minutes_from_origin: int | None = None


@dataclass
class Route:
    """A line between two locations, with optional ordered stops."""

    id: str
    route_code: str
    route_name: str
    origin_id: str
    destination_id: str
    is_active: bool = True
    distance_km: float | None = None
    estimated_duration_minutes: int | None = None
    stops: list[RouteStop] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
