"""Domain entity for stations and stop locations."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Location:
    """A named place (bus station, stop) that routes start, end or pass through."""

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
