"""Domain entity for vehicle categories."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class VehicleType:
    id: str
    name: str
    description: str | None = None
    created_at: datetime | None = None
