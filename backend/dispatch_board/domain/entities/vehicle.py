"""Domain entities for vehicles and their registration documents."""

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass
class VehicleDocument:
    """One paper carried by a vehicle (registration, inspection, insurance...)."""

    number: str
    issue_date: date
    expiry_date: date
    is_valid: bool = True
    issuing_authority: str | None = None
    document_url: str | None = None
    notes: str | None = None


@dataclass
class Vehicle:
    """A coach or bus owned by an operator.

    ``documents`` is keyed by document kind, e.g. ``registration`` or
    ``operation_permit``.
    """

    id: str
    plate_number: str
    operator_id: str
    seat_capacity: int
    is_active: bool = True
    vehicle_type_id: str | None = None
    manufacture_year: int | None = None
    chassis_number: str | None = None
    engine_number: str | None = None
    color: str | None = None
    notes: str | None = None
    documents: dict[str, VehicleDocument] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None
