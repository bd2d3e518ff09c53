"""Domain entity for dispatch records, one per vehicle visit to the station."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Literal


class DispatchStatus(str, Enum):
    """Stages a vehicle passes through between entering and leaving the station."""

    ENTERED = "entered"
    PASSENGERS_DROPPED = "passengers_dropped"
    PERMIT_ISSUED = "permit_issued"
    PERMIT_REJECTED = "permit_rejected"
    PAID = "paid"
    DEPARTURE_ORDERED = "departure_ordered"
    DEPARTED = "departed"


class PermitStatus(str, Enum):
    APPROVED = "approved"
    REJECTED = "rejected"
    PENDING = "pending"


class PaymentMethod(str, Enum):
    CASH = "cash"
    BANK_TRANSFER = "bank_transfer"
    CARD = "card"


ALL_TAB = "all"

DispatchTab = DispatchStatus | Literal["all"]


@dataclass
class DispatchRecord:
    """A vehicle's pass through the station.

    Each stage (entry, passenger drop, boarding permit, payment, departure
    order, exit) fills its own timestamp and actor fields; ``current_status``
    tracks the latest stage reached.
    """

    id: str
    vehicle_id: str
    vehicle_plate_number: str
    driver_id: str
    driver_name: str
    route_id: str
    route_name: str
    entry_time: datetime
    current_status: DispatchStatus = DispatchStatus.ENTERED
    schedule_id: str | None = None
    entry_by: str | None = None

    # Passenger drop
    passenger_drop_time: datetime | None = None
    passengers_arrived: int | None = None
    passenger_drop_by: str | None = None

    # Boarding permit
    boarding_permit_time: datetime | None = None
    planned_departure_time: datetime | None = None
    transport_order_code: str | None = None
    seat_count: int | None = None
    permit_status: PermitStatus | None = None
    rejection_reason: str | None = None
    boarding_permit_by: str | None = None

    # Payment
    payment_time: datetime | None = None
    payment_amount: float | None = None
    payment_method: PaymentMethod | None = None
    invoice_number: str | None = None
    payment_by: str | None = None

    # Departure order and exit
    departure_order_time: datetime | None = None
    passengers_departing: int | None = None
    departure_order_by: str | None = None
    exit_time: datetime | None = None
    exit_by: str | None = None

    notes: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None
