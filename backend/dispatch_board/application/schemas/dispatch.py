"""Pydantic DTOs for dispatch records and their stage transitions."""

from datetime import datetime
from typing import Any

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityResponse
from dispatch_board.domain.entities import (
    DispatchRecord,
    DispatchStatus,
    PaymentMethod,
    PermitStatus,
)


class DispatchCreate(CamelModel):
    """A vehicle entering the station."""

    vehicle_id: str = Field(..., min_length=1)
    driver_id: str = Field(..., min_length=1)
    route_id: str = Field(..., min_length=1)
    entry_time: datetime
    schedule_id: str | None = None
    notes: str | None = None


class DispatchRecordPatch(CamelModel):
    """Extra fields sent along with a status transition; only set fields are sent."""

    passenger_drop_time: datetime | None = None
    passengers_arrived: int | None = Field(None, ge=0)
    planned_departure_time: datetime | None = None
    transport_order_code: str | None = None
    seat_count: int | None = Field(None, ge=0)
    permit_status: PermitStatus | None = None
    rejection_reason: str | None = None
    payment_amount: float | None = Field(None, ge=0)
    payment_method: PaymentMethod | None = None
    invoice_number: str | None = None
    passengers_departing: int | None = Field(None, ge=0)
    exit_time: datetime | None = None
    notes: str | None = None
    metadata: dict[str, Any] | None = None


class PermitRequest(CamelModel):
    permit_number: str = Field(..., min_length=1)
    departure_time: datetime
    seat_count: int = Field(..., ge=0)


class PaymentRequest(CamelModel):
    amount: float = Field(..., ge=0)


class DepartRequest(CamelModel):
    exit_time: datetime
    passenger_count: int = Field(..., ge=0)


class DispatchRecordResponse(EntityResponse):
    entity_class = DispatchRecord

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
    passenger_drop_time: datetime | None = None
    passengers_arrived: int | None = None
    passenger_drop_by: str | None = None
    boarding_permit_time: datetime | None = None
    planned_departure_time: datetime | None = None
    transport_order_code: str | None = None
    seat_count: int | None = None
    permit_status: PermitStatus | None = None
    rejection_reason: str | None = None
    boarding_permit_by: str | None = None
    payment_time: datetime | None = None
    payment_amount: float | None = None
    payment_method: PaymentMethod | None = None
    invoice_number: str | None = None
    payment_by: str | None = None
    departure_order_time: datetime | None = None
    passengers_departing: int | None = None
    departure_order_by: str | None = None
    exit_time: datetime | None = None
    exit_by: str | None = None
    notes: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None
