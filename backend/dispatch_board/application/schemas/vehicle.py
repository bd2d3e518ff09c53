"""Pydantic DTOs for the Vehicle resource."""

from datetime import date, datetime
from typing import Literal

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityResponse
from dispatch_board.domain.entities import Vehicle, VehicleDocument

DocumentKind = Literal["registration", "inspection", "insurance", "operation_permit", "emblem"]


class VehicleDocumentSchema(CamelModel):
    number: str = Field(..., min_length=1)
    issue_date: date
    expiry_date: date
    is_valid: bool = True
    issuing_authority: str | None = None
    document_url: str | None = None
    notes: str | None = None


class VehicleCreate(CamelModel):
    """Schema for registering a vehicle with the station."""

    plate_number: str = Field(..., min_length=1)
    operator_id: str = Field(..., min_length=1)
    seat_capacity: int = Field(..., gt=0)
    vehicle_type_id: str | None = None
    manufacture_year: int | None = Field(None, ge=1900)
    chassis_number: str | None = None
    engine_number: str | None = None
    color: str | None = None
    notes: str | None = None
    documents: dict[DocumentKind, VehicleDocumentSchema] | None = None


class VehicleUpdate(CamelModel):
    plate_number: str | None = None
    operator_id: str | None = None
    seat_capacity: int | None = Field(None, gt=0)
    vehicle_type_id: str | None = None
    manufacture_year: int | None = Field(None, ge=1900)
    chassis_number: str | None = None
    engine_number: str | None = None
    color: str | None = None
    notes: str | None = None
    documents: dict[DocumentKind, VehicleDocumentSchema] | None = None
    is_active: bool | None = None


class VehicleResponse(EntityResponse):
    entity_class = Vehicle

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
    documents: dict[str, VehicleDocumentSchema] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_entity(self) -> Vehicle:
        data = self.model_dump(exclude={"documents"})
        documents = {
            kind: VehicleDocument(**doc.model_dump())
            for kind, doc in (self.documents or {}).items()
        }
        return Vehicle(**data, documents=documents)
