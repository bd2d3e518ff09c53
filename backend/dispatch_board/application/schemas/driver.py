"""Pydantic DTOs for the Driver resource."""

from datetime import date, datetime

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityFilter, EntityResponse
from dispatch_board.domain.entities import Driver


class DriverCreate(CamelModel):
    """Schema for registering a new driver."""

    operator_id: str = Field(..., min_length=1)
    full_name: str = Field(..., min_length=1)
    id_number: str = Field(..., min_length=1)
    license_number: str = Field(..., min_length=1)
    license_class: str = Field(..., min_length=1)
    license_expiry_date: date
    date_of_birth: date | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    license_issue_date: date | None = None
    health_certificate_expiry: date | None = None
    image_url: str | None = None
    notes: str | None = None


class DriverUpdate(CamelModel):
    """Schema for a partial driver update; only set fields are sent."""

    operator_id: str | None = None
    full_name: str | None = None
    id_number: str | None = None
    license_number: str | None = None
    license_class: str | None = None
    license_expiry_date: date | None = None
    date_of_birth: date | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    license_issue_date: date | None = None
    health_certificate_expiry: date | None = None
    image_url: str | None = None
    notes: str | None = None
    is_active: bool | None = None


class DriverFilter(EntityFilter):
    operator_id: str | None = None
    is_active: bool | None = None


class DriverResponse(EntityResponse):
    entity_class = Driver

    id: str
    operator_id: str
    full_name: str
    id_number: str
    license_number: str
    license_class: str
    license_expiry_date: date
    is_active: bool = True
    date_of_birth: date | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    license_issue_date: date | None = None
    health_certificate_expiry: date | None = None
    image_url: str | None = None
    notes: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
