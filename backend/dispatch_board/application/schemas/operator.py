"""Pydantic DTOs for the Operator resource."""

from datetime import date, datetime

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityResponse
from dispatch_board.domain.entities import Operator


class OperatorCreate(CamelModel):
    """Schema for registering a transport operator."""

    name: str = Field(..., min_length=1)
    code: str = Field(..., min_length=1)
    tax_code: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    representative_name: str | None = None
    contract_number: str | None = None
    contract_start_date: date | None = None
    contract_end_date: date | None = None


class OperatorUpdate(CamelModel):
    """Schema for a partial operator update; only set fields are sent."""

    name: str | None = None
    code: str | None = None
    tax_code: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    representative_name: str | None = None
    contract_number: str | None = None
    contract_start_date: date | None = None
    contract_end_date: date | None = None
    is_active: bool | None = None


class OperatorResponse(EntityResponse):
    entity_class = Operator

    id: str
    name: str
    code: str
    is_active: bool = True
    tax_code: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    representative_name: str | None = None
    contract_number: str | None = None
    contract_start_date: date | None = None
    contract_end_date: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
