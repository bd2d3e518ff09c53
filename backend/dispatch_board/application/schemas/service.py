"""Pydantic DTOs for the station Service resource."""

from datetime import datetime

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityResponse
from dispatch_board.domain.entities import Service


class ServiceCreate(CamelModel):
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    unit: str = Field(..., min_length=1)
    tax_percentage: float = Field(0.0, ge=0, le=100)
    material_type: str | None = None
    use_quantity_formula: bool = False
    use_price_formula: bool = False
    display_order: int = 0
    is_default: bool = False
    auto_calculate_quantity: bool = False
    is_active: bool | None = None


class ServiceUpdate(CamelModel):
    code: str | None = None
    name: str | None = None
    unit: str | None = None
    tax_percentage: float | None = Field(None, ge=0, le=100)
    material_type: str | None = None
    use_quantity_formula: bool | None = None
    use_price_formula: bool | None = None
    display_order: int | None = None
    is_default: bool | None = None
    auto_calculate_quantity: bool | None = None
    is_active: bool | None = None


class ServiceResponse(EntityResponse):
    entity_class = Service

    id: str
    code: str
    name: str
    unit: str
    is_active: bool = True
    tax_percentage: float = 0.0
    material_type: str | None = None
    use_quantity_formula: bool = False
    use_price_formula: bool = False
    display_order: int = 0
    is_default: bool = False
    auto_calculate_quantity: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
