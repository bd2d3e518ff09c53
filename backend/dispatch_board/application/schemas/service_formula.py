"""Pydantic DTOs for the ServiceFormula resource."""

from datetime import datetime

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityFilter, EntityResponse
from dispatch_board.domain.entities import FormulaType, ServiceFormula


class ServiceFormulaCreate(CamelModel):
    code: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    formula_type: FormulaType
    description: str | None = None
    formula_expression: str | None = None
    is_active: bool | None = None


class ServiceFormulaUpdate(CamelModel):
    code: str | None = None
    name: str | None = None
    formula_type: FormulaType | None = None
    description: str | None = None
    formula_expression: str | None = None
    is_active: bool | None = None


class ServiceFormulaFilter(EntityFilter):
    """``formula_type`` accepts the enum or its string value."""

    formula_type: FormulaType | None = Field(None, strict=False)
    is_active: bool | None = None


class ServiceFormulaResponse(EntityResponse):
    entity_class = ServiceFormula

    id: str
    code: str
    name: str
    formula_type: FormulaType
    is_active: bool = True
    description: str | None = None
    formula_expression: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
