"""Domain entity for the formulas station services use to compute charges."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class FormulaType(str, Enum):
    QUANTITY = "quantity"
    PRICE = "price"


@dataclass
class ServiceFormula:
    id: str
    code: str
    name: str
    formula_type: FormulaType
    is_active: bool = True
    description: str | None = None
    formula_expression: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
