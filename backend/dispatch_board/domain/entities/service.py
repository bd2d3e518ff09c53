"""Domain entity for billable station services."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Service:
    """A chargeable station service (parking, cleaning, boarding fee...)."""

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
