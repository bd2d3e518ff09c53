"""Domain entity for transport operators (bus companies)."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class Operator:
    """A transport company whose vehicles and drivers use the station."""

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
