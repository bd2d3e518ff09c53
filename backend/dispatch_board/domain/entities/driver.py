"""Domain entity for drivers employed by a transport operator."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class Driver:
    """A driver record as held by the client.

    ``operator_id`` links the driver to the operator that employs them;
    licence fields are kept as dates so expiry checks can compare directly.
    """

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
