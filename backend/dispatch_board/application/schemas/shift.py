"""Pydantic DTOs for the Shift resource."""

from datetime import datetime

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityResponse
from dispatch_board.domain.entities import Shift

_HH_MM = r"^([01]\d|2[0-3]):[0-5]\d$"


class ShiftCreate(CamelModel):
    name: str = Field(..., min_length=1)
    start_time: str = Field(..., pattern=_HH_MM, examples=["06:00"])
    end_time: str = Field(..., pattern=_HH_MM, examples=["14:00"])


class ShiftUpdate(CamelModel):
    name: str | None = None
    start_time: str | None = Field(None, pattern=_HH_MM)
    end_time: str | None = Field(None, pattern=_HH_MM)


class ShiftResponse(EntityResponse):
    entity_class = Shift

    id: str
    name: str
    start_time: str
    end_time: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
