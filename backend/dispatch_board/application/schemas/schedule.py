"""Pydantic DTOs for the Schedule resource."""

from datetime import date, datetime
from typing import Annotated

from pydantic import Field

from dispatch_board.application.schemas.base import CamelModel, EntityFilter, EntityResponse
from dispatch_board.domain.entities import FrequencyType, Schedule

_HH_MM = r"^([01]\d|2[0-3]):[0-5]\d$"
# 0 = Sunday ... 6 = Saturday
Weekday = Annotated[int, Field(ge=0, le=6)]


class ScheduleCreate(CamelModel):
    schedule_code: str = Field(..., min_length=1)
    route_id: str = Field(..., min_length=1)
    operator_id: str = Field(..., min_length=1)
    departure_time: str = Field(..., pattern=_HH_MM)
    frequency_type: FrequencyType
    effective_from: date
    days_of_week: list[Weekday] | None = None
    effective_to: date | None = None


class ScheduleUpdate(CamelModel):
    schedule_code: str | None = None
    route_id: str | None = None
    operator_id: str | None = None
    departure_time: str | None = Field(None, pattern=_HH_MM)
    frequency_type: FrequencyType | None = None
    effective_from: date | None = None
    days_of_week: list[Weekday] | None = None
    effective_to: date | None = None
    is_active: bool | None = None


class ScheduleFilter(EntityFilter):
    route_id: str | None = None
    operator_id: str | None = None
    is_active: bool | None = None


class ScheduleResponse(EntityResponse):
    entity_class = Schedule

    id: str
    schedule_code: str
    route_id: str
    operator_id: str
    departure_time: str
    frequency_type: FrequencyType
    effective_from: date
    is_active: bool = True
    days_of_week: list[int] = Field(default_factory=list)
    effective_to: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
