"""Domain entity for recurring departure schedules."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum


class FrequencyType(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    SPECIFIC_DAYS = "specific_days"


@dataclass
class Schedule:
    """A planned departure of one operator on one route.

    ``departure_time`` is an ``HH:mm`` string; ``days_of_week`` only matters
    for weekly and specific-day schedules.
    """

    id: str
    schedule_code: str
    route_id: str
    operator_id: str
    departure_time: str
    frequency_type: FrequencyType
    effective_from: date
    is_active: bool = True
    days_of_week: list[int] = field(default_factory=list)
    effective_to: date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
