from dispatch_board.application.schemas import (
    ScheduleCreate,
    ScheduleFilter,
    ScheduleResponse,
    ScheduleUpdate,
)
from dispatch_board.application.services.entity_service import FilterableEntityService
from dispatch_board.domain.entities import Schedule


class ScheduleService(FilterableEntityService[Schedule, ScheduleCreate, ScheduleUpdate, ScheduleFilter]):
    """Departure schedules, filterable by route, operator and active flag."""

    collection_path = "/schedules"
    response_schema = ScheduleResponse
