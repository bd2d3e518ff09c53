from dispatch_board.application.schemas import (
    ActiveFilter,
    ServiceCreate,
    ServiceResponse,
    ServiceUpdate,
)
from dispatch_board.application.services.entity_service import FilterableEntityService
from dispatch_board.domain.entities import Service


class ServiceService(FilterableEntityService[Service, ServiceCreate, ServiceUpdate, ActiveFilter]):
    """Billable station services, filterable by active flag."""

    collection_path = "/services"
    response_schema = ServiceResponse
